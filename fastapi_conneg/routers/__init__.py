"""Routers with content negotiation."""

from .base import NegotiatingRouter

__all__ = ["NegotiatingRouter"]
