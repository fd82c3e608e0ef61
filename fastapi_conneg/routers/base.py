"""Router scaffolding for negotiated routes."""

from typing import Any, Callable, Iterable

from fastapi import APIRouter, Depends

from fastapi_conneg.dependencies import AcceptNegotiator, ContentTypeValidator


class NegotiatingRouter(APIRouter):
    """APIRouter that attaches content negotiation to registered views."""

    def register_view(
        self,
        path: str,
        view: Callable[..., Any],
        *,
        methods: list[str] | None = None,
        produces: Iterable[str] | None = None,
        consumes: Iterable[str] | None = None,
        name: str | None = None,
        dependencies: list[Any] | None = None,
    ) -> None:
        """Register a view function with negotiation dependencies.

        Args:
            path: URL path for the route (e.g., "/articles/{article_id}")
            view: View function to register. It can read the chosen type from
                 ``request.state.negotiated_media_type``.
            methods: HTTP methods for the route (defaults to ["GET"])
            produces: Response media types the view can render. Requests whose
                     Accept header matches none of them get a 406.
            consumes: Request body media types the view can read. Other
                     Content-Types get a 415.
            name: Route name for OpenAPI documentation
            dependencies: Additional FastAPI dependencies to inject

        Examples:
            router.register_view(
                "/articles/{article_id}",
                get_article,
                produces=["application/json", "text/html; q=0.5"],
            )
        """
        if methods is None:
            methods = ["GET"]

        route_dependencies = list(dependencies or [])
        if consumes is not None:
            route_dependencies.append(Depends(ContentTypeValidator(consumes)))
        if produces is not None:
            route_dependencies.append(Depends(AcceptNegotiator(produces)))

        self.add_api_route(
            path,
            view,
            methods=methods,
            name=name,
            dependencies=route_dependencies or None,
        )
