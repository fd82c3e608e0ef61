"""Example FastAPI app rendering one resource in several media types.

Run with:
    uvicorn examples.negotiation_example_app:app --reload

Try:
    curl -H "Accept: text/html" http://localhost:8000/articles/1
    curl -H "Accept: text/plain, application/json; q=0" http://localhost:8000/articles/1
"""
from __future__ import annotations

from html import escape

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from fastapi_conneg.dependencies import install_exception_handlers
from fastapi_conneg.middleware import ErrorHandlerMiddleware
from fastapi_conneg.routers import NegotiatingRouter

ARTICLES = {
    "1": {"id": "1", "title": "Content negotiation", "body": "Pick the best representation."},
    "2": {"id": "2", "title": "Quality values", "body": "Weights between 0 and 1."},
}

app = FastAPI(title="Negotiation example")
app.add_middleware(ErrorHandlerMiddleware)
install_exception_handlers(app)

router = NegotiatingRouter()


async def get_article(request: Request, article_id: str) -> Response:
    article = ARTICLES.get(article_id)
    if article is None:
        return JSONResponse({"errors": [{"status": "404", "title": "Not Found"}]}, status_code=404)

    media_type = request.state.negotiated_media_type
    if media_type.subtype == "html":
        return HTMLResponse(
            f"<h1>{escape(article['title'])}</h1><p>{escape(article['body'])}</p>"
        )
    if media_type.subtype == "plain":
        return PlainTextResponse(f"{article['title']}\n\n{article['body']}")
    return JSONResponse(article)


async def create_article(request: Request) -> Response:
    payload = await request.json()
    article_id = str(len(ARTICLES) + 1)
    ARTICLES[article_id] = {"id": article_id, **payload}
    return JSONResponse(ARTICLES[article_id], status_code=201)


router.register_view(
    "/articles/{article_id}",
    get_article,
    produces=["text/plain; q=0.5", "text/html; q=0.8", "application/json"],
    name="article_retrieve",
)
router.register_view(
    "/articles",
    create_article,
    methods=["POST"],
    produces=["application/json"],
    consumes=["application/json"],
    name="article_create",
)

app.include_router(router)
