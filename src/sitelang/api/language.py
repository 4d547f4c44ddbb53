"""Language context API endpoints.

Exposes page detection and cross-language URL mapping to header and
navigation rendering.
"""

import logging

from aiohttp import web

from sitelang.app_keys import articles_file_key, base_url_key, manager_key
from sitelang.core.articles import Article, load_articles
from sitelang.core.context import assemble_language_context

logger = logging.getLogger(__name__)


def create_language_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/languages", get_languages),
        web.get("/api/language/{path:.*}", get_language_context),
    ]


async def get_languages(request: web.Request) -> web.Response:
    languages = request.app[manager_key].settings.languages
    return web.json_response(
        {
            "default": languages.default,
            "items": [language.to_dict() for language in languages],
        }
    )


async def get_language_context(request: web.Request) -> web.Response:
    path = "/" + request.match_info["path"]
    manager = request.app[manager_key]

    try:
        articles = _load_content(request)
        context = assemble_language_context(manager, path, articles)
    except ValueError as e:
        logger.error(f"Invalid content data for {path}: {e}")
        return web.json_response(
            {"error": "Invalid content data", "path": path, "detail": str(e)},
            status=500,
        )

    return web.json_response(context.to_dict(request.app[base_url_key]))


def _load_content(request: web.Request) -> list[Article] | None:
    """Read the content listing fresh for each request."""
    articles_file = request.app[articles_file_key]
    if articles_file is None:
        return None
    try:
        return load_articles(articles_file)
    except FileNotFoundError:
        logger.warning(f"Content listing not found: {articles_file}")
        return None
