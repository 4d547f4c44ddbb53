"""aiohttp server for sitelang.

Application factory and route registration for standalone server mode.
"""

from aiohttp import web

from sitelang.api.language import create_language_routes
from sitelang.app_keys import articles_file_key, base_url_key, manager_key
from sitelang.config import Config
from sitelang.core.detection import PageDetectionManager


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[manager_key] = PageDetectionManager.create(config.to_settings())
    app[articles_file_key] = config.content.articles_file
    app[base_url_key] = config.site.base_url

    app.router.add_routes(create_language_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
