"""Application keys for type-safe app configuration access."""

from pathlib import Path

from aiohttp import web

from sitelang.core.detection import PageDetectionManager

manager_key = web.AppKey("manager", PageDetectionManager)
articles_file_key = web.AppKey("articles_file", Path | None)
base_url_key = web.AppKey("base_url", str)
