"""Serves the viewer over HTTP with aiohttp."""
from __future__ import annotations

import logging

from aiohttp import web

from .viewer import DocsViewer

logger = logging.getLogger(__name__)

VIEWER_KEY = web.AppKey("viewer", DocsViewer)


def register_viewer_routes(routes: web.RouteTableDef) -> None:
	@routes.get("/")
	async def show_document(request: web.Request) -> web.Response:
		"""
		Render the page for one document.

		Query params:
		  doc: document id; unknown or missing ids show the first document
		"""
		viewer = request.app[VIEWER_KEY]
		requested = request.query.get("doc")
		try:
			page = viewer.render(requested)
		except OSError as exc:
			logger.error("Failed to render document %r: %s", requested, exc)
			return web.Response(status=500, text="Failed to read document")
		return web.Response(text=page, content_type="text/html")


def create_app(viewer: DocsViewer) -> web.Application:
	app = web.Application()
	app[VIEWER_KEY] = viewer
	routes = web.RouteTableDef()
	register_viewer_routes(routes)
	app.add_routes(routes)
	return app


def serve(viewer: DocsViewer, host: str = "127.0.0.1", port: int = 8080) -> None:
	logger.info("Serving %d document(s) on http://%s:%d/", len(viewer.docs), host, port)
	web.run_app(create_app(viewer), host=host, port=port, print=None)
