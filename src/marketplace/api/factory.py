"""FastAPI application factory.

Configuration and the routing provider are built once per application and
kept on ``app.state``; endpoints receive them through dependencies.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from marketplace.api.cors import LocalhostCORSMiddleware, options_passthrough
from marketplace.api.routes import catalogue_router, checkout_router, delivery_router
from marketplace.config import AppConfig, get_config
from marketplace.delivery.routing import RoutingProvider, build_routing_provider
from marketplace.domain import marketplace
from marketplace.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)


def create_app(config: AppConfig | None = None, routing_provider: RoutingProvider | None = None) -> FastAPI:
    config = config or get_config()

    app = FastAPI(
        title="UniThrift API",
        description="Campus marketplace API",
    )
    app.state.config = config
    app.state.routing_provider = routing_provider or build_routing_provider(config)

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Log the request and run it inside the marketplace domain context."""
        clear_context()
        add_context(method=request.method, path=request.url.path)
        logger.info("Request received", query=str(request.url.query))
        with marketplace.domain_context():
            response = await call_next(request)
        return response

    app.middleware("http")(options_passthrough)

    # Added last so it wraps everything and answers preflights first
    app.add_middleware(LocalhostCORSMiddleware)

    app.include_router(catalogue_router)
    app.include_router(checkout_router)
    app.include_router(delivery_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "UniThrift API ✅"

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": marketplace.name})

    return app
