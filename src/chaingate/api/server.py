# File: src/chaingate/api/server.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import make_asgi_app
from starlette.exceptions import HTTPException

from chaingate.config.settings import GatewayConfig
from chaingate.explorer.api import ExplorerAPI
from chaingate.explorer.enrichment import TransactionEnricher
from chaingate.monitoring.metrics import MetricsCollector
from chaingate.upstream.client import SochainClient
from chaingate.utils.logger import get_logger
from .routes import explorer_router, health_router

logger = get_logger(__name__)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    # Error bodies are a bare JSON string
    return JSONResponse(status_code=exc.status_code, content=exc.detail, headers=exc.headers)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content="internal server error")


def create_app(explorer: ExplorerAPI, metrics: Optional[MetricsCollector] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        explorer.client.close()

    app = FastAPI(title="chaingate API", lifespan=lifespan)
    app.state.explorer = explorer

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Include routers
    app.include_router(explorer_router)
    app.include_router(health_router)

    if metrics is not None:
        app.mount("/metrics", make_asgi_app(registry=metrics.registry))

    return app


def build_explorer(config: GatewayConfig, metrics: Optional[MetricsCollector] = None) -> ExplorerAPI:
    client = SochainClient(
        base_url=config.get("upstream.base_url"),
        timeout=config.get("upstream.timeout"),
        metrics=metrics,
    )
    enricher = TransactionEnricher(
        client, max_transactions=config.get("explorer.max_tx_per_block")
    )
    return ExplorerAPI(client, enricher=enricher, metrics=metrics)


def create_app_from_config(config: GatewayConfig) -> FastAPI:
    metrics = MetricsCollector() if config.get("monitoring.metrics_enabled") else None
    return create_app(build_explorer(config, metrics), metrics=metrics)
