"""
Chat Gateway Service.

HTTP front end for the provider-abstraction gateway. One provider call per
request; success returns ``{"content": ...}``, failure ``{"error": ...}``.
"""

import json
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from opentelemetry import trace
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from .core.config import GatewaySettings, load_config
from .core.errors import MalformedRequestError
from .core.registry import ProviderRegistry, create_default_registry
from .gateway import run_completion
from .models.response import CompletionResult

logger = logging.getLogger(__name__)


def setup_tracing(settings: GatewaySettings) -> None:
    """Export spans over OTLP when an endpoint is configured."""
    if not settings.otel_endpoint:
        return

    from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

    provider = TracerProvider()
    provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.otel_endpoint, insecure=True))
    )
    trace.set_tracer_provider(provider)


def create_app(
    settings: Optional[GatewaySettings] = None,
    registry: Optional[ProviderRegistry] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Service settings (loaded from YAML/env when omitted)
        registry: Provider registry (the four built-in adapters when omitted)
    """
    settings = settings or load_config()
    registry = registry or create_default_registry(timeout=settings.timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        await registry.connect_all()
        yield
        await registry.disconnect_all()

    app = FastAPI(
        title="Chat Gateway",
        description="Single completion endpoint over Claude, OpenAI, Gemini and Llama",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.registry = registry
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    FastAPIInstrumentor.instrument_app(app)

    @app.get("/health")
    async def health():
        return {"status": "healthy", "providers": registry.list_providers()}

    @app.get("/providers")
    async def list_providers():
        """Supported provider tags with suggested models."""
        return {"providers": await registry.describe()}

    @app.post("/complete")
    @app.post("/api/chat")
    async def complete(request: Request):
        """Run one conversation turn against the configured provider."""
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            error = MalformedRequestError("Request body is not valid JSON")
            return JSONResponse(
                CompletionResult.failure(error.message).to_dict(),
                status_code=error.status_code,
            )

        result, status_code = await run_completion(payload, registry)
        return JSONResponse(result.to_dict(), status_code=status_code)

    return app


def run() -> None:
    """Console entry point."""
    import uvicorn

    settings = load_config()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs full URLs at INFO; Gemini keys travel in the query string.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    setup_tracing(settings)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
