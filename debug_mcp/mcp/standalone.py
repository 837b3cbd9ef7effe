"""MCP Standalone Server.

Uruchamia API narzędzi MCP na dedykowanym porcie (MCP_HOST:MCP_PORT).
"""

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from debug_mcp import __version__
from debug_mcp.config import Settings
from debug_mcp.api.routers import mcp_router


def create_standalone_app(settings: Optional[Settings] = None) -> FastAPI:
    """Utwórz aplikację FastAPI dla standalone MCP.

    Args:
        settings: Konfiguracja; odczytywana ze zmiennych środowiskowych, gdy brak.

    Returns:
        Aplikacja z routerem MCP, /health i (opcjonalnie) /metrics.
    """
    settings = settings or Settings()

    app = FastAPI(
        title="Debug MCP Server",
        description="Standalone Model Context Protocol server exposing runtime inspection tools",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.include_router(mcp_router.router)

    @app.get("/health")
    async def health():
        """Sprawdź status serwera MCP."""
        from debug_mcp.mcp import registry

        return {
            "ok": True,
            "mode": "standalone",
            "version": __version__,
            "stats": registry.get_stats(),
        }

    if settings.enable_metrics:

        @app.get("/metrics")
        async def metrics() -> Response:
            """Endpoint metryk Prometheus."""
            return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app


def main():
    """Uruchom standalone serwer MCP."""
    settings = Settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger = logging.getLogger(__name__)

    logger.info("=" * 60)
    logger.info("Debug MCP Standalone Server Starting")
    logger.info("=" * 60)
    logger.info(f"Listening on: {settings.mcp_base_url}")
    logger.info(f"Invocation log: {settings.mcp_log_path}")
    logger.info("=" * 60)

    app = create_standalone_app(settings)

    try:
        uvicorn.run(
            app,
            host=settings.mcp_host,
            port=settings.mcp_port,
            log_level=settings.log_level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Shutting down MCP server...")
    except Exception as e:
        logger.error(f"Error running MCP server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
