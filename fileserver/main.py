"""FastAPI app factory and process entry point for the file server."""
from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from fileserver import __version__
from fileserver.api import router as files_router
from fileserver.config import ServerConfig
from fileserver.logging_conf import get_logger, setup_logging
from fileserver.service.resolver import FileResolver

# Configure logging before anything else.
setup_logging()
logger = get_logger("fileserver")


def create_app(config: ServerConfig | None = None) -> FastAPI:
    config = config or ServerConfig.from_cwd()

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "startup",
            extra={
                "event": "startup",
                "root": str(config.root),
                "confine_to_root": config.confine_to_root,
            },
        )
        if not config.root.is_dir():
            logger.warning(
                "root.missing",
                extra={"event": "root_missing", "root": str(config.root)},
            )
        yield
        logger.info("shutdown", extra={"event": "shutdown"})

    # No docs/openapi routes: every path belongs to the public root.
    app = FastAPI(
        title="Public File Server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.resolver = FileResolver(config.root, confine_to_root=config.confine_to_root)

    app.include_router(files_router)

    return app


def serve(config: ServerConfig | None = None) -> None:
    """Run the server under uvicorn on the configured (default) bind address."""
    config = config or ServerConfig.from_cwd()
    # log_config=None keeps the JSON handlers installed by setup_logging().
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_config=None)


# ASGI entrypoint for uvicorn: `uvicorn fileserver.main:app`
app = create_app()
