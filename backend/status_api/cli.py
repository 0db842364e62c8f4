"""Typer-based CLI for running the status service."""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn

from status_api.core.config import get_settings
from status_api.core.logging import get_logger, setup_logging

app = typer.Typer(help="Backend status service utilities")

logger = get_logger(__name__)

_APP_PATH = "status_api.main:app"


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address. Defaults to HOST from settings."),
    port: Optional[int] = typer.Option(None, "--port", "-p", min=1, max=65535, help="Bind port. Defaults to PORT from settings."),
    reload: bool = typer.Option(False, "--reload", help="Restart the server when source files change."),
):
    """Run the HTTP server under uvicorn."""

    settings = get_settings()
    setup_logging(settings.log_level, json_output=settings.log_json)

    bind_host = host or settings.host
    bind_port = port if port is not None else settings.port

    logger.info("server.starting", host=bind_host, port=bind_port, reload=reload)
    uvicorn.run(
        _APP_PATH,
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_config=None,
    )


@app.command()
def routes():
    """List the registered API routes."""

    from status_api.main import create_app

    application = create_app(get_settings())
    # The schema lists every mounted path whether or not docs are served.
    for path, operations in application.openapi()["paths"].items():
        for method in sorted(operations):
            typer.echo(f"{method.upper()} {path}")


if __name__ == "__main__":
    app()
