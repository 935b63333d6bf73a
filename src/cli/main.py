"""CLI interface for AI Utility Hub."""
import json
import logging
import sys
from typing import Optional

import typer

from core.config import AppConfig
from core.providers import get_provider
from core.services import ServiceDispatcher, ServiceError, ServiceKind

app = typer.Typer(help="AI Utility Hub - Gemini-backed text utilities")

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def _read_input(value: Optional[str]) -> Optional[str]:
    """``-`` means read from stdin."""
    if value == "-":
        return sys.stdin.read()
    return value


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Listen port (default: $PORT or 8080)"),
):
    """Start the HTTP API with uvicorn."""
    import uvicorn

    from services.api.app.main import create_app

    config = AppConfig.from_env()
    listen_port = port or config.port
    logger.info("Server listening on %s:%d", host, listen_port)
    uvicorn.run(create_app(config), host=host, port=listen_port)


@app.command()
def run(
    service: ServiceKind = typer.Argument(..., help="summarize | email | explain-code | rewrite"),
    text: Optional[str] = typer.Option(None, help="Text to summarize or rewrite ('-' for stdin)"),
    code: Optional[str] = typer.Option(None, help="Code to explain ('-' for stdin)"),
    details: Optional[str] = typer.Option(None, help="Email details ('-' for stdin)"),
    tone: Optional[str] = typer.Option(None, help="Tone for email / rewrite"),
    recipient_role: Optional[str] = typer.Option(None, "--recipient-role", help="Email recipient role"),
    purpose: Optional[str] = typer.Option(None, help="Email purpose"),
    as_json: bool = typer.Option(False, "--json", help="Print the full response envelope"),
):
    """Run a single service and print the normalized output."""
    config = AppConfig.from_env()
    dispatcher = ServiceDispatcher(
        get_provider(config),
        model=config.model,
        timeout_seconds=config.timeout_seconds,
    )
    body = {
        "text": _read_input(text),
        "code": _read_input(code),
        "details": _read_input(details),
        "tone": tone,
        "recipientRole": recipient_role,
        "purpose": purpose,
    }
    body = {k: v for k, v in body.items() if v is not None}

    try:
        result = dispatcher.dispatch(service, body)
    except ServiceError as e:
        typer.echo(json.dumps(e.to_payload(), ensure_ascii=False, indent=2), err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        typer.echo(result.output)


def main():
    app()


if __name__ == "__main__":
    main()
