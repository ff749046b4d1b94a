"""Gateway command line."""

from __future__ import annotations

import click

from app.api.root import AVAILABLE_ENDPOINTS


def _banner(host: str, port: int, upstream_url: str) -> str:
    rule = "=" * 70
    lines = [
        rule,
        "🏥 Medical Assistant Backend Server",
        rule,
        f"✅ Server running on:    http://{host}:{port}",
        f"🔗 FastAPI URL:          {upstream_url}",
        rule,
        "📍 Available Endpoints:",
        *(f"   {endpoint}" for endpoint in AVAILABLE_ENDPOINTS),
        rule,
        "🧪 Quick Test Commands:",
        f"   curl http://localhost:{port}/api/test-direct",
        f"   curl -X POST http://localhost:{port}/api/chat \\",
        '        -H "Content-Type: application/json" \\',
        "        -d '{\"message\": \"I have fever and headache\"}'",
        rule,
    ]
    return "\n".join(lines)


@click.group()
def cli() -> None:
    """Medical Assistant gateway in front of the disease prediction API."""


@cli.command()
@click.option("--host", default=None, help="Bind host (default from HOST or 0.0.0.0)")
@click.option("--port", default=None, type=int, help="Bind port (default from PORT or 3000)")
def serve(host: str | None, port: int | None) -> None:
    """Run the gateway API server."""
    import uvicorn

    from app.core.config import Settings
    from app.core.logging import setup_logging
    from app.main import create_app

    settings = Settings()
    setup_logging(settings.log_level)
    final_host = host or settings.host
    final_port = port or settings.port
    settings.port = final_port

    click.echo(_banner(final_host, final_port, settings.medical_api_url))
    app = create_app(settings)
    uvicorn.run(app, host=final_host, port=final_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    cli()
