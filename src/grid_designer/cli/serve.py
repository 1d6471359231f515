"""CLI command: grid-designer serve -- run the web API."""

from __future__ import annotations

import click

from grid_designer.location import QUERY_KEY


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--query", default="", help="Start from the grid system shared in this query string")
@click.option("--key", default=QUERY_KEY, help="Query parameter holding the grid system")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, query: str, key: str, debug: bool) -> None:
    """Start the grid designer web API."""
    from grid_designer.config import DesignerConfig
    from grid_designer.store import GridSystemStore
    from grid_designer.web.app import create_app

    log_level = ctx.parent.params["log_level"] if ctx.parent else "WARNING"
    config = DesignerConfig(
        host=host, port=port, query_key=key, log_level=log_level.upper(), debug=debug
    )
    store = GridSystemStore.from_query(query, config.query_key)

    app = create_app(config=config, store=store)
    click.echo(f"Starting grid designer on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=config.debug)
