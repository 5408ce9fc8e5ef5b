from __future__ import annotations

import typer

from .util import configure_logging, configure_stdio

app = typer.Typer(help="nutch-conf: Crawler configuration inspection CLI")


@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    configure_stdio()
    configure_logging(verbose)


from .commands import config_cmd as config_cmd  # noqa: E402

app.add_typer(config_cmd.app, name="config", help="Materialize and inspect configurations")


def main():
    app()
