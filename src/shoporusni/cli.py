from datetime import timedelta
from pathlib import Path

import typer
from rich.console import Console

from shoporusni.api import COUNTER_NAMES, StatsClient, parse
from shoporusni.arbiter import Arbiter
from shoporusni.cache import CacheStore
from shoporusni.config import CONFIG_FILE_NAME, config_dir, ensure_dir, load_config
from shoporusni.errors import ShoporusniError
from shoporusni.render import render
from shoporusni.util.duration import parse_duration
from shoporusni.util.logging import configure_logging, get_logger

app = typer.Typer(add_completion=False)
err_console = Console(stderr=True)
LOG = get_logger(__name__)


def _parse_refresh(value: str) -> timedelta:
    try:
        return parse_duration(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--refresh") from exc


def _output_console(color: bool) -> Console:
    if color:
        return Console(force_terminal=True, color_system="standard", no_color=False, highlight=False)
    return Console(color_system=None, highlight=False)


@app.command()
def main(
    url: str | None = typer.Option(None, "--url", "-u", help="Remote API URL."),
    refresh: str | None = typer.Option(
        None, "--refresh", "-r", help="Cache refresh interval, e.g. 30minutes or 1h."
    ),
    counter: str = typer.Option(
        "personnel_units", "--counter", "-c", help="Which counter to print."
    ),
    config: Path | None = typer.Option(None, "--config", help="Path to config.toml."),
    cache_dir: Path | None = typer.Option(
        None, "--cache-dir", help="Directory holding cache.json."
    ),
    color: bool = typer.Option(True, "--color/--no-color", help="Colorize the output."),
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True, help="-v for warn, -vv for info, -vvv for debug."
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Disable logging."),
) -> None:
    """Print the latest counter and its increase, using the on-disk cache."""
    configure_logging(verbose, quiet)
    if counter not in COUNTER_NAMES:
        raise typer.BadParameter(
            f"expected one of: {', '.join(COUNTER_NAMES)}", param_hint="--counter"
        )
    ttl = _parse_refresh(refresh) if refresh is not None else None

    try:
        cfg_dir = config_dir() if config is None or cache_dir is None else None
        cfg = load_config(config or cfg_dir / CONFIG_FILE_NAME, required=config is not None)
        if ttl is None:
            ttl = cfg.cache.ttl

        store = CacheStore(ensure_dir(cache_dir) if cache_dir else cfg_dir, ttl)
        client = StatsClient(cfg.api.user_agent, cfg.api.timeout_seconds)
        try:
            text = Arbiter(store, client.fetch_text).resolve(url or cfg.api.url)
        finally:
            client.close()

        LOG.info("Parsing statistics")
        doc = parse(text)
    except ShoporusniError as exc:
        err_console.print(
            f"Error: {exc}", style="red", markup=False, highlight=False, soft_wrap=True
        )
        raise typer.Exit(code=1) from exc

    LOG.info("Printing result")
    _output_console(color).print(render(doc, counter), end="", soft_wrap=True)


if __name__ == "__main__":
    app()
