"""Command-line interface for PageGist."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click
import structlog
import uvicorn
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from pagegist import __version__
from pagegist.config.config import Config, find_config_file
from pagegist.extractor.soup_node import parse_html
from pagegist.observability import configure_logging
from pagegist.pipeline import Pipeline

console = Console()
logger = structlog.get_logger(__name__)


def _load_config(config_path: Optional[Path]) -> Config:
    path = config_path or find_config_file()
    if path is None:
        return Config()
    try:
        return Config.from_yaml(path)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid configuration in {escape(str(path))}: {escape(str(e))}[/red]")
        sys.exit(2)


@click.group()
@click.version_option(__version__, prog_name="pagegist")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file (defaults to ./pagegist.yaml when present).",
)
@click.option("--log-level", default=None, help="Override the configured log level.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], log_level: Optional[str]) -> None:
    """PageGist: key points of a web page, computed locally."""
    config = _load_config(config_path)
    if log_level:
        config.monitoring.log_level = log_level
    configure_logging(config.monitoring)
    ctx.obj = config


@cli.command()
@click.argument("html_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--url", default="", help="Source URL of the page, used by the eligibility checks.")
@click.option("--json", "as_json", is_flag=True, help="Print machine-readable JSON.")
@click.pass_obj
def extract(config: Config, html_file: Path, url: str, as_json: bool) -> None:
    """Extract the main content of an HTML file."""
    pipeline = Pipeline(config)
    document = parse_html(html_file.read_text(encoding="utf-8", errors="replace"))
    extracted = pipeline.extract_content(document, url)

    payload = extracted.to_dict()
    payload["isLongForm"] = pipeline.is_long_form(extracted)
    payload["shouldProcess"] = pipeline.should_process(url, document) if url else None

    if as_json:
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    table = Table(title=escape(extracted.title), show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Words", str(extracted.word_count))
    table.add_row("Long-form", "yes" if payload["isLongForm"] else "no")
    if url:
        table.add_row("Should process", "yes" if payload["shouldProcess"] else "no")
    table.add_row("Headings", escape("\n".join(extracted.headings)) or "-")
    console.print(table)
    console.print(Panel(escape(extracted.content) or "[dim]no content[/dim]", title="Content"))


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--title", default=None, help="Title used for keyword extraction.")
@click.option("--html/--text", "is_html", default=True, help="Treat the input as HTML (default) or plain text.")
@click.option("--url", default="", help="Source URL of the page.")
@click.option("--json", "as_json", is_flag=True, help="Print machine-readable JSON.")
@click.pass_obj
def summarize(
    config: Config,
    input_file: Path,
    title: Optional[str],
    is_html: bool,
    url: str,
    as_json: bool,
) -> None:
    """Summarize an HTML or plain-text file into key points."""
    pipeline = Pipeline(config)
    raw = input_file.read_text(encoding="utf-8", errors="replace")

    if is_html:
        extracted = pipeline.extract_content(parse_html(raw), url)
        content = extracted.content
        title = title or extracted.title
    else:
        content = raw
        title = title or ""

    points = pipeline.summarize_locally(content, title)

    if as_json:
        click.echo(json.dumps({"title": title, "points": list(points)}, ensure_ascii=False, indent=2))
        return

    if not points:
        console.print("[yellow]No sentences long enough to summarize.[/yellow]")
        return

    body = "\n".join(f"• {escape(point)}" for point in points)
    console.print(Panel(body, title=escape(title or "Summary")))


@cli.command()
@click.option("--host", default=None, help="Bind address (defaults to the configured host).")
@click.option("--port", default=None, type=int, help="Port (defaults to the configured port).")
@click.pass_obj
def serve(config: Config, host: Optional[str], port: Optional[int]) -> None:
    """Run the HTTP API."""
    from pagegist.web.main import create_app

    host = host or config.web.host
    port = port or config.web.port
    logger.info("Starting web server", host=host, port=port)
    uvicorn.run(create_app(config), host=host, port=port, log_config=None)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
