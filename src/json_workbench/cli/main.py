"""Main CLI entry point for the JSON Workbench.

Every command reads its input from a file or from stdin (``-``) and writes
the rendered output to stdout.
"""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from json_workbench import __version__
from json_workbench.config.base import OutputMode
from json_workbench.config.loader import load_config
from json_workbench.converters.serializers import to_json
from json_workbench.engine.workbench import Workbench, WorkbenchSession, render_diff
from json_workbench.parsing.unwrap import unwrap as unwrap_value
from json_workbench.schemas.base import SchemaTarget
from json_workbench.schemas.registry import get_global_schema_registry
from json_workbench.tools.api_client import ApiRequest, execute_request
from json_workbench.tools.mock import SAMPLE_TEMPLATE
from json_workbench.tools.strings import (
    escape_json,
    from_base64,
    to_base64,
    unescape_json,
    url_decode,
    url_encode,
)

console = Console()

ENCODERS = {"base64": to_base64, "url": url_encode, "json": escape_json}
DECODERS = {"base64": from_base64, "url": url_decode, "json": unescape_json}

CONVERT_MODES = {
    "json": OutputMode.TREE,
    "yaml": OutputMode.YAML,
    "xml": OutputMode.XML,
    "csv": OutputMode.CSV,
}

TARGET_DESCRIPTIONS = {
    SchemaTarget.TYPESCRIPT: "TypeScript interfaces",
    SchemaTarget.ZOD: "Zod validation schema",
    SchemaTarget.JAVA: "Java POJOs with Lombok and Jackson annotations",
    SchemaTarget.SQL: "SQL CREATE TABLE statement",
    SchemaTarget.MONGOOSE: "Mongoose schema definition",
    SchemaTarget.JSON_SCHEMA: "JSON Schema (draft-07) document",
}


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("json_workbench")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def _fail(ctx: click.Context, message: str) -> None:
    console.print(f"[red]Error: {message}[/red]")
    if ctx.obj.get("verbose", False) and sys.exc_info()[0] is not None:
        import traceback
        console.print(traceback.format_exc())
    sys.exit(1)


def _render(ctx: click.Context, session: WorkbenchSession) -> str:
    """Render a session and return its content, exiting on inline errors."""
    workbench: Workbench = ctx.obj["workbench"]
    try:
        output = workbench.render(session)
    except Exception as e:
        _fail(ctx, str(e))
    if output.error:
        _fail(ctx, output.error)
    return output.content


def _read_text(text: str | None) -> str:
    if text is None:
        return click.get_text_stream("stdin").read().rstrip("\n")
    return text


@click.group()
@click.version_option(version=__version__, prog_name="json-workbench")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="Path to a YAML config file")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """JSON Workbench - Inspect, convert and generate code from structured text.

    Accepts JSON, YAML, XML or CSV input (including JSON that has been
    stringified one or more times) and re-renders it as other formats,
    schema definitions, diffs, query results or mock data.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)

    try:
        config = load_config(config_path)
    except Exception as e:
        console.print(f"[red]Error loading config: {e}[/red]")
        sys.exit(1)

    ctx.obj["config"] = config
    ctx.obj["workbench"] = Workbench(config)


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.pass_context
def detect(ctx: click.Context, source) -> None:
    """Detect the format of SOURCE and print the parsed value.

    SOURCE is a file path, or - for stdin.
    """
    workbench: Workbench = ctx.obj["workbench"]
    result = workbench.detector.detect(source.read())

    if result.data is None:
        _fail(ctx, result.error or "Empty input")

    console.print(f"[cyan]Format:[/cyan] {result.format.value}", highlight=False)
    click.echo(to_json(result.data, ctx.obj["config"].json_indent))


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.pass_context
def unwrap(ctx: click.Context, source) -> None:
    """Recursively decode JSON stringified one or more times.

    SOURCE is a file path, or - for stdin.
    """
    value = unwrap_value(source.read().strip())
    click.echo(to_json(value, ctx.obj["config"].json_indent))


@cli.command("format")
@click.argument("source", type=click.File("r"), default="-")
@click.option("--minify", "-m", is_flag=True, help="Minify instead of pretty printing")
@click.pass_context
def format_command(ctx: click.Context, source, minify: bool) -> None:
    """Pretty print or minify SOURCE as JSON."""
    workbench: Workbench = ctx.obj["workbench"]
    click.echo(workbench.format_input(source.read(), minify=minify))


@cli.command()
@click.argument("target", type=click.Choice([t.value for t in SchemaTarget]))
@click.argument("source", type=click.File("r"), default="-")
@click.option("--root-name", "-r", help="Root type, constant or table name")
@click.pass_context
def schema(ctx: click.Context, target: str, source, root_name: str | None) -> None:
    """Generate a TARGET schema from the structure of SOURCE.

    \b
    Examples:
      json-workbench schema typescript payload.json
      json-workbench schema sql users.csv --root-name users
      cat payload.yaml | json-workbench schema zod -
    """
    session = WorkbenchSession(mode=OutputMode(target), input=source.read(), root_name=root_name)
    click.echo(_render(ctx, session))


@cli.command()
@click.argument("fmt", metavar="FORMAT", type=click.Choice(list(CONVERT_MODES)))
@click.argument("source", type=click.File("r"), default="-")
@click.pass_context
def convert(ctx: click.Context, fmt: str, source) -> None:
    """Convert SOURCE to FORMAT (json, yaml, xml or csv)."""
    session = WorkbenchSession(mode=CONVERT_MODES[fmt], input=source.read())
    click.echo(_render(ctx, session))


@cli.command()
@click.argument("first", type=click.File("r"))
@click.argument("second", type=click.File("r"))
@click.option("--summary", is_flag=True, help="Only print the number of changed segments")
@click.pass_context
def diff(ctx: click.Context, first, second, summary: bool) -> None:
    """Compare FIRST against SECOND.

    Structured inputs are compared independent of formatting and key order;
    anything else is compared line by line.
    """
    session = WorkbenchSession(mode=OutputMode.DIFF, input=first.read(), second_input=second.read())
    output = ctx.obj["workbench"].render(session)
    result = output.diff

    if result is None or not result.has_changes:
        console.print("[green]No differences[/green]")
        return

    if summary:
        console.print(
            f"{result.mode.value} diff: "
            f"[red]{result.removed_count} removed[/red], [green]{result.added_count} added[/green]"
        )
        return

    for line in render_diff(result).splitlines():
        color = "green" if line.startswith("+") else "red" if line.startswith("-") else None
        click.secho(line, fg=color)


@cli.command()
@click.argument("expression")
@click.argument("source", type=click.File("r"), default="-")
@click.pass_context
def query(ctx: click.Context, expression: str, source) -> None:
    """Run a JMESPath EXPRESSION against SOURCE.

    \b
    Examples:
      json-workbench query "users[?active].name" users.json
    """
    session = WorkbenchSession(mode=OutputMode.QUERY, input=source.read(), query=expression)
    click.echo(_render(ctx, session))


@cli.command()
@click.argument("code")
@click.argument("source", type=click.File("r"), default="-")
@click.pass_context
def transform(ctx: click.Context, code: str, source) -> None:
    """Apply a transform expression CODE to SOURCE.

    CODE is a Python expression over the name ``data``.

    \b
    Examples:
      json-workbench transform "[u['name'] for u in data['users']]" users.json
    """
    session = WorkbenchSession(mode=OutputMode.TRANSFORM, input=source.read(), second_input=code)
    click.echo(_render(ctx, session))


@cli.command()
@click.argument("token", required=False)
@click.pass_context
def jwt(ctx: click.Context, token: str | None) -> None:
    """Decode a JSON Web Token without verifying its signature.

    TOKEN is read from stdin when omitted.
    """
    session = WorkbenchSession(mode=OutputMode.JWT, input=_read_text(token))
    output = ctx.obj["workbench"].render(session)

    if output.error or output.jwt is None:
        _fail(ctx, output.error or "No token given")

    click.echo(output.content)
    details = output.jwt
    if details.expires_at:
        status = "[red]expired[/red]" if details.is_expired else "[green]valid[/green]"
        console.print(f"Expires at {details.expires_at} ({status})", highlight=False)


@cli.command()
@click.argument("template", type=click.File("r"), required=False)
@click.option("--count", "-n", type=int, help="Number of records")
@click.option("--seed", "-s", type=int, help="Random seed for reproducibility")
@click.pass_context
def mock(ctx: click.Context, template, count: int | None, seed: int | None) -> None:
    """Generate mock records from a JSON TEMPLATE.

    String values may contain {{provider.path}} placeholders such as
    {{person.fullName}} or {{internet.email}}. A sample template is used
    when TEMPLATE is omitted.
    """
    workbench: Workbench = ctx.obj["workbench"]
    if seed is not None:
        config = workbench.config.model_copy(deep=True)
        config.mock.seed = seed
        workbench = Workbench(config)

    text = template.read() if template else SAMPLE_TEMPLATE
    output = workbench.render(WorkbenchSession(mode=OutputMode.MOCK, input=text, mock_count=count))

    if not output.data and (count is None or count > 0):
        _fail(ctx, "Template must be valid JSON")

    click.echo(output.content)


@cli.command()
@click.argument("url")
@click.option("--method", "-X", default="GET", help="HTTP method")
@click.option("--header", "-H", "headers", multiple=True, help="Header as 'Name: value'")
@click.option("--data", "-d", "body", help="Request body")
@click.pass_context
def fetch(ctx: click.Context, url: str, method: str, headers: tuple[str, ...], body: str | None) -> None:
    """Send an HTTP request to URL and print the response body."""
    parsed_headers = {}
    for header in headers:
        name, sep, value = header.partition(":")
        if not sep:
            _fail(ctx, f"Invalid header '{header}', expected 'Name: value'")
        parsed_headers[name.strip()] = value.strip()

    request = ApiRequest(method=method, url=url, headers=parsed_headers, body=body)
    response = execute_request(request, timeout=ctx.obj["config"].http.timeout)

    if response.error:
        _fail(ctx, f"{response.status_text}: {response.error}")

    color = "green" if response.success else "red"
    console.print(
        f"[{color}]{response.status} {response.status_text}[/{color}] "
        f"({response.duration_ms} ms, {response.size})",
        highlight=False,
    )

    if isinstance(response.data, (dict, list)):
        click.echo(to_json(response.data, ctx.obj["config"].json_indent))
    else:
        click.echo(response.data)


@cli.command()
@click.argument("kind", type=click.Choice(list(ENCODERS)))
@click.argument("text", required=False)
def encode(kind: str, text: str | None) -> None:
    """Encode TEXT as base64, URL component or JSON string literal."""
    click.echo(ENCODERS[kind](_read_text(text)))


@cli.command()
@click.argument("kind", type=click.Choice(list(DECODERS)))
@click.argument("text", required=False)
def decode(kind: str, text: str | None) -> None:
    """Decode base64, URL component or JSON string literal TEXT."""
    click.echo(DECODERS[kind](_read_text(text)))


@cli.command()
def targets() -> None:
    """List available schema targets."""
    registry = get_global_schema_registry()

    table = Table(title="Schema Targets")
    table.add_column("Target", style="cyan")
    table.add_column("Description")

    for target in registry.list_targets():
        table.add_row(target.value, TARGET_DESCRIPTIONS.get(target, ""))

    console.print(table)


if __name__ == "__main__":
    cli()
