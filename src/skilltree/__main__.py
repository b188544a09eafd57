"""CLI entry point for skilltree."""

import sys

import click

from skilltree.compiler import compile
from skilltree.config import DEFAULT_PASSES, LayoutConfig
from skilltree.emitters import to_json, to_mermaid
from skilltree.errors import SkillTreeError
from skilltree.loader import loads
from skilltree.observability import configure_logging

_EMITTERS = {
    "json": to_json,
    "mermaid": to_mermaid,
}


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option(
    "--format", "-f", "fmt", type=click.Choice(sorted(_EMITTERS)), default="json", help="Output format"
)
@click.option("--passes", "-p", "passes", type=click.IntRange(min=0), default=DEFAULT_PASSES, help="Barycenter sweeps")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option(
    "--log-level",
    "log_level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Diagnostics written to stderr",
)
def main(input: str | None, fmt: str, passes: int, output: str | None, log_level: str) -> None:
    """Compile a TOML feature list into a laid-out skill tree."""
    configure_logging(log_level=log_level)

    if input:
        try:
            with open(input, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        result = compile(loads(text), LayoutConfig(passes=passes))
    except SkillTreeError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    rendered = _EMITTERS[fmt](result)
    if not rendered.endswith("\n"):
        rendered += "\n"

    if output:
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
