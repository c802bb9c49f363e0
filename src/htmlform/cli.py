"""CLI entry point for htmlform."""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.syntax import Syntax

from htmlform.core.logging import ErrorIds, logError, set_log_level
from htmlform.core.registry import UnknownOperationError
from htmlform.loader import DefinitionError, build_form, load_definition
from htmlform.models.request import FieldValue, RequestContext

console = Console()
err_console = Console(stderr=True)


def _parse_data(pairs: list[str]) -> dict[str, FieldValue]:
    """Turn KEY=VALUE pairs into submitted data; repeated keys become lists."""
    data: dict[str, FieldValue] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"expected KEY=VALUE, got {pair!r}")
        if key in data:
            existing = data[key]
            data[key] = [*existing, value] if isinstance(existing, list) else [existing, value]
        else:
            data[key] = value
    return data


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="htmlform - render an HTML form from a YAML definition"
    )
    parser.add_argument("definition", help="Path to a YAML form definition")
    parser.add_argument(
        "--method",
        choices=["get", "post"],
        default="post",
        help="Method of the simulated request carrying --data (default: post)",
    )
    parser.add_argument(
        "--data",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Submitted field value; repeat for several fields or values",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate the submitted data and report to stderr (exit 1 when invalid)",
    )
    parser.add_argument(
        "--highlight",
        action="store_true",
        help="Syntax-highlight the rendered HTML",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        help="Console log level (default: warning)",
    )

    args = parser.parse_args(argv)
    set_log_level(args.log_level)

    try:
        data = _parse_data(args.data)
        field = "body" if args.method == "post" else "query"
        request = RequestContext(method=args.method.upper(), **{field: data})
        form = build_form(load_definition(Path(args.definition)), request=request)
    except (DefinitionError, UnknownOperationError, ValueError, TypeError, OSError) as e:
        logError(ErrorIds.DEFINITION_LOAD_FAILED, str(e))
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        return 2

    valid = True
    if args.validate:
        valid = form.is_valid()
        if valid:
            err_console.print("[green]Form is valid.[/green]")
        else:
            err_console.print(f"[red]Form has {len(form.errors)} error(s):[/red]")
            for error in form.errors:
                err_console.print(f"  - {error.message}")
        if not form.passed_honeypot():
            err_console.print("[yellow]Honeypot check failed.[/yellow]")

    html = form.render()
    if args.highlight:
        console.print(Syntax(html, "html", word_wrap=True))
    else:
        sys.stdout.write(html + "\n")

    return 0 if valid else 1


if __name__ == "__main__":
    sys.exit(main())
