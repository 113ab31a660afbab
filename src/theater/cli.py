import dataclasses
import json
import logging
import sys

import click

from . import __version__ as VERSION
from .config import refresh_config
from .errors import TheaterError
from .loader import load_invoice, load_plays
from .statement import build_statement, render_plain_text

logger = logging.getLogger(__name__)


def _emit_structured_error(message: str, *, code: str, category: str, as_json: bool = False, exit_code: int = 2):
    payload = {
        "ok": False,
        "error": {
            "code": code,
            "category": category,
            "message": message,
        },
    }
    if as_json:
        click.echo(json.dumps(payload, indent=2, sort_keys=True))
    else:
        prefix = "theater internal error" if code == "INTERNAL" else "theater error"
        click.echo(f"{prefix} [{category}:{code}]: {message}", err=True)
    sys.exit(exit_code)


@click.group(invoke_without_command=True)
@click.pass_context
@click.option("--version", is_flag=True, help="Show the version and exit.")
def main(ctx, version):
    """Theater invoice statements."""
    if version:
        click.echo(f"theater version {VERSION}")
        return
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.argument("invoice_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("plays_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "json_output", is_flag=True, help="Emit a machine-readable summary")
@click.option("--currency", help="Currency code used for display (overrides THEATER_CURRENCY)")
@click.option("--locale", help="Separator convention, e.g. en_US or de_DE (overrides THEATER_LOCALE)")
def statement(invoice_path, plays_path, json_output, currency, locale):
    """Print the statement for INVOICE_PATH priced against PLAYS_PATH."""
    try:
        config = refresh_config()
        if currency:
            config = dataclasses.replace(config, currency=currency.upper())
        if locale:
            config = dataclasses.replace(config, locale=locale)

        result = build_statement(load_invoice(invoice_path), load_plays(plays_path))
        if json_output:
            click.echo(json.dumps({"ok": True, "statement": result.to_dict()}, indent=2, sort_keys=True))
        else:
            click.echo(render_plain_text(result, config), nl=False)
    except TheaterError as exc:
        _emit_structured_error(exc.explanation, code=exc.error_code, category=exc.category, as_json=json_output)
    except Exception as exc:
        logger.exception("Unhandled statement error")
        _emit_structured_error(str(exc), code="INTERNAL", category="SYSTEM", as_json=json_output)


if __name__ == "__main__":
    main()
