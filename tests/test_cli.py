import json
from pathlib import Path

from click.testing import CliRunner

from theater import __version__
from theater.cli import main

DATA_DIR = Path(__file__).parent / "data"
INVOICE = str(DATA_DIR / "invoice.json")
PLAYS = str(DATA_DIR / "plays.json")


def _invoke(args, env=None):
    return CliRunner().invoke(main, args, env={"THEATER_LINE_SEPARATOR": "lf", **(env or {})})


def test_version():
    result = _invoke(["--version"])

    assert result.exit_code == 0
    assert f"theater version {__version__}" in result.output


def test_statement_prints_plain_text():
    result = _invoke(["statement", INVOICE, PLAYS])

    assert result.exit_code == 0, result.output
    assert result.output == (
        "Statement for BigCo\n"
        "  Hamlet: $650.00 (55 seats)\n"
        "  As You Like It: $510.00 (35 seats)\n"
        "  Othello: $500.00 (40 seats)\n"
        "Amount owed is $1,660.00\n"
        "You earned 47 credits\n"
    )


def test_statement_locale_options_override_env():
    result = _invoke(
        ["statement", INVOICE, PLAYS, "--currency", "eur", "--locale", "de_DE"],
        env={"THEATER_LOCALE": "fr_FR"},
    )

    assert result.exit_code == 0, result.output
    assert "Amount owed is €1.660,00" in result.output


def test_statement_json_output():
    result = _invoke(["statement", INVOICE, PLAYS, "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["ok"] is True
    assert payload["statement"]["total_amount"] == 166000
    assert payload["statement"]["total_credits"] == 47


def test_unknown_play_exits_with_structured_error(tmp_path):
    invoice = tmp_path / "invoice.json"
    invoice.write_text(
        json.dumps({"customer": "BigCo", "performances": [{"playID": "macbeth", "audience": 10}]}),
        encoding="utf-8",
    )

    result = _invoke(["statement", str(invoice), PLAYS])

    assert result.exit_code == 2
    assert "theater error [CATALOG:UNKNOWN_PLAY]: unknown play: macbeth" in result.output
    assert "Statement for" not in result.output


def test_unsupported_genre_json_error(tmp_path):
    plays = tmp_path / "plays.json"
    plays.write_text(json.dumps({"hamlet": {"name": "Hamlet", "type": "history"}}), encoding="utf-8")
    invoice = tmp_path / "invoice.json"
    invoice.write_text(
        json.dumps({"customer": "BigCo", "performances": [{"playID": "hamlet", "audience": 10}]}),
        encoding="utf-8",
    )

    result = _invoke(["statement", str(invoice), str(plays), "--json"])

    assert result.exit_code == 2
    payload = json.loads(result.output)
    assert payload["ok"] is False
    assert payload["error"]["code"] == "UNSUPPORTED_GENRE"
    assert payload["error"]["category"] == "PRICING"


def test_missing_file_is_a_usage_error(tmp_path):
    result = _invoke(["statement", str(tmp_path / "missing.json"), PLAYS])

    assert result.exit_code == 2
    assert "does not exist" in result.output


def test_undecodable_invoice_is_an_input_error(tmp_path):
    invoice = tmp_path / "invoice.json"
    invoice.write_bytes(b'{"customer": "Big\xffCo", "performances": []}')

    result = _invoke(["statement", str(invoice), PLAYS])

    assert result.exit_code == 2
    assert "theater error [INPUT:INVOICE_FORMAT]" in result.output
