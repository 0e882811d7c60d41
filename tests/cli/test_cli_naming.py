from __future__ import annotations

from typer.testing import CliRunner

from colfeat.cli import app

runner = CliRunner()


def test_cli_name_and_conj() -> None:
    res = runner.invoke(app, ["name", "AGE", "35"])
    assert res.exit_code == 0
    assert res.stdout.strip() == "AGE@35"

    res = runner.invoke(app, ["conj", "AGE", "GENDER", "M"])
    assert res.exit_code == 0
    assert res.stdout.strip() == "CONJ[AGE,GENDER]@M"


def test_cli_parse_conjunction() -> None:
    res = runner.invoke(app, ["parse", "CONJ[AGE,GENDER]@M"])
    assert res.exit_code == 0
    lines = res.stdout.strip().splitlines()
    assert lines == [
        "field_name: CONJ",
        "first_field_name: AGE",
        "second_field_name: GENDER",
        "base: M",
    ]


def test_cli_parse_rejects_plain_string() -> None:
    res = runner.invoke(app, ["parse", "no_joiner"])
    assert res.exit_code == 1
