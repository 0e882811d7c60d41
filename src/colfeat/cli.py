# src/colfeat/cli.py
# -----------------------------------------------------------------------------
# colfeat – Command Line Interface (Typer)
#
#   name     : canonical name of a single-column feature      FIELD@BASE
#   conj     : canonical name of a two-column conjunction     CONJ[A,B]@BASE
#   parse    : recover provenance from a canonical name
#   predict  : name every request in a YAML config, write a feature table
#   inspect  : read a (name, value) table and spell out provenance
#
# Command output goes through typer.echo; progress lines through log_stdout.
# Failures (bad input, missing files) are reported as "[<cmd>] failed: ..." with exit code 1.
# -----------------------------------------------------------------------------

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd
import typer

from colfeat.checks.guards import ensure_no_name_collisions
from colfeat.common.config import load_naming_config
from colfeat.common.logging import Timed, log_stdout
from colfeat.features.columnar import generate_conjunction_name, generate_simple_name
from colfeat.features.frame import features_to_frame, frame_to_features
from colfeat.features.parse import split_feature_name

app = typer.Typer(add_completion=False, no_args_is_help=True)


# ------------------------------ helpers ---------------------------------
def _ensure_parents(p: Path) -> None:
    """Ensure parent directories of path ``p`` exist (idempotent)."""
    p.parent.mkdir(parents=True, exist_ok=True)


def _read_table(p: Path) -> pd.DataFrame:
    if p.suffix.lower() == ".parquet":
        return pd.read_parquet(p)
    if p.suffix.lower() == ".csv":
        return pd.read_csv(p, keep_default_na=False, na_values=[""])
    raise ValueError(f"Unsupported table format {p.suffix!r} (use .csv or .parquet)")


def _write_table(df: pd.DataFrame, p: Path) -> None:
    _ensure_parents(p)
    if p.suffix.lower() == ".parquet":
        df.to_parquet(p, index=False)
    elif p.suffix.lower() == ".csv":
        df.to_csv(p, index=False)
    else:
        raise ValueError(f"Unsupported table format {p.suffix!r} (use .csv or .parquet)")


def _fail(cmd: str, e: Exception) -> typer.Exit:
    typer.echo(f"[{cmd}] failed: {e}", err=True)
    return typer.Exit(code=1)


# -------------------------------- naming --------------------------------
@app.command()
def name(
    field: str = typer.Argument(..., help="Source column name"),
    base: str = typer.Argument(..., help="Base feature label"),
) -> None:
    """Print the canonical name of a single-column feature."""
    typer.echo(generate_simple_name(field, base))


@app.command()
def conj(
    first: str = typer.Argument(..., help="First source column"),
    second: str = typer.Argument(..., help="Second source column"),
    base: str = typer.Argument(..., help="Base feature label"),
) -> None:
    """Print the canonical name of a conjunction feature (field order matters)."""
    typer.echo(generate_conjunction_name(first, second, base))


@app.command()
def parse(
    feature_name: str = typer.Argument(..., help="Canonical feature name"),
) -> None:
    """Recover provenance and base name from a canonical feature name."""
    try:
        provenance, base = split_feature_name(feature_name)
    except ValueError as e:
        raise _fail("parse", e)
    typer.echo(f"field_name: {provenance.field_name}")
    typer.echo(f"first_field_name: {provenance.first_field_name}")
    typer.echo(f"second_field_name: {provenance.second_field_name}")
    typer.echo(f"base: {base}")


# ------------------------------- tables ---------------------------------
@app.command()
def predict(
    config: str = typer.Option(..., "--config", help="Path to naming YAML config"),
    out: Optional[str] = typer.Option(
        None, help="Output table (.csv/.parquet); defaults to the config's `output`"
    ),
    check: bool = typer.Option(False, help="Fail if two requests produce the same name"),
) -> None:
    """Name every request in a config and write the resulting feature table."""
    try:
        cfg = load_naming_config(Path(config))
        out_s = out or cfg.output
        if not out_s:
            raise ValueError("no output path: pass --out or set `output` in the config")
        with Timed() as t:
            feats = cfg.to_features()
            if check:
                ensure_no_name_collisions(feats)
            df = features_to_frame(feats)
            _write_table(df, Path(out_s))
    except (ValueError, OSError) as e:
        raise _fail("predict", e)
    log_stdout(f"[predict] {len(df)} features in {t.elapsed:.3f}s")
    typer.echo(f"[predict] written: {out_s}")


@app.command()
def inspect(
    path: str = typer.Argument(..., help="Table (.csv/.parquet) with name and value columns"),
    out: Optional[str] = typer.Option(None, help="Write the provenance table here instead"),
    name_col: str = typer.Option("name", help="Column holding canonical names"),
    value_col: str = typer.Option("value", help="Column holding feature values"),
) -> None:
    """Spell out the provenance of each feature in a (name, value) table."""
    try:
        raw = _read_table(Path(path))
        feats = frame_to_features(raw, name_col=name_col, value_col=value_col)
        df = features_to_frame(feats)
        if out:
            _write_table(df, Path(out))
    except (ValueError, OSError) as e:
        raise _fail("inspect", e)
    if out:
        typer.echo(f"[inspect] written: {out}")
    else:
        typer.echo(df.to_string(index=False))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
