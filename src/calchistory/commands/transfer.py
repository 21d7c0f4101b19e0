import sys
from pathlib import Path

import typer

from calchistory.exceptions import CalcHistoryError
from calchistory.utils import open_store, parse_type


def export(type_name: str | None, output: Path | None) -> None:
    store = open_store()
    records = store.get_by_type(parse_type(type_name)) if type_name else store.get_all()
    text = store.export_json(records)

    if output is None:
        print(text)
        return

    try:
        _ = output.write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        raise CalcHistoryError(f"Could not write export file {output}: {e}") from e
    print(f"Exported {len(records)} calculation(s) to {output}", file=sys.stderr)


def import_(file: Path) -> None:
    try:
        text = file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CalcHistoryError(f"Could not read import file {file}: {e}") from e

    added = open_store().import_json(text)
    if added == 0:
        typer.echo("Nothing new to import: every calculation in the file is already in the history.")
    else:
        typer.echo(f"Imported {added} new calculation(s).")
