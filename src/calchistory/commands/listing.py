import typer

from calchistory.console import print_records
from calchistory.display import Language
from calchistory.utils import open_store, parse_type


def list_records(type_name: str | None, limit: int, language: Language) -> None:
    store = open_store()
    records = store.get_by_type(parse_type(type_name)) if type_name else store.get_all()
    print_records(records[: max(limit, 0)], language)


def show(record_id: str) -> None:
    store = open_store()
    record = store.get_by_id(record_id)
    if record is None:
        typer.secho(f"Error: No calculation found with id '{record_id}'.", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    print(store.export_json([record]))


def search(query: str, language: Language) -> None:
    if not query.strip():
        typer.secho("Error: Search query must not be empty.", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    print_records(open_store().search(query), language)
