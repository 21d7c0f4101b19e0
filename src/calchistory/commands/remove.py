import typer

from calchistory.utils import open_store, parse_type


def delete(record_id: str) -> None:
    if not open_store().delete(record_id):
        typer.secho(f"Error: No calculation found with id '{record_id}'.", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(f"Deleted {record_id}.")


def delete_type(type_name: str) -> None:
    calc_type = parse_type(type_name)
    removed = open_store().delete_by_type(calc_type)
    typer.echo(f"Deleted {removed} {calc_type.value} calculation(s).")


def clear(yes: bool) -> None:
    if not yes:
        _ = typer.confirm("Remove the entire calculation history?", abort=True)
    open_store().clear()
    typer.echo("Calculation history cleared.")
