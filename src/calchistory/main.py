from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from sys import exit
from typing import Annotated, Any, cast, final, override

import typer
from typer.core import TyperGroup

from calchistory.display import Language
from calchistory.exceptions import CalcHistoryError


@final
class CalcHistoryGroup(TyperGroup):
    @override
    def main(  # pyright: ignore[reportAny]
        self,
        args: Sequence[str] | None = None,
        prog_name: str | None = None,
        complete_var: str | None = None,
        standalone_mode: bool = True,
        windows_expand_args: bool = True,
        **extra: Any,  # pyright: ignore[reportAny, reportExplicitAny]
    ) -> Any:  # pyright: ignore[reportExplicitAny]
        try:
            return super().main(args, prog_name, complete_var, standalone_mode, windows_expand_args, **extra)  # pyright: ignore[reportAny]
        except CalcHistoryError as e:
            typer.secho(f"Error: {e.message}", err=True, fg=typer.colors.RED)
            exit(e.exit_code)
        except Exception as e:
            typer.secho("Unexpected Internal Error", err=True, fg=typer.colors.RED)
            typer.echo(str(e), err=True)
            exit(1)


app = typer.Typer(cls=CalcHistoryGroup, no_args_is_help=True)


class LanguageChoice(str, Enum):
    AR = "ar"
    EN = "en"


LanguageOption = Annotated[LanguageChoice, typer.Option("--lang", help="Language for type names and dates.")]


def _language(choice: LanguageChoice) -> Language:
    return cast(Language, choice.value)


@app.command("list")
def list_records(
    type_name: Annotated[str | None, typer.Option("--type", help="Only show calculations of this type.")] = None,
    limit: Annotated[int, typer.Option("--limit", "-n", help="Maximum number of calculations to show.")] = 20,
    language: LanguageOption = LanguageChoice.EN,
) -> None:
    """
    List recorded calculations, newest first.
    """
    from calchistory.commands import listing

    listing.list_records(type_name, limit, _language(language))


@app.command("show")
def show(
    record_id: Annotated[str, typer.Argument(help="Id of the calculation (calc_...).")],
) -> None:
    """
    Print a single calculation as JSON.
    """
    from calchistory.commands import listing

    listing.show(record_id)


@app.command("search")
def search(
    query: Annotated[str, typer.Argument(help="Text to look for in employee name, id, department, notes or type.")],
    language: LanguageOption = LanguageChoice.EN,
) -> None:
    """
    Search calculations by metadata and type.
    """
    from calchistory.commands import listing

    listing.search(query, _language(language))


@app.command("stats")
def stats(
    json_output: Annotated[bool, typer.Option("--json", help="Output the statistics as JSON.")] = False,
    language: LanguageOption = LanguageChoice.EN,
) -> None:
    """
    Show history statistics.
    """
    from calchistory.commands import stats

    stats.stats(json_output, _language(language))


@app.command("export")
def export(
    type_name: Annotated[str | None, typer.Option("--type", help="Only export calculations of this type.")] = None,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write to this file instead of stdout.")] = None,
) -> None:
    """
    Export the history as pretty-printed JSON.
    """
    from calchistory.commands import transfer

    transfer.export(type_name, output)


@app.command("import")
def import_(
    file: Annotated[Path, typer.Argument(help="JSON file produced by `calchistory export`.")],
) -> None:
    """
    Import calculations from an exported JSON file. Already known ids are skipped.
    """
    from calchistory.commands import transfer

    transfer.import_(file)


@app.command("delete")
def delete(
    record_id: Annotated[str, typer.Argument(help="Id of the calculation to delete.")],
) -> None:
    """
    Delete a single calculation.
    """
    from calchistory.commands import remove

    remove.delete(record_id)


@app.command("delete-type")
def delete_type(
    type_name: Annotated[str, typer.Argument(help="Calculation type to delete (gosi, eosb, leave, ...).")],
) -> None:
    """
    Delete every calculation of one type.
    """
    from calchistory.commands import remove

    remove.delete_type(type_name)


@app.command("clear")
def clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask for confirmation.")] = False,
) -> None:
    """
    Remove the entire calculation history.
    """
    from calchistory.commands import remove

    remove.clear(yes)


if __name__ == "__main__":
    app()
