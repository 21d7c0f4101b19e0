from rich.console import Console
from rich.table import Table

from calchistory.display import Language, format_record_date, get_calculation_type_name
from calchistory.models import CalculationType
from calchistory.serialization import to_pretty_json
from calchistory.utils import open_store


def stats(json_output: bool, language: Language) -> None:
    history_stats = open_store().get_stats()

    if json_output:
        print(to_pretty_json(history_stats))
        return

    console = Console()
    console.print(f"[bold]Total calculations:[/bold] {history_stats.total}")
    console.print(f"Last 7 days: {history_stats.last_week}")
    console.print(f"Last 30 days: {history_stats.last_month}")

    if history_stats.newest_record is not None and history_stats.oldest_record is not None:
        console.print(f"Newest: {format_record_date(history_stats.newest_record, language)}")
        console.print(f"Oldest: {format_record_date(history_stats.oldest_record, language)}")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Type")
    table.add_column("Count", justify="right")
    for calc_type in CalculationType:
        table.add_row(get_calculation_type_name(calc_type, language), str(history_stats.by_type[calc_type.value]))
    console.print(table)
