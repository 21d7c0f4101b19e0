"""Terminal rendering of calculation records."""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from calchistory.display import Language, format_record_date, get_calculation_type_name
from calchistory.models import CalculationRecord


def _summary(record: CalculationRecord) -> str:
    meta = record.metadata
    if meta is None:
        return ""
    parts = [p for p in (meta.employee_name, meta.employee_id, meta.department) if p]
    return " / ".join(parts)


def records_table(records: Sequence[CalculationRecord], language: Language = "en") -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", no_wrap=True)
    table.add_column("Type")
    table.add_column("Date", no_wrap=True)
    table.add_column("Employee")
    for record in records:
        table.add_row(
            record.id,
            get_calculation_type_name(record.type, language),
            format_record_date(record.timestamp, language),
            _summary(record),
        )
    return table


def print_records(records: Sequence[CalculationRecord], language: Language = "en") -> None:
    console = Console()
    if not records:
        console.print("No calculations recorded.")
        return
    console.print(records_table(records, language))
