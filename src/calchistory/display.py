"""Localized labels for calculation records (Arabic and English)."""

from datetime import UTC, datetime
from typing import Literal

from calchistory.models import CalculationType

Language = Literal["ar", "en"]

_TYPE_NAMES: dict[CalculationType, dict[Language, str]] = {
    CalculationType.GOSI: {"ar": "حساب التأمينات الاجتماعية", "en": "GOSI Calculation"},
    CalculationType.EOSB: {"ar": "حساب نهاية الخدمة", "en": "End of Service"},
    CalculationType.LEAVE: {"ar": "حساب الإجازات", "en": "Leave Calculation"},
    CalculationType.SAUDIZATION: {"ar": "نسبة السعودة", "en": "Saudization"},
    CalculationType.COMPLIANCE: {"ar": "تقييم الامتثال", "en": "Compliance Check"},
}

_MONTHS: dict[Language, tuple[str, ...]] = {
    "ar": (
        "يناير",
        "فبراير",
        "مارس",
        "أبريل",
        "مايو",
        "يونيو",
        "يوليو",
        "أغسطس",
        "سبتمبر",
        "أكتوبر",
        "نوفمبر",
        "ديسمبر",
    ),
    "en": (
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ),
}


def get_calculation_type_name(type_tag: CalculationType | str, language: Language = "ar") -> str:
    return _TYPE_NAMES[CalculationType(type_tag)][language]


def format_record_date(timestamp: int, language: Language = "ar") -> str:
    """
    Formats a millisecond timestamp as 'day month year, HH:MM' (UTC) with localized month names.
    """
    moment = datetime.fromtimestamp(timestamp / 1000, tz=UTC)
    month = _MONTHS[language][moment.month - 1]
    return f"{moment.day} {month} {moment.year}, {moment:%H:%M}"
