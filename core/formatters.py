# core/formatters.py

# all pure text and time helpers
# must never import from models!

import datetime
from typing import Iterable

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_comma_separated(items: Iterable[str]) -> str:
    return ", ".join(items)


def to_title_case(text: str) -> str:
    """
    Capitalizes the first letter of each space-separated word and lowercases the rest.

    Unlike `str.title()`, letters following digits stay lowercase, so "sec 2b" becomes "Sec 2b".
    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


# === time formatters ===


def format_time(value: datetime.time) -> str:
    return value.strftime("%H:%M")


def format_time_range(start: datetime.time, end: datetime.time) -> str:
    return f"{format_time(start)}-{format_time(end)}"
