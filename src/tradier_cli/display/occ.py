"""OCC option symbol humanization (``AAPL220617C00270000`` -> ``AAPL 06/17/22 $270 Call``)."""

from __future__ import annotations

# YYMMDD + C/P + 8-digit strike in thousandths
OCC_SUFFIX_LENGTH = 15
_DIGITS = frozenset("0123456789")
_OPTION_TYPES = {"C": "Call", "P": "Put"}


def humanize_option_symbol(symbol: str) -> str:
    """Render an OCC symbol readably; anything that does not match is returned unchanged."""
    if len(symbol) < OCC_SUFFIX_LENGTH:
        return symbol

    root = symbol[:-OCC_SUFFIX_LENGTH]
    suffix = symbol[-OCC_SUFFIX_LENGTH:]
    date_part = suffix[0:6]
    type_code = suffix[6]
    strike_part = suffix[7:15]

    if not _all_digits(date_part):
        return symbol
    if type_code not in _OPTION_TYPES:
        return symbol
    if not _all_digits(strike_part):
        return symbol

    yy, mm, dd = date_part[0:2], date_part[2:4], date_part[4:6]
    return f"{root} {mm}/{dd}/{yy} {_strike_label(int(strike_part))} {_OPTION_TYPES[type_code]}"


def _all_digits(text: str) -> bool:
    return all(ch in _DIGITS for ch in text)


def _strike_label(thousandths: int) -> str:
    dollars, remainder = divmod(thousandths, 1000)
    if remainder == 0:
        return f"${dollars}"
    return f"${thousandths / 1000:.2f}"
