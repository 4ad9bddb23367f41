"""Cell formatting shared by the renderers."""

from __future__ import annotations


def money(value: float) -> str:
    # + 0.0 folds negative zero so it never renders as "$-0.00"
    if value < 0:
        return f"-${-value:.2f}"
    return f"${value + 0.0:.2f}"


def pct(value: float) -> str:
    return f"{value + 0.0:+.2f}%"


def signed(value: float) -> str:
    return f"{value + 0.0:+.2f}"


def fixed(value: float) -> str:
    return f"{value:.2f}"


def whole(value: float) -> str:
    return f"{value:.0f}"


def short_date(text: str) -> str:
    """Trim an ISO-8601 timestamp to its ``YYYY-MM-DD`` prefix."""
    if len(text) >= 10:
        return text[:10]
    return text
