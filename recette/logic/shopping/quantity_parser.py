"""Free-text quantity parsing for the shopping list.

Recipe fields are user-authored strings ("4人分", "200g", "適量", "¥1000-",
"4,000kcal"), so every helper here is best-effort: none of them raises, each
falls back to a fixed default when nothing usable can be extracted.

Fallbacks:
    extract_servings -> 0 (unknown)
    servings_ratio   -> 1.0 (no scaling)
    scale_amount     -> amount unchanged
    parse_budget / parse_calories -> 0
"""
import logging
import re
from typing import Iterable

from recette.utilities.constants import (
    BUDGET_DECORATIONS,
    BUDGET_TRAILING_MARK,
    CALORIE_DECORATIONS,
    SERVING_SUFFIXES,
)

logger = logging.getLogger(__name__)

_SERVINGS_PATTERN = re.compile(r"([0-9]+)(?:" + "|".join(map(re.escape, SERVING_SUFFIXES)) + r")")
_NUMBER_PATTERN = re.compile(r"[0-9]+\.?[0-9]*")
_DIGITS_PATTERN = re.compile(r"[0-9]+")

__all__ = ["extract_servings", "servings_ratio", "scale_amount", "format_quantity",
           "parse_budget", "parse_calories"]


def extract_servings(descriptor: str) -> int:
    """Return the serving count of the first "<digits>人分" / "<digits>人前" match, or 0."""
    match = _SERVINGS_PATTERN.search("" if descriptor is None else str(descriptor))
    if not match:
        return 0
    return int(match.group(1))


def servings_ratio(requested: int, descriptor: str) -> float:
    """requested / nominal servings, or 1.0 when the nominal count is unknown."""
    original = extract_servings(descriptor)
    if original <= 0:
        logger.debug("No serving count in %r; using ratio 1.0", descriptor)
        return 1.0
    return requested / original


def format_quantity(value: float) -> str:
    if value == int(value):
        return f"{value:.0f}"
    return f"{value:.1f}"


def scale_amount(amount: str, ratio: float) -> str:
    """Scale the first number in ``amount`` by ``ratio``, keeping the surrounding text.

    >>> scale_amount("2個", 2.0)
    '4個'
    >>> scale_amount("1個", 1.5)
    '1.5個'
    >>> scale_amount("適量", 3.0)
    '適量'
    """
    if ratio == 1.0:
        return amount
    match = _NUMBER_PATTERN.search(amount or "")
    if not match:
        return amount
    try:
        value = float(match.group(0))
    except ValueError:
        return amount
    scaled = format_quantity(value * ratio)
    return amount[:match.start()] + scaled + amount[match.end():]


def _strip_int(text: str, decorations: Iterable[str], trailing: str = "") -> int:
    cleaned = "" if text is None else str(text)
    for token in decorations:
        cleaned = cleaned.replace(token, "")
    cleaned = cleaned.strip()
    if trailing and cleaned.endswith(trailing):
        cleaned = cleaned[:-len(trailing)]
    # ASCII digits only: no sign, underscores or full-width digits
    if not _DIGITS_PATTERN.fullmatch(cleaned):
        logger.debug("Unparseable numeric field %r; counting as 0", text)
        return 0
    return int(cleaned)


def parse_budget(text: str) -> int:
    """'¥1000-' / '500円' -> int; 0 when unparseable."""
    return _strip_int(text, BUDGET_DECORATIONS, trailing=BUDGET_TRAILING_MARK)


def parse_calories(text: str) -> int:
    """'4,000kcal' -> 4000; 0 when unparseable."""
    return _strip_int(text, CALORIE_DECORATIONS)
