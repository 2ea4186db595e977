"""
Salary normalization.

Job sources disagree on how salary is represented: the placeholder feed
produces a number in thousands (e.g. 150), the CRUD backend stores a
formatted range string (e.g. "$120,000 - $150,000"). Everything is
normalized to a single integer in thousands at the ingestion boundary so
the filter engine can compare numbers.

A range collapses to its lower bound.
"""

import re
from typing import Any, Optional

# "120", "120,000", "120.5", "120k"
_AMOUNT_PATTERN = re.compile(r"(\d[\d,]*(?:\.\d+)?)\s*([kK])?")


def _to_thousands(amount: float, has_k_suffix: bool = False) -> int:
    if has_k_suffix:
        return int(round(amount))
    if amount >= 1000:
        return int(round(amount / 1000))
    return int(round(amount))


def normalize_salary(value: Any) -> Optional[int]:
    """
    Normalize a raw salary value to thousands.

    Args:
        value: Number (thousands or absolute), range string, or None

    Returns:
        Lower bound in thousands, or None when no amount can be read

    Examples:
        >>> normalize_salary(150)
        150
        >>> normalize_salary("$120,000 - $150,000")
        120
        >>> normalize_salary("$120k-150k")
        120
        >>> normalize_salary("Competitive") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        if value < 0:
            return None
        return _to_thousands(float(value))

    text = str(value).strip()
    if not text:
        return None

    amounts = []
    for number, suffix in _AMOUNT_PATTERN.findall(text):
        try:
            amounts.append(_to_thousands(float(number.replace(",", "")), bool(suffix)))
        except ValueError:
            continue

    if not amounts:
        return None
    return min(amounts)


def format_salary(salary: Optional[int], salary_text: Optional[str] = None) -> str:
    """Display string for a salary: the source text if present, else '<n>k'."""
    if salary_text:
        return salary_text
    if salary is None:
        return "Not disclosed"
    return f"{salary}k"
