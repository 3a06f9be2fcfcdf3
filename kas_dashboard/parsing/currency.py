"""
Currency Parsing

Spreadsheet cells arrive as text written by hand in either Indonesian
("Rp 1.234.567,50") or US ("1,234,567.50") notation, or blank, or with
stray characters. parse_currency() turns any of these into a float and
never raises: anything it cannot read is worth 0.0.
"""

import re
from typing import Optional


# Everything that is not part of a number
_NOISE = re.compile(r"[^\d.,-]")

# An integer grouped in thousands with one kind of separator:
# "50.000", "1.234.567", "1,234,567"
_GROUPED_INTEGER = re.compile(r"^-?[1-9]\d{0,2}([.,])\d{3}(?:\1\d{3})*$")

# The numeric prefix a lenient float reader accepts: "12", "12.5", ".5", "12."
_LEADING_NUMBER = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


def normalize_number_text(value: str) -> str:
    """
    Rewrite a raw cell so that '.' is the only decimal separator.

    Separator rules, in order:
    1. A grouped integer ("1.234.567", "50.000") loses every separator.
    2. If the last ',' comes after the last '.', ',' is the decimal
       separator: every '.' is dropped and the last ',' becomes '.'.
    3. Otherwise '.' is the decimal separator and every ',' is dropped.
    """
    text = _NOISE.sub("", value)

    if _GROUPED_INTEGER.match(text):
        return text.replace(".", "").replace(",", "")

    last_comma = text.rfind(",")
    last_dot = text.rfind(".")

    if last_comma > last_dot:
        whole, _, fraction = text.replace(".", "").rpartition(",")
        return whole.replace(",", "") + "." + fraction

    return text.replace(",", "")


def parse_currency(value: Optional[str]) -> float:
    """
    Parse a currency cell into a float.

    Examples:
        parse_currency("Rp 50.000")  -> 50000.0
        parse_currency("1.234,56")   -> 1234.56
        parse_currency("1,234.56")   -> 1234.56
        parse_currency("-")          -> 0.0
        parse_currency(None)         -> 0.0
    """
    if not value:
        return 0.0

    match = _LEADING_NUMBER.match(normalize_number_text(str(value)))
    if match is None:
        return 0.0

    # -0.0 is reported as 0.0
    return float(match.group()) or 0.0
