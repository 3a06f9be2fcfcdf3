"""
Kas Dashboard - Source Package

Reads a community cash-book kept in a Google spreadsheet (one tab with
year header rows followed by Indonesian month rows, plus one tab per year
with individual transactions) and turns it into the numbers a dashboard
shows: headline summary, monthly report, yearly report and per-year
summaries.

PRINCIPLES:
1. The spreadsheet is never written to
2. A blank or malformed cell is worth 0, never an error
3. The public read operations always return a usable value
"""

__version__ = "1.0.0"
__author__ = "Kas Dashboard Team"
