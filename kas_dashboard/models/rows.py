"""
Classified Row Models

The mixed year/month tab reuses the same columns with different meanings
depending on the row: on a year header, column B is the opening balance
and column C the unpaid amount; on a month row, column B is income,
column C expense and column D the running balance.

The classifier turns each raw row into one of these named shapes, so the
aggregator never looks at a column index.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# A raw CSV row: cells in sheet order, any of which may be missing
RawRow = list[Optional[str]]


class YearHeader(BaseModel):
    """A row whose first cell is a four-digit year, e.g. '2026'."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["year_header"] = "year_header"
    year: int
    opening_balance: float = Field(default=0.0, description="Column B: saldo awal")
    unpaid: float = Field(default=0.0, description="Column C: uang belum disetor")


class MonthDetail(BaseModel):
    """A row whose first cell is a full Indonesian month name, under a year."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["month_detail"] = "month_detail"
    month_name: str
    income: float = 0.0
    expense: float = 0.0
    running_balance: float = 0.0

    @property
    def month_abbreviation(self) -> str:
        return self.month_name[:3]


class SkippedRow(BaseModel):
    """Any row that is neither a year header nor a month row."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["skipped"] = "skipped"


ClassifiedRow = Annotated[
    Union[YearHeader, MonthDetail, SkippedRow],
    Field(discriminator="kind"),
]
