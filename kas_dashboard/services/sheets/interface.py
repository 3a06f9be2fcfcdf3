"""
Abstract Sheet Source Interface

DESIGN DECISION: Reading a spreadsheet tab is a single capability:
"give me the rows of tab <gid> in document <id>". Sources implement
that capability and raise SheetSourceError subclasses when they can't;
the SheetIngestor above them turns every failure into an empty row set.

Sources are read-only. Nothing in this package writes to a sheet.
"""

from abc import ABC, abstractmethod

from kas_dashboard.models.rows import RawRow


class SheetSourceError(Exception):
    """Base exception for sheet source errors."""
    pass


class SheetConnectionError(SheetSourceError):
    """Failed to reach or authenticate with the spreadsheet service."""
    pass


class SheetFetchError(SheetSourceError):
    """A tab could not be fetched or its content could not be read."""

    def __init__(self, gid: str, message: str):
        self.gid = gid
        super().__init__(message)


class SheetSourceInterface(ABC):
    """
    Abstract interface for reading spreadsheet tabs as rows.

    Any source (published CSV export, Sheets API, a fixture in tests)
    must implement this method.
    """

    @abstractmethod
    async def fetch_rows(
        self,
        document_id: str,
        gid: str,
        skip_empty_lines: bool = True,
    ) -> list[RawRow]:
        """
        Fetch all rows of one tab.

        Args:
            document_id: Spreadsheet document ID
            gid: Tab ID within the document
            skip_empty_lines: Drop lines with no content at all. Callers
                              that address rows by index pass False so
                              indices match sheet row numbers.

        Returns:
            Rows in sheet order, each a list of cell strings

        Raises:
            SheetSourceError: If the tab can't be read
        """
        pass
