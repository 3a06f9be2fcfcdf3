"""
Published CSV Export Source

Reads a tab through the spreadsheet's public CSV export:

    https://docs.google.com/spreadsheets/d/<id>/export?format=csv&gid=<gid>

No credentials are needed as long as the document is shared for viewing.
Each call opens its own HTTP client; there is no connection state to share
between calls. Failed requests are not retried.
"""

import csv
import io
from typing import Optional

import httpx

from kas_dashboard.models.rows import RawRow
from kas_dashboard.services.sheets.interface import SheetFetchError, SheetSourceInterface


EXPORT_URL = "https://docs.google.com/spreadsheets/d/{document_id}/export"


def parse_csv_text(text: str, skip_empty_lines: bool = True) -> list[RawRow]:
    """
    Split CSV text into rows of cell strings.

    With ``skip_empty_lines`` a line with no characters at all is dropped;
    a line of empty cells (",,,") is still a row.
    """
    reader = csv.reader(io.StringIO(text, newline=""))
    rows: list[RawRow] = []
    for row in reader:
        if skip_empty_lines and (not row or row == [""]):
            continue
        rows.append(list(row))
    return rows


class PublishedCsvSource(SheetSourceInterface):
    """Sheet source backed by the public CSV export endpoint."""

    def __init__(
        self,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the source.

        Args:
            timeout: Seconds to wait for one export
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self._timeout = timeout
        self._transport = transport

    def export_url(self, document_id: str) -> str:
        return EXPORT_URL.format(document_id=document_id)

    async def fetch_text(self, document_id: str, gid: str) -> str:
        """Download the raw CSV text of one tab."""
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(
                    self.export_url(document_id),
                    params={"format": "csv", "gid": gid},
                )
        except httpx.HTTPError as e:
            raise SheetFetchError(gid, f"Failed to fetch CSV: {e}")

        if not response.is_success:
            raise SheetFetchError(
                gid,
                f"Failed to fetch CSV: {response.status_code} {response.reason_phrase}",
            )
        return response.text

    async def fetch_rows(
        self,
        document_id: str,
        gid: str,
        skip_empty_lines: bool = True,
    ) -> list[RawRow]:
        """Fetch and parse one tab."""
        text = await self.fetch_text(document_id, gid)
        try:
            return parse_csv_text(text, skip_empty_lines=skip_empty_lines)
        except csv.Error as e:
            raise SheetFetchError(gid, f"Malformed CSV: {e}")
