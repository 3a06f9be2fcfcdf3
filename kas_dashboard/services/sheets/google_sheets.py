"""
Google Sheets API Source

Reads tabs through the authenticated Sheets API instead of the public
CSV export, for documents that are not shared publicly.

Rows come back as the API returns them: every row padded to the same
width, so a blank sheet row is a row of empty strings, the same as a
",,,," line in the CSV export.

Connecting is retried (authentication hiccups are common on cold start);
reading a tab is not.
"""

import asyncio
from typing import Optional

import gspread
from google.oauth2.service_account import Credentials
from tenacity import retry, stop_after_attempt, wait_exponential

from kas_dashboard.models.rows import RawRow
from kas_dashboard.services.sheets.interface import (
    SheetConnectionError,
    SheetFetchError,
    SheetSourceInterface,
)


# Read-only scopes; this package never writes to a sheet
SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets.readonly",
    "https://www.googleapis.com/auth/drive.readonly",
]


class GoogleSheetsClient:
    """
    Low-level Google Sheets client wrapper.

    Handles authentication and caches opened spreadsheets by ID.
    """

    def __init__(self, credentials_path: str):
        self._credentials_path = credentials_path
        self._client: Optional[gspread.Client] = None
        self._spreadsheets: dict[str, gspread.Spreadsheet] = {}

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    def connect(self) -> gspread.Client:
        """
        Establish connection to Google Sheets.

        Uses service account credentials for authentication.
        """
        if self._client is None:
            try:
                credentials = Credentials.from_service_account_file(
                    self._credentials_path,
                    scopes=SCOPES,
                )
                self._client = gspread.authorize(credentials)
            except FileNotFoundError:
                raise SheetConnectionError(
                    f"Google credentials file not found: {self._credentials_path}"
                )
            except Exception as e:
                raise SheetConnectionError(f"Failed to connect to Google Sheets: {e}")

        return self._client

    def get_spreadsheet(self, document_id: str) -> gspread.Spreadsheet:
        """Open a spreadsheet by ID."""
        if document_id not in self._spreadsheets:
            client = self.connect()
            try:
                self._spreadsheets[document_id] = client.open_by_key(document_id)
            except gspread.SpreadsheetNotFound:
                raise SheetConnectionError(f"Spreadsheet not found: {document_id}")
        return self._spreadsheets[document_id]

    def get_values(self, document_id: str, gid: str) -> list[list[str]]:
        """Get every cell value of one tab."""
        spreadsheet = self.get_spreadsheet(document_id)
        try:
            worksheet = spreadsheet.get_worksheet_by_id(int(gid))
        except ValueError:
            raise SheetFetchError(gid, f"Tab id is not a number: {gid!r}")
        except gspread.WorksheetNotFound:
            worksheet = None
        if worksheet is None:
            raise SheetFetchError(gid, f"Tab not found: {gid}")

        try:
            return worksheet.get_all_values()
        except gspread.exceptions.APIError as e:
            raise SheetFetchError(gid, f"Failed to read tab: {e}")


class GoogleSheetsApiSource(SheetSourceInterface):
    """Sheet source backed by the authenticated Sheets API."""

    def __init__(self, client: GoogleSheetsClient):
        self._client = client

    async def fetch_rows(
        self,
        document_id: str,
        gid: str,
        skip_empty_lines: bool = True,
    ) -> list[RawRow]:
        """Fetch one tab; the blocking gspread call runs in a worker thread."""
        values = await asyncio.to_thread(self._client.get_values, document_id, gid)
        rows: list[RawRow] = [list(row) for row in values]
        if skip_empty_lines:
            rows = [row for row in rows if row]
        return rows
