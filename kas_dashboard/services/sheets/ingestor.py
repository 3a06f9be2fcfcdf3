"""
Sheet Ingestion

The single place where fetch failures stop. Whatever goes wrong while
reading a tab (network error, non-success response, bad credentials,
unreadable CSV) is logged and turned into an empty row set, which the
reconciler later replaces with fallback data.
"""

import asyncio

from kas_dashboard.log import get_logger
from kas_dashboard.models.rows import RawRow
from kas_dashboard.services.sheets.interface import SheetSourceInterface


class SheetIngestor:
    """Fetches raw rows for one spreadsheet document."""

    def __init__(self, source: SheetSourceInterface, document_id: str):
        self._source = source
        self._document_id = document_id
        self._logger = get_logger(__name__)

    @property
    def document_id(self) -> str:
        return self._document_id

    async def fetch(self, gid: str, skip_empty_lines: bool = True) -> list[RawRow]:
        """
        Fetch one tab as rows.

        Never raises: any failure gives an empty list.
        """
        try:
            return await self._source.fetch_rows(
                self._document_id,
                gid,
                skip_empty_lines=skip_empty_lines,
            )
        except Exception as e:
            self._logger.warning(
                "sheet_fetch_failed",
                gid=gid,
                error_type=type(e).__name__,
                error=str(e),
            )
            return []

    async def fetch_many(
        self,
        *gids: str,
        skip_empty_lines: bool = True,
    ) -> list[list[RawRow]]:
        """Fetch several tabs concurrently, results in argument order."""
        return list(await asyncio.gather(
            *(self.fetch(gid, skip_empty_lines=skip_empty_lines) for gid in gids)
        ))
