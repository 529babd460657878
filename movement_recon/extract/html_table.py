"""Row extraction from the movement HTML page."""

import logging
from pathlib import Path
from typing import Protocol

import requests
from lxml import html as lxml_html
from lxml.etree import ParserError

from movement_recon.config import FetchConfig
from movement_recon.exceptions import FetchError, TableNotFoundError

logger = logging.getLogger(__name__)

ROW_XPATH = "//table//tr"
CELL_XPATH = "td"


class RowExtractor(Protocol):
    """Source of raw table rows, header excluded."""

    def rows(self) -> list[list[str]]: ...


def fetch_page(config: FetchConfig) -> str:
    """Download the movement page with a single GET.

    Parameters
    ----------
    config : FetchConfig
        URL, timeout and headers.

    Returns
    -------
    str
        Response body.

    Raises
    ------
    FetchError
        On connection failure, timeout or a non-2xx status.
    """
    logger.debug("GET %s (timeout=%.1fs)", config.url, config.timeout_seconds)
    try:
        with requests.Session() as session:
            response = session.get(
                config.url,
                timeout=config.timeout_seconds,
                headers=config.headers,
            )
            response.raise_for_status()
            return response.text
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch {config.url}: {e}") from e


def read_page(path: str | Path) -> str:
    """Read a saved movement page from disk."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise FetchError(f"Failed to read {path}: {e}") from e


class HtmlTableExtractor:
    """Extract data rows from every table in an HTML document.

    The first ``tr`` in document order is the header and is skipped.
    Cell texts are the trimmed text content of each ``td``.
    """

    def __init__(self, document: str) -> None:
        self._tr_nodes = self._select_rows(document)

    @staticmethod
    def _select_rows(document: str) -> list:
        if not document.strip():
            return []
        try:
            tree = lxml_html.fromstring(document)
        except ParserError:
            return []
        return tree.xpath(ROW_XPATH)

    @property
    def row_count(self) -> int:
        """Number of data rows (header excluded)."""
        return max(len(self._tr_nodes) - 1, 0)

    def rows(self) -> list[list[str]]:
        """Return trimmed cell texts for each data row.

        Raises
        ------
        TableNotFoundError
            If the document contains no table rows.
        """
        if not self._tr_nodes:
            raise TableNotFoundError("No data found on the webpage.")

        return [
            [cell.text_content().strip() for cell in tr.xpath(CELL_XPATH)]
            for tr in self._tr_nodes[1:]
        ]
