"""Raw row extraction from movement pages."""

from movement_recon.extract.html_table import (
    HtmlTableExtractor,
    RowExtractor,
    fetch_page,
    read_page,
)

__all__ = ["HtmlTableExtractor", "RowExtractor", "fetch_page", "read_page"]
