"""Conversion of raw table rows into Transaction records."""

import logging
from typing import Iterable, Sequence

from movement_recon.exceptions import RowParseError
from movement_recon.models import Transaction
from movement_recon.parsing.coerce import (
    to_datetime,
    to_decimal,
    to_int,
    to_str,
    try_parse_int,
)

MIN_CELLS = 8
FLAG_SET = "1"


class TransactionParser:
    """Build Transaction records from trimmed table cells.

    Parameters
    ----------
    logger : logging.Logger | None
        Logger used for per-row diagnostics. Defaults to the module logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def parse_row(self, cells: Sequence[str]) -> Transaction | None:
        """Parse a single row.

        Parameters
        ----------
        cells : Sequence[str]
            Trimmed cell texts in page column order.

        Returns
        -------
        Transaction | None
            The parsed record, or None for rows with fewer than eight cells.

        Raises
        ------
        RowParseError
            If the ID column is not an integer.
        """
        if len(cells) < MIN_CELLS:
            return None

        row_id = try_parse_int(cells[0])
        if not row_id.ok:
            raise RowParseError(f"Invalid transaction ID: {cells[0]!r}")

        return Transaction(
            id=row_id.or_default(0),
            trans_id=to_str(cells[1]),
            customer_code=to_str(cells[2]),
            timestamp=to_datetime(cells[3]),
            category=to_int(cells[4]),
            amount=to_decimal(cells[5]),
            is_deposit=to_str(cells[6]) == FLAG_SET,
            is_withdraw=to_str(cells[7]) == FLAG_SET,
        )

    def parse_rows(self, rows: Iterable[Sequence[str]]) -> list[Transaction]:
        """Parse rows in source order, skipping short ones."""
        transactions = []
        for index, cells in enumerate(rows):
            transaction = self.parse_row(cells)
            if transaction is None:
                self.logger.debug("Skipping row %d: %d cells", index, len(cells))
                continue
            transactions.append(transaction)
        return transactions
