"""Synthetic movement ledgers and their HTML rendering."""

from datetime import datetime, timedelta
from decimal import Decimal
from html import escape
from typing import Iterable

from movement_recon.generators.base import BaseGenerator
from movement_recon.models import Transaction
from movement_recon.parsing.coerce import DATETIME_FORMAT
from movement_recon.reconcile.window import EXCLUDED_CATEGORY

HEADER = (
    "ID",
    "TransID",
    "CustomerCode",
    "Zaman",
    "YatirimTipi",
    "Tutar",
    "IsDeposit",
    "IsWithdraw",
)


class MovementGenerator(BaseGenerator):
    """Generate deposit/withdraw ledgers for a single customer."""

    CATEGORIES = [12, 24, 31, 45, EXCLUDED_CATEGORY]
    CATEGORY_WEIGHTS = [0.30, 0.25, 0.20, 0.15, 0.10]
    DEPOSIT_RATE = 0.55

    def __init__(self, seed: int | None = None, locale: str = "tr_TR") -> None:
        super().__init__(seed, locale)
        self.customer_code = self.fake.bothify("CUST-#####")

    def generate(
        self,
        id: int,
        timestamp: datetime,
        is_deposit: bool | None = None,
    ) -> Transaction:
        """Generate a single movement.

        Parameters
        ----------
        id : int
            Row ID.
        timestamp : datetime
            Movement time.
        is_deposit : bool | None
            Force a deposit (True) or withdrawal (False); random when None.

        Returns
        -------
        Transaction
            Generated movement.
        """
        if is_deposit is None:
            is_deposit = self.rng.random() < self.DEPOSIT_RATE

        # Round figures dominate real top-ups
        amount = Decimal(self.rng.randint(1, 200) * 50)
        if self.rng.random() < 0.3:
            amount += Decimal(self.rng.randint(1, 99)) / 100

        return Transaction(
            id=id,
            trans_id=self.fake.uuid4(),
            customer_code=self.customer_code,
            timestamp=timestamp.replace(microsecond=0),
            category=self.rng.choices(self.CATEGORIES, weights=self.CATEGORY_WEIGHTS, k=1)[0],
            amount=amount,
            is_deposit=is_deposit,
            is_withdraw=not is_deposit,
        )

    def generate_batch(
        self,
        count: int,
        start: datetime | None = None,
        max_gap_hours: int = 12,
    ) -> list[Transaction]:
        """Generate ``count`` movements with ascending IDs and times.

        Parameters
        ----------
        count : int
            Number of movements.
        start : datetime | None
            Time of the first movement. Defaults to ``count * max_gap_hours``
            hours before now.
        max_gap_hours : int
            Upper bound on the gap between consecutive movements.

        Returns
        -------
        list[Transaction]
            Movements, oldest first.
        """
        if start is None:
            start = datetime.now() - timedelta(hours=count * max_gap_hours)

        movements = []
        timestamp = start
        for index in range(count):
            movements.append(self.generate(id=index + 1, timestamp=timestamp))
            timestamp += timedelta(minutes=self.rng.randint(5, max_gap_hours * 60))
        return movements


def _cells(transaction: Transaction) -> list[str]:
    return [
        str(transaction.id),
        transaction.trans_id,
        transaction.customer_code,
        transaction.timestamp.strftime(DATETIME_FORMAT),
        str(transaction.category),
        str(transaction.amount),
        "1" if transaction.is_deposit else "0",
        "1" if transaction.is_withdraw else "0",
    ]


def render_table(transactions: Iterable[Transaction], title: str = "Hareketler") -> str:
    """Render movements as an HTML page in the scraped column layout."""
    header = "".join(f"<th>{escape(name)}</th>" for name in HEADER)
    body = "\n".join(
        "<tr>" + "".join(f"<td>{escape(cell)}</td>" for cell in _cells(t)) + "</tr>"
        for t in transactions
    )
    return (
        "<!DOCTYPE html>\n"
        f"<html><head><meta charset=\"utf-8\"><title>{escape(title)}</title></head>\n"
        "<body>\n<table>\n"
        f"<tr>{header}</tr>\n"
        f"{body}\n"
        "</table>\n</body></html>\n"
    )
