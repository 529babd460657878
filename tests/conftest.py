"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable

import pytest

from movement_recon.models import Transaction


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def base_time() -> datetime:
    """Reference time for constructed ledgers."""
    return datetime(2024, 3, 10, 12, 0, 0)


@pytest.fixture
def make_transaction(base_time: datetime) -> Callable[..., Transaction]:
    """Factory for transactions placed relative to ``base_time``."""
    counter = iter(range(1, 10_000))

    def _make(
        hours: float,
        amount: str | int = "100",
        deposit: bool = True,
        category: int = 1,
        id: int | None = None,
    ) -> Transaction:
        tx_id = id if id is not None else next(counter)
        return Transaction(
            id=tx_id,
            trans_id=f"TX-{tx_id:04d}",
            customer_code="CUST-00001",
            timestamp=base_time + timedelta(hours=hours),
            category=category,
            amount=Decimal(str(amount)),
            is_deposit=deposit,
            is_withdraw=not deposit,
        )

    return _make


SAMPLE_PAGE = """<!DOCTYPE html>
<html><body>
<table>
<tr><th>ID</th><th>TransID</th><th>CustomerCode</th><th>Zaman</th>
<th>YatirimTipi</th><th>Tutar</th><th>IsDeposit</th><th>IsWithdraw</th></tr>
<tr><td>1</td><td>T-1</td><td>C-1</td><td>2024/03/07 09:00:00</td><td>5</td><td>200</td><td>0</td><td>1</td></tr>
<tr><td>2</td><td>T-2</td><td>C-1</td><td>2024/03/09 10:00:00</td><td>5</td><td>80</td><td>0</td><td>1</td></tr>
<tr><td>3</td><td>T-3</td><td>C-1</td><td>2024/03/09 11:00:00</td><td>76</td><td>999</td><td>1</td><td>0</td></tr>
<tr><td>4</td><td>T-4</td><td>C-1</td><td>2024/03/10 12:00:00</td><td>5</td><td>150</td><td>1</td><td>0</td></tr>
<tr><td>5</td><td>T-5</td><td>C-1</td><td>2024/03/11 08:00:00</td><td>5</td><td>200</td><td>1</td><td>0</td></tr>
<tr><td>6</td><td>T-6</td><td>C-1</td></tr>
</table>
</body></html>
"""


@pytest.fixture
def sample_page() -> str:
    """Movement page with one short row and one category-76 deposit."""
    return SAMPLE_PAGE
