"""Transaction model for the movement ledger."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class Transaction:
    """One row of the movement table.

    Column order on the page is ``ID, TransID, CustomerCode, Timestamp,
    CategoryCode, Amount, DepositFlag, WithdrawFlag``.
    """

    id: int
    trans_id: str
    customer_code: str
    timestamp: datetime  # Zaman
    category: int  # YatirimTipi
    amount: Decimal  # Tutar
    is_deposit: bool
    is_withdraw: bool
