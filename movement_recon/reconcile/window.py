"""Selection of the reconciliation window.

The window is bounded by three anchors: the latest deposit, the oldest
deposit within ``DEPOSIT_WINDOW`` of it, and the earliest withdrawal at or
before ``WITHDRAW_LOOKBACK`` prior to that oldest deposit.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable

from movement_recon.exceptions import (
    NoDepositsError,
    NoDepositsInWindowError,
    NoQualifyingWithdrawalError,
)
from movement_recon.models import Transaction

DEPOSIT_WINDOW = timedelta(hours=48)
WITHDRAW_LOOKBACK = timedelta(hours=24)
EXCLUDED_CATEGORY = 76


def _by_time(transaction: Transaction) -> datetime:
    return transaction.timestamp


@dataclass
class ReconciliationWindow:
    """Anchors and filtered transactions for one reconciliation run."""

    latest_deposit: Transaction
    window_deposits: list[Transaction]
    anchor_withdraw: Transaction
    relevant: list[Transaction]

    @property
    def oldest_deposit(self) -> Transaction:
        """Oldest deposit inside the deposit window."""
        return self.window_deposits[0]

    @property
    def deposits(self) -> list[Transaction]:
        """Relevant deposits, oldest first."""
        return sorted((t for t in self.relevant if t.is_deposit), key=_by_time)

    @property
    def withdraws(self) -> list[Transaction]:
        """Relevant withdrawals, oldest first."""
        return sorted((t for t in self.relevant if t.is_withdraw), key=_by_time)


class WindowSelector:
    """Derive a ReconciliationWindow from an unsorted ledger.

    Parameters
    ----------
    logger : logging.Logger | None
        Logger that receives the anchor messages.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def select(self, transactions: Iterable[Transaction]) -> ReconciliationWindow:
        """Select anchors and the relevant transaction set.

        Raises
        ------
        NoDepositsError
            If there is no deposit at all.
        NoDepositsInWindowError
            If the deposit window is empty.
        NoQualifyingWithdrawalError
            If no withdrawal lies at or before the lookback cutoff.
        """
        # Stable sorts throughout: equal timestamps keep this ordering.
        ordered = sorted(transactions, key=_by_time, reverse=True)

        latest_deposit = next((t for t in ordered if t.is_deposit), None)
        if latest_deposit is None:
            raise NoDepositsError("No deposit transactions found.")
        self.logger.info(
            "Latest deposit found: ID %s, Time %s", latest_deposit.id, latest_deposit.timestamp
        )

        window_start = latest_deposit.timestamp - DEPOSIT_WINDOW
        window_deposits = sorted(
            (t for t in ordered if t.is_deposit and t.timestamp >= window_start),
            key=_by_time,
        )
        if not window_deposits:
            raise NoDepositsInWindowError("No deposits found within the last 48 hours.")
        oldest_deposit = window_deposits[0]
        self.logger.info(
            "Oldest deposit within 48 hours: ID %s, Time %s",
            oldest_deposit.id,
            oldest_deposit.timestamp,
        )

        # Earliest withdrawal at or before the cutoff, not the nearest one.
        cutoff = oldest_deposit.timestamp - WITHDRAW_LOOKBACK
        candidates = sorted(
            (t for t in ordered if t.is_withdraw and t.timestamp <= cutoff),
            key=_by_time,
        )
        if not candidates:
            raise NoQualifyingWithdrawalError("No withdraws found within the required timeframe.")
        anchor_withdraw = candidates[0]
        self.logger.info(
            "Oldest withdraw found: ID %s, Time %s", anchor_withdraw.id, anchor_withdraw.timestamp
        )

        relevant = [
            t
            for t in ordered
            if t.timestamp >= anchor_withdraw.timestamp and t.category != EXCLUDED_CATEGORY
        ]
        self.logger.info(
            "%d relevant transactions found after filtering Payment Type ID %d.",
            len(relevant),
            EXCLUDED_CATEGORY,
        )

        return ReconciliationWindow(
            latest_deposit=latest_deposit,
            window_deposits=window_deposits,
            anchor_withdraw=anchor_withdraw,
            relevant=relevant,
        )


def select_window(
    transactions: Iterable[Transaction],
    logger: logging.Logger | None = None,
) -> ReconciliationWindow:
    """Select the reconciliation window for ``transactions``."""
    return WindowSelector(logger=logger).select(transactions)
