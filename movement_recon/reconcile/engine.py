"""Greedy netting of deposits against withdrawals."""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from decimal import Decimal
from typing import Iterator, Sequence

from movement_recon.models import Transaction

NETTING_HORIZON = timedelta(hours=24)


@dataclass
class Allocation:
    """Amount of one deposit applied to one withdrawal."""

    deposit_id: int
    withdraw_id: int
    amount: Decimal
    consumed: bool


@dataclass
class OpenWithdrawal:
    """A withdrawal still in the working set, with what is left of it."""

    transaction: Transaction
    outstanding: Decimal


@dataclass
class ReconciliationResult:
    """Outcome of an engine run."""

    remaining: Decimal
    deposit_count: int
    withdraw_count: int
    allocations: list[Allocation] = field(default_factory=list)
    open_withdrawals: list[OpenWithdrawal] = field(default_factory=list)


class WithdrawalWorkingSet:
    """Withdrawals awaiting deposits, keyed by transaction identity.

    Keys keep input order, so iterating a snapshot yields withdrawals
    oldest first. Every withdrawal's latest amount is remembered even after
    it is consumed, so a row flagged both ways brings its reduced amount
    when it is later netted as a deposit. The input transactions are never
    modified.
    """

    def __init__(self, withdraws: Sequence[Transaction]) -> None:
        self._amounts: dict[int, OpenWithdrawal] = {
            id(t): OpenWithdrawal(transaction=t, outstanding=t.amount) for t in withdraws
        }
        self._open: dict[int, OpenWithdrawal] = dict(self._amounts)

    def __len__(self) -> int:
        return len(self._open)

    def __contains__(self, key: int) -> bool:
        return key in self._open

    def snapshot(self) -> list[tuple[int, Transaction]]:
        """Keys and transactions currently open, oldest first."""
        return [(key, item.transaction) for key, item in self._open.items()]

    def outstanding(self, key: int) -> Decimal:
        """Amount still open on the withdrawal at ``key``."""
        return self._open[key].outstanding

    def consume(self, key: int) -> Decimal:
        """Remove the withdrawal at ``key`` and return its outstanding amount."""
        return self._open.pop(key).outstanding

    def reduce(self, key: int, by: Decimal) -> Decimal:
        """Lower the outstanding amount at ``key`` and return the new value."""
        item = self._open[key]
        item.outstanding -= by
        return item.outstanding

    def amount_of(self, transaction: Transaction) -> Decimal:
        """Current amount of ``transaction``, reduced if it was netted as a withdrawal."""
        item = self._amounts.get(id(transaction))
        if item is None:
            return transaction.amount
        return item.outstanding

    def open_items(self) -> Iterator[OpenWithdrawal]:
        """Iterate open withdrawals, oldest first."""
        return iter(list(self._open.values()))


class ReconciliationEngine:
    """Net deposits against withdrawals, oldest deposit first.

    Each deposit, topped up by whatever the previous deposit left over, is
    applied to open withdrawals in time order. Withdrawals more than
    ``NETTING_HORIZON`` after the deposit are skipped; earlier ones are
    always eligible. A withdrawal covered in full leaves the working set,
    otherwise it stays with a reduced outstanding amount.

    Parameters
    ----------
    logger : logging.Logger | None
        Logger for per-allocation DEBUG output.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def run(
        self,
        deposits: Sequence[Transaction],
        withdraws: Sequence[Transaction],
    ) -> ReconciliationResult:
        """Run the netting pass.

        Parameters
        ----------
        deposits : Sequence[Transaction]
            Deposits ordered oldest first.
        withdraws : Sequence[Transaction]
            Withdrawals ordered oldest first.

        Returns
        -------
        ReconciliationResult
            Final remaining amount and the allocations that produced it.
        """
        working_set = WithdrawalWorkingSet(withdraws)
        allocations: list[Allocation] = []
        remaining = Decimal("0")

        for deposit in deposits:
            deposit_amount = working_set.amount_of(deposit) + remaining

            for key, withdraw in working_set.snapshot():
                if withdraw.timestamp - deposit.timestamp > NETTING_HORIZON:
                    continue

                if deposit_amount <= 0:
                    break

                outstanding = working_set.outstanding(key)
                if deposit_amount >= outstanding:
                    deposit_amount -= working_set.consume(key)
                    allocations.append(Allocation(deposit.id, withdraw.id, outstanding, True))
                else:
                    left = working_set.reduce(key, deposit_amount)
                    allocations.append(Allocation(deposit.id, withdraw.id, deposit_amount, False))
                    self.logger.debug(
                        "Deposit %s partially covered withdraw %s, %s left open",
                        deposit.id,
                        withdraw.id,
                        left,
                    )
                    deposit_amount = Decimal("0")

            remaining = deposit_amount
            self.logger.debug("Deposit %s processed, carrying %s", deposit.id, remaining)

        return ReconciliationResult(
            remaining=remaining,
            deposit_count=len(deposits),
            withdraw_count=len(withdraws),
            allocations=allocations,
            open_withdrawals=list(working_set.open_items()),
        )
