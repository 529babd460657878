"""Tests for reconciliation window selection."""

import logging
from datetime import timedelta
from typing import Callable

import pytest

from movement_recon.exceptions import (
    NoDepositsError,
    NoDepositsInWindowError,
    NoQualifyingWithdrawalError,
    ReconciliationHalted,
)
from movement_recon.models import Transaction
from movement_recon.reconcile import (
    DEPOSIT_WINDOW,
    EXCLUDED_CATEGORY,
    WITHDRAW_LOOKBACK,
    WindowSelector,
    select_window,
)

MakeTx = Callable[..., Transaction]


class TestConstants:
    """The business thresholds are fixed."""

    def test_values(self) -> None:
        assert DEPOSIT_WINDOW == timedelta(hours=48)
        assert WITHDRAW_LOOKBACK == timedelta(hours=24)
        assert EXCLUDED_CATEGORY == 76


class TestAnchors:
    """Tests for the three window anchors."""

    def test_latest_deposit(self, make_transaction: MakeTx) -> None:
        ledger = [
            make_transaction(-100, deposit=False),
            make_transaction(0, id=10),
            make_transaction(5, id=11),
            make_transaction(9, deposit=False),
        ]
        window = select_window(ledger)
        assert window.latest_deposit.id == 11

    def test_deposit_window_bounds(self, make_transaction: MakeTx) -> None:
        """Deposits exactly 48h before the latest are inside, older ones are not."""
        ledger = [
            make_transaction(-200, deposit=False),
            make_transaction(-49, id=1),
            make_transaction(-48, id=2),
            make_transaction(-10, id=3),
            make_transaction(0, id=4),
        ]
        window = select_window(ledger)

        assert [t.id for t in window.window_deposits] == [2, 3, 4]
        assert window.oldest_deposit.id == 2

    def test_withdraw_anchor_is_earliest(self, make_transaction: MakeTx) -> None:
        """Of several withdrawals before the cutoff the earliest is chosen."""
        ledger = [
            make_transaction(-30, deposit=False, id=1),
            make_transaction(-72, deposit=False, id=2),
            make_transaction(-50, deposit=False, id=3),
            make_transaction(-10, deposit=False, id=4),
            make_transaction(0, id=5),
        ]
        window = select_window(ledger)
        assert window.anchor_withdraw.id == 2

    def test_withdraw_cutoff_inclusive(self, make_transaction: MakeTx) -> None:
        ledger = [
            make_transaction(-24, deposit=False, id=1),
            make_transaction(-23, deposit=False, id=2),
            make_transaction(0, id=3),
        ]
        window = select_window(ledger)
        assert window.anchor_withdraw.id == 1

    def test_withdraw_cutoff_uses_oldest_window_deposit(self, make_transaction: MakeTx) -> None:
        """The cutoff is measured from the oldest deposit in the window."""
        ledger = [
            make_transaction(-30, deposit=False, id=1),
            make_transaction(-70, deposit=False, id=2),
            make_transaction(-40, id=3),
            make_transaction(0, id=4),
        ]
        window = select_window(ledger)

        assert window.oldest_deposit.id == 3
        assert window.anchor_withdraw.id == 2

    def test_equal_timestamps_keep_input_order(self, make_transaction: MakeTx) -> None:
        ledger = [
            make_transaction(-48, deposit=False, id=1),
            make_transaction(-48, deposit=False, id=2),
            make_transaction(0, id=3),
        ]
        window = select_window(ledger)
        assert window.anchor_withdraw.id == 1


class TestRelevantSet:
    """Tests for the relevant transaction set."""

    def test_excluded_category_removed(self, make_transaction: MakeTx) -> None:
        """Category 76 leaves the set regardless of time or direction."""
        ledger = [
            make_transaction(-48, deposit=False, id=1),
            make_transaction(-20, deposit=False, category=76, id=2),
            make_transaction(-5, category=76, id=3),
            make_transaction(-4, id=4),
            make_transaction(0, category=76, id=5),
            make_transaction(1, deposit=False, id=6),
        ]
        window = select_window(ledger)

        ids = {t.id for t in window.relevant}
        assert ids == {1, 4, 6}
        # The excluded deposit still anchors the window.
        assert window.latest_deposit.id == 5

    def test_older_than_anchor_removed(self, make_transaction: MakeTx) -> None:
        ledger = [
            make_transaction(-100, id=1),
            make_transaction(-60, deposit=False, id=2),
            make_transaction(0, id=3),
        ]
        window = select_window(ledger)

        assert window.anchor_withdraw.id == 2
        assert [t.id for t in window.relevant] == [3, 2]

    def test_deposit_and_withdraw_views(self, make_transaction: MakeTx) -> None:
        ledger = [
            make_transaction(2, deposit=False, id=1),
            make_transaction(-30, deposit=False, id=2),
            make_transaction(1, id=3),
            make_transaction(-1, id=4),
        ]
        window = select_window(ledger)

        assert [t.id for t in window.deposits] == [4, 3]
        assert [t.id for t in window.withdraws] == [2, 1]

    def test_anchor_category_76_excluded_from_relevant(self, make_transaction: MakeTx) -> None:
        ledger = [
            make_transaction(-30, deposit=False, category=76, id=1),
            make_transaction(0, id=2),
        ]
        window = select_window(ledger)

        assert window.anchor_withdraw.id == 1
        assert [t.id for t in window.relevant] == [2]


class TestHalts:
    """Empty scenarios stop the run with a distinct message."""

    def test_no_deposits(self, make_transaction: MakeTx) -> None:
        ledger = [make_transaction(0, deposit=False)]
        with pytest.raises(NoDepositsError, match="No deposit transactions found."):
            select_window(ledger)

    def test_empty_ledger(self) -> None:
        with pytest.raises(NoDepositsError):
            select_window([])

    def test_no_qualifying_withdrawal(self, make_transaction: MakeTx) -> None:
        ledger = [
            make_transaction(-23, deposit=False),
            make_transaction(0),
        ]
        with pytest.raises(
            NoQualifyingWithdrawalError,
            match="No withdraws found within the required timeframe.",
        ):
            select_window(ledger)

    def test_window_always_contains_latest(self, make_transaction: MakeTx) -> None:
        """The latest deposit is always in its own window."""
        ledger = [make_transaction(-48, deposit=False), make_transaction(0)]
        window = select_window(ledger)
        assert window.window_deposits == [window.latest_deposit]

    def test_halts_share_base(self) -> None:
        for exc in (NoDepositsError, NoDepositsInWindowError, NoQualifyingWithdrawalError):
            assert issubclass(exc, ReconciliationHalted)


class TestLogging:
    """The selector reports each anchor on the supplied logger."""

    def test_anchor_messages(
        self, make_transaction: MakeTx, caplog: pytest.LogCaptureFixture
    ) -> None:
        logger = logging.getLogger("test.window")
        caplog.set_level(logging.INFO, logger="test.window")
        ledger = [
            make_transaction(-30, deposit=False, id=7),
            make_transaction(0, id=8),
        ]
        WindowSelector(logger=logger).select(ledger)

        assert "Latest deposit found: ID 8, Time 2024-03-10 12:00:00" in caplog.messages
        assert "Oldest deposit within 48 hours: ID 8, Time 2024-03-10 12:00:00" in caplog.messages
        assert "Oldest withdraw found: ID 7, Time 2024-03-09 06:00:00" in caplog.messages
        assert "2 relevant transactions found after filtering Payment Type ID 76." in caplog.messages
