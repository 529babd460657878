"""Window selection and deposit/withdraw netting."""

from movement_recon.reconcile.engine import (
    Allocation,
    OpenWithdrawal,
    ReconciliationEngine,
    ReconciliationResult,
    WithdrawalWorkingSet,
)
from movement_recon.reconcile.window import (
    DEPOSIT_WINDOW,
    EXCLUDED_CATEGORY,
    WITHDRAW_LOOKBACK,
    ReconciliationWindow,
    WindowSelector,
    select_window,
)

__all__ = [
    "Allocation",
    "DEPOSIT_WINDOW",
    "EXCLUDED_CATEGORY",
    "OpenWithdrawal",
    "ReconciliationEngine",
    "ReconciliationResult",
    "ReconciliationWindow",
    "WITHDRAW_LOOKBACK",
    "WindowSelector",
    "WithdrawalWorkingSet",
    "select_window",
]
