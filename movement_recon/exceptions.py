"""Custom exception hierarchy for movement-recon."""


class MovementReconError(Exception):
    """Base exception for all movement-recon errors."""


class FetchError(MovementReconError):
    """Raised when the movement page cannot be retrieved."""


class TableNotFoundError(MovementReconError):
    """Raised when the document holds no table rows."""


class RowParseError(MovementReconError):
    """Raised when a strictly parsed column holds an invalid value."""


class ConfigurationError(MovementReconError):
    """Raised when configuration is invalid or missing."""


class ReconciliationHalted(MovementReconError):
    """Raised when a pipeline stage finds no qualifying record.

    This is a valid empty outcome rather than a failure: the run stops
    after logging the message and produces no remaining amount.
    """


class NoDepositsError(ReconciliationHalted):
    """Raised when the ledger holds no deposit at all."""


class NoDepositsInWindowError(ReconciliationHalted):
    """Raised when no deposit falls inside the deposit window."""


class NoQualifyingWithdrawalError(ReconciliationHalted):
    """Raised when no withdrawal precedes the deposit window by the lookback."""
