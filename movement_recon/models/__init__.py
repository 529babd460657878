"""Domain models for movement reconciliation."""

from movement_recon.models.transaction import Transaction

__all__ = ["Transaction"]
