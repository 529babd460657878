"""Reconcile deposits against withdrawals scraped from a movement table."""

from movement_recon.pipeline import ReconciliationPipeline, run

__all__ = ["ReconciliationPipeline", "run"]
__version__ = "0.1.0"
