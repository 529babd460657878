"""End-to-end reconciliation run: load, parse, select, net."""

import logging
from decimal import Decimal

from movement_recon.config import ReconConfig
from movement_recon.exceptions import ReconciliationHalted, TableNotFoundError
from movement_recon.extract import HtmlTableExtractor, fetch_page, read_page
from movement_recon.models import Transaction
from movement_recon.parsing import TransactionParser
from movement_recon.reconcile import ReconciliationEngine, ReconciliationResult, WindowSelector


class ReconciliationPipeline:
    """Run the full reconciliation and log every stage.

    Each collaborator receives the same logger, so the whole run reads as
    one sequence of messages.

    Parameters
    ----------
    config : ReconConfig | None
        Where to load the page from. Defaults to ``ReconConfig()``.
    logger : logging.Logger | None
        Logger passed to every component.
    """

    def __init__(
        self,
        config: ReconConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or ReconConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.parser = TransactionParser(logger=self.logger)
        self.selector = WindowSelector(logger=self.logger)
        self.engine = ReconciliationEngine(logger=self.logger)
        self.result: ReconciliationResult | None = None

    def load_document(self) -> str:
        """Return the page HTML from the configured file or URL."""
        if self.config.source_file is not None:
            return read_page(self.config.source_file)
        return fetch_page(self.config.fetch)

    def load_transactions(self, document: str) -> list[Transaction]:
        """Extract and parse every data row of ``document``."""
        extractor = HtmlTableExtractor(document)
        rows = extractor.rows()
        self.logger.info("%d transactions found in the table.", extractor.row_count)

        transactions = self.parser.parse_rows(rows)
        self.logger.info("Transactions successfully parsed.")
        return transactions

    def reconcile(self, transactions: list[Transaction]) -> ReconciliationResult:
        """Select the window and net its deposits against its withdrawals."""
        window = self.selector.select(transactions)

        deposits = window.deposits
        withdraws = window.withdraws
        self.logger.info(
            "Processing %d deposits and %d withdraws.", len(deposits), len(withdraws)
        )

        result = self.engine.run(deposits, withdraws)
        self.logger.info(
            "Calculation complete. Remaining amount after processing: %s", result.remaining
        )
        return result

    def run(self, document: str | None = None) -> Decimal | None:
        """Run the pipeline.

        Parameters
        ----------
        document : str | None
            Page HTML. When None the page is loaded per the configuration.

        Returns
        -------
        Decimal | None
            Remaining unmatched amount, or None if the run stopped early.
        """
        self.result = None
        try:
            self.logger.info("Starting the scraping process...")
            if document is None:
                document = self.load_document()
            self.logger.info("Webpage loaded successfully.")

            transactions = self.load_transactions(document)
            self.result = self.reconcile(transactions)
            return self.result.remaining
        except (ReconciliationHalted, TableNotFoundError) as e:
            self.logger.info("%s", e)
            return None
        except Exception as e:
            self.logger.error("Error: %s", e)
            self.logger.debug("Run aborted", exc_info=True)
            return None


def run(config: ReconConfig | None = None, document: str | None = None) -> Decimal | None:
    """Run a reconciliation with a fresh pipeline."""
    return ReconciliationPipeline(config=config).run(document)
