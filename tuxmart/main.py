"""Composition root for the TuxMart store.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization with constructor injection
- Running a sale for an order document
"""

import argparse
import json
import logging
import sys

from tuxmart.adapters.cli.order_file import load_order
from tuxmart.adapters.financial.markdown import MarkdownLedgerAdapter
from tuxmart.adapters.financial.stdout import StdoutFinancialAdapter
from tuxmart.adapters.inventory.memory import InMemoryInventoryAdapter, load_stock_file
from tuxmart.adapters.payment.always_approve import AlwaysApprovePaymentAdapter
from tuxmart.adapters.payment.credit_line import CreditLinePaymentAdapter
from tuxmart.config import Settings, load_settings
from tuxmart.core.ports import FinancialService, InventoryService, PaymentService
from tuxmart.core.sale_processor import SaleProcessor

logger = logging.getLogger(__name__)


class JsonLogFormatter(logging.Formatter):
    """Formats each record as one JSON object per line.

    Values go through json.dumps, so quotes and newlines in messages or
    tracebacks stay valid JSON.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    if log_format == "json":
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    logging.basicConfig(level=level, handlers=[handler])


def build_payment_service(settings: Settings) -> PaymentService:
    """Instantiate the payment adapter selected in settings."""
    if settings.payment_backend == "credit_line":
        logger.info(f"Payment adapter: credit line ({settings.credit_limit})")
        return CreditLinePaymentAdapter(credit_limit=settings.credit_limit)
    elif settings.payment_backend == "always_approve":
        logger.info("Payment adapter: always approve")
        return AlwaysApprovePaymentAdapter()
    raise ValueError(f"Unknown payment backend: {settings.payment_backend}")


def build_inventory_service(settings: Settings) -> InventoryService:
    """Instantiate the in-memory inventory, seeded from the stock file if set."""
    stock = {}
    if settings.inventory_stock_file:
        stock = load_stock_file(settings.inventory_stock_file)
        logger.info(
            f"Inventory seeded with {len(stock)} SKUs from {settings.inventory_stock_file}"
        )
    return InMemoryInventoryAdapter(stock=stock, allow_backorder=settings.allow_backorder)


def build_financial_service(settings: Settings) -> FinancialService:
    """Instantiate the financial adapter selected in settings."""
    if settings.financial_backend == "stdout":
        logger.info("Financial adapter: stdout")
        return StdoutFinancialAdapter(verbose=settings.debug)
    elif settings.financial_backend == "markdown":
        logger.info(f"Financial adapter: markdown ledger in {settings.ledger_dir}")
        return MarkdownLedgerAdapter(ledger_dir=settings.ledger_dir)
    raise ValueError(f"Unknown financial backend: {settings.financial_backend}")


def build_sale_processor(settings: Settings) -> SaleProcessor:
    """Wire the configured adapters into a SaleProcessor.

    Raises:
        ValueError: If a backend name is unknown or the stock file is invalid.
        OSError: If the stock file or ledger directory cannot be used.
    """
    return SaleProcessor(
        payment_service=build_payment_service(settings),
        inventory_service=build_inventory_service(settings),
        financial_service=build_financial_service(settings),
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tuxmart",
        description="Process a sale for an order described in a JSON file.",
    )
    parser.add_argument("order_file", help="path to the order JSON document")
    parser.add_argument(
        "--env-file",
        default=None,
        help="settings file to load instead of ./.env",
    )
    return parser.parse_args(argv)


def run(argv: list[str] | None = None) -> None:
    """Load configuration, wire adapters and process one sale.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters and the sale processor
    4. Load the order and make the sale
    """
    args = _parse_args(argv)

    settings = load_settings(args.env_file)
    configure_logging(settings.log_level, settings.log_format)
    logger.info("Starting TuxMart...")

    processor = build_sale_processor(settings)

    order = load_order(args.order_file)
    logger.info(
        f"Processing order {order.order_number} "
        f"({len(order.line_items)} line items, total {order.grand_total})"
    )
    processor.make_sale(order)
    logger.info(f"Finished processing order {order.order_number}")


def main(argv: list[str] | None = None) -> None:
    """Application entry point.

    Exit codes:
        0: Sale processed (including a declined payment)
        1: Fatal configuration, input or collaborator error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    try:
        run(argv)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
