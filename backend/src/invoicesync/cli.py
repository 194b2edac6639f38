"""
Command-line interface for invoicesync.

Usage:
    invoicesync add "Customer A" 50
    invoicesync list --low-value
    invoicesync send --log-level DEBUG

``send`` exits with status 1 when at least one invoice failed to send.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from invoicesync import __version__
from invoicesync.domain.models import Invoice
from invoicesync.exceptions import ConfigurationError
from invoicesync.infrastructure.database import close_db, init_db
from invoicesync.infrastructure.storage import InvoiceStore, SQLInvoiceStore
from invoicesync.services.accounting import HttpAccountingGateway
from invoicesync.services.filtering import InvoiceFilter
from invoicesync.services.sender import LowValueInvoiceSender

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S",
    )


def _print_invoices(invoices: list[Invoice]) -> None:
    for invoice in invoices:
        print(f"{invoice.customer}\t{invoice.value}")
    print(f"{len(invoices)} invoice(s)")


def cmd_add(args: argparse.Namespace, store: InvoiceStore) -> int:
    try:
        invoice = Invoice(customer=args.customer, value=args.value)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    store.save(invoice)
    print(f"Stored invoice for {invoice.customer} ({invoice.value})")
    return 0


def cmd_list(args: argparse.Namespace, store: InvoiceStore) -> int:
    if args.low_value:
        _print_invoices(InvoiceFilter(store).low_value_invoices())
    else:
        _print_invoices(store.all())
    return 0


def cmd_send(args: argparse.Namespace, store: InvoiceStore) -> int:
    try:
        gateway = HttpAccountingGateway.from_settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    sender = LowValueInvoiceSender(InvoiceFilter(store), gateway)
    failed = sender.send_low_valued_invoices()

    if not failed:
        print("All low-value invoices sent")
        return 0

    print(f"{len(failed)} invoice(s) failed to send:")
    for invoice in failed:
        print(f"  {invoice.customer}\t{invoice.value}")
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="invoicesync",
        description="Forward low-value invoices to the accounting system",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    add = subparsers.add_parser("add", help="Store an invoice")
    add.add_argument("customer", help="Customer identifier")
    add.add_argument("value", help="Invoice amount")
    add.set_defaults(handler=cmd_add)

    list_ = subparsers.add_parser("list", help="Print stored invoices")
    list_.add_argument(
        "--low-value",
        action="store_true",
        help="Only invoices the next send would forward",
    )
    list_.set_defaults(handler=cmd_list)

    send = subparsers.add_parser("send", help="Send low-value invoices")
    send.set_defaults(handler=cmd_send)

    return parser


def main(argv: Sequence[str] | None = None, store: InvoiceStore | None = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name. Uses sys.argv if None.
        store: Invoice store. Uses the configured database if None.

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if store is not None:
        return args.handler(args, store)

    init_db()
    try:
        return args.handler(args, SQLInvoiceStore())
    finally:
        close_db()


if __name__ == "__main__":
    sys.exit(main())
