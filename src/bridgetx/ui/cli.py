from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from bridgetx.app import fetch_block_info, list_bridge_transactions
from bridgetx.config import configure_logging
from bridgetx.domain.model import MessageStatus, PaginationParams

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from bridgetx.domain.model import BridgeTransaction

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile bridge transactions")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    transactions = subparsers.add_parser(
        "transactions",
        help="List bridge transactions sent by an address",
    )
    transactions.add_argument("address", type=str, help="Sender address (0x-prefixed)")
    transactions.add_argument(
        "--page",
        type=int,
        default=PaginationParams().page,
        help="Relayer page to request (default: %(default)s)",
    )
    transactions.add_argument(
        "--size",
        type=int,
        default=PaginationParams().size,
        help="Number of events per relayer page (default: %(default)s)",
    )
    transactions.add_argument(
        "--chain-id",
        type=int,
        help="Only include events reported for this chain",
    )

    subparsers.add_parser("block-info", help="Show the relayer's last processed block per chain")

    return parser.parse_args(list(argv))


def _status_label(status: MessageStatus | int) -> str:
    if isinstance(status, MessageStatus):
        return status.name
    return str(status)


def _describe(tx: BridgeTransaction) -> str:
    symbol = tx.symbol or "ETH"
    return (
        f"{tx.hash} {tx.src_chain_id}->{tx.dest_chain_id} "
        f"{_status_label(tx.status)} {tx.amount} {symbol}"
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    pagination: PaginationParams | None = None
    try:
        if parsed_args.command == "transactions":
            pagination = PaginationParams(page=parsed_args.page, size=parsed_args.size)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "transactions":
            page = list_bridge_transactions(
                parsed_args.address,
                pagination=pagination,
                chain_id=parsed_args.chain_id,
            )
            for tx in page.transactions:
                log.info(_describe(tx))
            info = page.pagination_info
            log.info(
                "Page %s of %s (%s events reported by relayer)",
                info.page,
                info.total_pages,
                info.total,
            )
        elif parsed_args.command == "block-info":
            for chain_id, info in sorted(fetch_block_info().items()):
                log.info("Chain %s: last processed block %s", chain_id, info.block_number)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
