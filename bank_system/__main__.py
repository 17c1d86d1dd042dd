#!/usr/bin/env python3
"""Main entry point for the console bank"""

import sys

from .config import get_settings
from .logging_config import setup_logging
from .operations import BankService
from .shell import BankShell
from .storage import AccountStore, FileSnapshot
from .transaction_log import TransactionLog


def main() -> int:
    """Wire the store, log and service together and run the shell"""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.log_file)

    store = AccountStore(FileSnapshot(settings.accounts_file))
    store.load()
    transaction_log = TransactionLog(settings.transactions_file)

    service = BankService(store, transaction_log, settings)
    return BankShell(service).run()


if __name__ == "__main__":
    sys.exit(main())
