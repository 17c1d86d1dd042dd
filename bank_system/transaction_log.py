"""
Transaction Log Module

Append-only plain-text ledger. One line per state-changing event:

    <timestamp> | <account_number> | <label> | <amount>

Write failures are reported and swallowed so they never undo the balance
change that triggered them.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Union

from .logging_config import get_logger


logger = get_logger("bank_system.transaction_log")

SEPARATOR = " | "


def format_amount(amount: float) -> str:
    """Render an amount the way the ledger always has: ``50.0``, ``12.5``"""
    return repr(float(amount))


def format_line(timestamp: str, account_number: str, label: str, amount: float) -> str:
    return SEPARATOR.join([timestamp, account_number, label, format_amount(amount)])


@dataclass(frozen=True)
class TransactionRecord:
    """Parsed ledger line"""
    timestamp: str
    account_number: str
    label: str
    amount: str

    @classmethod
    def parse(cls, line: str) -> Optional['TransactionRecord']:
        """Split a ledger line into its fields; None if it is not one"""
        parts = line.rstrip("\n").split(SEPARATOR)
        if len(parts) < 4:
            return None
        # Labels may contain the separator; timestamp, number and amount may not
        return cls(
            timestamp=parts[0],
            account_number=parts[1],
            label=SEPARATOR.join(parts[2:-1]),
            amount=parts[-1]
        )


class TransactionLog:
    """
    Append-only transaction log file
    """

    def __init__(self, path: Union[str, Path],
                 clock: Callable[[], datetime] = datetime.now):
        self.path = Path(path)
        self._clock = clock

    def _timestamp(self) -> str:
        return self._clock().isoformat(sep=" ", timespec="seconds")

    def append(self, account_number: str, label: str, amount: float) -> bool:
        """
        Append one record, creating the file if needed

        Returns:
            True if the record was written
        """
        line = format_line(self._timestamp(), account_number, label, amount)
        try:
            with open(self.path, 'a', encoding='utf-8') as f:
                f.write(line + "\n")
        except OSError as e:
            print("Error logging transaction.")
            logger.error(f"Failed to log transaction for {account_number}: {e}")
            return False
        return True

    def read_lines(self) -> List[str]:
        """
        All ledger lines in write order; empty if the log does not exist yet

        Undecodable bytes are replaced rather than failing the whole read.
        """
        try:
            with open(self.path, 'r', encoding='utf-8', errors='replace') as f:
                return [line.rstrip("\n") for line in f]
        except FileNotFoundError:
            return []

    def history(self, account_number: str, substring: bool = False) -> List[str]:
        """
        Lines belonging to an account

        Args:
            account_number: Account to match against the account field
            substring: Match anywhere in the line instead of the account
                field. Numbers that are substrings of others then match
                foreign records too.

        Returns:
            Matching lines in write order
        """
        lines = self.read_lines()
        if substring:
            return [line for line in lines if account_number in line]

        matches = []
        for line in lines:
            record = TransactionRecord.parse(line)
            if record is not None and record.account_number == account_number:
                matches.append(line)
        return matches
