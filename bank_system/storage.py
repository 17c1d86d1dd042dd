"""
Account Storage Module

Provides the Account record, snapshot backends for file persistence and
in-memory testing, and the AccountStore that owns the ordered account
collection. The snapshot is a JSON document rewritten in full on every save.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union
from dataclasses import dataclass, asdict
from enum import Enum
from pathlib import Path
import json

from .logging_config import get_logger


logger = get_logger("bank_system.storage")


@dataclass
class Account:
    """
    Bank account as held in memory and in the snapshot
    """
    account_number: str
    name: str
    balance: float
    pin_hash: str  # Hex digest, never the raw PIN

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Account':
        """Create Account from a snapshot entry"""
        return cls(
            account_number=str(data['account_number']),
            name=str(data['name']),
            balance=float(data['balance']),
            pin_hash=str(data['pin_hash'])
        )


class LoadStatus(Enum):
    """Outcome of the last snapshot load"""
    NOT_LOADED = "not_loaded"
    LOADED = "loaded"
    MISSING = "missing"    # No snapshot yet
    CORRUPT = "corrupt"    # Snapshot present but unreadable


class SnapshotBackend(ABC):
    """Abstract interface for snapshot persistence"""

    @abstractmethod
    def read(self) -> Optional[str]:
        """Return the snapshot text, or None if there is no snapshot"""
        pass

    @abstractmethod
    def write(self, text: str) -> None:
        """Replace the snapshot with ``text``"""
        pass


class InMemorySnapshot(SnapshotBackend):
    """In-memory snapshot for testing"""

    def __init__(self, text: Optional[str] = None):
        self.text = text
        self.writes = 0

    def read(self) -> Optional[str]:
        return self.text

    def write(self, text: str) -> None:
        self.text = text
        self.writes += 1


class FileSnapshot(SnapshotBackend):
    """Snapshot stored in a single UTF-8 JSON file"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def read(self) -> Optional[str]:
        try:
            return self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            return None

    def write(self, text: str) -> None:
        # Plain overwrite: a crash mid-write can truncate the snapshot
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(text)


class AccountStore:
    """
    Ordered in-memory account collection backed by a snapshot
    """

    def __init__(self, backend: SnapshotBackend):
        self.backend = backend
        self._accounts: List[Account] = []
        self.load_status = LoadStatus.NOT_LOADED

    @property
    def accounts(self) -> Tuple[Account, ...]:
        return tuple(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts)

    def load(self) -> List[Account]:
        """
        Replace the in-memory collection with the snapshot contents

        Any failure leaves an empty collection; ``load_status`` records
        whether the snapshot was missing or corrupt.

        Returns:
            The loaded accounts, in snapshot order
        """
        self._accounts = []
        try:
            text = self.backend.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read account snapshot: {e}")
            self.load_status = LoadStatus.CORRUPT
            return []

        if text is None:
            self.load_status = LoadStatus.MISSING
            return []

        try:
            accounts = self._decode(text)
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Discarding corrupt account snapshot: {e}")
            self.load_status = LoadStatus.CORRUPT
            return []

        self._accounts = accounts
        self.load_status = LoadStatus.LOADED
        logger.info(f"Loaded {len(accounts)} accounts")
        return list(accounts)

    def save(self) -> bool:
        """
        Overwrite the snapshot with the full collection

        Returns:
            True if the snapshot was written
        """
        text = self._encode(self._accounts)
        try:
            self.backend.write(text)
        except OSError as e:
            print("Error saving accounts.")
            logger.error(f"Failed to save account snapshot: {e}")
            return False
        logger.debug(f"Saved {len(self._accounts)} accounts")
        return True

    def add(self, account: Account) -> None:
        self._accounts.append(account)

    def find_by_number(self, account_number: str) -> Optional[Account]:
        """First account with this number, by linear scan"""
        for account in self._accounts:
            if account.account_number == account_number:
                return account
        return None

    @staticmethod
    def _encode(accounts: List[Account]) -> str:
        return json.dumps(
            {"accounts": [account.to_dict() for account in accounts]},
            indent=2
        )

    @staticmethod
    def _decode(text: str) -> List[Account]:
        data = json.loads(text)
        if not isinstance(data, dict) or not isinstance(data.get("accounts"), list):
            raise ValueError("snapshot has no account list")
        return [Account.from_dict(entry) for entry in data["accounts"]]
