"""
Banking Operations Module

Create, authenticate, deposit, withdraw, transfer, balance and history.
Every mutating operation authenticates, updates balances in place, saves the
full snapshot and appends to the transaction log, in that order. Failures
raise a BankingError before anything is changed.
"""

from typing import List, Optional, Tuple

from .config import BankSettings
from .errors import (
    AccountNotFoundError, AuthenticationError, DuplicateAccountError,
    InsufficientFundsError, InvalidAccountNumberError, InvalidPinError
)
from .logging_config import get_logger
from .pin import hash_pin, is_valid_pin, verify_pin
from .storage import Account, AccountStore
from .transaction_log import SEPARATOR, TransactionLog


class BankService:
    """
    Banking operations over one account store and one transaction log
    """

    def __init__(
        self,
        store: AccountStore,
        transaction_log: TransactionLog,
        settings: Optional[BankSettings] = None
    ):
        self.store = store
        self.transaction_log = transaction_log
        self.settings = settings or BankSettings()
        self.logger = get_logger("bank_system.operations")

    def find_account(self, account_number: str) -> Optional[Account]:
        return self.store.find_by_number(account_number)

    def create_account(
        self,
        account_number: str,
        name: str,
        initial_balance: float,
        pin: str
    ) -> Account:
        """
        Open a new account

        Args:
            account_number: Lookup key for the account
            name: Account holder name
            initial_balance: Opening balance
            pin: Raw PIN; only its digest is stored

        Returns:
            Created Account object
        """
        if not is_valid_pin(pin, self.settings.pin_length):
            raise InvalidPinError(self.settings.pin_length)

        # The log field separator would shift the account field in every record
        if SEPARATOR in account_number:
            raise InvalidAccountNumberError(account_number)

        if (not self.settings.allow_duplicate_account_numbers
                and self.store.find_by_number(account_number) is not None):
            raise DuplicateAccountError(account_number)

        account = Account(
            account_number=account_number,
            name=name,
            balance=float(initial_balance),
            pin_hash=hash_pin(pin)
        )
        self.store.add(account)
        self.store.save()
        self.transaction_log.append(account_number, "Account Created", account.balance)

        self.logger.info(f"Created account {account_number}", extra={
            "account_number": account_number, "operation": "create", "amount": account.balance
        })
        return account

    def authenticate(self, account_number: str, pin: str) -> Account:
        """
        Look up an account and check its PIN

        Raises:
            AccountNotFoundError: No account with this number
            AuthenticationError: PIN does not match
        """
        account = self.store.find_by_number(account_number)
        if account is None:
            raise AccountNotFoundError(account_number)
        if not verify_pin(pin, account.pin_hash):
            self.logger.warning(f"Incorrect PIN for account {account_number}", extra={
                "account_number": account_number, "operation": "authenticate"
            })
            raise AuthenticationError(account_number)
        return account

    def deposit(self, account_number: str, pin: str, amount: float) -> Account:
        # The amount is not range-checked, so negative deposits go through
        account = self.authenticate(account_number, pin)
        account.balance += amount
        self.store.save()
        self.transaction_log.append(account_number, "Deposit", amount)
        self.logger.info(f"Deposit to {account_number}", extra={
            "account_number": account_number, "operation": "deposit", "amount": amount
        })
        return account

    def withdraw(self, account_number: str, pin: str, amount: float) -> Account:
        account = self.authenticate(account_number, pin)
        if amount > account.balance:
            raise InsufficientFundsError("Insufficient balance.")
        account.balance -= amount
        self.store.save()
        self.transaction_log.append(account_number, "Withdraw", amount)
        self.logger.info(f"Withdrawal from {account_number}", extra={
            "account_number": account_number, "operation": "withdraw", "amount": amount
        })
        return account

    def check_balance(self, account_number: str, pin: str) -> Tuple[str, float]:
        """Return (holder name, balance)"""
        account = self.authenticate(account_number, pin)
        return account.name, account.balance

    def transfer(
        self,
        sender_number: str,
        pin: str,
        receiver_number: str,
        amount: float
    ) -> Tuple[Account, Account]:
        """
        Move funds between two accounts

        Only the sender is authenticated. The snapshot is saved once and one
        log record is written for each side.

        Returns:
            (sender, receiver) after the transfer
        """
        sender = self.authenticate(sender_number, pin)

        receiver = self.store.find_by_number(receiver_number)
        if receiver is None:
            raise AccountNotFoundError(receiver_number, role="receiver")

        if amount > sender.balance:
            raise InsufficientFundsError("Insufficient funds in sender account.")

        sender.balance -= amount
        receiver.balance += amount
        self.store.save()
        self.transaction_log.append(sender_number, f"Transfer to {receiver_number}", amount)
        self.transaction_log.append(receiver_number, f"Received from {sender_number}", amount)

        self.logger.info(f"Transfer from {sender_number} to {receiver_number}", extra={
            "account_number": sender_number, "operation": "transfer", "amount": amount
        })
        return sender, receiver

    def transaction_history(self, account_number: str, pin: str) -> List[str]:
        """
        Ledger lines for an authenticated account

        Raises:
            OSError: The log exists but cannot be read
        """
        self.authenticate(account_number, pin)
        return self.transaction_log.history(
            account_number,
            substring=self.settings.history_substring_match
        )

    def shutdown(self) -> bool:
        """Persist the store before exit"""
        return self.store.save()
