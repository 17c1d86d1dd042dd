"""
Interactive console shell.

Reads a menu choice and line-based fields from standard input and dispatches
to BankService until the user exits.
"""

import math
from typing import Callable, Dict, Optional, Tuple

from .errors import BankingError, InvalidAmountError
from .operations import BankService
from .transaction_log import format_amount


MENU = """
--- BANK MANAGEMENT SYSTEM ---
1. Create Account
2. Deposit
3. Withdraw
4. Check Balance
5. Fund Transfer
6. View Transaction History
7. Exit"""

EXIT_CHOICE = 7


def parse_amount(text: str) -> float:
    """Parse a console amount; raises InvalidAmountError"""
    try:
        amount = float(text.strip())
    except ValueError:
        raise InvalidAmountError()
    if not math.isfinite(amount):
        raise InvalidAmountError()
    return amount


class BankShell:
    """
    Menu loop over a BankService
    """

    def __init__(
        self,
        service: BankService,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print
    ):
        self.service = service
        self.input = input_func
        self.output = output
        self._handlers: Dict[int, Callable[[], None]] = {
            1: self.create_account,
            2: self.deposit,
            3: self.withdraw,
            4: self.check_balance,
            5: self.fund_transfer,
            6: self.view_history,
        }

    def run(self) -> int:
        """
        Show the menu until Exit, end of input or Ctrl-C

        Returns:
            Process exit status
        """
        while True:
            self.output(MENU)
            try:
                raw = self.input("Choose option: ")
            except (EOFError, KeyboardInterrupt):
                break

            choice = self._parse_choice(raw)
            if choice == EXIT_CHOICE:
                break
            handler = self._handlers.get(choice)
            if handler is None:
                self.output("Invalid choice.")
                continue

            try:
                handler()
            except (EOFError, KeyboardInterrupt):
                break
            except BankingError as e:
                self.output(str(e))

        self.service.shutdown()
        return 0

    @staticmethod
    def _parse_choice(raw: str) -> Optional[int]:
        try:
            return int(raw.strip())
        except ValueError:
            return None

    def _login(self, prompt: str = "Enter account number: ") -> Optional[Tuple[str, str]]:
        """Ask for an account number, then the PIN if the account exists"""
        account_number = self.input(prompt)
        if self.service.find_account(account_number) is None:
            self.output("Account not found.")
            return None
        pin = self.input("Enter PIN: ")
        self.service.authenticate(account_number, pin)
        return account_number, pin

    def create_account(self) -> None:
        account_number = self.input("Enter account number: ")
        name = self.input("Enter name: ")
        balance = parse_amount(self.input("Enter initial balance: "))
        pin = self.input(f"Set {self.service.settings.pin_length}-digit PIN: ")
        self.service.create_account(account_number, name, balance, pin)
        self.output("Account created successfully!")

    def deposit(self) -> None:
        credentials = self._login()
        if credentials is None:
            return
        amount = parse_amount(self.input("Enter amount to deposit: "))
        self.service.deposit(*credentials, amount)
        self.output("Deposit successful.")

    def withdraw(self) -> None:
        credentials = self._login()
        if credentials is None:
            return
        amount = parse_amount(self.input("Enter amount to withdraw: "))
        self.service.withdraw(*credentials, amount)
        self.output("Withdrawal successful.")

    def check_balance(self) -> None:
        credentials = self._login()
        if credentials is None:
            return
        name, balance = self.service.check_balance(*credentials)
        self.output(f"Account Holder: {name}")
        self.output(f"Balance: {format_amount(balance)}")

    def fund_transfer(self) -> None:
        credentials = self._login("Enter sender account number: ")
        if credentials is None:
            return
        sender_number, pin = credentials
        receiver_number = self.input("Enter receiver account number: ")
        if self.service.find_account(receiver_number) is None:
            self.output("Receiver account not found.")
            return
        amount = parse_amount(self.input("Enter amount to transfer: "))
        self.service.transfer(sender_number, pin, receiver_number, amount)
        self.output("Transfer successful.")

    def view_history(self) -> None:
        credentials = self._login()
        if credentials is None:
            return
        try:
            lines = self.service.transaction_history(*credentials)
        except OSError:
            self.output("Error reading transaction file.")
            return
        if not lines:
            self.output("No transactions found for this account.")
            return
        for line in lines:
            self.output(line)
