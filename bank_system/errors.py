"""
Banking error types.

Every error carries the message shown to the user at the console.
"""


class BankingError(Exception):
    """Base class for operation failures that abort without changing state"""


class ValidationError(BankingError):
    pass


class InvalidPinError(ValidationError):
    def __init__(self, length: int = 4):
        super().__init__(f"PIN must be exactly {length} digits.")


class InvalidAmountError(ValidationError):
    def __init__(self, message: str = "Invalid amount."):
        super().__init__(message)


class InsufficientFundsError(ValidationError):
    pass


class DuplicateAccountError(ValidationError):
    def __init__(self, account_number: str):
        self.account_number = account_number
        super().__init__(f"Account {account_number} already exists.")


class AccountNotFoundError(BankingError):
    def __init__(self, account_number: str, role: str = "account"):
        self.account_number = account_number
        self.role = role
        if role == "receiver":
            message = "Receiver account not found."
        else:
            message = "Account not found."
        super().__init__(message)


class AuthenticationError(BankingError):
    def __init__(self, account_number: str):
        self.account_number = account_number
        super().__init__("Incorrect PIN.")


class InvalidAccountNumberError(ValidationError):
    def __init__(self, account_number: str):
        self.account_number = account_number
        super().__init__("Account number must not contain ' | '.")
