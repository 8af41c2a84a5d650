"""A wallet holding an amount of Bitcoin."""


class Bitcoin(int):
    """An amount of Bitcoin."""

    def __str__(self):
        return f"{int(self)} BTC"


class InsufficientFundsError(Exception):
    """A withdrawal asked for more than the wallet holds."""


class Wallet:
    """Holds a Bitcoin balance."""

    def __init__(self, balance=0):
        self._balance = Bitcoin(balance)

    def deposit(self, amount):
        """Add ``amount`` to the balance."""
        self._balance = Bitcoin(self._balance + amount)

    def withdraw(self, amount):
        """Take ``amount`` from the balance, raising if it is not covered."""
        if amount > self._balance:
            raise InsufficientFundsError("cannot withdraw, insufficient funds")
        self._balance = Bitcoin(self._balance - amount)

    def balance(self):
        """Return the current balance."""
        return self._balance