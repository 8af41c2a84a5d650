"""Small worked examples: sums, greetings, a dictionary, a countdown, a wallet and shapes."""

__version__ = "0.1.0"