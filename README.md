# primers

A collection of small, self-contained examples. Each one is a tiny module with
its own tests.

| Module               | What it does                                                    |
|----------------------|-----------------------------------------------------------------|
| `primers.arrays`     | `total`, `sum_all` and `sum_all_tails` over collections of ints |
| `primers.greeting`   | `greet` writes a greeting; `greeter_app` serves it over WSGI    |
| `primers.integers`   | `add` two integers                                              |
| `primers.iteration`  | `repeat` a string five times                                    |
| `primers.dictionary` | `Dictionary` with `search`, `add`, `update` and `delete`        |
| `primers.countdown`  | `countdown` from 3 to "Go!" with a pluggable `Sleeper`          |
| `primers.wallet`     | `Wallet` holding `Bitcoin` that refuses overdrafts              |
| `primers.shapes`     | `Rectangle`, `Circle` and `Triangle` with their areas           |

## Installing

```
pip install .
```

## Using the library

```python
import io

from primers.arrays import sum_all, sum_all_tails
from primers.countdown import SpyCountdownOperations, countdown
from primers.dictionary import Dictionary, NotFoundError, WordExistsError
from primers.greeting import greet
from primers.shapes import Circle, Rectangle, perimeter
from primers.wallet import Bitcoin, InsufficientFundsError, Wallet

sum_all([1, 2], [0, 9])              # [3, 9]
sum_all_tails([1, 2], [0, 9])        # [2, 9]
sum_all_tails([], [3, 4, 5])         # [0, 9]

buffer = io.StringIO()
greet(buffer, "Chris")
buffer.getvalue()                    # "Hello, Chris"

words = Dictionary()
words.add("test", "this is just a test")
words.search("test")                 # "this is just a test"
try:
    words.search("unknown")
except NotFoundError as error:
    print(error)                     # could not find the word you were looking for
try:
    words.add("test", "new test")
except WordExistsError:
    pass

out = io.StringIO()
countdown(out, SpyCountdownOperations())
out.getvalue()                       # "3\n2\n1\nGo!"

wallet = Wallet()
wallet.deposit(Bitcoin(10))
str(wallet.balance())                # "10 BTC"
try:
    wallet.withdraw(Bitcoin(100))
except InsufficientFundsError:
    pass

perimeter(Rectangle(10.0, 10.0))     # 40.0
Circle(10).area()                    # 314.1592653589793
```

All dictionary errors derive from `DictionaryError`; `update` and `delete`
raise `WordDoesNotExistError` for a word that is not present.

`countdown` writes each number on its own line and calls the sleeper's
`sleep()` after each one. `ConfigurableSleeper(duration, sleep_func)` calls
`sleep_func(duration)`; `DefaultSleeper` sleeps for one second.

## Commands

Serve a greeting over HTTP on port 5001 until interrupted:

```
primers-greet
```

Every request, whatever its path or method, is answered with `Hello, world`
as plain text. If the port cannot be bound the error is printed and the
command exits with status 1.

Count down from 3 to "Go!" on standard output, one second apart:

```
primers-countdown
```

Neither command takes any options besides `--help` for `primers-countdown`;
the port, the name greeted and the starting number are fixed.

## Running the tests

```
pip install ".[test]"
pytest
```