"""Counting down to a final word, with pluggable sleeping."""

import argparse
import sys
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import TextIO

FINAL_WORD = "Go!"
COUNTDOWN_START = 3

WRITE = "write"
SLEEP = "sleep"


class Sleeper(ABC):
    """Something that pauses between countdown steps."""

    @abstractmethod
    def sleep(self) -> None:
        """Pause once."""


class DefaultSleeper(Sleeper):
    """Sleeps for one second."""

    def sleep(self) -> None:
        time.sleep(1)


@dataclass
class ConfigurableSleeper(Sleeper):
    """Sleeps for ``duration`` seconds using ``sleep_func``."""

    duration: float
    sleep_func: Callable[[float], None]

    def sleep(self) -> None:
        self.sleep_func(self.duration)


@dataclass
class SpyCountdownOperations(Sleeper):
    """Records the order of writes and sleeps."""

    calls: list[str] = field(default_factory=list)

    def sleep(self) -> None:
        self.calls.append(SLEEP)

    def write(self, data: str) -> int:
        self.calls.append(WRITE)
        return len(data)


@dataclass
class SpyTime:
    """Records the last duration it was asked to sleep for."""

    duration_slept: float = 0.0

    def sleep(self, duration: float) -> None:
        self.duration_slept = duration


def count_down_from(start: int) -> Iterator[int]:
    """Yield ``start`` down to 1."""
    yield from range(start, 0, -1)


def countdown(out: TextIO, sleeper: Sleeper) -> None:
    """Write a countdown to ``out``, sleeping after each number."""
    for number in count_down_from(COUNTDOWN_START):
        out.write(f"{number}\n")
        sleeper.sleep()
    out.write(FINAL_WORD)


def main(argv: list[str] | None = None) -> int:
    """Count down to standard output, one second per step."""
    parser = argparse.ArgumentParser(description="Count down from 3.")
    parser.parse_args(argv)
    countdown(sys.stdout, ConfigurableSleeper(1.0, time.sleep))
    return 0