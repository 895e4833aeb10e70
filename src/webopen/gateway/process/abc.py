"""Process operations abstraction for testing.

This module provides an ABC for probing and running external programs so
launcher selection can be tested without touching the real search path or
process table.
"""

from abc import ABC, abstractmethod


class ProcessRunner(ABC):
    """Abstract process operations for dependency injection."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Check whether a program resolves on the search path.

        Args:
            name: Program name, e.g. "xdg-open"

        Returns:
            True if the program can be found, False otherwise
        """
        ...

    @abstractmethod
    def run(self, name: str, args: list[str]) -> None:
        """Run a program and wait for it to exit.

        Args:
            name: Program to run
            args: Arguments passed to the program

        Raises:
            OSError: If the program cannot be started
            subprocess.CalledProcessError: If the program exits non-zero
        """
        ...
