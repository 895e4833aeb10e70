"""Fake ProcessRunner implementation for testing.

FakeProcessRunner is an in-memory implementation that answers existence
probes from a configured set of programs and records every call, enabling
fast and deterministic tests.
"""

from dataclasses import dataclass

from webopen.gateway.process.abc import ProcessRunner


@dataclass(frozen=True)
class RunCall:
    """Record of a run() call for test assertions."""

    name: str
    args: tuple[str, ...]


class FakeProcessRunner(ProcessRunner):
    """In-memory fake that records probes and runs.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        installed: set[str] | None,
        run_errors: dict[str, Exception] | None,
    ) -> None:
        """Create FakeProcessRunner.

        Args:
            installed: Programs that exists() reports as present.
                If None, no program is present.
            run_errors: Exception to raise from run() per program name.
                Use to simulate a launcher that is missing or exits non-zero.
        """
        self._installed = installed if installed is not None else set()
        self._run_errors = run_errors if run_errors is not None else {}
        self._probed_names: list[str] = []
        self._run_calls: list[RunCall] = []

    def exists(self, name: str) -> bool:
        self._probed_names.append(name)
        return name in self._installed

    def run(self, name: str, args: list[str]) -> None:
        self._run_calls.append(RunCall(name=name, args=tuple(args)))
        error = self._run_errors.get(name)
        if error is not None:
            raise error

    @property
    def probed_names(self) -> list[str]:
        """Names passed to exists(), in call order.

        This property is for test assertions only.
        """
        return list(self._probed_names)

    @property
    def run_calls(self) -> list[RunCall]:
        """Calls made to run(), in call order.

        This property is for test assertions only.
        """
        return list(self._run_calls)
