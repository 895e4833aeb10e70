"""Real ProcessRunner implementation using shutil.which and subprocess.run."""

import os
import shutil
import subprocess

from webopen.gateway.process.abc import ProcessRunner
from webopen.host import WINDOWS

# cmd.exe builtin on Windows; os.startfile performs the same ShellExecute
# "open" without cmd's quoting and %VAR% expansion.
_SHELL_OPEN = "start"


class RealProcessRunner(ProcessRunner):
    """Production implementation that probes PATH and spawns processes."""

    def __init__(self, *, platform: str) -> None:
        self._platform = platform

    def exists(self, name: str) -> bool:
        return shutil.which(name) is not None

    def run(self, name: str, args: list[str]) -> None:
        if self._platform == WINDOWS and name == _SHELL_OPEN:
            for target in args:
                os.startfile(target)  # type: ignore[attr-defined]
            return
        subprocess.run([name, *args], check=True)
