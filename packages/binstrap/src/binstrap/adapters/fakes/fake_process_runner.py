"""Fake process runner for testing.

Provides a test double for ProcessRunnerPort that records launches
instead of spawning processes.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence


@dataclass(frozen=True)
class RunCall:
    """Record of a single run() call.

    Attributes:
        executable: Program that would have been launched.
        args: Arguments passed to it.
        env: Environment it would have received.
        timeout: Timeout passed by the caller.
    """

    executable: Path
    args: tuple[str, ...]
    env: dict[str, str]
    timeout: float | None


class FakeProcessRunner:
    """Fake implementation of ProcessRunnerPort for testing.

    Example:
        >>> from pathlib import Path
        >>> runner = FakeProcessRunner(exit_code=3)
        >>> runner.run(Path("/bin/tool"), ["--version"], {})
        3
        >>> runner.calls[0].args
        ('--version',)
    """

    def __init__(self, exit_code: int = 0) -> None:
        self._exit_code = exit_code
        self._exception: BaseException | None = None
        self._calls: list[RunCall] = []

    @property
    def calls(self) -> list[RunCall]:
        return self._calls

    def set_exit_code(self, exit_code: int) -> None:
        self._exit_code = exit_code

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from run(), or None to clear."""
        self._exception = exception

    def run(
        self,
        executable: Path,
        args: Sequence[str],
        env: dict[str, str],
        timeout: float | None = None,
    ) -> int:
        self._calls.append(
            RunCall(executable=executable, args=tuple(args), env=dict(env), timeout=timeout)
        )
        if self._exception is not None:
            raise self._exception
        return self._exit_code
