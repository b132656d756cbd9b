"""Subprocess adapter implementing ProcessRunnerPort."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from binstrap.adapters.ports import ProcessRunnerPort
from binstrap.domain.exceptions import ProcessError

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Runs executables with subprocess.Popen.

    Standard input, output and error are inherited from the calling
    process, nothing is captured or buffered.
    """

    def run(
        self,
        executable: Path,
        args: Sequence[str],
        env: dict[str, str],
        timeout: float | None = None,
    ) -> int:
        """Run the executable and wait for it to exit.

        Args:
            executable: Path to the program.
            args: Arguments passed after the program name.
            env: Environment for the child.
            timeout: Optional timeout in seconds. On expiry the child is
                killed.

        Returns:
            The exit code of the child. Negative values mean the child was
            terminated by that signal (POSIX).

        Raises:
            ProcessError: If the child cannot be started or times out.
        """
        command = [str(executable), *args]
        logger.debug("Executing %s", command)
        try:
            proc = subprocess.Popen(command, env=env)
        except (OSError, ValueError) as e:
            raise ProcessError(
                f"Could not start {executable}: {e}", path=executable, original_error=e
            ) from e

        with proc:
            try:
                return proc.wait(timeout=timeout)
            except subprocess.TimeoutExpired as e:
                proc.kill()
                proc.wait()
                raise ProcessError(
                    f"{executable} did not exit within {timeout}s",
                    path=executable,
                    original_error=e,
                ) from e


# Runtime protocol check
assert isinstance(SubprocessRunner(), ProcessRunnerPort)
