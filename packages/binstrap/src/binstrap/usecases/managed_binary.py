"""Managed binary use case: provisioning and delegated execution."""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Iterator, Sequence

from binstrap.domain.exceptions import BinaryError, FileIOError, ProcessError
from binstrap.usecases.url_template import expand_url_template

if TYPE_CHECKING:
    from binstrap.adapters.ports import (
        EnvironmentPort,
        FetcherPort,
        FileSystemPort,
        ProcessRunnerPort,
    )
    from binstrap.domain.binary import BinaryDescriptor

logger = logging.getLogger(__name__)

# Must be a multiple of 4 so every chunk decodes on its own
_DECODE_CHUNK_CHARS = 64 * 1024


class ProvisionOutcome(Enum):
    """What prepare() did to make the executable available.

    Attributes:
        ALREADY_PRESENT: A regular file was already at the executable path.
        DOWNLOADED: The binary was fetched straight to disk.
        DECODED: The binary was decoded from embedded data.
    """

    ALREADY_PRESENT = "already_present"
    DOWNLOADED = "downloaded"
    DECODED = "decoded"


@dataclass(frozen=True)
class PrepareAndRunResult:
    """Result of a prepare_and_run() call.

    Attributes:
        success: True if the binary was provisioned and exited with 0.
        exit_code: Exit code of the child, None if it never ran to completion.
        error: The error that stopped the operation, None on success.
        stage: "prepare" or "run" for failures, None on success.
    """

    success: bool
    exit_code: int | None
    error: BinaryError | None
    stage: str | None

    @classmethod
    def create_success(cls, exit_code: int = 0) -> PrepareAndRunResult:
        return cls(success=True, exit_code=exit_code, error=None, stage=None)

    @classmethod
    def create_failure(cls, stage: str, error: BinaryError) -> PrepareAndRunResult:
        """Create a failure result.

        Args:
            stage: Which step failed, "prepare" or "run".
            error: The error raised by that step.

        Returns:
            PrepareAndRunResult indicating failure. exit_code is taken from
            a ProcessError when the child did exit.
        """
        exit_code = error.exit_code if isinstance(error, ProcessError) else None
        return cls(success=False, exit_code=exit_code, error=error, stage=stage)


def _encode_chunks(chunks: Iterable[bytes]) -> Iterator[bytes]:
    """Base64-encode a byte stream chunk by chunk."""
    pending = b""
    for chunk in chunks:
        pending += chunk
        usable = len(pending) - len(pending) % 3
        if usable:
            yield base64.b64encode(pending[:usable])
            pending = pending[usable:]
    if pending:
        yield base64.b64encode(pending)


def _decode_chunks(data: str) -> Iterator[bytes]:
    """Base64-decode text in bounded chunks.

    Line breaks are ignored. Raises binascii.Error on malformed input.
    """
    text = data.replace("\r", "").replace("\n", "")
    for start in range(0, len(text), _DECODE_CHUNK_CHARS):
        yield base64.b64decode(text[start : start + _DECODE_CHUNK_CHARS], validate=True)


class ManagedBinary:
    """Lifecycle manager for one external binary.

    Resolves the download URL for the current platform, provisions the
    executable on disk (from embedded data or by downloading it) and runs
    it with the caller's standard streams.

    All I/O goes through injected ports; see binstrap.factories for the
    production wiring.

    Example:
        binary = create_managed_binary(descriptor)
        binary.prepare()
        binary.run(["--version"])
    """

    def __init__(
        self,
        descriptor: BinaryDescriptor,
        environment: EnvironmentPort,
        fetcher: FetcherPort,
        filesystem: FileSystemPort,
        process_runner: ProcessRunnerPort,
    ) -> None:
        """Initialize the managed binary.

        Args:
            descriptor: Identity of the binary.
            environment: Port for platform identifiers and variables.
            fetcher: Port for HTTP GET requests.
            filesystem: Port for stat and file creation.
            process_runner: Port for launching the executable.
        """
        self._descriptor = descriptor
        self._environment = environment
        self._fetcher = fetcher
        self._filesystem = filesystem
        self._process_runner = process_runner
        self._embedded_data = descriptor.embedded_data

    @property
    def descriptor(self) -> BinaryDescriptor:
        return self._descriptor

    @property
    def embedded_data(self) -> str:
        """Base64 payload held in memory, empty when none."""
        return self._embedded_data

    def executable_path(self) -> Path:
        """Return the path of the executable. Never raises."""
        return self._descriptor.executable_path()

    def expand_url(self) -> str:
        """Expand the descriptor's URL template.

        $GOOS and $GOARCH come from the environment port's platform,
        $VERSION from the descriptor's default version. Any other name is
        looked up as an environment variable, unset variables expand to "".
        The platform is only detected when the template uses it.

        Raises:
            BinaryConfigError: If the template uses $GOOS or $GOARCH and
                the platform cannot be determined.
        """

        def mapping(name: str) -> str:
            if name == "GOOS":
                return self._environment.platform().os
            if name == "GOARCH":
                return self._environment.platform().arch
            if name == "VERSION":
                return self._descriptor.default_version
            return self._environment.lookup(name)

        return expand_url_template(self._descriptor.url_template, mapping)

    def download(self, timeout: float | None = None) -> None:
        """Fetch the binary into memory as base64 text.

        On success the encoded body replaces embedded_data. On failure
        embedded_data is left unchanged.

        Args:
            timeout: Optional request timeout in seconds.

        Raises:
            FetchError: If the request or reading the body fails.
        """
        url = self.expand_url()
        logger.info("Downloading %s into memory from %s", self._descriptor.name, url)
        with self._fetcher.open(url, timeout=timeout) as response:
            encoded = b"".join(_encode_chunks(response.iter_bytes()))
        self._embedded_data = encoded.decode("ascii")

    def save(self) -> None:
        """Decode embedded_data and write it to the executable path.

        The payload is decoded before the file is opened, so malformed
        data never touches the disk. The file is created with mode 0755.

        Raises:
            FileIOError: If the file cannot be opened or written, or the
                embedded data is not valid base64.
        """
        path = self.executable_path()
        try:
            chunks = list(_decode_chunks(self._embedded_data))
        except (binascii.Error, ValueError) as e:
            logger.warning("Embedded data for %s is not valid base64", path)
            raise FileIOError(
                f"Embedded data for {path} is not valid base64: {e}",
                path=path,
                original_error=e,
            ) from e

        logger.info("Writing embedded %s to %s", self._descriptor.name, path)
        with self._filesystem.open_executable(path) as f:
            for chunk in chunks:
                f.write(chunk)

    def download_and_save(self, timeout: float | None = None) -> None:
        """Stream the binary from its URL straight to the executable path.

        No in-memory buffering or encoding takes place.

        Args:
            timeout: Optional request timeout in seconds.

        Raises:
            FetchError: If the request or reading the body fails.
            FileIOError: If the file cannot be opened or written.
        """
        url = self.expand_url()
        path = self.executable_path()
        logger.info("Downloading %s from %s to %s", self._descriptor.name, url, path)
        with self._fetcher.open(url, timeout=timeout) as response:
            with self._filesystem.open_executable(path) as f:
                for chunk in response.iter_bytes():
                    f.write(chunk)

    def is_saved(self) -> bool:
        """Return True if a regular file exists at the executable path."""
        return self._filesystem.is_regular_file(self.executable_path())

    def prepare(self) -> ProvisionOutcome:
        """Make sure the executable exists on disk.

        1. A regular file already at the path wins; nothing is written.
        2. Without embedded data the binary is downloaded to disk.
        3. Otherwise the embedded data is decoded to disk.

        Errors from the chosen step propagate; nothing is retried.

        Returns:
            ProvisionOutcome describing which path was taken.

        Raises:
            FetchError: If downloading fails.
            FileIOError: If writing the file fails.
        """
        if self.is_saved():
            logger.debug(
                "%s already present at %s",
                self._descriptor.name,
                self.executable_path(),
            )
            return ProvisionOutcome.ALREADY_PRESENT

        try:
            if self._embedded_data == "":
                self.download_and_save()
                return ProvisionOutcome.DOWNLOADED

            self.save()
            return ProvisionOutcome.DECODED
        except BinaryError as e:
            logger.warning("Could not prepare %s: %s", self._descriptor.name, e)
            raise

    def run(self, args: Sequence[str] = (), timeout: float | None = None) -> int:
        """Run the executable with args, inheriting environment and streams.

        Blocks until the child exits.

        Args:
            args: Arguments passed to the executable.
            timeout: Optional timeout in seconds; the child is killed on expiry.

        Returns:
            0, the exit code of a successful run.

        Raises:
            ProcessError: If the child cannot be started, times out, or
                exits with a non-zero status.
        """
        path = self.executable_path()
        exit_code = self._process_runner.run(
            path, list(args), self._environment.environ(), timeout=timeout
        )
        if exit_code != 0:
            logger.warning("%s exited with status %d", path, exit_code)
            raise ProcessError(
                f"{path} exited with status {exit_code}",
                path=path,
                exit_code=exit_code,
            )
        return exit_code

    def prepare_and_run(
        self, args: Sequence[str] = (), timeout: float | None = None
    ) -> PrepareAndRunResult:
        """Provision the executable, then run it.

        Errors are returned in the result, never raised, so the host
        decides whether to terminate.

        Args:
            args: Arguments passed to the executable.
            timeout: Optional timeout for the run, in seconds.

        Returns:
            PrepareAndRunResult describing the outcome.
        """
        try:
            self.prepare()
        except BinaryError as e:
            return PrepareAndRunResult.create_failure("prepare", e)

        try:
            exit_code = self.run(args, timeout=timeout)
        except BinaryError as e:
            return PrepareAndRunResult.create_failure("run", e)

        return PrepareAndRunResult.create_success(exit_code)
