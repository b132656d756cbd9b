"""Fake environment provider for testing.

Provides a test double for EnvironmentPort with a fixed platform and
an explicit variable mapping instead of the real process state.
"""

from __future__ import annotations

from binstrap.domain.binary import Platform


class FakeEnvironment:
    """Fake implementation of EnvironmentPort for testing.

    Example:
        >>> env = FakeEnvironment(variables={"CUSTOM_VAR": "foo"})
        >>> env.platform()
        Platform(os='linux', arch='amd64')
        >>> env.lookup("CUSTOM_VAR")
        'foo'
        >>> env.lookup("UNSET")
        ''
    """

    def __init__(
        self,
        platform: Platform | None = None,
        variables: dict[str, str] | None = None,
    ) -> None:
        """Initialize with a platform and variables.

        Args:
            platform: Platform to report, linux/amd64 by default.
            variables: Environment variables, empty by default.
        """
        self._platform = platform or Platform(os="linux", arch="amd64")
        self._variables: dict[str, str] = dict(variables or {})
        self._lookups: list[str] = []
        self._platform_exception: BaseException | None = None

    @property
    def lookups(self) -> list[str]:
        """Return the names passed to lookup(), in call order."""
        return list(self._lookups)

    def set_platform(self, platform: Platform) -> None:
        self._platform = platform

    def set_platform_exception(self, exception: BaseException | None) -> None:
        """Make platform() raise, as on a host with an unmapped OS or arch."""
        self._platform_exception = exception

    def set_variable(self, name: str, value: str) -> None:
        self._variables[name] = value

    def unset_variable(self, name: str) -> None:
        self._variables.pop(name, None)

    def platform(self) -> Platform:
        if self._platform_exception is not None:
            raise self._platform_exception
        return self._platform

    def lookup(self, name: str) -> str:
        self._lookups.append(name)
        return self._variables.get(name, "")

    def environ(self) -> dict[str, str]:
        return dict(self._variables)
