"""Use cases: Application logic layer."""

from binstrap.usecases.managed_binary import (
    ManagedBinary,
    PrepareAndRunResult,
    ProvisionOutcome,
)
from binstrap.usecases.url_template import expand_url_template

__all__ = [
    "ManagedBinary",
    "PrepareAndRunResult",
    "ProvisionOutcome",
    "expand_url_template",
]
