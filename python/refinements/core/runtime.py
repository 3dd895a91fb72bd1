"""Runtime contract-checking settings."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag(raw: Optional[str]) -> bool:
    return raw is not None and raw.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Runtime:
    """Runtime contract-checking settings.

    Static checkers verify that a classifier's hits match the declared
    narrowing. With ``debug`` on, refinements additionally check each
    classifier outcome as it is produced. ``strict`` raises on a violation
    instead of warning, and implies ``debug``.
    """

    debug: bool = False
    strict: bool = False

    @property
    def checks_enabled(self) -> bool:
        return self.debug or self.strict

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Runtime":
        """Build settings from ``REFINEMENTS_DEBUG`` and ``REFINEMENTS_STRICT``."""
        env = os.environ if environ is None else environ
        return cls(
            debug=_flag(env.get("REFINEMENTS_DEBUG")),
            strict=_flag(env.get("REFINEMENTS_STRICT")),
        )


# Default settings, read once at import
_runtime = Runtime.from_env()
