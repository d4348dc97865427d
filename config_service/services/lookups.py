"""Read-only key/value lookups over each deployment context."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Mapping, Optional, Protocol, Union

from dotenv import dotenv_values

PLACEHOLDER_PATTERN = re.compile(r"^__[A-Z0-9_]+__$")


class KeyValueLookup(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...


class EnvironmentLookup:
    """Lookup over the process environment of the serverless function."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str) -> Optional[str]:
        return self._environ.get(key)


class MappingLookup:
    """Lookup over a static constant map, e.g. values baked in at build time."""

    def __init__(self, values: Mapping[str, Optional[str]]) -> None:
        self._values = dict(values)

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def __repr__(self) -> str:
        return f"MappingLookup(keys={sorted(self._values)})"


class DotenvLookup:
    """Lookup over a ``.env`` style file read by the local dev server.

    The file is re-read on every lookup so edits apply without a restart.
    A missing file behaves like an empty lookup.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def get(self, key: str) -> Optional[str]:
        if not self.path.is_file():
            return None
        return dotenv_values(self.path).get(key)


def is_placeholder(value: Optional[str]) -> bool:
    """Check whether a value is an unsubstituted ``__NAME__`` template token."""
    return bool(value) and PLACEHOLDER_PATTERN.match(value) is not None


class PlaceholderAwareLookup:
    """Hide values the deployment pipeline never substituted."""

    def __init__(self, inner: KeyValueLookup) -> None:
        self._inner = inner

    def get(self, key: str) -> Optional[str]:
        value = self._inner.get(key)
        if is_placeholder(value):
            return None
        return value
