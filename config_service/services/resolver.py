"""Resolve the client-visible configuration record from a lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple, Union

from .lookups import KeyValueLookup


class ConfigurationError(RuntimeError):
    """Base class for configuration resolution failures."""


class IncompleteConfigurationError(ConfigurationError):
    """Raised when a required configuration value is missing."""

    def __init__(self, missing: Iterable[str], message: Optional[str] = None) -> None:
        self.missing: Tuple[str, ...] = tuple(missing)
        if message is None:
            message = "Missing required configuration: " + ", ".join(self.missing)
        super().__init__(message)


@dataclass(frozen=True)
class FieldKeys:
    """Key names one deployment context uses for each logical field.

    ``None`` means the context does not provide that field at all.
    """

    storage_url: Optional[str]
    storage_anon_key: Optional[str]
    drive_root_folder_id: Optional[str] = None
    drive_upload_endpoint: Optional[str] = None
    auto_seed_enabled: Optional[str] = None

    def names(self) -> List[str]:
        return [
            name
            for name in (
                self.storage_url,
                self.storage_anon_key,
                self.drive_root_folder_id,
                self.drive_upload_endpoint,
                self.auto_seed_enabled,
            )
            if name is not None
        ]


ENVIRONMENT_KEYS = FieldKeys(
    storage_url="VITE_SUPABASE_URL",
    storage_anon_key="VITE_SUPABASE_ANON_KEY",
    drive_root_folder_id="VITE_GOOGLE_DRIVE_ROOT_FOLDER_ID",
    drive_upload_endpoint="VITE_GOOGLE_DRIVE_UPLOAD_ENDPOINT",
    auto_seed_enabled="VITE_ENABLE_AUTO_SEED",
)

TEMPLATE_KEYS = FieldKeys(
    storage_url="SUPABASE_URL",
    storage_anon_key="SUPABASE_ANON_KEY",
)


@dataclass(frozen=True)
class ConfigurationRecord:
    storage_url: str
    storage_anon_key: str
    drive_root_folder_id: Optional[str] = None
    drive_upload_endpoint: Optional[str] = None
    auto_seed_enabled: bool = False

    def to_dict(self) -> Dict[str, Union[str, bool, None]]:
        """Return the JSON shape the browser application expects."""
        return {
            "SUPABASE_URL": self.storage_url,
            "SUPABASE_ANON_KEY": self.storage_anon_key,
            "VITE_GOOGLE_DRIVE_ROOT_FOLDER_ID": self.drive_root_folder_id,
            "VITE_GOOGLE_DRIVE_UPLOAD_ENDPOINT": self.drive_upload_endpoint,
            "ENABLE_AUTO_SEED": self.auto_seed_enabled,
        }


class ConfigSource(NamedTuple):
    label: str
    lookup: KeyValueLookup
    keys: FieldKeys = ENVIRONMENT_KEYS


def _read(source: KeyValueLookup, key: Optional[str]) -> Optional[str]:
    if key is None:
        return None
    # Empty strings count as unset.
    return source.get(key) or None


def resolve(
    source: KeyValueLookup, keys: FieldKeys = ENVIRONMENT_KEYS
) -> ConfigurationRecord:
    """Build a configuration record from ``source``.

    Raises ``IncompleteConfigurationError`` when the storage URL or the
    storage anon key is missing. Only the five enumerated fields are read.
    """
    storage_url = _read(source, keys.storage_url)
    storage_anon_key = _read(source, keys.storage_anon_key)

    missing = [
        key or field
        for field, key, value in (
            ("storage_url", keys.storage_url, storage_url),
            ("storage_anon_key", keys.storage_anon_key, storage_anon_key),
        )
        if value is None
    ]
    if missing:
        raise IncompleteConfigurationError(missing)

    return ConfigurationRecord(
        storage_url=storage_url,
        storage_anon_key=storage_anon_key,
        drive_root_folder_id=_read(source, keys.drive_root_folder_id),
        drive_upload_endpoint=_read(source, keys.drive_upload_endpoint),
        auto_seed_enabled=_read(source, keys.auto_seed_enabled) == "true",
    )


def resolve_source(
    sources: Iterable[ConfigSource],
) -> Tuple[ConfigSource, ConfigurationRecord]:
    """Pick the first source that resolves completely, with its record.

    The winning source is used whole; values are never mixed across sources.
    """
    tried: List[str] = []
    missing: List[str] = []
    for source in sources:
        try:
            return source, resolve(source.lookup, source.keys)
        except IncompleteConfigurationError as exc:
            tried.append(source.label)
            missing.extend(key for key in exc.missing if key not in missing)

    if not tried:
        raise IncompleteConfigurationError((), "No configuration sources to try")
    raise IncompleteConfigurationError(
        missing,
        "No complete configuration in sources: " + ", ".join(tried),
    )


def resolve_first(sources: Iterable[ConfigSource]) -> ConfigurationRecord:
    """Return the record from the first source that resolves completely."""
    return resolve_source(sources)[1]
