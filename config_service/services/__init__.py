"""Service layer exports."""

from .browser_scripts import (
    browser_globals_lookup,
    render_dev_script,
    render_template_script,
)
from .lookups import (
    DotenvLookup,
    EnvironmentLookup,
    KeyValueLookup,
    MappingLookup,
    PlaceholderAwareLookup,
)
from .resolver import (
    ENVIRONMENT_KEYS,
    TEMPLATE_KEYS,
    ConfigSource,
    ConfigurationError,
    ConfigurationRecord,
    FieldKeys,
    IncompleteConfigurationError,
    resolve,
    resolve_first,
    resolve_source,
)

__all__ = [
    "ConfigSource",
    "ConfigurationError",
    "ConfigurationRecord",
    "DotenvLookup",
    "ENVIRONMENT_KEYS",
    "EnvironmentLookup",
    "FieldKeys",
    "IncompleteConfigurationError",
    "KeyValueLookup",
    "MappingLookup",
    "PlaceholderAwareLookup",
    "TEMPLATE_KEYS",
    "browser_globals_lookup",
    "render_dev_script",
    "render_template_script",
    "resolve",
    "resolve_first",
    "resolve_source",
]
