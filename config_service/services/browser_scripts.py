"""Render and read the scripts that inject configuration as browser globals."""

from __future__ import annotations

import json
import re
from typing import Dict, Optional

from .lookups import KeyValueLookup, MappingLookup, PlaceholderAwareLookup
from .resolver import TEMPLATE_KEYS

DEV_SCRIPT_KEYS = (
    "VITE_GOOGLE_CLIENT_ID",
    "VITE_GOOGLE_DRIVE_ROOT_FOLDER_ID",
    "VITE_GOOGLE_DRIVE_UPLOAD_ENDPOINT",
    "VITE_SUPABASE_URL",
    "VITE_SUPABASE_ANON_KEY",
)

_ASSIGNMENT = re.compile(
    r"""window\.ENV\.(?P<key>[A-Za-z_][A-Za-z0-9_]*)\s*=\s*(?P<value>"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*'|undefined|null)\s*;"""
)
_OBJECT_ASSIGNMENT = re.compile(r"window\.ENV\s*=\s*(?P<body>\{.*?\})\s*;", re.DOTALL)
_OBJECT_ENTRY = re.compile(
    r"""(?P<key>[A-Za-z_][A-Za-z0-9_]*)\s*:\s*(?P<value>"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*'|undefined|null)"""
)


def placeholder(key: str) -> str:
    return f"__{key}__"


def _literal(value: Optional[str]) -> str:
    if value is None:
        return "undefined"
    # Keep "</script>" from terminating an inline script tag.
    return json.dumps(value).replace("</", "<\\/")


def render_dev_script(source: KeyValueLookup) -> str:
    """Render the script the local dev server injects before the app loads."""
    lines = [
        "// Generated by the local development server. Do not commit.",
        "window.__ENV_LOADED__ = true;",
        "window.ENV = window.ENV || {};",
        "",
    ]
    for key in DEV_SCRIPT_KEYS:
        lines.append(f"window.ENV.{key} = {_literal(source.get(key) or None)};")
    return "\n".join(lines) + "\n"


def render_template_script() -> str:
    """Render the build-time script whose tokens the pipeline substitutes."""
    entries = ",\n".join(
        f"  {key}: {json.dumps(placeholder(key))}"
        for key in (TEMPLATE_KEYS.storage_url, TEMPLATE_KEYS.storage_anon_key)
    )
    return "window.ENV = {\n" + entries + "\n};\n"


def _parse_literal(raw: str) -> Optional[str]:
    if raw in ("undefined", "null"):
        return None
    if raw.startswith("'"):
        raw = '"' + raw[1:-1].replace('\\"', '"').replace('"', '\\"') + '"'
        raw = raw.replace("\\'", "'")
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        # JS-only escapes such as \x41 or \u{41}; treat the value as unset.
        return None


def read_script_globals(script: str) -> Dict[str, Optional[str]]:
    """Collect the ``window.ENV`` string values an injection script assigns."""
    values: Dict[str, Optional[str]] = {}
    for block in _OBJECT_ASSIGNMENT.finditer(script):
        for entry in _OBJECT_ENTRY.finditer(block.group("body")):
            values[entry.group("key")] = _parse_literal(entry.group("value"))
    for match in _ASSIGNMENT.finditer(script):
        values[match.group("key")] = _parse_literal(match.group("value"))
    return values


def browser_globals_lookup(script: str) -> PlaceholderAwareLookup:
    """Lookup over the globals an injection script would set in the browser.

    Tokens the pipeline left unsubstituted read as absent.
    """
    return PlaceholderAwareLookup(MappingLookup(read_script_globals(script)))
