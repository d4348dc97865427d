"""Tests for the browser-global injection scripts."""

import pytest

from config_service.services import (
    TEMPLATE_KEYS,
    IncompleteConfigurationError,
    MappingLookup,
    browser_globals_lookup,
    render_dev_script,
    render_template_script,
    resolve,
)
from config_service.services.browser_scripts import read_script_globals


def test_dev_script_sets_loaded_flag_and_values():
    script = render_dev_script(
        MappingLookup(
            {
                "VITE_GOOGLE_CLIENT_ID": "client-id",
                "VITE_SUPABASE_URL": "https://x.supabase.co",
                "VITE_SUPABASE_ANON_KEY": "abc",
            }
        )
    )
    assert "window.__ENV_LOADED__ = true;" in script
    assert "window.ENV = window.ENV || {};" in script
    assert 'window.ENV.VITE_GOOGLE_CLIENT_ID = "client-id";' in script
    assert 'window.ENV.VITE_SUPABASE_URL = "https://x.supabase.co";' in script
    assert "window.ENV.VITE_GOOGLE_DRIVE_ROOT_FOLDER_ID = undefined;" in script


def test_dev_script_escapes_values():
    script = render_dev_script(
        MappingLookup({"VITE_SUPABASE_ANON_KEY": 'a"b</script>'})
    )
    assert "</script>" not in script
    assert read_script_globals(script)["VITE_SUPABASE_ANON_KEY"] == 'a"b</script>'


def test_dev_script_never_emits_unrelated_keys():
    script = render_dev_script(
        MappingLookup({"SUPABASE_SERVICE_ROLE_KEY": "secret", "VITE_SUPABASE_URL": "u"})
    )
    assert "secret" not in script


def test_template_script_carries_placeholders():
    script = render_template_script()
    assert '"__SUPABASE_URL__"' in script
    assert '"__SUPABASE_ANON_KEY__"' in script
    assert "VITE_GOOGLE_CLIENT_ID" not in script


def test_substituted_template_resolves():
    script = (
        render_template_script()
        .replace("__SUPABASE_URL__", "https://x.supabase.co")
        .replace("__SUPABASE_ANON_KEY__", "abc")
    )
    record = resolve(browser_globals_lookup(script), TEMPLATE_KEYS)
    assert record.storage_url == "https://x.supabase.co"
    assert record.storage_anon_key == "abc"


def test_unsubstituted_template_is_incomplete():
    with pytest.raises(IncompleteConfigurationError):
        resolve(browser_globals_lookup(render_template_script()), TEMPLATE_KEYS)


def test_read_single_quoted_assignments():
    script = (
        "window.__ENV_LOADED__ = true;\n"
        "window.ENV = window.ENV || {};\n"
        "window.ENV.VITE_SUPABASE_URL = 'https://x.supabase.co';\n"
        "window.ENV.VITE_GOOGLE_CLIENT_ID = 'it\\'s';\n"
        "window.ENV.VITE_GOOGLE_DRIVE_ROOT_FOLDER_ID = undefined;\n"
    )
    values = read_script_globals(script)
    assert values["VITE_SUPABASE_URL"] == "https://x.supabase.co"
    assert values["VITE_GOOGLE_CLIENT_ID"] == "it's"
    assert values["VITE_GOOGLE_DRIVE_ROOT_FOLDER_ID"] is None


def test_js_only_escapes_read_as_unset():
    script = (
        "window.ENV.VITE_SUPABASE_URL = 'https://x.supabase.co';\n"
        "window.ENV.VITE_SUPABASE_ANON_KEY = '\\x41';\n"
        "window.ENV.VITE_GOOGLE_CLIENT_ID = '\\u{41}';\n"
    )
    values = read_script_globals(script)
    assert values["VITE_SUPABASE_URL"] == "https://x.supabase.co"
    assert values["VITE_SUPABASE_ANON_KEY"] is None
    assert values["VITE_GOOGLE_CLIENT_ID"] is None
