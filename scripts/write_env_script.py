"""CLI script to write the browser configuration injection script."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

import config
from config_service.services import (
    ConfigSource,
    DotenvLookup,
    EnvironmentLookup,
    IncompleteConfigurationError,
    render_dev_script,
    render_template_script,
    resolve_source,
)

DEFAULT_DEV_OUTPUT = Path(".env.local.js")
DEFAULT_TEMPLATE_OUTPUT = Path("env-config.template.js")


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--template",
        action="store_true",
        help="write the build-time template with placeholder tokens",
    )
    parser.add_argument(
        "--env-file",
        default=config.DEV_ENV_FILE,
        help="dotenv file used when the process environment is incomplete",
    )
    parser.add_argument("--output", type=Path, help="destination path")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)

    if args.template:
        output = args.output or DEFAULT_TEMPLATE_OUTPUT
        content = render_template_script()
    else:
        output = args.output or DEFAULT_DEV_OUTPUT
        sources = [
            ConfigSource("environment", EnvironmentLookup()),
            ConfigSource(args.env_file, DotenvLookup(args.env_file)),
        ]
        try:
            source, _ = resolve_source(sources)
        except IncompleteConfigurationError as exc:
            print(f"Not writing {output}: {exc}")
            return 1
        print(f"Using configuration from {source.label}.")
        content = render_dev_script(source.lookup)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    print(f"Wrote {output}.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
