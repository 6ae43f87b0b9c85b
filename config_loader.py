"""Helpers for resolving the notebook conversion configuration file."""

from __future__ import annotations

import json
import os
import re
from typing import Any, Dict, Optional

import soupsieve  # type: ignore[import-not-found]

from notebook_export.models import ConversionOptions, ParseOptions
from notebook_export.naming import NAMING_STRATEGIES

DEFAULT_CONFIG_NAME = "config.json"
CONFIG_ENV_VAR = "NOTEBOOK_EXPORT_CONFIG"


class ConfigError(Exception):
    """Raised when runtime configuration cannot be loaded."""


def _resolve_config_path(path: Optional[str]) -> Optional[str]:
    """Return the absolute config path, or None when no file is configured.

    Only the implicit ``config.json`` may be absent; an explicit path or the
    environment override must point at an existing file.
    """
    env_override = os.environ.get(CONFIG_ENV_VAR)
    explicit = path or env_override
    candidate = explicit or DEFAULT_CONFIG_NAME
    expanded = os.path.expanduser(candidate)
    if os.path.isabs(expanded):
        if os.path.isfile(expanded):
            return expanded
    else:
        resolved = os.path.abspath(os.path.join(os.getcwd(), expanded))
        if os.path.isfile(resolved):
            return resolved

    if explicit:
        raise ConfigError(f"Configuration file not found: {candidate}")
    return None


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the JSON config file, returning an empty mapping when absent."""
    config_path = _resolve_config_path(path)
    if config_path is None:
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as config_file:
            data = json.load(config_file)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {config_path}")
    return data


def _string_value(config: Dict[str, Any], key: str, default: str) -> str:
    value = config.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"{key} must be a string, got {value!r}")
    return value


def _string_list(
    config: Dict[str, Any], key: str, default: tuple[str, ...]
) -> tuple[str, ...]:
    value = config.get(key, list(default))
    if not isinstance(value, list) or not all(
        isinstance(item, str) for item in value
    ):
        raise ConfigError(f"{key} must be a list of strings, got {value!r}")
    return tuple(value)


def _compile_patterns(patterns: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            raise ConfigError(
                f"Invalid skip pattern {pattern!r}: {exc}"
            ) from exc
    return tuple(compiled)


def _check_selector(key: str, selector: str) -> str:
    try:
        soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as exc:
        raise ConfigError(f"Invalid {key} {selector!r}: {exc}") from exc
    return selector


def build_parse_options(config: Dict[str, Any]) -> ParseOptions:
    """Translate config keys into ``ParseOptions``, keeping defaults."""
    defaults = ParseOptions()
    highlight_selectors = _string_list(
        config, "highlight_selectors", defaults.highlight_selectors
    )
    if not highlight_selectors:
        raise ConfigError("highlight_selectors must not be empty.")

    skip_sources = tuple(pattern.pattern for pattern in defaults.skip_patterns)
    return ParseOptions(
        authors_selector=_check_selector(
            "authors_selector",
            _string_value(config, "authors_selector", defaults.authors_selector),
        ),
        title_selector=_check_selector(
            "title_selector",
            _string_value(config, "title_selector", defaults.title_selector),
        ),
        highlight_selectors=tuple(
            _check_selector("highlight_selectors", selector)
            for selector in highlight_selectors
        ),
        skip_patterns=_compile_patterns(
            _string_list(config, "skip_patterns", skip_sources)
        ),
    )


def resolve_conversion_options(
    *,
    config_path: Optional[str] = None,
    extension: Optional[str] = None,
    naming_strategy: Optional[str] = None,
) -> ConversionOptions:
    """Resolve runtime options by combining CLI overrides with config."""
    config = load_config(config_path)
    defaults = ConversionOptions()

    resolved_extension = extension or _string_value(
        config, "extension", defaults.extension
    )
    if not resolved_extension.startswith("."):
        raise ConfigError(
            f"extension must start with a dot, got {resolved_extension!r}"
        )

    resolved_naming = naming_strategy or _string_value(
        config, "naming_strategy", defaults.naming_strategy
    )
    if resolved_naming not in NAMING_STRATEGIES:
        choices = ", ".join(sorted(NAMING_STRATEGIES))
        raise ConfigError(
            f"Unknown naming_strategy {resolved_naming!r} (expected one of:"
            f" {choices})"
        )

    return ConversionOptions(
        extension=resolved_extension,
        naming_strategy=resolved_naming,
        parse=build_parse_options(config),
    )
