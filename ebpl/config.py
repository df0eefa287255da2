"""Compiler configuration support for EBPL."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ebpl.errors import ConfigError
from ebpl.observability.logging import LOG_LEVELS

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older interpreters
    tomllib = None  # type: ignore

DEFAULT_HEADER: Tuple[str, ...] = ("#!/usr/bin/env python3", "# Generated from EBPL")

CONFIG_CANDIDATES = ("ebpl.toml", ".ebplrc")

LOG_LEVEL_ENV = "EBPL_LOG_LEVEL"


@dataclass(frozen=True)
class CompilerConfig:
    """Settings applied to every stage of a compile call."""

    header_lines: Tuple[str, ...] = DEFAULT_HEADER
    indent_width: int = 4
    token_pad_width: int = 20
    simulate: bool = True
    log_level: str = "info"


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON: {exc.msg}", line=exc.lineno, path=str(path)) from exc
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object", path=str(path))
    return data


def _read_toml_config(path: Path) -> Dict[str, Any]:
    if tomllib is None:
        raise ConfigError("TOML parsing requires Python 3.11 or later.", path=str(path))
    with path.open("rb") as handle:
        try:
            return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML: {exc}", path=str(path)) from exc


def _positive_int(section: Dict[str, Any], key: str, default: int, path: Optional[Path]) -> int:
    raw = section.get(key, default)
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise ConfigError(
            f"'{key}' must be a non-negative integer, got {raw!r}",
            path=str(path) if path else None,
        )
    return raw


def _bool(section: Dict[str, Any], key: str, default: bool, path: Optional[Path]) -> bool:
    raw = section.get(key, default)
    if not isinstance(raw, bool):
        raise ConfigError(
            f"'{key}' must be true or false, got {raw!r}",
            path=str(path) if path else None,
        )
    return raw


def _parse_compiler_section(data: Dict[str, Any], path: Optional[Path]) -> CompilerConfig:
    section = data.get("compiler") or {}
    if not isinstance(section, dict):
        raise ConfigError("'compiler' section must be a table", path=str(path) if path else None)

    header_raw = section.get("header_lines", list(DEFAULT_HEADER))
    header: List[str]
    if isinstance(header_raw, str):
        header = [header_raw]
    elif isinstance(header_raw, (list, tuple)):
        header = [str(item) for item in header_raw]
    else:
        raise ConfigError("'header_lines' must be a list of strings", path=str(path) if path else None)

    log_level = str(section.get("log_level") or CompilerConfig.log_level).lower()
    if log_level not in LOG_LEVELS:
        raise ConfigError(
            f"Unknown log level '{log_level}' (use one of: {', '.join(LOG_LEVELS)})",
            path=str(path) if path else None,
        )

    return CompilerConfig(
        header_lines=tuple(header),
        indent_width=_positive_int(section, "indent_width", CompilerConfig.indent_width, path),
        token_pad_width=_positive_int(section, "token_pad_width", CompilerConfig.token_pad_width, path),
        simulate=_bool(section, "simulate", CompilerConfig.simulate, path),
        log_level=log_level,
    )


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_CANDIDATES:
        path = root / candidate
        if path.exists():
            return path
    return None


def apply_env_overrides(config: CompilerConfig, environ: Optional[Dict[str, str]] = None) -> CompilerConfig:
    env = os.environ if environ is None else environ
    level = env.get(LOG_LEVEL_ENV)
    if level and level.lower() in LOG_LEVELS:
        return replace(config, log_level=level.lower())
    return config


def load_compiler_config(root: Path, explicit: Optional[Path] = None) -> CompilerConfig:
    """Load ``ebpl.toml`` (or ``.ebplrc`` JSON) from ``root``.

    Missing files yield the defaults; ``EBPL_LOG_LEVEL`` overrides the
    configured log level.
    """
    root = root.resolve()
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        return apply_env_overrides(CompilerConfig())

    if config_path.suffix == ".toml":
        data = _read_toml_config(config_path)
    else:
        data = _read_json_config(config_path)

    return apply_env_overrides(_parse_compiler_section(data, config_path))


__all__ = [
    "CompilerConfig",
    "DEFAULT_HEADER",
    "CONFIG_CANDIDATES",
    "LOG_LEVEL_ENV",
    "locate_config_file",
    "apply_env_overrides",
    "load_compiler_config",
]
