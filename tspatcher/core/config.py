"""Typed loading of `tspatcher.toml`.

The file is optional. Every key has a default matching the upstream
TypeScript repository layout, so a bare workspace works out of the box.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_TYPE_DEPTH",
    "Config",
    "ConfigError",
    "PatchConfig",
    "PathsConfig",
    "UpstreamConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "tspatcher.toml"

DEFAULT_REPO = "microsoft/TypeScript"
DEFAULT_CLONE_URL = "https://github.com/microsoft/TypeScript.git"
DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TYPE_DEPTH = 1000


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Config file exists but cannot be used."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class UpstreamConfig:
    """Where the compiler sources and their release metadata live."""

    repo: str = DEFAULT_REPO
    clone_url: str = DEFAULT_CLONE_URL
    api_url: str = DEFAULT_API_URL


@dataclass(frozen=True, slots=True)
class PathsConfig:
    """Paths of the Cloned Tree and of the two patch targets inside it.

    `checkout` is relative to the workspace root, the others are relative
    to the checkout.
    """

    checkout: str = "TypeScript"
    checker: str = "src/compiler/checker.ts"
    package: str = "package.json"


@dataclass(frozen=True, slots=True)
class PatchConfig:
    type_depth: int = DEFAULT_TYPE_DEPTH


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    upstream: UpstreamConfig = field(default_factory=UpstreamConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    patch: PatchConfig = field(default_factory=PatchConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a parsed TOML mapping."""
        upstream: StrDict = get_table(data, "upstream") or {}
        paths: StrDict = get_table(data, "paths") or {}
        patch: StrDict = get_table(data, "patch") or {}

        type_depth = get_int(patch, "type_depth")
        if type_depth is not None and type_depth <= 0:
            raise ValueError(f"patch.type_depth must be positive, got {type_depth}")

        return cls(
            upstream=UpstreamConfig(
                repo=get_str(upstream, "repo") or DEFAULT_REPO,
                clone_url=get_str(upstream, "clone_url") or DEFAULT_CLONE_URL,
                api_url=(get_str(upstream, "api_url") or DEFAULT_API_URL).rstrip("/"),
            ),
            paths=PathsConfig(
                checkout=get_str(paths, "checkout") or "TypeScript",
                checker=get_str(paths, "checker") or "src/compiler/checker.ts",
                package=get_str(paths, "package") or "package.json",
            ),
            patch=PatchConfig(type_depth=type_depth or DEFAULT_TYPE_DEPTH),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and validate configuration from a TOML file.

    Args:
        path: Path to tspatcher.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Like load_config, but a missing file yields the defaults."""
    if not path.exists():
        return Ok(Config())
    return load_config(path)
