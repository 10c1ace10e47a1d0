#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the mdoverlay CLI.

Render configuration can live in a dedicated ``.mdoverlay.toml``,
``.mdoverlay.yaml``/``.yml`` or ``.mdoverlay.json`` file, or in the
``[tool.mdoverlay]`` table of a ``pyproject.toml``. This module finds such a
file, loads it into a plain dictionary, and merges dictionaries with the
right priority before they are turned into :class:`RenderOptions`.

A path that does not exist or has an unsupported format raises
``argparse.ArgumentTypeError``; a file that exists but cannot be decoded
raises :class:`~mdoverlay.exceptions.ParsingError`.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Callable, Dict, Optional

import yaml

from mdoverlay.exceptions import ParsingError
from mdoverlay.options.render import RenderOptions

logger = logging.getLogger(__name__)

DEDICATED_CONFIG_FILENAMES = [".mdoverlay.toml", ".mdoverlay.yaml", ".mdoverlay.yml", ".mdoverlay.json"]
PYPROJECT_FILENAME = "pyproject.toml"
TOOL_TABLE = "mdoverlay"


def _read_toml(config_path: Path) -> Any:
    with open(config_path, "rb") as f:
        return tomllib.load(f)


def _read_yaml(config_path: Path) -> Any:
    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _read_json(config_path: Path) -> Any:
    with open(config_path, "r", encoding="utf-8") as f:
        return json.load(f)


_READERS: Dict[str, tuple[str, Callable[[Path], Any], tuple[type[Exception], ...]]] = {
    ".toml": ("TOML", _read_toml, (tomllib.TOMLDecodeError, UnicodeDecodeError)),
    ".yaml": ("YAML", _read_yaml, (yaml.YAMLError,)),
    ".yml": ("YAML", _read_yaml, (yaml.YAMLError,)),
    ".json": ("JSON", _read_json, (json.JSONDecodeError, UnicodeDecodeError)),
}


def _decode(config_path: Path, ext: str) -> Any:
    """Read a config file with the reader registered for ``ext``.

    Raises
    ------
    ParsingError
        If the content cannot be decoded or the file cannot be read

    """
    format_name, reader, decode_errors = _READERS[ext]
    try:
        return reader(config_path)
    except decode_errors as e:
        raise ParsingError(
            f"Invalid {format_name} in config file {config_path}: {e}", parsing_stage="config", original_error=e
        ) from e
    except OSError as e:
        raise ParsingError(
            f"Error reading config file {config_path}: {e}", parsing_stage="config", original_error=e
        ) from e


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.mdoverlay]`` table of a pyproject.toml, or an empty dict.

    Raises
    ------
    ParsingError
        If the file is not valid TOML or the section is not a table

    """
    data = _decode(pyproject_path, ".toml")
    section = data.get("tool", {}).get(TOOL_TABLE, {})
    if not isinstance(section, dict):
        raise ParsingError(
            f"[tool.{TOOL_TABLE}] section in {pyproject_path} must be a table, got {type(section).__name__}",
            parsing_stage="config",
        )
    return section


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest configuration file from ``start_dir`` up to the root.

    In each directory the dedicated files are checked first, in the order of
    ``DEDICATED_CONFIG_FILENAMES``; a ``pyproject.toml`` only counts when it
    has a non-empty ``[tool.mdoverlay]`` table. Unreadable pyproject files
    are skipped.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        The first config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    for directory in (current, *current.parents):
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = directory / filename
            if config_path.is_file():
                return config_path

        pyproject_path = directory / PYPROJECT_FILENAME
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ParsingError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Searches the working directory and its parents (see
    :func:`find_config_in_parents`), then the dedicated config files in the
    user's home directory.

    Returns
    -------
    Path or None
        Path to the discovered config file

    """
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in DEDICATED_CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary; empty for an empty YAML file or a
        pyproject.toml without a ``[tool.mdoverlay]`` table

    Raises
    ------
    argparse.ArgumentTypeError
        If the path does not exist, is not a file, or has an unsupported
        extension
    ParsingError
        If the file cannot be decoded or does not contain a mapping

    Examples
    --------
    Load a dedicated config file::

        config = load_config_file(".mdoverlay.toml")
        config.get("table_style")  # "normal"

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")
    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    if config_path.name.lower() == PYPROJECT_FILENAME:
        return _load_pyproject_section(config_path)

    ext = config_path.suffix.lower()
    if ext not in _READERS:
        raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .toml, .yaml, or .json")

    config = _decode(config_path, ext)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ParsingError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}",
            parsing_stage="config",
        )
    logger.debug("Loaded configuration from %s", config_path)
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively; lists and scalars replace.

    Examples
    --------
    >>> base = {'highlights': {'dash': 'LineNr', 'code': 'ColorColumn'}, 'table_style': 'full'}
    >>> override = {'highlights': {'code': 'CursorLine'}, 'table_style': 'normal'}
    >>> merge_configs(base, override)
    {'highlights': {'dash': 'LineNr', 'code': 'CursorLine'}, 'table_style': 'normal'}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):

    1. Explicit config file path (``--config``)
    2. Environment variable config path (``MDOVERLAY_CONFIG``)
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration dictionary (empty if no config was found)

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        logger.debug("Discovered configuration file %s", discovered_path)
        return load_config_file(discovered_path)

    return {}


def build_render_options(config: Dict[str, Any], overrides: Optional[Dict[str, Any]] = None) -> RenderOptions:
    """Turn loaded configuration plus command line overrides into options.

    Raises
    ------
    ConfigurationError
        If the merged configuration is invalid

    """
    return RenderOptions.from_dict(merge_configs(config, overrides or {}))


def get_config_search_paths() -> list[Path]:
    """Get representative paths of the configuration file search, in order.

    The actual search walks up from the working directory to the filesystem
    root; only the working directory is listed here.
    """
    cwd = Path.cwd()
    paths = [cwd / filename for filename in (*DEDICATED_CONFIG_FILENAMES, PYPROJECT_FILENAME)]
    home = Path.home()
    paths.extend(home / filename for filename in DEDICATED_CONFIG_FILENAMES)
    return paths


__all__ = [
    "build_render_options",
    "discover_config_file",
    "find_config_in_parents",
    "get_config_search_paths",
    "load_config_file",
    "load_config_with_priority",
    "merge_configs",
]
