"""Base classes for render configuration values.

This module defines the foundation shared by every configuration dataclass
in mdoverlay: frozen instances that can be cloned with changes, converted to
plain data, and rebuilt from (possibly partial) plain data.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, is_dataclass, replace
from typing import Any, ClassVar, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdoverlay.exceptions import ConfigurationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


def _freeze(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(value)
    if isinstance(value, Mapping):
        return dict(value)
    return value


def _thaw(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: _thaw(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    return value


@dataclass(frozen=True)
class BaseOptions(CloneFrozenMixin):
    """Base class for configuration sections.

    Subclasses list the fields holding nested sections in ``_nested`` so that
    :meth:`from_dict` can rebuild the whole tree from plain data.

    Notes
    -----
    Validation belongs in ``__post_init__`` and must raise
    :class:`~mdoverlay.exceptions.ConfigurationError`, so that an invalid
    configuration is rejected before any render pass begins.

    """

    _nested: ClassVar[dict[str, type]] = {}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None = None, _path: str = "") -> Self:
        """Build an instance from plain data, keeping defaults for missing keys.

        Nested sections are merged key by key; lists and scalars replace the
        default value.

        Parameters
        ----------
        data : Mapping[str, Any], optional
            Plain configuration data (e.g. loaded from TOML or YAML)

        Returns
        -------
        Self
            The validated configuration value

        Raises
        ------
        ConfigurationError
            If ``data`` contains unknown keys or invalid values

        """
        data = data or {}
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Configuration section '{_path or cls.__name__}' must be a mapping, got {type(data).__name__}",
                parameter_name=_path or None,
                parameter_value=data,
            )

        known = {f.name for f in fields(cls) if f.init}
        unknown = sorted(set(data) - known)
        if unknown:
            prefix = f"{_path}." if _path else ""
            raise ConfigurationError(
                f"Unknown configuration option(s): {', '.join(prefix + key for key in unknown)}",
                parameter_name=prefix + unknown[0],
                parameter_value=data[unknown[0]],
            )

        defaults = cls()
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            path = f"{_path}.{key}" if _path else key
            nested_cls = cls._nested.get(key)
            if nested_cls is not None:
                kwargs[key] = nested_cls.from_dict(value, _path=path)
            elif isinstance(value, Mapping) and isinstance(getattr(defaults, key), Mapping):
                kwargs[key] = {**getattr(defaults, key), **value}
            else:
                kwargs[key] = _freeze(value)

        try:
            return cls(**kwargs)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration for '{_path or cls.__name__}': {e}", original_error=e) from e

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to plain, JSON compatible data."""
        return _thaw(self)


__all__ = ["CloneFrozenMixin", "BaseOptions"]
