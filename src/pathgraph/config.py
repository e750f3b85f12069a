"""Configuration management for algorithm and graph defaults."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf

from .exceptions import ConfigurationError
from .logger import set_level

__all__ = ["Config", "DEFAULTS", "configure", "get_config", "reset"]


DEFAULTS: dict[str, dict[str, Any]] = {
    "grid": {"diagonals": True, "weight": 1},
    "pathways": {"cache_size": 1024},
    "topology": {"recursive": False},
    "parsing": {"directed": False, "default_weight": 1},
    "logging": {"level": "INFO"},
}


class Config:
    """Store library defaults using OmegaConf.

    User values are merged over :data:`DEFAULTS`, so a partial mapping such as
    ``{"grid": {"diagonals": False}}`` keeps every other default intact.
    """

    def __init__(
        self,
        mapping: Mapping[str, Any] | DictConfig | str | Path | None = None,
    ) -> None:
        """Create a configuration.

        Parameters
        ----------
        mapping:
            Initial configuration data, an existing ``DictConfig`` or the path
            of a YAML file.
        """
        if isinstance(mapping, (str, Path)):
            try:
                user = OmegaConf.load(str(mapping))
            except Exception as e:
                raise ConfigurationError(f"Failed to load config from {mapping}: {e}") from e
        else:
            user = OmegaConf.create(mapping or {})
        if not OmegaConf.is_dict(user):
            raise ConfigurationError(f"Config root must be a mapping, got {type(mapping).__name__}")
        try:
            merged = OmegaConf.merge(OmegaConf.create(DEFAULTS), user)
        except Exception as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
        object.__setattr__(self, "_conf", merged)

    def __getattr__(self, name: str) -> Any:
        """Allow attribute-style access to config values."""
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")
        try:
            return self._conf[name]
        except (KeyError, TypeError):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        """Allow attribute-style setting of config values."""
        if name.startswith("_"):
            object.__setattr__(self, name, value)
        else:
            self._conf[name] = value

    def select(self, key: str, default: Any = None) -> Any:
        """Return the value at dotted ``key`` or ``default``."""
        return OmegaConf.select(self._conf, key, default=default)

    def to_dict(self) -> dict[str, Any]:
        return OmegaConf.to_container(self._conf, resolve=True)  # type: ignore[return-value]


_config: Config | None = None
_config_lock = threading.Lock()


def get_config() -> Config:
    """Get the process-wide configuration, creating defaults on first use."""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = Config()
    return _config


def configure(
    mapping: Mapping[str, Any] | DictConfig | str | Path | Config | None = None,
    **overrides: Any,
) -> Config:
    """Install the process-wide configuration and apply its logging level.

    Parameters
    ----------
    mapping:
        A :class:`Config`, mapping, ``DictConfig`` or YAML path.
    **overrides:
        Top-level sections merged over ``mapping``, e.g.
        ``configure(grid={"diagonals": False})``.

    Returns
    -------
    Config
        The installed configuration.
    """
    global _config
    cfg = mapping if isinstance(mapping, Config) else Config(mapping)
    if overrides:
        cfg = Config(OmegaConf.merge(cfg._conf, OmegaConf.create(overrides)))
    with _config_lock:
        _config = cfg
    set_level(cfg.select("logging.level", "INFO"))
    return cfg


def reset() -> None:
    """Restore the default configuration. Primarily for testing."""
    global _config
    with _config_lock:
        _config = None
    set_level(DEFAULTS["logging"]["level"])
