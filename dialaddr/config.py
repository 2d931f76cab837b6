"""YAML configuration file loading."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from dialaddr.resolver import FAMILIES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".dialaddr"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DialConfig:
    """Top-level configuration for the dialaddr tool.

    Every field has a default so the tool works without a config file.

    Attributes:
        prefer_family: Family picked when a lookup answers with both
            (``"ipv4"`` or ``"ipv6"``).
        static_hosts: Host name → list of IP strings answered without
            asking the system resolver.
        log_level: Name of the logging level for the CLI.
    """

    prefer_family: str = "ipv4"
    static_hosts: dict[str, list[str]] = field(default_factory=dict)
    log_level: str = "WARNING"


# Keys in the YAML file that map to DialConfig fields.
_YAML_KEY_TO_FIELD: dict[str, str] = {
    "prefer_family": "prefer_family",
    "static_hosts": "static_hosts",
    "log_level": "log_level",
}


def load_config(path: Path | str | None = None) -> DialConfig:
    """Load configuration from a YAML file.

    Args:
        path: Explicit path to a YAML config file.  If ``None``, the
            default location (``~/.dialaddr/config.yaml``) is tried.  If
            the default file doesn't exist, a ``DialConfig`` with all
            defaults is returned silently.

    Returns:
        A populated ``DialConfig`` instance.

    Raises:
        FileNotFoundError: If an explicit *path* was given but doesn't exist.
        ConfigError: If the file contains invalid YAML, has an unexpected
            top-level structure, or holds an invalid value.
    """
    resolved = _resolve_path(path)

    if resolved is None:
        logger.debug("No config file found; using defaults")
        return DialConfig()

    logger.debug("Loading config from %s", resolved)
    text = resolved.read_text(encoding="utf-8")

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {resolved}: {exc}") from exc

    if raw is None:
        # Empty file — treat as all-defaults.
        return DialConfig()

    if not isinstance(raw, dict):
        raise ConfigError(
            f"Expected a YAML mapping at the top level in {resolved}, "
            f"got {type(raw).__name__}"
        )

    return _build_config(raw, source=resolved)


class ConfigError(Exception):
    """Raised when a configuration file is malformed or unreadable."""


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------


def _resolve_path(path: Path | str | None) -> Path | None:
    """Return a concrete ``Path`` to read, or ``None`` if nothing to read.

    Raises:
        FileNotFoundError: If the caller supplied an explicit path that
            doesn't exist on disk.
    """
    if path is not None:
        p = Path(path).expanduser()
        if not p.is_file():
            raise FileNotFoundError(f"Config file not found: {p}")
        return p

    default = DEFAULT_CONFIG_PATH.expanduser()
    if default.is_file():
        return default
    return None


def _build_config(raw: dict, source: Path) -> DialConfig:
    """Map raw YAML dict to a ``DialConfig``, ignoring unknown keys."""
    kwargs: dict[str, object] = {}

    for yaml_key, field_name in _YAML_KEY_TO_FIELD.items():
        if yaml_key in raw:
            kwargs[field_name] = raw[yaml_key]

    unknown = set(raw) - set(_YAML_KEY_TO_FIELD)
    if unknown:
        logger.warning(
            "Ignoring unknown config keys in %s: %s",
            source,
            ", ".join(sorted(unknown)),
        )

    if "prefer_family" in kwargs:
        kwargs["prefer_family"] = _check_family(kwargs["prefer_family"], source)
    if "static_hosts" in kwargs:
        kwargs["static_hosts"] = _check_static_hosts(kwargs["static_hosts"], source)
    if "log_level" in kwargs:
        kwargs["log_level"] = _check_log_level(kwargs["log_level"], source)

    return DialConfig(**kwargs)


def _check_family(value: object, source: Path) -> str:
    family = str(value).lower()
    if family not in FAMILIES:
        raise ConfigError(
            f"prefer_family in {source} must be one of "
            f"{', '.join(FAMILIES)}, got {value!r}"
        )
    return family


def _check_static_hosts(value: object, source: Path) -> dict[str, list[str]]:
    """Validate the ``static_hosts`` table.

    A single address may be given as a bare string instead of a list.
    """
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(
            f"static_hosts in {source} must be a mapping, got {type(value).__name__}"
        )

    hosts: dict[str, list[str]] = {}
    for name, addrs in value.items():
        if isinstance(addrs, str):
            addrs = [addrs]
        if not isinstance(addrs, list) or not addrs:
            raise ConfigError(
                f"static_hosts[{name!r}] in {source} must be a non-empty list "
                f"of addresses"
            )
        hosts[str(name)] = [str(a) for a in addrs]
    return hosts


def _check_log_level(value: object, source: Path) -> str:
    level = str(value).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(
            f"log_level in {source} must be one of {', '.join(_LOG_LEVELS)}, "
            f"got {value!r}"
        )
    return level
