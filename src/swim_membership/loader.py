"""TOML loading for ``MembershipConfig``.

Provides ``load_config`` / ``discover_config`` for reading the ``[membership]``
table of a ``membership.toml`` file, and ``config_from_mapping`` for callers
that already hold the parsed table (e.g. embedded in a larger config file).

Values are applied on top of a preset through the regular ``with_*``
mutators; no range checks are made.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TypeAlias

from swim_membership.address import parse_seed_address
from swim_membership.config import MembershipConfig, NetworkProfile


__all__ = [
    "CONFIG_FILENAME",
    "config_from_mapping",
    "discover_config",
    "load_config",
]

CONFIG_FILENAME = "membership.toml"

logger = logging.getLogger("swim_membership.loader")


_Setter: TypeAlias = Callable[[MembershipConfig, Any], MembershipConfig]


def _apply_seed_members(cfg: MembershipConfig, value: Any) -> MembershipConfig:
    if not isinstance(value, (list, tuple)):
        msg = f"seed_members must be a list of 'host:port' strings, got: {value!r}"
        raise ValueError(msg)
    return cfg.with_seed_member_list(parse_seed_address(s) for s in value)


_SETTERS: dict[str, _Setter] = {
    "seed_members": _apply_seed_members,
    "sync_interval": MembershipConfig.with_sync_interval,
    "sync_timeout": MembershipConfig.with_sync_timeout,
    "suspicion_mult": MembershipConfig.with_suspicion_mult,
    "removed_members_history_size": MembershipConfig.with_removed_members_history_size,
    "namespace": MembershipConfig.with_namespace,
}


def config_from_mapping(raw: Mapping[str, Any]) -> MembershipConfig:
    """Build a ``MembershipConfig`` from a parsed ``[membership]`` table.

    The optional ``profile`` key (``"lan"``, ``"wan"`` or ``"local"``,
    default ``"lan"``) selects the starting preset; every other key overrides
    the matching field.

    Parameters
    ----------
    raw : Mapping[str, Any]
        Parsed table.  ``seed_members`` is a list of ``host:port`` strings.

    Returns
    -------
    MembershipConfig

    Raises
    ------
    ValueError
        If *raw* is not a table, or on unknown keys, an unknown profile, or
        malformed seed members.

    Examples
    --------
    >>> cfg = config_from_mapping({"profile": "wan", "namespace": "orders"})
    >>> cfg.sync_interval, cfg.namespace
    (60000, 'orders')
    """
    if not isinstance(raw, Mapping):
        msg = f"Membership config must be a table, got: {raw!r}"
        raise ValueError(msg)

    unknown = sorted(set(raw) - set(_SETTERS) - {"profile"})
    if unknown:
        msg = f"Unknown membership config keys: {', '.join(unknown)}"
        raise ValueError(msg)

    profile = str(raw.get("profile", NetworkProfile.lan.value))
    config = MembershipConfig.for_profile(profile)

    for key, setter in _SETTERS.items():
        if key in raw:
            config = setter(config, raw[key])
    return config


def discover_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for ``membership.toml``.

    Parameters
    ----------
    start : Path | None
        Directory to start searching from.

    Returns
    -------
    Path | None
        Path to the discovered config file, or ``None`` if not found.
    """
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(path: Path | None = None) -> MembershipConfig:
    """Load a ``MembershipConfig`` from a TOML file.

    If *path* is ``None``, auto-discovers ``membership.toml`` by walking up
    from the current working directory.  Returns the default config if no
    file is found.

    Parameters
    ----------
    path : Path | None
        Explicit path to a TOML config file.

    Returns
    -------
    MembershipConfig

    Raises
    ------
    FileNotFoundError
        If an explicit *path* is given but does not exist.
    ValueError
        If the ``[membership]`` table is invalid.

    Examples
    --------
    >>> config = load_config(Path("membership.toml"))
    >>> config.namespace
    'default'
    """
    if path is None:
        discovered = discover_config()
        if discovered is None:
            logger.debug("No %s found, using defaults", CONFIG_FILENAME)
            return MembershipConfig.default()
        path = discovered

    if not path.exists():
        msg = f"Config file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        raw = tomllib.load(f)

    logger.debug("Loading membership config from %s", path)
    config = config_from_mapping(raw.get("membership", {}))
    logger.info("Membership config: %r", config)
    return config
