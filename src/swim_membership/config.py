"""Membership protocol configuration.

Provides ``MembershipConfig``, an immutable set of tuning parameters for
SWIM-style cluster membership (sync rounds, suspicion timeouts, removed-member
history), together with presets for LAN, WAN and local loopback clusters.

Every ``with_*`` method returns a new instance; the receiver is never
modified, so a config can be shared freely between threads and protocol
engines.  Values are not range-checked here: the consuming engine is
responsible for rejecting settings it cannot run with.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

from swim_membership.address import SeedAddress
from swim_membership.cluster_math import suspicion_timeout


__all__ = [
    "DEFAULT_LOCAL_SUSPICION_MULT",
    "DEFAULT_LOCAL_SYNC_INTERVAL",
    "DEFAULT_NAMESPACE",
    "DEFAULT_REMOVED_MEMBERS_HISTORY_SIZE",
    "DEFAULT_SUSPICION_MULT",
    "DEFAULT_SYNC_INTERVAL",
    "DEFAULT_SYNC_TIMEOUT",
    "DEFAULT_WAN_SUSPICION_MULT",
    "DEFAULT_WAN_SYNC_INTERVAL",
    "MembershipConfig",
    "NetworkProfile",
    "default_config",
    "default_lan_config",
    "default_local_config",
    "default_wan_config",
]


# LAN (default)
DEFAULT_SYNC_INTERVAL = 30_000
DEFAULT_SYNC_TIMEOUT = 3_000
DEFAULT_SUSPICION_MULT = 5
DEFAULT_REMOVED_MEMBERS_HISTORY_SIZE = 42
DEFAULT_NAMESPACE = "default"

# WAN, applied on top of the defaults
DEFAULT_WAN_SUSPICION_MULT = 6
DEFAULT_WAN_SYNC_INTERVAL = 60_000

# Local loopback, applied on top of the defaults
DEFAULT_LOCAL_SUSPICION_MULT = 3
DEFAULT_LOCAL_SYNC_INTERVAL = 15_000


class NetworkProfile(Enum):
    """Deployment topology selecting a preset.

    Examples
    --------
    >>> NetworkProfile("wan")
    <NetworkProfile.wan: 'wan'>
    """

    lan = "lan"
    wan = "wan"
    local = "local"


@dataclass(frozen=True)
class MembershipConfig:
    """Tuning parameters for the membership protocol.

    All durations are in milliseconds.

    Parameters
    ----------
    seed_members : tuple[SeedAddress, ...]
        Bootstrap peers contacted to join the cluster.  Order and duplicates
        are preserved; any iterable is copied into a tuple.
    sync_interval : int
        Period between full membership synchronization rounds.
    sync_timeout : int
        Response deadline for a single synchronization round.
    suspicion_mult : int
        Multiplier applied to the probe interval to compute the suspicion
        timeout before a member is declared dead.
    removed_members_history_size : int
        Number of recently removed members remembered to suppress duplicate
        removal events.
    namespace : str
        Logical cluster name scoping gossip messages.

    Examples
    --------
    >>> cfg = MembershipConfig.default().with_namespace("orders")
    >>> cfg.namespace, cfg.sync_interval
    ('orders', 30000)
    >>> MembershipConfig.wan().suspicion_mult
    6
    """

    seed_members: tuple[SeedAddress, ...] = ()
    sync_interval: int = DEFAULT_SYNC_INTERVAL
    sync_timeout: int = DEFAULT_SYNC_TIMEOUT
    suspicion_mult: int = DEFAULT_SUSPICION_MULT
    removed_members_history_size: int = DEFAULT_REMOVED_MEMBERS_HISTORY_SIZE
    namespace: str = DEFAULT_NAMESPACE

    def __post_init__(self) -> None:
        # Frozen: bypass __setattr__ to store our own copy of the seeds.
        object.__setattr__(self, "seed_members", tuple(self.seed_members))

    # --- presets ---

    @staticmethod
    def default() -> MembershipConfig:
        """All parameters at their defaults (tuned for a LAN)."""
        return MembershipConfig()

    @staticmethod
    def lan() -> MembershipConfig:
        """Settings for a cluster on a local area network.

        Same as ``default()``; the defaults are LAN-tuned.
        """
        return MembershipConfig.default()

    @staticmethod
    def wan() -> MembershipConfig:
        """Settings for a cluster spanning a wide area network.

        Slower sync rounds and a longer suspicion window to tolerate higher
        latency and packet loss.
        """
        return (
            MembershipConfig.default()
            .with_suspicion_mult(DEFAULT_WAN_SUSPICION_MULT)
            .with_sync_interval(DEFAULT_WAN_SYNC_INTERVAL)
        )

    @staticmethod
    def local() -> MembershipConfig:
        """Settings for a cluster running over the loopback interface.

        Faster sync rounds and a shorter suspicion window.
        """
        return (
            MembershipConfig.default()
            .with_suspicion_mult(DEFAULT_LOCAL_SUSPICION_MULT)
            .with_sync_interval(DEFAULT_LOCAL_SYNC_INTERVAL)
        )

    @staticmethod
    def for_profile(profile: NetworkProfile | str) -> MembershipConfig:
        """Return the preset for *profile*.

        Parameters
        ----------
        profile : NetworkProfile | str
            A ``NetworkProfile`` or its name (case-insensitive).

        Returns
        -------
        MembershipConfig

        Raises
        ------
        ValueError
            If *profile* is neither a ``NetworkProfile`` nor the name of one.

        Examples
        --------
        >>> MembershipConfig.for_profile("LOCAL") == MembershipConfig.local()
        True
        """
        if isinstance(profile, str):
            try:
                profile = NetworkProfile(profile.lower())
            except ValueError:
                known = ", ".join(p.value for p in NetworkProfile)
                msg = f"Unknown network profile {profile!r}, expected one of: {known}"
                raise ValueError(msg) from None

        match profile:
            case NetworkProfile.lan:
                return MembershipConfig.lan()
            case NetworkProfile.wan:
                return MembershipConfig.wan()
            case NetworkProfile.local:
                return MembershipConfig.local()
            case _:
                msg = f"Unknown network profile {profile!r}"
                raise ValueError(msg)

    # --- copy-on-write mutators ---

    def with_seed_members(self, *seed_members: SeedAddress) -> MembershipConfig:
        """Return a copy with the given seed members."""
        return self.with_seed_member_list(seed_members)

    def with_seed_member_list(
        self, seed_members: Iterable[SeedAddress]
    ) -> MembershipConfig:
        """Return a copy whose seeds are a snapshot of *seed_members*.

        Later changes to the caller's list are not seen by the copy.
        """
        return replace(self, seed_members=tuple(seed_members))

    def with_sync_interval(self, sync_interval: int) -> MembershipConfig:
        """Return a copy with updated sync interval."""
        return replace(self, sync_interval=sync_interval)

    def with_sync_timeout(self, sync_timeout: int) -> MembershipConfig:
        """Return a copy with updated sync timeout."""
        return replace(self, sync_timeout=sync_timeout)

    def with_suspicion_mult(self, suspicion_mult: int) -> MembershipConfig:
        """Return a copy with updated suspicion multiplier."""
        return replace(self, suspicion_mult=suspicion_mult)

    def with_namespace(self, namespace: str) -> MembershipConfig:
        """Return a copy with updated namespace."""
        return replace(self, namespace=namespace)

    def with_removed_members_history_size(
        self, removed_members_history_size: int
    ) -> MembershipConfig:
        """Return a copy with updated removed-members history size."""
        return replace(
            self, removed_members_history_size=removed_members_history_size
        )

    # --- derived values ---

    def suspicion_timeout(self, cluster_size: int, ping_interval: int) -> int:
        """Suspicion timeout (ms) for a cluster of *cluster_size* members.

        Parameters
        ----------
        cluster_size : int
            Number of known members, including the local one.
        ping_interval : int
            Failure detector probe period (ms).

        Returns
        -------
        int

        Examples
        --------
        >>> MembershipConfig.default().suspicion_timeout(8, 1000)
        15000
        """
        return suspicion_timeout(self.suspicion_mult, cluster_size, ping_interval)


def default_config() -> MembershipConfig:
    return MembershipConfig.default()


def default_lan_config() -> MembershipConfig:
    return MembershipConfig.lan()


def default_wan_config() -> MembershipConfig:
    return MembershipConfig.wan()


def default_local_config() -> MembershipConfig:
    return MembershipConfig.local()
