from swim_membership.address import SeedAddress, parse_seed_address
from swim_membership.cluster_math import ceil_log2, suspicion_timeout
from swim_membership.config import (
    DEFAULT_LOCAL_SUSPICION_MULT,
    DEFAULT_LOCAL_SYNC_INTERVAL,
    DEFAULT_NAMESPACE,
    DEFAULT_REMOVED_MEMBERS_HISTORY_SIZE,
    DEFAULT_SUSPICION_MULT,
    DEFAULT_SYNC_INTERVAL,
    DEFAULT_SYNC_TIMEOUT,
    DEFAULT_WAN_SUSPICION_MULT,
    DEFAULT_WAN_SYNC_INTERVAL,
    MembershipConfig,
    NetworkProfile,
    default_config,
    default_lan_config,
    default_local_config,
    default_wan_config,
)
from swim_membership.loader import (
    CONFIG_FILENAME,
    config_from_mapping,
    discover_config,
    load_config,
)

__all__ = [
    "CONFIG_FILENAME",
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
    "SeedAddress",
    "ceil_log2",
    "config_from_mapping",
    "default_config",
    "default_lan_config",
    "default_local_config",
    "default_wan_config",
    "discover_config",
    "load_config",
    "parse_seed_address",
    "suspicion_timeout",
]
