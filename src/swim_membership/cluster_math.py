"""Timeout arithmetic derived from membership settings."""

from __future__ import annotations


def ceil_log2(n: int) -> int:
    """Return the smallest ``k`` such that ``2 ** k >= n``.

    Returns 0 for ``n <= 1``.

    Examples
    --------
    >>> ceil_log2(1), ceil_log2(2), ceil_log2(5), ceil_log2(8)
    (0, 1, 3, 3)
    """
    if n <= 1:
        return 0
    return (n - 1).bit_length()


def suspicion_timeout(suspicion_mult: int, cluster_size: int, ping_interval: int) -> int:
    """Dwell time (ms) before a suspected member is declared dead.

    Grows with ``log2`` of the cluster size so that a suspicion has time to
    reach every member before it expires.  No bounds are checked; a
    single-member cluster gives 0.

    Parameters
    ----------
    suspicion_mult : int
        Configured suspicion multiplier.
    cluster_size : int
        Number of known members, including the local one.
    ping_interval : int
        Failure detector probe period (ms).

    Returns
    -------
    int

    Examples
    --------
    >>> suspicion_timeout(5, 8, 1000)
    15000
    """
    return suspicion_mult * ceil_log2(cluster_size) * ping_interval
