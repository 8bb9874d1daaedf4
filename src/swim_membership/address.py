"""Seed member addresses.

Provides ``SeedAddress``, the endpoint identifier listed in
``MembershipConfig.seed_members``, and ``parse_seed_address`` for the
``host:port`` strings found in configuration files.  Addresses are opaque to
the configuration: nothing here resolves or probes them.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class SeedAddress:
    """Network endpoint of a bootstrap peer.

    Ordered lexicographically by ``(host, port)``.

    Parameters
    ----------
    host : str
        Hostname or IP address of the peer.
    port : int
        Port the peer's membership protocol listens on.

    Examples
    --------
    >>> addr = SeedAddress(host="10.0.0.1", port=4801)
    >>> str(addr)
    '10.0.0.1:4801'
    >>> SeedAddress("a", 1) < SeedAddress("b", 1)
    True
    """

    host: str
    port: int

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SeedAddress):
            return NotImplemented
        return (self.host, self.port) < (other.host, other.port)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


def parse_seed_address(raw: str) -> SeedAddress:
    """Parse a ``host:port`` string into a ``SeedAddress``.

    Splits on the last colon, so a bracketed IPv6 host such as ``[::1]:4801``
    keeps ``[::1]`` as its host.

    Parameters
    ----------
    raw : str
        Address in ``host:port`` form.

    Returns
    -------
    SeedAddress

    Raises
    ------
    ValueError
        If *raw* has no colon, an empty host, or a non-integer port.

    Examples
    --------
    >>> parse_seed_address("127.0.0.1:4801")
    SeedAddress(host='127.0.0.1', port=4801)
    """
    if not isinstance(raw, str):
        msg = f"Invalid seed address, expected a 'host:port' string, got: {raw!r}"
        raise ValueError(msg)
    host, sep, port_str = raw.rpartition(":")
    if not sep or not host:
        msg = f"Invalid seed address, expected 'host:port', got: {raw!r}"
        raise ValueError(msg)
    try:
        port = int(port_str)
    except ValueError:
        msg = f"Invalid seed address port in {raw!r}: {port_str!r}"
        raise ValueError(msg) from None
    return SeedAddress(host=host, port=port)
