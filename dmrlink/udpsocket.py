"""Non-blocking UDP socket with address lookup and matching."""

import errno
import logging
import select
import socket
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

_INADDR_NONE = "255.255.255.255"


class IPMatchType(Enum):
    """How much of two addresses must agree for them to match."""

    ADDRESS_AND_PORT = "address_and_port"
    ADDRESS_ONLY = "address_only"


@dataclass(frozen=True)
class SocketAddress:
    """A resolved IPv4 or IPv6 socket address."""

    family: int
    host: str
    port: int
    flowinfo: int = 0
    scope_id: int = 0

    @classmethod
    def from_sockaddr(cls, family: int, sockaddr: tuple) -> "SocketAddress":
        """Build from the tuple form used by the socket module."""
        if family == socket.AF_INET6:
            host, port, flowinfo, scope_id = sockaddr[:4]
            return cls(family, host, port, flowinfo, scope_id)
        host, port = sockaddr[:2]
        return cls(family, host, port)

    @property
    def sockaddr(self) -> tuple:
        """The tuple form used by the socket module."""
        if self.family == socket.AF_INET6:
            return (self.host, self.port, self.flowinfo, self.scope_id)
        return (self.host, self.port)

    @property
    def packed(self) -> Optional[bytes]:
        """The binary form of the host address, or None if it cannot be packed."""
        try:
            if self.family == socket.AF_INET:
                return socket.inet_pton(socket.AF_INET, self.host)
            if self.family == socket.AF_INET6:
                return socket.inet_pton(socket.AF_INET6, self.host.split("%", 1)[0])
        except OSError:
            return None
        return None


def lookup(hostname: str, port: int, family: int = socket.AF_UNSPEC, passive: bool = False) -> SocketAddress:
    """Resolve a host name and numeric port to the first matching address.

    An empty host name resolves to the wildcard address when passive,
    otherwise to the loopback address. Raises socket.gaierror on failure.
    """
    flags = socket.AI_NUMERICSERV
    if passive:
        flags |= socket.AI_PASSIVE
    try:
        results = socket.getaddrinfo(hostname or None, str(port), family, socket.SOCK_DGRAM, 0, flags)
    except socket.gaierror:
        logger.error("Cannot find address for host %s", hostname)
        raise
    found_family, _, _, _, sockaddr = results[0]
    return SocketAddress.from_sockaddr(found_family, sockaddr)


def match(addr1: SocketAddress, addr2: SocketAddress,
          match_type: IPMatchType = IPMatchType.ADDRESS_AND_PORT) -> bool:
    """Compare two addresses by host, and by port unless ADDRESS_ONLY."""
    if addr1.family != addr2.family:
        return False
    if addr1.family not in (socket.AF_INET, socket.AF_INET6):
        return False
    packed1 = addr1.packed
    if packed1 is None or packed1 != addr2.packed:
        return False
    if match_type is IPMatchType.ADDRESS_AND_PORT:
        return addr1.port == addr2.port
    return match_type is IPMatchType.ADDRESS_ONLY


def is_none(addr: SocketAddress) -> bool:
    """Return True for the IPv4 'no address' value 255.255.255.255."""
    return addr.family == socket.AF_INET and addr.packed == socket.inet_pton(socket.AF_INET, _INADDR_NONE)


class UDPSocket:
    """A UDP socket bound to a local address when a local port is given."""

    def __init__(self, address: str = "", port: int = 0) -> None:
        self.local_address = address
        self.local_port = port
        self._sock: Optional[socket.socket] = None
        self._family = socket.AF_UNSPEC

    @property
    def is_open(self) -> bool:
        return self._sock is not None

    def open(self, address: Optional[SocketAddress] = None) -> None:
        """Create the socket, using the family of the given address if any.

        Raises OSError if the local address is invalid or binding fails.
        """
        if self._sock is not None:
            raise RuntimeError("socket is already open")
        if address is not None:
            self._family = address.family

        try:
            local = lookup(self.local_address, self.local_port, self._family, passive=True)
        except socket.gaierror:
            logger.error("The local address is invalid - %s", self.local_address)
            raise
        self._family = local.family

        try:
            sock = socket.socket(self._family, socket.SOCK_DGRAM)
        except OSError as exc:
            logger.error("Cannot create the UDP socket, err: %s", exc.errno)
            raise

        if self.local_port > 0:
            try:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            except OSError as exc:
                logger.error("Cannot set the UDP socket option, err: %s", exc.errno)
                sock.close()
                raise
            try:
                sock.bind(local.sockaddr)
            except OSError as exc:
                logger.error("Cannot bind the UDP address, err: %s", exc.errno)
                sock.close()
                raise
            logger.info("Opening UDP port on %d", self.local_port)

        self._sock = sock

    def read(self, length: int) -> Optional[Tuple[bytes, SocketAddress]]:
        """Return one waiting datagram and its sender, or None if none is waiting."""
        if length <= 0:
            raise ValueError("length must be positive")
        if self._sock is None:
            return None

        try:
            readable, _, _ = select.select([self._sock], [], [], 0)
        except OSError as exc:
            logger.error("Error returned from UDP poll, err: %s", exc.errno)
            raise
        if not readable:
            return None

        try:
            data, sockaddr = self._sock.recvfrom(length)
        except OSError as exc:
            logger.error("Error returned from recvfrom, err: %s", exc.errno)
            if exc.errno == errno.ENOTSOCK:
                logger.info("Re-opening UDP port on %d", self.local_port)
                self.close()
                self.open()
            raise
        if not data:
            logger.error("Error returned from recvfrom, empty datagram")
            raise OSError("empty datagram received")

        return data, SocketAddress.from_sockaddr(self._sock.family, sockaddr)

    def write(self, data: bytes, address: SocketAddress) -> bool:
        """Send a datagram; return True if all of it was sent."""
        if not data:
            raise ValueError("data must not be empty")
        if self._sock is None:
            raise RuntimeError("socket is not open")
        try:
            sent = self._sock.sendto(data, address.sockaddr)
        except OSError as exc:
            logger.error("Error returned from sendto, err: %s", exc.errno)
            raise
        return sent == len(data)

    def close(self) -> None:
        """Close the socket if it is open."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> "UDPSocket":
        if self._sock is None:
            self.open()
        return self

    def __exit__(self, *args) -> None:
        self.close()