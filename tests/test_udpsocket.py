import socket
import time

import pytest

from dmrlink.udpsocket import (
    IPMatchType,
    SocketAddress,
    UDPSocket,
    is_none,
    lookup,
    match,
)


def _free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as probe:
        probe.bind(("127.0.0.1", 0))
        return probe.getsockname()[1]


def _read_with_retry(sock, length, attempts=200):
    for _ in range(attempts):
        result = sock.read(length)
        if result is not None:
            return result
        time.sleep(0.01)
    return None


def test_lookup_numeric_ipv4():
    addr = lookup("127.0.0.1", 62031)
    assert addr.family == socket.AF_INET
    assert addr.host == "127.0.0.1"
    assert addr.port == 62031


def test_lookup_passive_empty_host_ipv4_is_wildcard():
    addr = lookup("", 4000, socket.AF_INET, passive=True)
    assert addr.host == "0.0.0.0"
    assert addr.port == 4000


def test_lookup_unknown_host_raises():
    with pytest.raises(socket.gaierror):
        lookup("no-such-host.invalid", 1000)


def test_sockaddr_round_trip_ipv4():
    addr = SocketAddress(socket.AF_INET, "10.1.2.3", 5000)
    assert SocketAddress.from_sockaddr(socket.AF_INET, addr.sockaddr) == addr


def test_sockaddr_round_trip_ipv6():
    addr = SocketAddress(socket.AF_INET6, "::1", 5000, 0, 0)
    assert addr.sockaddr == ("::1", 5000, 0, 0)
    assert SocketAddress.from_sockaddr(socket.AF_INET6, addr.sockaddr) == addr


def test_match_address_and_port():
    a = SocketAddress(socket.AF_INET, "192.0.2.1", 62031)
    b = SocketAddress(socket.AF_INET, "192.0.2.1", 62031)
    c = SocketAddress(socket.AF_INET, "192.0.2.1", 62032)
    assert match(a, b) is True
    assert match(a, c) is False
    assert match(a, c, IPMatchType.ADDRESS_AND_PORT) is False


def test_match_address_only_ignores_port():
    a = SocketAddress(socket.AF_INET, "192.0.2.1", 1)
    b = SocketAddress(socket.AF_INET, "192.0.2.1", 2)
    c = SocketAddress(socket.AF_INET, "192.0.2.9", 1)
    assert match(a, b, IPMatchType.ADDRESS_ONLY) is True
    assert match(a, c, IPMatchType.ADDRESS_ONLY) is False


def test_match_ipv6_compares_binary_form():
    a = SocketAddress(socket.AF_INET6, "::1", 10)
    b = SocketAddress(socket.AF_INET6, "0:0:0:0:0:0:0:1", 10)
    assert match(a, b) is True


def test_match_different_families_never_match():
    a = SocketAddress(socket.AF_INET, "127.0.0.1", 10)
    b = SocketAddress(socket.AF_INET6, "::1", 10)
    assert match(a, b) is False
    assert match(a, b, IPMatchType.ADDRESS_ONLY) is False


def test_is_none():
    assert is_none(SocketAddress(socket.AF_INET, "255.255.255.255", 0)) is True
    assert is_none(SocketAddress(socket.AF_INET, "127.0.0.1", 0)) is False
    assert is_none(SocketAddress(socket.AF_INET6, "::1", 0)) is False


def test_send_and_receive_over_loopback():
    port = _free_port()
    receiver = UDPSocket("127.0.0.1", port)
    sender = UDPSocket("127.0.0.1")
    receiver.open()
    sender.open()
    try:
        target = lookup("127.0.0.1", port)
        assert sender.write(b"DMRD-frame", target) is True
        result = _read_with_retry(receiver, 500)
        assert result is not None
        data, source = result
        assert data == b"DMRD-frame"
        assert source.host == "127.0.0.1"
        assert source.family == socket.AF_INET
    finally:
        sender.close()
        receiver.close()


def test_reply_reaches_original_sender():
    port_a = _free_port()
    port_b = _free_port()
    with UDPSocket("127.0.0.1", port_a) as a, UDPSocket("127.0.0.1", port_b) as b:
        assert a.write(b"ping", lookup("127.0.0.1", port_b))
        data, source = _read_with_retry(b, 100)
        assert data == b"ping"
        assert match(source, lookup("127.0.0.1", port_a))
        assert b.write(b"pong", source)
        reply, _ = _read_with_retry(a, 100)
        assert reply == b"pong"


def test_read_with_nothing_waiting_returns_none():
    with UDPSocket("127.0.0.1", _free_port()) as sock:
        assert sock.read(100) is None


def test_read_truncates_to_length():
    port = _free_port()
    with UDPSocket("127.0.0.1", port) as receiver, UDPSocket("127.0.0.1") as sender:
        sender.write(b"abcdefgh", lookup("127.0.0.1", port))
        data, _ = _read_with_retry(receiver, 3)
        assert data == b"abc"


def test_read_on_closed_socket_returns_none():
    sock = UDPSocket("127.0.0.1", 0)
    assert sock.read(10) is None


def test_write_on_closed_socket_raises():
    sock = UDPSocket("127.0.0.1")
    with pytest.raises(RuntimeError):
        sock.write(b"x", SocketAddress(socket.AF_INET, "127.0.0.1", 9))


def test_write_empty_data_raises():
    with UDPSocket("127.0.0.1") as sock:
        with pytest.raises(ValueError):
            sock.write(b"", SocketAddress(socket.AF_INET, "127.0.0.1", 9))


def test_open_twice_raises():
    sock = UDPSocket("127.0.0.1")
    sock.open()
    try:
        with pytest.raises(RuntimeError):
            sock.open()
    finally:
        sock.close()


def test_open_with_invalid_local_address_raises():
    sock = UDPSocket("no-such-host.invalid", 0)
    with pytest.raises(socket.gaierror):
        sock.open()
    assert sock.is_open is False


def test_context_manager_closes_socket():
    with UDPSocket("127.0.0.1") as sock:
        assert sock.is_open is True
    assert sock.is_open is False


def test_open_follows_family_of_given_address():
    sock = UDPSocket("", 0)
    sock.open(SocketAddress(socket.AF_INET, "127.0.0.1", 1))
    try:
        assert sock.is_open is True
        assert sock.write(b"x", SocketAddress(socket.AF_INET, "127.0.0.1", _free_port())) is True
    finally:
        sock.close()