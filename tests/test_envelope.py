"""Tests for the TTL envelope codec."""

import pytest

from file_store import envelope


class ExpireSpy:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest.fixture
def spy():
    return ExpireSpy()


def test_encode_without_expiry_is_identity():
    assert envelope.encode(b'{"a":1}') == b'{"a":1}'


def test_encode_with_expiry():
    assert envelope.encode(b"payload", 1700000000) == b"#^e:1700000000\npayload"


def test_decode_plain_payload(spy):
    assert envelope.decode(b"[1,2]", 100, spy) == b"[1,2]"
    assert spy.calls == 0


def test_decode_live_entry(spy):
    assert envelope.decode(b"#^e:200\nrest\nof payload", 100, spy) == b"rest\nof payload"
    assert spy.calls == 0


def test_decode_expired_entry(spy):
    assert envelope.decode(b"#^e:99\npayload", 100, spy) is None
    assert spy.calls == 1


def test_decode_at_exact_timestamp_is_live(spy):
    assert envelope.decode(b"#^e:100\npayload", 100, spy) == b"payload"
    assert spy.calls == 0


def test_decode_marker_without_newline(spy):
    assert envelope.decode(b"#^e:200", 100, spy) == b""
    assert spy.calls == 0


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        (b"#^e:1700000000\n", 1700000000),
        (b"#^e:42", 42),
        (b"#^e: 42\n", 42),
        (b"#^e:-5\n", -5),
        (b"#^e:12abc\n", 12),
        (b"#^e:abc\n", 0),
        (b"#^e:\n", 0),
        (b'{"a":1}', None),
        (b"", None),
    ],
)
def test_read_expiry(line, expected):
    assert envelope.read_expiry(line) == expected


def test_is_expired_is_strict():
    assert envelope.is_expired(99, 100)
    assert not envelope.is_expired(100, 100)
    assert not envelope.is_expired(101, 100)
