# truthlinked-auth
# Copyright (c) 2026 Truthlinked contributors
# SPDX-License-Identifier: MIT
"""constant_time_equal: equality, symmetry, length mismatch."""

from truthlinked_auth.security.compare import constant_time_equal


def test_equal_strings() -> None:
    assert constant_time_equal("test", "test") is True


def test_different_strings_same_length() -> None:
    assert constant_time_equal("test", "fail") is False


def test_different_lengths_false_regardless_of_prefix() -> None:
    assert constant_time_equal("test", "testing") is False
    assert constant_time_equal(b"", b"\x00") is False


def test_reflexive_and_symmetric() -> None:
    a, b = b"\x01\x02\x03", b"\x01\x02\x04"
    assert constant_time_equal(a, a)
    assert constant_time_equal(a, b) == constant_time_equal(b, a)


def test_mismatch_in_last_byte_detected() -> None:
    a = bytes(32)
    b = bytes(31) + b"\x01"
    assert constant_time_equal(a, b) is False


def test_text_and_bytes_compare_by_utf8() -> None:
    assert constant_time_equal("né", "né".encode("utf-8"))
    assert constant_time_equal(bytearray(b"abc"), memoryview(b"abc"))
