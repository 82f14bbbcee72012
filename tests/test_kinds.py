"""Tests for value kind classification."""

from __future__ import annotations

import asyncio
import threading
from collections import OrderedDict
from concurrent.futures import Future
from decimal import Decimal

import pytest

from valtype import ConfigurationError, Kind, kind, kind_of
from valtype.validation.kinds import record_get, record_items


def _generator():
    yield 1


async def _coroutine():
    return 1


class Opaque:
    pass


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, Kind.NONE),
        (True, Kind.BOOLEAN),
        (False, Kind.BOOLEAN),
        (0, Kind.NUMBER),
        (2.5, Kind.NUMBER),
        (Decimal("1.5"), Kind.NUMBER),
        ("", Kind.STRING),
        ("text", Kind.STRING),
        ({}, Kind.RECORD),
        (OrderedDict(a=1), Kind.RECORD),
        ([1, 2], Kind.RECORD),
        ((1,), Kind.RECORD),
        (len, Kind.FUNCTION),
        (lambda: None, Kind.FUNCTION),
        (Opaque(), Kind.OPAQUE),
        (b"bytes", Kind.OPAQUE),
        ({1, 2}, Kind.OPAQUE),
    ],
)
def test_kind_of(value, expected):
    assert kind_of(value) is expected


def test_bool_is_not_a_number():
    assert kind_of(True) is not Kind.NUMBER


def test_concurrency_handles():
    assert kind_of(threading.Thread(target=lambda: None)) is Kind.CONCURRENT
    assert kind_of(Future()) is Kind.CONCURRENT

    gen = _generator()
    assert kind_of(gen) is Kind.CONCURRENT

    coro = _coroutine()
    try:
        assert kind_of(coro) is Kind.CONCURRENT
    finally:
        coro.close()


def test_asyncio_future_is_concurrent():
    loop = asyncio.new_event_loop()
    try:
        assert kind_of(loop.create_future()) is Kind.CONCURRENT
    finally:
        loop.close()


def test_kind_accepts_string_tag():
    assert kind("string").is_valid("x")
    assert not kind("string").is_valid(1)


def test_unknown_kind_is_configuration_error():
    with pytest.raises(ConfigurationError) as exc:
        kind("table")
    assert exc.value.argument == "kind"


# -- record access -----------------------------------------------------------


def test_record_items_uses_indices_for_sequences():
    assert list(record_items(["a", "b"])) == [(0, "a"), (1, "b")]
    assert list(record_items({"x": 1})) == [("x", 1)]


def test_record_get_missing_returns_none():
    assert record_get({"a": 1}, "b") is None
    assert record_get(["a"], 0) == "a"
    assert record_get(["a"], 5) is None
    assert record_get(["a"], "0") is None
