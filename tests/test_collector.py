"""Tests for the correlator and the collector buffer."""

from __future__ import annotations

import pytest

from notiscope.common.schemas import CollectedRequest, NotificationRecord
from notiscope.notifications.buffer import CollectorBuffer
from notiscope.notifications.correlator import Correlator


# --- Helpers ---


def _mail(to: list[str] | None, **data) -> NotificationRecord:
    return NotificationRecord(type="mail", to=to, data=data)


def _buffer(*records: NotificationRecord) -> CollectorBuffer:
    buffer = CollectorBuffer()
    for record in records:
        buffer.append(record)
    return buffer


# --- Buffer Tests ---


def test_buffer_append_and_last():
    buffer = CollectorBuffer()
    assert buffer.last is None
    first, second = _mail(["a@x.com"]), _mail(["b@x.com"])
    buffer.append(first)
    buffer.append(second)
    assert len(buffer) == 2
    assert buffer.last is second


def test_buffer_iterates_copies():
    record = _mail(["a@x.com"], cc=None)
    buffer = _buffer(record)
    copy = next(iter(buffer))
    copy.data["cc"] = ["changed@x.com"]
    assert record.data["cc"] is None


def test_drain_into_appends_in_order():
    request = CollectedRequest(notifications=[{"type": "existing"}])
    buffer = _buffer(_mail(["a@x.com"]), _mail(["b@x.com"]))
    buffer.drain_into(request)
    assert [n["type"] for n in request.notifications] == ["existing", "mail", "mail"]
    assert request.notifications[1]["to"] == ["a@x.com"]
    assert request.notifications[2]["to"] == ["b@x.com"]


def test_drain_copies_by_value():
    record = _mail(["a@x.com"], cc=None)
    request = CollectedRequest()
    _buffer(record).drain_into(request)
    request.notifications[0]["data"]["cc"] = "changed"
    assert record.data["cc"] is None


def test_reset_on_empty_buffer_is_noop():
    request = CollectedRequest(notifications=[{"type": "existing"}])
    buffer = CollectorBuffer()
    buffer.reset()
    buffer.drain_into(request)
    assert request.notifications == [{"type": "existing"}]


def test_reset_discards_records():
    buffer = _buffer(_mail(["a@x.com"]))
    buffer.reset()
    request = CollectedRequest()
    buffer.drain_into(request)
    assert request.notifications == []
    assert len(buffer) == 0


def test_merge_last_data_requires_records():
    with pytest.raises(IndexError):
        CollectorBuffer().merge_last_data({"a": 1})


# --- Correlator Tests ---


def test_merge_same_recipients():
    buffer = _buffer(_mail(["a@x.com", "b@x.com"], cc=["c@x.com"], mailable=None))
    incoming = _mail(["a@x.com", "b@x.com"], cc=None, notification={"id": 1})
    assert Correlator().merge(buffer, incoming) is True
    assert len(buffer) == 1
    assert buffer.last.data == {"cc": None, "mailable": None, "notification": {"id": 1}}


def test_no_merge_on_recipient_mismatch():
    buffer = _buffer(_mail(["a@x.com"], cc=None))
    assert Correlator().merge(buffer, _mail(["b@x.com"], notification={})) is False
    assert buffer.last.data == {"cc": None}


def test_no_merge_on_empty_buffer():
    assert Correlator().merge(CollectorBuffer(), _mail(["a@x.com"])) is False


def test_no_merge_into_non_mail_record():
    buffer = _buffer(NotificationRecord(type="slack", to="a@x.com"))
    assert Correlator().merge(buffer, _mail(["a@x.com"])) is False


def test_only_last_record_is_compared():
    buffer = _buffer(_mail(["a@x.com"]), _mail(["b@x.com"]))
    assert Correlator().merge(buffer, _mail(["a@x.com"], notification={})) is False


def test_join_formatting_must_match():
    buffer = _buffer(_mail(["Ann <a@x.com>"]))
    assert Correlator().merge(buffer, _mail(["a@x.com"])) is False
