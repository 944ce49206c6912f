"""Tests for the value serializer."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from notiscope.helpers.serializer import Serializer
from notiscope.helpers.stack_trace import StackFrame


# --- Helpers ---


class User:
    def __init__(self, name: str, password: str) -> None:
        self.name = name
        self.password = password


@dataclass
class Invoice:
    number: str
    total: float


class Receipt(BaseModel):
    number: str
    api_key: str = "k"


@dataclass
class Exploding:
    value: int = 0

    def __getattribute__(self, name: str):
        if name == "value":
            raise RuntimeError("boom")
        return super().__getattribute__(name)


# --- Normalize ---


def test_scalars_pass_through():
    serializer = Serializer()
    assert serializer.normalize("a") == "a"
    assert serializer.normalize(3) == 3
    assert serializer.normalize(None) is None
    assert serializer.normalize(True) is True


def test_containers():
    serializer = Serializer()
    assert serializer.normalize({"a": (1, 2)}) == {"a": [1, 2]}
    assert serializer.normalize(b"raw") == "raw"


def test_object_with_class_marker_and_redaction():
    result = Serializer().normalize(User("ann", "hunter2"))
    assert result == {"__class__": "User", "name": "ann", "password": "*REMOVED*"}


def test_dataclass_and_pydantic_model():
    serializer = Serializer()
    assert serializer.normalize(Invoice("INV-1", 9.5)) == {
        "__class__": "Invoice", "number": "INV-1", "total": 9.5,
    }
    assert serializer.normalize(Receipt(number="R-1")) == {
        "__class__": "Receipt", "number": "R-1", "api_key": "*REMOVED*",
    }


def test_cycles_marked():
    node: dict = {"name": "root"}
    node["self"] = node
    result = Serializer().normalize(node)
    assert result == {"name": "root", "self": "*RECURSION*"}


def test_shared_reference_is_not_a_cycle():
    shared = {"x": 1}
    assert Serializer().normalize([shared, shared]) == [{"x": 1}, {"x": 1}]


def test_depth_limit():
    nested = {"a": {"b": {"c": {"d": 1}}}}
    result = Serializer(max_depth=2).normalize(nested)
    assert result == {"a": {"b": "*DEPTH*"}}


def test_custom_redact_keys():
    serializer = Serializer(redact_keys=("pin",))
    assert serializer.normalize({"PIN": 1234, "password": "x"}) == {"PIN": "*REMOVED*", "password": "x"}


# --- Normalize Each ---


def test_normalize_each_isolates_failures():
    result = Serializer().normalize_each({"ok": {"a": 1}, "bad": Exploding()})
    assert result["ok"] == {"a": 1}
    assert result["bad"] == {"__error__": "RuntimeError: boom"}


# --- Traces ---


def test_shorten_trace():
    frames = [
        StackFrame(file="/app/mail.py", line=3, function="send"),
        StackFrame(file="welcome.html", line=7, function="root", view="welcome.html"),
    ]
    assert Serializer().shorten_trace(frames) == [
        {"call": "send()", "file": "/app/mail.py", "line": 3},
        {"call": "root()", "file": "welcome.html", "line": 7, "view": "welcome.html"},
    ]
