"""Serializer and stack trace collaborators used by the data sources."""

from notiscope.helpers.serializer import Serializer
from notiscope.helpers.stack_trace import StackFrame, StackTrace

__all__ = ["Serializer", "StackFrame", "StackTrace"]
