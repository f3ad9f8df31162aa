# src/task_calendar/core/result.py

from __future__ import annotations

"""
Explicit outcomes at the store/client boundary.

Reads and writes against the remote task store never raise for transport
problems. They return Ok(value) or Err(kind) and the caller decides whether
to degrade (see with_fallback).
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(StrEnum):
    # Request rejected, unreachable, 5xx, or an unparseable body.
    NETWORK_FAILURE = "network_failure"
    # Successful response that carried no tasks.
    EMPTY_RESULT = "empty_result"


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err:
    kind: ErrorKind
    detail: str = ""


def is_ok(result: Ok[T] | Err) -> bool:
    return isinstance(result, Ok)


def with_fallback(result: Ok[T] | Err, fallback: T) -> T:
    """Unwrap an Ok, or return `fallback` for any Err."""
    if isinstance(result, Ok):
        return result.value
    return fallback
