"""Argument guards used at the top of every endpoint method.

All guards raise ValueError naming the offending parameter.
"""

from collections.abc import Sized
from typing import Any


def not_none(value: Any, name: str) -> None:
    if value is None:
        raise ValueError(f"{name} must not be None")


def not_blank(value: Any, name: str) -> None:
    """Require a non-empty, non-whitespace string."""
    not_none(value, name)
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise ValueError(f"{name} must not be empty")


def not_empty(value: Any, name: str) -> None:
    """Require a non-empty collection."""
    not_none(value, name)
    if isinstance(value, Sized) and len(value) == 0:
        raise ValueError(f"{name} must not be empty")


def positive(value: Any, name: str) -> None:
    not_none(value, name)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def workflow_ref(workflow_id: int | str, name: str = "workflow_id") -> str:
    """Validate a workflow id (int) or workflow file name (str) for URL use."""
    if isinstance(workflow_id, str):
        not_blank(workflow_id, name)
        return workflow_id
    positive(workflow_id, name)
    return str(workflow_id)
