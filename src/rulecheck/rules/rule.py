# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Rule contract.

A rule is anything exposing ``code``, ``message`` and ``validate(value) -> bool``.
``BaseRule`` is the frozen dataclass the built-in rules share; custom rules
only need to satisfy the ``Rule`` protocol.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, runtime_checkable

__all__ = ("BaseRule", "Rule", "StringRule")

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Rule(Protocol[T_contra]):
    """Named predicate over a single value type.

    Attributes:
        code: Stable identifier, unique within one validator invocation.
        message: Caller-supplied text reported when the rule fails.
    """

    @property
    def code(self) -> str: ...

    @property
    def message(self) -> str | None: ...

    def validate(self, value: T_contra) -> bool: ...


@dataclass(frozen=True, slots=True, kw_only=True)
class BaseRule(ABC, Generic[T]):
    """Immutable rule base. Subclasses declare a default ``code``.

    Equality is by kind and configuration, so two ``MinimumLength(length=8)``
    rules compare equal.
    """

    code: str
    message: str | None = None

    @abstractmethod
    def validate(self, value: T) -> bool:
        """Return True when ``value`` satisfies the rule."""


class StringRule:
    """Marker for rules over ``str``; required by ``StringValidator``."""

    __slots__ = ()
