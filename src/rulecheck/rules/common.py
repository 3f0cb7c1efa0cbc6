# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Collection and equality rules.

The generic rules work on any ``Sized`` value (str, list, dict, set, ...).
The ``String*`` variants are the same predicates marked for ``StringValidator``.
"""

from __future__ import annotations

from collections.abc import Sized
from dataclasses import dataclass
from typing import Any, TypeVar

from rulecheck.errors import ContractViolationError

from .rule import BaseRule, StringRule

__all__ = (
    "EqualsValue",
    "MinimumLength",
    "NotEmpty",
    "StringEqualsValue",
    "StringMinimumLength",
    "StringNotEmpty",
)

S = TypeVar("S", bound=Sized)
T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class NotEmpty(BaseRule[S]):
    """Passes when the collection has at least one element.

    Whitespace counts as content: ``"  "`` is not empty.
    """

    code: str = "is_not_empty"

    def validate(self, value: S) -> bool:
        return len(value) > 0


@dataclass(frozen=True, slots=True, kw_only=True)
class MinimumLength(BaseRule[S]):
    """Passes when ``len(value) >= length``. ``length=0`` accepts empty."""

    code: str = "minimum_length"
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ContractViolationError(
                f"MinimumLength requires length >= 0, got {self.length}",
                details={"code": self.code, "length": self.length},
            )

    def validate(self, value: S) -> bool:
        return len(value) >= self.length


@dataclass(frozen=True, slots=True, kw_only=True)
class EqualsValue(BaseRule[T]):
    """Passes when the value equals ``value`` under native ``==``."""

    code: str = "same_value"
    value: Any

    def validate(self, value: T) -> bool:
        return self.value == value


class StringNotEmpty(NotEmpty[str], StringRule):
    __slots__ = ()


class StringMinimumLength(MinimumLength[str], StringRule):
    __slots__ = ()


class StringEqualsValue(EqualsValue[str], StringRule):
    __slots__ = ()
