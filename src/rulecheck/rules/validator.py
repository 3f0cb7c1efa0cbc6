# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Validator - ordered, short-circuiting rule aggregation.

A Validator runs its rules against one value at construction time:
- Rules run in the order given
- Evaluation stops at the first rule whose ``validate`` returns False
- The result carries that rule's message, or ``(True, None)`` if all pass

Rule codes must be unique within one validator. Duplicates are a caller bug
and raise ``ContractViolationError`` before any rule runs.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from rulecheck.errors import ContractViolationError

from .rule import Rule, StringRule

__all__ = (
    "StringValidator",
    "ValidationResult",
    "Validator",
    "rule_codes_must_be_unique",
    "validate",
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ValidationResult(BaseModel):
    """Outcome of running a validator.

    Attributes:
        valid: True if every rule passed.
        message: Message of the first failing rule, None when valid.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    message: str | None = Field(default=None)

    def as_tuple(self) -> tuple[bool, str | None]:
        return self.valid, self.message

    def __bool__(self) -> bool:
        return self.valid


def rule_codes_must_be_unique(rules: Iterable[Rule]) -> None:
    """Raise ContractViolationError if two rules share a code."""
    counts = Counter(rule.code for rule in rules)
    duplicates = sorted(code for code, n in counts.items() if n > 1)
    if duplicates:
        raise ContractViolationError(
            f"Rule codes must be unique, duplicated: {duplicates}",
            details={"duplicates": duplicates, "codes": list(counts)},
        )


class Validator(Generic[T]):
    """Evaluate an ordered sequence of rules against one value.

    Example:
        validator = Validator(
            "password123",
            [StringNotEmpty(), StringMinimumLength(length=8, message="Too short")],
        )
        if not validator.result.valid:
            print(validator.result.message)

    Attributes:
        value: The value that was validated.
        rules: The rules, in evaluation order.
        result: ``ValidationResult`` computed at construction.
        failed_rule: The first rule that failed, or None.
    """

    __slots__ = ("_failed_rule", "_result", "_rules", "_value")

    def __init__(self, value: T, rules: Sequence[Rule[T]] = ()):
        rules = tuple(rules)
        rule_codes_must_be_unique(rules)

        failed = next((rule for rule in rules if not rule.validate(value)), None)
        if failed is not None:
            logger.debug("Rule '%s' rejected value %r", failed.code, value)

        self._value = value
        self._rules = rules
        self._failed_rule = failed
        self._result = ValidationResult(
            valid=failed is None,
            message=None if failed is None else failed.message,
        )

    @property
    def value(self) -> T:
        return self._value

    @property
    def rules(self) -> tuple[Rule[T], ...]:
        return self._rules

    @property
    def result(self) -> ValidationResult:
        return self._result

    @property
    def failed_rule(self) -> Rule[T] | None:
        return self._failed_rule

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Validator):
            return NotImplemented
        return self._result == other._result

    def __hash__(self) -> int:
        return hash(self._result)

    def __repr__(self) -> str:
        codes = [rule.code for rule in self._rules]
        return f"{type(self).__name__}(value={self._value!r}, rules={codes}, result={self._result!r})"


class StringValidator(Validator[str]):
    """Validator restricted to ``str`` values and ``StringRule`` rules.

    Raises:
        ContractViolationError: If the value is not a str or a rule is not a StringRule.
    """

    __slots__ = ()

    def __init__(self, value: str, rules: Sequence[Rule[str]] = ()):
        if not isinstance(value, str):
            raise ContractViolationError(
                f"StringValidator requires a str value, got {type(value).__name__}",
                details={"type": type(value).__name__},
            )
        rules = tuple(rules)
        foreign = [type(rule).__name__ for rule in rules if not isinstance(rule, StringRule)]
        if foreign:
            raise ContractViolationError(
                f"StringValidator only accepts string rules, got {foreign}",
                details={"rules": foreign},
            )
        super().__init__(value, rules)


def validate(value: T, rules: Sequence[Rule[T]] = ()) -> ValidationResult:
    """Run ``rules`` against ``value`` and return the result."""
    return Validator(value, rules).result
