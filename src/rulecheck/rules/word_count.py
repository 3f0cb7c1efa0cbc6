# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass

from rulecheck.errors import ContractViolationError

from .rule import BaseRule, StringRule

__all__ = ("WordCount",)


@dataclass(frozen=True, slots=True, kw_only=True)
class WordCount(BaseRule[str], StringRule):
    """Passes when the string is exactly ``word_count`` words joined by single spaces.

    Leading or trailing whitespace and runs of two or more spaces fail.

    Example:
        >>> rule = WordCount(word_count=2)
        >>> rule.validate("hello world")
        True
        >>> rule.validate("hello  world")
        False

    Raises:
        ContractViolationError: On construction with ``word_count < 1``.
    """

    code: str = "word_count"
    word_count: int

    def __post_init__(self) -> None:
        if self.word_count < 1:
            raise ContractViolationError(
                f"WordCount requires word_count >= 1, got {self.word_count}",
                details={"code": self.code, "word_count": self.word_count},
            )

    def validate(self, value: str) -> bool:
        if value.strip() != value:
            return False

        words = [w for w in value.split(" ") if w]
        if len(words) != self.word_count:
            return False

        # split() drops empty fragments, so "a  b" only fails here
        return " ".join(words) == value
