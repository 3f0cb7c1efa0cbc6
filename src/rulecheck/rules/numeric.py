# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Numeric-string rule with optional relational comparison.

Parsing is locale-aware in one respect only: the decimal separator. The
string must be a plain decimal literal (optional sign, digits, optional
fraction, optional exponent); ``NaN``, ``Infinity``, grouping characters and
currency symbols are rejected.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rulecheck.errors import ConfigurationError

from .number_locale import NumberLocale
from .rule import BaseRule, StringRule

__all__ = (
    "Comparison",
    "ComparisonOperator",
    "IsNumeric",
    "NumericOptions",
    "parse_number",
)


class ComparisonOperator(str, Enum):
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL_TO = ">="
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL_TO = "<="


_OPERATORS: dict[ComparisonOperator, Callable[[float, float], bool]] = {
    ComparisonOperator.GREATER_THAN: operator.gt,
    ComparisonOperator.GREATER_THAN_OR_EQUAL_TO: operator.ge,
    ComparisonOperator.LESS_THAN: operator.lt,
    ComparisonOperator.LESS_THAN_OR_EQUAL_TO: operator.le,
}


class Comparison(BaseModel):
    """Relational check applied after a successful parse.

    Attributes:
        op: One of ``>``, ``>=``, ``<``, ``<=``.
        value: Threshold the parsed number is compared against.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    op: ComparisonOperator
    value: float = Field(allow_inf_nan=False)

    def evaluate(self, number: float) -> bool:
        return _OPERATORS[self.op](number, self.value)


class NumericOptions(BaseModel):
    """Extra checks for ``IsNumeric``. No comparison means parse-only."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    comparison: Comparison | None = Field(
        default=None,
        description="Relational check against a threshold; None skips it.",
    )


@lru_cache(maxsize=32)
def _number_pattern(decimal_separator: str) -> re.Pattern[str]:
    sep = re.escape(decimal_separator)
    return re.compile(rf"[+-]?(?:[0-9]+(?:{sep}[0-9]*)?|{sep}[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_number(value: str, locale: NumberLocale) -> float | None:
    """Parse ``value`` as a decimal literal under ``locale``.

    Returns:
        The value as a float, or None if the string is not a number.
    """
    if _number_pattern(locale.decimal_separator).fullmatch(value) is None:
        return None
    return float(value.replace(locale.decimal_separator, "."))


def _coerce_locale(locale: NumberLocale | str) -> NumberLocale:
    if isinstance(locale, NumberLocale):
        return locale
    if not isinstance(locale, str):
        raise ConfigurationError(
            f"locale must be a NumberLocale or identifier, got {type(locale).__name__}",
            details={"type": type(locale).__name__},
        )
    return NumberLocale.from_identifier(locale)


def _coerce_options(options: NumericOptions | dict[str, Any] | None) -> NumericOptions:
    if options is None:
        return NumericOptions()
    if isinstance(options, NumericOptions):
        return options
    try:
        return NumericOptions.model_validate(options)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid numeric options",
            details={"options": options},
            cause=e,
        ) from e


@dataclass(frozen=True, slots=True, kw_only=True)
class IsNumeric(BaseRule[str], StringRule):
    """Passes when the string is a number and satisfies the comparison, if any.

    Example:
        >>> IsNumeric().validate("2.5e-3")
        True
        >>> IsNumeric(locale="de_DE").validate("123,45")
        True
        >>> rule = IsNumeric(options={"comparison": {"op": ">", "value": 10}})
        >>> rule.validate("10")
        False

    Attributes:
        locale: ``NumberLocale`` or a known identifier such as ``"de_DE"``.
        options: ``NumericOptions`` or an equivalent mapping.
    """

    code: str = "numeric_string"
    locale: NumberLocale = field(default_factory=NumberLocale)
    options: NumericOptions = field(default_factory=NumericOptions)

    def __post_init__(self) -> None:
        object.__setattr__(self, "locale", _coerce_locale(self.locale))
        object.__setattr__(self, "options", _coerce_options(self.options))

    @property
    def comparison(self) -> Comparison | None:
        return self.options.comparison

    def validate(self, value: str) -> bool:
        # edge whitespace only; the parser rejects internal whitespace
        if value.strip() != value:
            return False
        if not value:
            return False

        number = parse_number(value, self.locale)
        if number is None:
            return False

        if self.comparison is None:
            return True
        return self.comparison.evaluate(number)
