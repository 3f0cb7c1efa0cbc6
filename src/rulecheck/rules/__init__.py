# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Rules module: composable value rules and the validator that runs them.

Core exports:
- Rule, BaseRule, StringRule: Rule contract and base classes
- Validator, StringValidator, ValidationResult, validate: Rule aggregation
- Collection rules: NotEmpty, MinimumLength, EqualsValue (+ String variants)
- String rules: IsEmail, IsNumeric, WordCount
- Numeric config: NumberLocale, NumericOptions, Comparison, ComparisonOperator
"""

from rulecheck.errors import ConfigurationError, ContractViolationError

from .common import (
    EqualsValue,
    MinimumLength,
    NotEmpty,
    StringEqualsValue,
    StringMinimumLength,
    StringNotEmpty,
)
from .email import IsEmail
from .number_locale import NumberLocale
from .numeric import Comparison, ComparisonOperator, IsNumeric, NumericOptions
from .rule import BaseRule, Rule, StringRule
from .validator import StringValidator, ValidationResult, Validator, validate
from .word_count import WordCount

__all__ = (
    # Base classes
    "BaseRule",
    "Rule",
    "StringRule",
    # Errors
    "ConfigurationError",
    "ContractViolationError",
    # Validator
    "StringValidator",
    "ValidationResult",
    "Validator",
    "validate",
    # Collection rules
    "EqualsValue",
    "MinimumLength",
    "NotEmpty",
    "StringEqualsValue",
    "StringMinimumLength",
    "StringNotEmpty",
    # String rules
    "IsEmail",
    "IsNumeric",
    "WordCount",
    # Numeric config
    "Comparison",
    "ComparisonOperator",
    "NumberLocale",
    "NumericOptions",
)
