# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""rulecheck - Composable value rules with first-failure validation.

Top-level re-exports are loaded lazily from:
- rulecheck.rules -> rules, validators, numeric config
- rulecheck.errors -> error hierarchy
"""

from __future__ import annotations

from typing import TYPE_CHECKING

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    # errors
    "ConfigurationError": ("rulecheck.errors", "ConfigurationError"),
    "ContractViolationError": ("rulecheck.errors", "ContractViolationError"),
    "RulecheckError": ("rulecheck.errors", "RulecheckError"),
    # rule contract
    "BaseRule": ("rulecheck.rules.rule", "BaseRule"),
    "Rule": ("rulecheck.rules.rule", "Rule"),
    "StringRule": ("rulecheck.rules.rule", "StringRule"),
    # collection rules
    "EqualsValue": ("rulecheck.rules.common", "EqualsValue"),
    "MinimumLength": ("rulecheck.rules.common", "MinimumLength"),
    "NotEmpty": ("rulecheck.rules.common", "NotEmpty"),
    "StringEqualsValue": ("rulecheck.rules.common", "StringEqualsValue"),
    "StringMinimumLength": ("rulecheck.rules.common", "StringMinimumLength"),
    "StringNotEmpty": ("rulecheck.rules.common", "StringNotEmpty"),
    # string rules
    "IsEmail": ("rulecheck.rules.email", "IsEmail"),
    "IsNumeric": ("rulecheck.rules.numeric", "IsNumeric"),
    "WordCount": ("rulecheck.rules.word_count", "WordCount"),
    # numeric config
    "Comparison": ("rulecheck.rules.numeric", "Comparison"),
    "ComparisonOperator": ("rulecheck.rules.numeric", "ComparisonOperator"),
    "NumberLocale": ("rulecheck.rules.number_locale", "NumberLocale"),
    "NumericOptions": ("rulecheck.rules.numeric", "NumericOptions"),
    # validator
    "StringValidator": ("rulecheck.rules.validator", "StringValidator"),
    "ValidationResult": ("rulecheck.rules.validator", "ValidationResult"),
    "Validator": ("rulecheck.rules.validator", "Validator"),
    "validate": ("rulecheck.rules.validator", "validate"),
}

_LOADED: dict[str, object] = {}


def __getattr__(name: str) -> object:
    """Lazy import attributes on first access."""
    if name in _LOADED:
        return _LOADED[name]

    if name in _LAZY_IMPORTS:
        from importlib import import_module

        module_name, attr_name = _LAZY_IMPORTS[name]
        module = import_module(module_name)
        value = getattr(module, attr_name)
        _LOADED[name] = value
        return value

    raise AttributeError(f"module 'rulecheck' has no attribute {name!r}")


def __dir__() -> list[str]:
    """Return all available attributes for autocomplete."""
    return list(__all__)


if TYPE_CHECKING:
    from rulecheck.errors import ConfigurationError, ContractViolationError, RulecheckError
    from rulecheck.rules.common import (
        EqualsValue,
        MinimumLength,
        NotEmpty,
        StringEqualsValue,
        StringMinimumLength,
        StringNotEmpty,
    )
    from rulecheck.rules.email import IsEmail
    from rulecheck.rules.number_locale import NumberLocale
    from rulecheck.rules.numeric import (
        Comparison,
        ComparisonOperator,
        IsNumeric,
        NumericOptions,
    )
    from rulecheck.rules.rule import BaseRule, Rule, StringRule
    from rulecheck.rules.validator import (
        StringValidator,
        ValidationResult,
        Validator,
        validate,
    )
    from rulecheck.rules.word_count import WordCount

__all__ = [
    # errors
    "ConfigurationError",
    "ContractViolationError",
    "RulecheckError",
    # rule contract
    "BaseRule",
    "Rule",
    "StringRule",
    # collection rules
    "EqualsValue",
    "MinimumLength",
    "NotEmpty",
    "StringEqualsValue",
    "StringMinimumLength",
    "StringNotEmpty",
    # string rules
    "IsEmail",
    "IsNumeric",
    "WordCount",
    # numeric config
    "Comparison",
    "ComparisonOperator",
    "NumberLocale",
    "NumericOptions",
    # validator
    "StringValidator",
    "ValidationResult",
    "Validator",
    "validate",
]
