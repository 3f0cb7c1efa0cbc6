# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Exception hierarchy for rulecheck.

A value failing a rule is never an exception; it is reported through
``ValidationResult``. Exceptions here signal misuse of the API.
"""

from __future__ import annotations

from typing import Any, ClassVar

__all__ = (
    "ConfigurationError",
    "ContractViolationError",
    "RulecheckError",
)


class RulecheckError(Exception):
    """Base error carrying a message and structured details."""

    default_message: ClassVar[str] = "rulecheck error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and self.__cause__ is not None:
            data["cause"] = repr(self.__cause__)
        return data


class ContractViolationError(RulecheckError):
    """Programmer error: the API was used in a way its contract forbids."""

    default_message = "Contract violation"


class ConfigurationError(ContractViolationError):
    """Rule options that cannot be honored (bad locale, bad comparison)."""

    default_message = "Invalid rule configuration"
