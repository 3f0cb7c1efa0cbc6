# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Number locales for numeric-string parsing.

Only the decimal separator is modelled. Grouping and currency conventions
are out of scope, so ``"1,000"`` is not a number under ``en_US``.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from rulecheck.errors import ConfigurationError

__all__ = ("DEFAULT_LOCALE_ID", "NumberLocale")

DEFAULT_LOCALE_ID = "en_US_POSIX"

_DECIMAL_SEPARATORS: dict[str, str] = {
    "en_US_POSIX": ".",
    "en_US": ".",
    "en_GB": ".",
    "en_AU": ".",
    "en_CA": ".",
    "de_CH": ".",
    "ja_JP": ".",
    "zh_CN": ".",
    "ko_KR": ".",
    "de_DE": ",",
    "de_AT": ",",
    "fr_FR": ",",
    "fr_CA": ",",
    "es_ES": ",",
    "it_IT": ",",
    "nl_NL": ",",
    "pt_BR": ",",
    "pt_PT": ",",
    "ru_RU": ",",
    "pl_PL": ",",
    "sv_SE": ",",
    "tr_TR": ",",
}


class NumberLocale(BaseModel):
    """Decimal-separator convention used when parsing numeric strings.

    Attributes:
        identifier: Locale name, e.g. ``"de_DE"``.
        decimal_separator: The single character separating the fraction.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    RESERVED: ClassVar[frozenset[str]] = frozenset("0123456789+-eE")

    identifier: str = Field(default=DEFAULT_LOCALE_ID)
    decimal_separator: str = Field(
        default=".",
        min_length=1,
        max_length=1,
        description="Exactly one character; digits, signs and exponent markers are rejected.",
    )

    @model_validator(mode="before")
    @classmethod
    def _separator_from_table(cls, data: Any) -> Any:
        """Known identifiers fix the separator; a conflicting one is rejected."""
        if not isinstance(data, dict):
            return data
        identifier = data.get("identifier", DEFAULT_LOCALE_ID)
        if not isinstance(identifier, str):
            return data
        expected = _DECIMAL_SEPARATORS.get(identifier.replace("-", "_"))
        if expected is None:
            return data
        if "decimal_separator" not in data:
            return {**data, "decimal_separator": expected}
        if data["decimal_separator"] != expected:
            raise ValueError(
                f"Locale '{identifier}' uses '{expected}' as decimal separator, "
                f"got '{data['decimal_separator']}'"
            )
        return data

    @field_validator("decimal_separator")
    @classmethod
    def _separator_not_reserved(cls, v: str) -> str:
        if v in cls.RESERVED or v.isspace():
            raise ValueError(f"'{v}' cannot be used as a decimal separator")
        return v

    @classmethod
    def from_identifier(cls, identifier: str) -> NumberLocale:
        """Resolve a known locale identifier.

        Accepts ``de_DE`` and ``de-DE`` spellings.

        Raises:
            ConfigurationError: If the identifier is not in the locale table.
        """
        key = identifier.replace("-", "_")
        if key not in _DECIMAL_SEPARATORS:
            raise ConfigurationError(
                f"Unknown locale identifier '{identifier}'",
                details={"identifier": identifier, "known": sorted(_DECIMAL_SEPARATORS)},
            )
        return cls(identifier=key, decimal_separator=_DECIMAL_SEPARATORS[key])

    @classmethod
    def custom(cls, identifier: str, decimal_separator: str) -> NumberLocale:
        """Build a locale outside the table.

        Raises:
            ConfigurationError: If the separator is not a usable single character.
        """
        try:
            return cls(identifier=identifier, decimal_separator=decimal_separator)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid decimal separator for locale '{identifier}'",
                details={"identifier": identifier, "decimal_separator": decimal_separator},
                cause=e,
            ) from e

    @classmethod
    def known_identifiers(cls) -> list[str]:
        return sorted(_DECIMAL_SEPARATORS)
