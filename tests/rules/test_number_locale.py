# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for rulecheck.rules.number_locale - NumberLocale."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from rulecheck.errors import ConfigurationError
from rulecheck.rules import NumberLocale


class TestNumberLocale:
    """Tests for NumberLocale."""

    def test_defaults(self):
        """Default locale is en_US_POSIX with a dot."""
        locale = NumberLocale()
        assert locale.identifier == "en_US_POSIX"
        assert locale.decimal_separator == "."

    @pytest.mark.parametrize(
        "identifier,separator",
        [("en_US", "."), ("de_DE", ","), ("fr_FR", ","), ("de_CH", "."), ("pt_BR", ",")],
    )
    def test_from_identifier(self, identifier, separator):
        """Table identifiers resolve to their separator."""
        assert NumberLocale.from_identifier(identifier).decimal_separator == separator

    def test_hyphenated_identifier(self):
        """de-DE resolves to de_DE."""
        assert NumberLocale.from_identifier("de-DE").identifier == "de_DE"

    def test_unknown_identifier(self):
        """Unknown identifiers raise with the known list in details."""
        with pytest.raises(ConfigurationError) as exc_info:
            NumberLocale.from_identifier("klingon")
        assert "en_US_POSIX" in exc_info.value.details["known"]

    def test_custom_locale(self):
        """Custom locales accept any unreserved single character."""
        locale = NumberLocale.custom("x_DOT", "·")
        assert locale.decimal_separator == "·"

    @pytest.mark.parametrize("separator", ["", "..", "5", "-", "e", " "])
    def test_custom_rejects_bad_separator(self, separator):
        """Empty, multi-char, digit, sign, exponent and space separators fail."""
        with pytest.raises(ConfigurationError):
            NumberLocale.custom("bad", separator)

    def test_frozen(self):
        """Locales are immutable."""
        locale = NumberLocale()
        with pytest.raises(ValidationError):
            locale.decimal_separator = ","

    @pytest.mark.parametrize(
        "identifier,separator",
        [("de_DE", ","), ("de-DE", ","), ("fr_FR", ","), ("en_US", "."), ("en_US_POSIX", ".")],
    )
    def test_known_identifier_fills_separator(self, identifier, separator):
        """Constructing with a known identifier alone uses the table separator."""
        assert NumberLocale(identifier=identifier).decimal_separator == separator

    def test_known_identifier_with_matching_separator(self):
        """An explicit separator that agrees with the table is accepted."""
        assert NumberLocale(identifier="de_DE", decimal_separator=",").decimal_separator == ","

    def test_known_identifier_with_conflicting_separator(self):
        """An explicit separator that disagrees with the table is rejected."""
        with pytest.raises(ValidationError, match="uses ','"):
            NumberLocale(identifier="de_DE", decimal_separator=".")

    def test_custom_rejects_known_identifier_with_conflicting_separator(self):
        """custom() reports the conflict as ConfigurationError."""
        with pytest.raises(ConfigurationError):
            NumberLocale.custom("de_DE", ".")

    def test_unknown_identifier_keeps_given_separator(self):
        """Identifiers outside the table keep the explicit or default separator."""
        assert NumberLocale(identifier="x_TEST").decimal_separator == "."
        assert NumberLocale(identifier="x_TEST", decimal_separator=";").decimal_separator == ";"

    def test_forbids_unknown_fields(self):
        """Extra fields such as a grouping separator are rejected."""
        with pytest.raises(ValidationError):
            NumberLocale(identifier="x_TEST", decimal_separator=".", grouping=",")

    def test_known_identifiers_sorted(self):
        """known_identifiers is sorted and includes de_DE."""
        known = NumberLocale.known_identifiers()
        assert known == sorted(known)
        assert "de_DE" in known
