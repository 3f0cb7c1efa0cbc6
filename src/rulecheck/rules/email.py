# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import re
from dataclasses import dataclass

from .rule import BaseRule, StringRule

__all__ = ("EMAIL_PATTERN", "IsEmail")

# local part: no leading dot, no "..", last char not "." or "'"
# domain: one or more alnum-led labels, then a TLD of 2+ letters
EMAIL_PATTERN = re.compile(
    r"(?!\.)(?!.*\.\.)([A-Z0-9_'+\-.]*[A-Z0-9_+\-])@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class IsEmail(BaseRule[str], StringRule):
    """Passes when the whole string is an email address.

    Whitespace anywhere, including at the edges, fails the match.
    """

    code: str = "email_string"

    def validate(self, value: str) -> bool:
        return EMAIL_PATTERN.fullmatch(value) is not None
