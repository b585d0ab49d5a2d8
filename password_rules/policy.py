from __future__ import annotations

import logging
import re
import string
from dataclasses import dataclass
from typing import Any, List, Optional

from .errors import PolicyConfigError
from .rules import HistoryRule, PatternRule, ValidationRule

logger = logging.getLogger(__name__)

# Enumerated alternative to the default "anything but A-Z, a-z, 0-9" definition
ASCII_PUNCTUATION = string.punctuation

UPPERCASE_MESSAGE = "Password should have at least one uppercase character"
LOWERCASE_MESSAGE = "Password should have at least one lowercase character"
DIGIT_MESSAGE = "Password should have at least one digit"
SPECIAL_MESSAGE = "Password should have at least one special character"
LENGTH_MESSAGE = "Password should be at least {min_length} characters long"
WHITESPACE_MESSAGE = "Password should not have any whitespaces"
HISTORY_MESSAGE = "Password should not match any of the previous passwords"


@dataclass(frozen=True)
class PolicySettings:
    min_length: int = 12
    require_upper: bool = True
    require_lower: bool = True
    require_digit: bool = True
    require_special: bool = True
    forbid_whitespace: bool = True
    check_history: bool = True
    # None: any non-alphanumeric character counts as special
    special_chars: Optional[str] = None


def _special_pattern(special_chars: Optional[str]) -> str:
    if special_chars is None:
        return r".*[^A-Za-z0-9].*"
    if not isinstance(special_chars, str) or not special_chars:
        logger.error("policy rejected: special_chars=%r", special_chars)
        raise PolicyConfigError(f"special_chars must be a non-empty string, got {special_chars!r}")
    return ".*[" + "".join(re.escape(c) for c in special_chars) + "].*"


def build_rules(settings: Any = None) -> List[ValidationRule]:
    """Build the ordered rule list for a settings object.

    The settings object is expected to expose the attributes of PolicySettings;
    missing attributes fall back to the PolicySettings defaults, so an
    application's own settings class can be passed directly.

    Order is fixed: uppercase, lowercase, digit, special, length, whitespace,
    history. Disabled rules are left out without reordering the rest.
    """
    defaults = PolicySettings()
    if settings is None:
        settings = defaults

    def opt(attr: str) -> Any:
        return getattr(settings, attr, getattr(defaults, attr))

    min_len = opt("min_length")
    if not isinstance(min_len, int) or isinstance(min_len, bool) or min_len < 1:
        logger.error("policy rejected: min_length=%r", min_len)
        raise PolicyConfigError(f"min_length must be a positive integer, got {min_len!r}")

    rules: List[ValidationRule] = []
    if opt("require_upper"):
        rules.append(PatternRule(r".*[A-Z].*", UPPERCASE_MESSAGE, name="uppercase"))
    if opt("require_lower"):
        rules.append(PatternRule(r".*[a-z].*", LOWERCASE_MESSAGE, name="lowercase"))
    if opt("require_digit"):
        rules.append(PatternRule(r".*[0-9].*", DIGIT_MESSAGE, name="digit"))
    if opt("require_special"):
        rules.append(PatternRule(_special_pattern(opt("special_chars")), SPECIAL_MESSAGE, name="special"))
    rules.append(PatternRule(f".{{{min_len},}}", LENGTH_MESSAGE.format(min_length=min_len), name="min_length"))
    if opt("forbid_whitespace"):
        rules.append(PatternRule(r"\S+", WHITESPACE_MESSAGE, name="no_whitespace"))
    if opt("check_history"):
        rules.append(HistoryRule(HISTORY_MESSAGE, name="history"))
    return rules
