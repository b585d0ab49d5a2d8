from .errors import PolicyConfigError
from .schemas import ValidationRequest, ValidationResponse
from .rules import ValidationRule, PatternRule, HistoryRule
from .policy import PolicySettings, build_rules, ASCII_PUNCTUATION
from .validator import PasswordValidator, validate_password

__all__ = [
    "PolicyConfigError",
    "ValidationRequest", "ValidationResponse",
    "ValidationRule", "PatternRule", "HistoryRule",
    "PolicySettings", "build_rules", "ASCII_PUNCTUATION",
    "PasswordValidator", "validate_password",
]
