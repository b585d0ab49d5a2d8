from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Tuple

from .errors import PolicyConfigError
from .policy import build_rules
from .rules import ValidationRule
from .schemas import ValidationRequest, ValidationResponse

logger = logging.getLogger(__name__)


class PasswordValidator:
    """Evaluates an ordered set of rules and aggregates their violations.

    Every rule runs on every call; the response lists the messages of the
    violated rules in declaration order. The rule tuple is fixed at
    construction, so one instance can be shared freely between threads.
    """

    def __init__(self, rules: Optional[Iterable[ValidationRule]] = None, *, settings: Any = None) -> None:
        if rules is not None and settings is not None:
            logger.error("validator rejected: both rules and settings given")
            raise PolicyConfigError("Pass either rules or settings, not both")
        if rules is None:
            rules = build_rules(settings)
        frozen = tuple(rules)
        for rule in frozen:
            if not isinstance(rule, ValidationRule):
                logger.error("validator rejected: %r is not a ValidationRule", rule)
                raise PolicyConfigError(f"Not a ValidationRule: {rule!r}")
        self._rules: Tuple[ValidationRule, ...] = frozen
        logger.debug("password validator ready: %s", [r.name for r in frozen])

    @property
    def rules(self) -> Tuple[ValidationRule, ...]:
        return self._rules

    def extend(self, *rules: ValidationRule) -> PasswordValidator:
        """Return a new validator with `rules` appended after the current ones."""
        return PasswordValidator(self._rules + rules)

    def validate(self, request: ValidationRequest) -> ValidationResponse:
        messages: List[str] = []
        failed: List[str] = []
        for rule in self._rules:
            if rule.evaluate(request):
                messages.append(rule.message)
                failed.append(rule.name)
        logger.debug("password checked against %d rules, violated: %s", len(self._rules), failed)
        return ValidationResponse(messages=tuple(messages))

    __call__ = validate

    def check(self, password: str, previous_passwords: Optional[Iterable[str]] = None) -> ValidationResponse:
        return self.validate(ValidationRequest(password=password, previous_passwords=previous_passwords))


# Default policy, shared by validate_password()
_default_validator = PasswordValidator()


def validate_password(password: str, previous_passwords: Optional[Iterable[str]] = None) -> ValidationResponse:
    """Validate against the default policy.

    Returns a response whose `messages` are empty when the password is accepted.
    """
    return _default_validator.check(password, previous_passwords)
