from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Optional, Union

from .errors import PolicyConfigError
from .schemas import ValidationRequest

logger = logging.getLogger(__name__)


def _check_message(message: str) -> str:
    if not isinstance(message, str) or not message.strip():
        logger.error("rule rejected: message must be a non-empty string, got %r", message)
        raise PolicyConfigError("Rule message must be a non-empty string")
    return message


class ValidationRule(ABC):
    """A single named check over a validation request.

    evaluate() returns True when the rule is violated, in which case the
    validator reports `message`. Implementations must not keep per-request
    state.
    """

    def __init__(self, message: str, *, name: Optional[str] = None) -> None:
        self._message = _check_message(message)
        self.name: str = name or type(self).__name__

    @property
    def message(self) -> str:
        return self._message

    @abstractmethod
    def evaluate(self, request: ValidationRequest) -> bool: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, message={self._message!r})"


class PatternRule(ValidationRule):
    """Violated when the whole password does not match the compliance pattern.

    The pattern is compiled here so a bad expression fails when the policy is
    built rather than on the first validation. `flags` applies to string
    patterns only (default re.DOTALL); a compiled pattern keeps its own flags.
    """

    def __init__(
        self,
        pattern: Union[str, re.Pattern[str]],
        message: str,
        *,
        name: Optional[str] = None,
        flags: Optional[int] = None,
    ) -> None:
        super().__init__(message, name=name)
        if isinstance(pattern, re.Pattern):
            if flags is not None:
                logger.error("rule %s rejected: flags given with a compiled pattern", self.name)
                raise PolicyConfigError(f"flags cannot be combined with a compiled pattern for rule {self.name}")
            self.pattern = pattern
        else:
            try:
                self.pattern = re.compile(pattern, re.DOTALL if flags is None else flags)
            except (re.error, TypeError, OverflowError) as e:
                logger.error("rule %s rejected: invalid pattern %r: %s", self.name, pattern, e)
                raise PolicyConfigError(f"Invalid pattern for rule {self.name}: {pattern!r}") from e
        if not isinstance(self.pattern.pattern, str):
            logger.error("rule %s rejected: pattern %r is not a text pattern", self.name, pattern)
            raise PolicyConfigError(f"Pattern for rule {self.name} must match text, got {pattern!r}")

    def evaluate(self, request: ValidationRequest) -> bool:
        return self.pattern.fullmatch(request.password) is None


class HistoryRule(ValidationRule):
    """Violated when the password is one of the caller-supplied previous passwords."""

    def evaluate(self, request: ValidationRequest) -> bool:
        return request.password in request.previous_passwords
