from __future__ import annotations


class PolicyConfigError(ValueError):
    """Raised when a rule or policy is configured incorrectly.

    Always raised while building rules or a validator, never from validate().
    """
