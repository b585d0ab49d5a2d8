from __future__ import annotations

from typing import Any, FrozenSet, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class ValidationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    password: str = Field(repr=False)
    previous_passwords: FrozenSet[str] = Field(default_factory=frozenset, repr=False)

    @field_validator("previous_passwords", mode="before")
    @classmethod
    def _coerce_history(cls, v: Any) -> Any:
        # None and any iterable of strings are accepted as history
        if v is None:
            return frozenset()
        if isinstance(v, str):
            return frozenset([v])
        return v


class ValidationResponse(BaseModel):
    """Outcome of a validation call.

    `valid` is derived from `messages`; there is no way to set it separately.
    """

    model_config = ConfigDict(frozen=True)

    messages: Tuple[str, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return not self.messages

    def __bool__(self) -> bool:
        return self.valid
