# core/result.py
"""
Tagged results returned by registry operations.

Registry operations never raise for domain failures. They return either
``Ok(value)`` or ``Err(kind, code)``:

- ``kind`` is the failure category (see ``ErrorKind``)
- ``code`` is the numeric code the registry has always reported for it
"""
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class ErrorKind(str, Enum):
    """Failure categories shared by all registries."""
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    INACTIVE_VERIFIER = "INACTIVE_VERIFIER"


class ResultError(Exception):
    """Raised when an Err result is unwrapped."""
    def __init__(self, err: "Err"):
        super().__init__(f"{err.kind.value} (code {err.code})")
        self.err = err


class Ok(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["ok"] = "ok"
    value: Any = True

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> Any:
        return self.value


class Err(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["err"] = "err"
    kind: ErrorKind
    code: int

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise ResultError(self)


Result = Ok | Err
