"""Error values shared by every module.

Errors here are **not** exceptions: they are immutable values returned on
the left arm of an ``Either`` and rendered by the API layer.  Each error
carries a ``name`` (its kind tag, always the class name) and a formatted
``message``.  Equality is structural, so two ``MissingParamError("sku")``
instances compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class DomainError:
    """Base error value."""

    name: str = field(init=False)
    message: str = field(init=False, default="")

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.__class__.__name__)
        object.__setattr__(self, "message", self.format_message())

    def format_message(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "message": self.message}

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class MissingParamError(DomainError):
    """A required request parameter is absent."""

    param_name: str = ""

    def format_message(self) -> str:
        return f"Missing param: {self.param_name}"


@dataclass(frozen=True)
class InvalidParamError(DomainError):
    """A request parameter is present but has the wrong shape or type."""

    param_name: str = ""
    expected: str = ""

    def format_message(self) -> str:
        return f"Invalid param: {self.param_name} must be a {self.expected}"
