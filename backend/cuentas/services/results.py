"""
Tagged outcomes returned by the account services.

Expected conditions (missing rows, bad input, duplicates) are returned as
values. Only unexpected persistence failures end up as ``Failure``.
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union


@dataclass
class Success:
    payload: Any = None


@dataclass
class NotFound:
    message: str


@dataclass
class ValidationError:
    messages: List[str] = field(default_factory=list)


@dataclass
class ConflictError:
    field: str
    message: str


@dataclass
class Failure:
    reason: str
    cause: Optional[Exception] = field(default=None, repr=False, compare=False)


@dataclass
class InvalidCredentials:
    message: str = "Invalid username or password"


Result = Union[Success, NotFound, ValidationError, ConflictError, Failure, InvalidCredentials]
