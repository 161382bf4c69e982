"""Error taxonomy shared by every calculator."""

from __future__ import annotations

import math
from typing import Any, List, Mapping, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ValidationError(ValueError):
    """An input is missing or out of domain; nothing was computed."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class DomainError(ArithmeticError):
    """A primitive was asked for a mathematically impossible value."""


def _format_error(error: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def ensure_valid(model: Type[ModelT], data: Union[ModelT, Mapping[str, Any]]) -> ModelT:
    """Re-run ``model``'s validation over ``data``.

    Records built upstream (or with ``model_construct``) are never trusted:
    they are dumped and validated again before any computation starts.
    """
    raw = data.model_dump() if isinstance(data, BaseModel) else data
    try:
        return model.model_validate(raw)
    except SchemaValidationError as exc:
        raise ValidationError([_format_error(err) for err in exc.errors()]) from exc


def money(value: float, field: str = "value") -> float:
    """Round a currency amount for exposure, rejecting NaN and infinities."""
    if not math.isfinite(value):
        raise ValidationError([f"{field}: result is not a finite amount"])
    return round(value, 2)
