"""Parameter models for algorithm runs.

Raw parameters arrive from input forms as text or numbers. Each model coerces
them leniently ("12" -> 12, " A " -> "A") and a ValidationError becomes a
PRECONDITION rejection frame naming the offending field.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Params(BaseModel):
    """Base for all parameter models."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
    )


def _split_numbers(value: Any) -> Any:
    if isinstance(value, str):
        return [part for part in value.replace(",", " ").split() if part]
    return value


class ValueParams(Params):
    value: int


class IndexParams(Params):
    index: int


class ArrayInsertParams(Params):
    value: int
    index: int | None = None


class TargetParams(Params):
    target: int


class TextParams(Params):
    text: str = Field(min_length=1)


class ValuesParams(Params):
    values: list[int] = Field(min_length=1)

    @field_validator("values", mode="before")
    @classmethod
    def split_text(cls, value: Any) -> Any:
        return _split_numbers(value)


class EnqueueParams(Params):
    value: int
    priority: int | None = None


class KeyParams(Params):
    key: int


class PositionParams(Params):
    position: int


class InsertAtParams(Params):
    value: int
    position: int


class CountParams(Params):
    n: int = Field(ge=1)


class RotateParams(Params):
    k: int = Field(ge=0)


class PairParams(Params):
    first: int
    second: int


class VertexParams(Params):
    vertex: str = Field(min_length=1)
    x: float | None = None
    y: float | None = None


class EdgeParams(Params):
    u: str = Field(min_length=1)
    v: str = Field(min_length=1)
    weight: int | float = 1


class EdgeEndpointsParams(Params):
    u: str = Field(min_length=1)
    v: str = Field(min_length=1)


class StartParams(Params):
    start: str = Field(min_length=1)


class RouteParams(Params):
    start: str = Field(min_length=1)
    goal: str = Field(min_length=1)


class RangeParams(Params):
    start: int = Field(ge=0)
    end: int = Field(ge=0)


class OtherParams(Params):
    other: str = Field(min_length=1)


class PatternParams(Params):
    pattern: str = Field(min_length=1)
