"""Internal generator output and password charset models."""
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field


class GeneratorOutput(BaseModel):
    """What a single generator hands back to the engine."""
    values: list[int | float | str] = Field(default_factory=list)
    bonus_values: list[int | float | str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    meta: dict[str, Any] | None = None


class SimpleCharset(BaseModel):
    """One fixed or custom character class, drawn uniformly per position."""
    kind: Literal["simple"] = "simple"
    chars: str


class ProCharset(BaseModel):
    """
    Explicit character classes after exclusions.

    groups holds each enabled class already filtered by the exclusions
    (possibly empty); pool is the filtered union.
    """
    kind: Literal["pro"] = "pro"
    groups: list[str]
    pool: str
    ensure_each: bool = False


PasswordCharset = Annotated[
    Union[SimpleCharset, ProCharset], Field(discriminator="kind")
]
