"""Registros brutos da fonte externa de demonstração.

Existem apenas durante uma leitura; nunca são persistidos.

A decodificação é tolerante como a de um cliente JSON comum: campo ausente
ou `null` vira o valor zero do tipo (`0` ou `""`). Só um registro que não
é objeto ou um campo com tipo incompatível invalidam a resposta.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _null_as(zero: Any):
    def _coerce(value: Any) -> Any:
        return zero if value is None else value

    return BeforeValidator(_coerce)


NullableStr = Annotated[str, _null_as("")]
NullableInt = Annotated[int, _null_as(0)]


class SourcePost(BaseModel):
    """Post retornado pela API JSONPlaceholder (`/posts`)."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    id: NullableInt = Field(default=0, description="Identificador do post na fonte.")
    title: NullableStr = Field(default="")
    body: NullableStr = Field(default="")
    user_id: NullableInt = Field(default=0, alias="userId")


__all__ = ["SourcePost"]
