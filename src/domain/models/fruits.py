"""Fruit payload models for the example resource.

FruitWrite is what clients send on create/update; FruitRead is what they
get back.  The key (uuid) is assigned by the persistence layer and is
never taken from a write payload.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FruitWrite(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)


class FruitRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    uuid: str
    name: str
