"""
Shared pydantic base for CapsuleKit IR types.

Compositions and capsule definitions arrive as JSON from the editor,
which uses camelCase keys. Models accept both the camelCase alias and
the Python field name.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class IRModel(BaseModel):
    """Base model: camelCase aliases, population by field name allowed."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenIRModel(IRModel):
    """IR model that may not be mutated after construction."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
