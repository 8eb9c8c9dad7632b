"""
Composition types for CapsuleKit IR.

An AppComposition is the unit handed to the compilers: app metadata,
target platforms, a theme, and the capsule instances to render, either
as a single ``root`` tree or as a flat ``capsules`` list.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator, model_validator

from .base import IRModel
from .platforms import ALL_PLATFORMS, TargetPlatform
from .theme import ThemeConfig

PropValue = str | int | float | bool | dict[str, Any] | list[Any] | None


class CapsuleInstance(IRModel):
    """
    A placement of a capsule definition inside a composition.

    Attributes:
        id: Instance id, unique within the composition
        capsule_id: Id of the CapsuleDefinition this instance renders
        name: Optional editor label
        props: Concrete prop values keyed by prop name
        children: Nested instances, in render order
        slots: Named nested content, slot name -> instances in render order
    """

    id: str
    capsule_id: str
    name: str | None = None
    props: dict[str, PropValue] = Field(default_factory=dict)
    children: list[CapsuleInstance] | None = None
    slots: dict[str, list[CapsuleInstance]] | None = None

    @model_validator(mode="before")
    @classmethod
    def _accept_flat_type_key(cls, data: Any) -> Any:
        # Flat capsule lists from the editor carry the capsule id as `type`
        if isinstance(data, dict) and "type" in data:
            if "capsuleId" not in data and "capsule_id" not in data:
                data = {**data, "capsuleId": data["type"]}
            data = {key: value for key, value in data.items() if key != "type"}
        return data

    def has_nested(self) -> bool:
        """Whether this instance renders any child or slot content."""
        if self.children:
            return True
        return any(self.slots.values()) if self.slots else False

    def nested(self) -> list[CapsuleInstance]:
        """Children followed by slot children, in traversal order."""
        nested = list(self.children or [])
        for slot_children in (self.slots or {}).values():
            nested.extend(slot_children)
        return nested


class AppComposition(IRModel):
    """
    The top-level unit compiled into platform projects.

    ``targets`` defaults to every known platform. ``platform_config`` holds
    per-platform overrides that are shallow-merged over a compiler's
    default configuration for a single compile.
    """

    id: str | None = None
    name: str
    description: str = ""
    version: str = "1.0.0"
    targets: list[TargetPlatform] = Field(default_factory=lambda: list(ALL_PLATFORMS))
    root: CapsuleInstance | None = None
    capsules: list[CapsuleInstance] = Field(default_factory=list)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    platform_config: dict[TargetPlatform, dict[str, Any]] = Field(default_factory=dict)

    @field_validator("targets", mode="before")
    @classmethod
    def _default_targets(cls, value: Any) -> Any:
        if value is None:
            return list(ALL_PLATFORMS)
        return value

    @field_validator("theme", mode="before")
    @classmethod
    def _default_theme(cls, value: Any) -> Any:
        if value is None:
            return ThemeConfig()
        return value

    def top_level_instances(self) -> list[CapsuleInstance]:
        """The root instance when present, otherwise the flat capsule list."""
        if self.root is not None:
            return [self.root]
        return list(self.capsules)

    def overrides_for(self, platform: TargetPlatform) -> dict[str, Any]:
        return dict(self.platform_config.get(platform) or {})
