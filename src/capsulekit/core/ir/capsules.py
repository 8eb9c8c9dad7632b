"""
Capsule definition types for CapsuleKit IR.

A capsule is a reusable UI component definition carrying, per target
platform, a source template plus the dependencies that template needs,
and a platform-agnostic prop schema.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import Field

from .base import FrozenIRModel
from .platforms import TargetPlatform


class CapsuleCategory(StrEnum):
    """Catalog categories used by the editor palette."""

    UI = "ui"
    LAYOUT = "layout"
    NAVIGATION = "navigation"
    FORMS = "forms"
    DATA = "data"
    MEDIA = "media"
    FEEDBACK = "feedback"
    FEATURE = "feature"


class PropType(StrEnum):
    """Platform-agnostic prop types."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    COLOR = "color"  # hex or theme color name
    SIZE = "size"  # xs..xl or a number
    SPACING = "spacing"
    ICON = "icon"  # SF Symbol / Material icon name
    IMAGE = "image"  # URL or local asset
    ACTION = "action"  # callback
    ARRAY = "array"
    OBJECT = "object"
    SELECT = "select"  # one of `options`
    SLOT = "slot"  # nested content


class PropDefinition(FrozenIRModel):
    """One entry of a capsule's prop schema."""

    name: str
    type: PropType
    required: bool = False
    default: Any = None
    description: str = ""
    options: list[str] | None = None


class PlatformImplementation(FrozenIRModel):
    """
    Source template for one platform.

    Attributes:
        code: Component source, copied verbatim into generated projects
        dependencies: Package identifiers, optionally version pinned
            (npm ``name:version``, SwiftPM ``url@version``, Gradle coordinates)
        framework: Framework the template targets (react, swiftui, compose...)
        min_version: Minimum OS / SDK version the template needs
        imports: Extra import lines the template relies on
    """

    code: str
    dependencies: list[str] = Field(default_factory=list)
    framework: str | None = None
    min_version: str | None = None
    imports: list[str] = Field(default_factory=list)


class CapsuleDefinition(FrozenIRModel):
    """
    A named, versioned, categorized component template.

    A capsule is usable on a platform only when ``platforms`` holds a
    non-null implementation for it.
    """

    id: str
    name: str
    description: str = ""
    category: CapsuleCategory = CapsuleCategory.UI
    tags: list[str] = Field(default_factory=list)
    version: str = "1.0.0"
    props: list[PropDefinition] = Field(default_factory=list)
    platforms: dict[TargetPlatform, PlatformImplementation | None] = Field(default_factory=dict)

    author: str | None = None
    deprecated: bool = False
    accepts_children: bool = False
    slots: list[str] = Field(default_factory=list)

    def implementation(self, platform: TargetPlatform) -> PlatformImplementation | None:
        """Get the implementation for a platform, or None."""
        return self.platforms.get(platform)

    def supports(self, platform: TargetPlatform) -> bool:
        return self.platforms.get(platform) is not None

    def supported_platforms(self) -> list[TargetPlatform]:
        return [platform for platform, impl in self.platforms.items() if impl is not None]

    def get_prop(self, name: str) -> PropDefinition | None:
        for prop in self.props:
            if prop.name == name:
                return prop
        return None
