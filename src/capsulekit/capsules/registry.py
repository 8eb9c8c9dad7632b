"""
Capsule registry.

A CapsuleRegistry is a plain catalog of capsule definitions keyed by id.
Compilers never read it during a compile: each one takes its own
filtered copy through ``register_capsules`` at setup time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..core.errors import RegistryError
from ..core.ir import ALL_PLATFORMS, CapsuleCategory, CapsuleDefinition, TargetPlatform
from .builtin import BUILTIN_CAPSULES

logger = logging.getLogger(__name__)


@dataclass
class CapsuleStats:
    """
    Catalog statistics.

    Attributes:
        total: Number of registered capsules
        categories: Distinct categories, first-seen order
        tags: Distinct tags, first-seen order
        by_platform: Number of capsules implementing each platform
    """

    total: int
    categories: list[CapsuleCategory] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    by_platform: dict[TargetPlatform, int] = field(default_factory=dict)


class CapsuleRegistry:
    """
    Catalog of capsule definitions.

    Registering an id that already exists replaces the old definition.
    """

    def __init__(self, capsules: Iterable[CapsuleDefinition] = ()) -> None:
        self._capsules: dict[str, CapsuleDefinition] = {}
        for capsule in capsules:
            self.register(capsule)

    @classmethod
    def with_builtins(cls) -> CapsuleRegistry:
        """Create a registry seeded with the built-in capsules."""
        return cls(BUILTIN_CAPSULES)

    def __len__(self) -> int:
        return len(self._capsules)

    def __contains__(self, capsule_id: object) -> bool:
        return capsule_id in self._capsules

    def register(self, capsule: CapsuleDefinition) -> None:
        """
        Register a capsule definition.

        Raises:
            RegistryError: If the definition has an empty id
        """
        if not capsule.id.strip():
            raise RegistryError(f"Capsule '{capsule.name}' has an empty id")
        if capsule.id in self._capsules:
            logger.debug("Replacing capsule definition '%s'", capsule.id)
        self._capsules[capsule.id] = capsule

    def unregister(self, capsule_id: str) -> bool:
        """Remove a capsule. Returns whether it was registered."""
        return self._capsules.pop(capsule_id, None) is not None

    def get(self, capsule_id: str) -> CapsuleDefinition | None:
        return self._capsules.get(capsule_id)

    def get_all(self) -> list[CapsuleDefinition]:
        return list(self._capsules.values())

    def get_by_category(self, category: CapsuleCategory | str) -> list[CapsuleDefinition]:
        return [capsule for capsule in self._capsules.values() if capsule.category == category]

    def get_by_tag(self, tag: str) -> list[CapsuleDefinition]:
        return [capsule for capsule in self._capsules.values() if tag in capsule.tags]

    def supports_platform(self, capsule_id: str, platform: TargetPlatform) -> bool:
        capsule = self._capsules.get(capsule_id)
        return capsule is not None and capsule.supports(platform)

    def get_supported_platforms(self, capsule_id: str) -> list[TargetPlatform]:
        capsule = self._capsules.get(capsule_id)
        if capsule is None:
            return []
        return capsule.supported_platforms()

    def stats(self) -> CapsuleStats:
        capsules = self.get_all()
        categories: dict[CapsuleCategory, None] = {}
        tags: dict[str, None] = {}
        for capsule in capsules:
            categories.setdefault(capsule.category, None)
            for tag in capsule.tags:
                tags.setdefault(tag, None)
        return CapsuleStats(
            total=len(capsules),
            categories=list(categories),
            tags=list(tags),
            by_platform={
                platform: sum(1 for capsule in capsules if capsule.supports(platform))
                for platform in ALL_PLATFORMS
            },
        )
