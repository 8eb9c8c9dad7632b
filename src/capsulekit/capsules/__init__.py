"""
Capsule catalog for CapsuleKit.

The functions below operate on a default registry seeded with the
built-in capsules on first use. Code that wants isolation (tests, a
multi-tenant service) should build its own CapsuleRegistry instead.
"""

from ..core.ir import CapsuleCategory, CapsuleDefinition, TargetPlatform
from .builtin import BUILTIN_CAPSULES
from .registry import CapsuleRegistry, CapsuleStats

# Default registry instance
_registry: CapsuleRegistry | None = None


def get_registry() -> CapsuleRegistry:
    """
    Get the default capsule registry.

    Seeds the built-in capsules on first call.

    Returns:
        CapsuleRegistry singleton
    """
    global _registry
    if _registry is None:
        _registry = CapsuleRegistry.with_builtins()
    return _registry


def reset_registry() -> None:
    """Drop the default registry so the next call re-seeds it."""
    global _registry
    _registry = None


def get_all_capsules() -> list[CapsuleDefinition]:
    return get_registry().get_all()


def get_capsule(capsule_id: str) -> CapsuleDefinition | None:
    return get_registry().get(capsule_id)


def register_capsule(capsule: CapsuleDefinition) -> None:
    """
    Register a capsule in the default registry.

    Raises:
        RegistryError: If the definition has an empty id
    """
    get_registry().register(capsule)


def unregister_capsule(capsule_id: str) -> bool:
    return get_registry().unregister(capsule_id)


def get_capsules_by_category(category: CapsuleCategory | str) -> list[CapsuleDefinition]:
    return get_registry().get_by_category(category)


def get_capsules_by_tag(tag: str) -> list[CapsuleDefinition]:
    return get_registry().get_by_tag(tag)


def supports_platform(capsule_id: str, platform: TargetPlatform) -> bool:
    return get_registry().supports_platform(capsule_id, platform)


def get_supported_platforms(capsule_id: str) -> list[TargetPlatform]:
    return get_registry().get_supported_platforms(capsule_id)


def get_capsule_stats() -> CapsuleStats:
    return get_registry().stats()


__all__ = [
    "BUILTIN_CAPSULES",
    "CapsuleRegistry",
    "CapsuleStats",
    "get_registry",
    "reset_registry",
    "get_all_capsules",
    "get_capsule",
    "register_capsule",
    "unregister_capsule",
    "get_capsules_by_category",
    "get_capsules_by_tag",
    "supports_platform",
    "get_supported_platforms",
    "get_capsule_stats",
]
