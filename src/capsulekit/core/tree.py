"""
Capsule instance tree traversal.

Traversal is pre-order: a node, then its children, then the children of
each slot in slot key order. Every walker carries the chain of ancestors
and refuses to descend into a node that is already on it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping

from .errors import CapsuleTreeError
from .ir import AppComposition, CapsuleDefinition, CapsuleInstance, TargetPlatform

TreeVisitor = Callable[[CapsuleInstance, int], None]


def iter_capsule_tree(
    instance: CapsuleInstance,
    depth: int = 0,
    _ancestors: frozenset[int] = frozenset(),
) -> Iterator[tuple[CapsuleInstance, int]]:
    """
    Yield ``(instance, depth)`` for every node of the subtree.

    Raises:
        CapsuleTreeError: If a node appears inside its own subtree
    """
    key = id(instance)
    if key in _ancestors:
        raise CapsuleTreeError(
            f"Capsule instance '{instance.id}' appears inside its own subtree"
        )
    yield instance, depth

    ancestors = _ancestors | {key}
    for child in instance.children or []:
        yield from iter_capsule_tree(child, depth + 1, ancestors)
    for slot_children in (instance.slots or {}).values():
        for child in slot_children:
            yield from iter_capsule_tree(child, depth + 1, ancestors)


def walk_capsule_tree(
    instance: CapsuleInstance,
    callback: TreeVisitor,
    depth: int = 0,
) -> None:
    """Invoke ``callback(node, depth)`` for every node of the subtree."""
    for node, node_depth in iter_capsule_tree(instance, depth):
        callback(node, node_depth)


def iter_composition(composition: AppComposition) -> Iterator[tuple[CapsuleInstance, int]]:
    """Walk every top-level instance of a composition in order."""
    for top in composition.top_level_instances():
        yield from iter_capsule_tree(top)


def used_capsule_ids(composition: AppComposition) -> list[str]:
    """Capsule ids referenced by the composition, in first-seen order."""
    seen: dict[str, None] = {}
    for node, _ in iter_composition(composition):
        seen.setdefault(node.capsule_id, None)
    return list(seen)


def collect_used_capsules(composition: AppComposition) -> set[str]:
    """Set of capsule ids referenced anywhere in the composition."""
    return set(used_capsule_ids(composition))


def collect_dependencies(
    composition: AppComposition,
    capsules: Mapping[str, CapsuleDefinition],
    platform: TargetPlatform,
) -> list[str]:
    """
    Union of the platform dependencies of every used capsule.

    Unknown capsules and capsules without an implementation for
    ``platform`` contribute nothing. Duplicates are dropped, keeping the
    first-seen order.
    """
    deps: dict[str, None] = {}
    for capsule_id in used_capsule_ids(composition):
        capsule = capsules.get(capsule_id)
        impl = capsule.implementation(platform) if capsule else None
        if impl is None:
            continue
        for dep in impl.dependencies:
            deps.setdefault(dep, None)
    return list(deps)
