"""Tests for capsule tree traversal and dependency collection."""

import pytest

from capsulekit.core.errors import CapsuleTreeError
from capsulekit.core.ir import AppComposition, CapsuleInstance, TargetPlatform
from capsulekit.core.tree import (
    collect_dependencies,
    collect_used_capsules,
    iter_capsule_tree,
    iter_composition,
    used_capsule_ids,
    walk_capsule_tree,
)


def _tree() -> CapsuleInstance:
    return CapsuleInstance(
        id="root",
        capsule_id="card",
        children=[
            CapsuleInstance(
                id="inner",
                capsule_id="card",
                children=[CapsuleInstance(id="t1", capsule_id="text")],
            ),
            CapsuleInstance(id="b1", capsule_id="button"),
        ],
        slots={"footer": [CapsuleInstance(id="i1", capsule_id="image")]},
    )


class TestTraversal:
    def test_pre_order_with_depth(self) -> None:
        visited = [(node.id, depth) for node, depth in iter_capsule_tree(_tree())]
        assert visited == [("root", 0), ("inner", 1), ("t1", 2), ("b1", 1), ("i1", 1)]

    def test_walk_invokes_callback_per_node(self) -> None:
        seen: list[str] = []
        walk_capsule_tree(_tree(), lambda node, depth: seen.append(node.id))
        assert seen == ["root", "inner", "t1", "b1", "i1"]

    def test_walk_with_start_depth(self) -> None:
        depths: list[int] = []
        walk_capsule_tree(CapsuleInstance(id="x", capsule_id="text"), lambda n, d: depths.append(d), 3)
        assert depths == [3]

    def test_cycle_is_rejected(self) -> None:
        node = CapsuleInstance(id="loop", capsule_id="card", children=[])
        node.children.append(node)
        with pytest.raises(CapsuleTreeError, match="loop"):
            list(iter_capsule_tree(node))

    def test_shared_subtree_is_not_a_cycle(self) -> None:
        shared = CapsuleInstance(id="shared", capsule_id="text")
        root = CapsuleInstance(id="root", capsule_id="card", children=[shared, shared])
        assert [n.id for n, _ in iter_capsule_tree(root)] == ["root", "shared", "shared"]

    def test_iter_composition_flat_list(self) -> None:
        composition = AppComposition(
            name="App",
            capsules=[_tree(), CapsuleInstance(id="last", capsule_id="input")],
        )
        ids = [node.id for node, _ in iter_composition(composition)]
        assert ids == ["root", "inner", "t1", "b1", "i1", "last"]


class TestUsedCapsules:
    def test_first_seen_order_without_duplicates(self) -> None:
        composition = AppComposition(name="App", root=_tree())
        assert used_capsule_ids(composition) == ["card", "text", "button", "image"]
        assert collect_used_capsules(composition) == {"card", "text", "button", "image"}

    def test_empty_composition(self) -> None:
        assert used_capsule_ids(AppComposition(name="App")) == []


class TestCollectDependencies:
    def test_union_in_first_seen_order(self, registry) -> None:
        composition = AppComposition(name="App", root=_tree())
        capsules = {capsule.id: capsule for capsule in registry.get_all()}
        assert collect_dependencies(composition, capsules, TargetPlatform.WEB) == [
            "lucide-react:^0.300.0"
        ]
        assert collect_dependencies(composition, capsules, TargetPlatform.ANDROID) == [
            "androidx.compose.material:material-icons-extended",
            "io.coil-kt:coil-compose:2.5.0",
        ]

    def test_unknown_and_unsupported_contribute_nothing(self, web_only_capsule) -> None:
        composition = AppComposition(
            name="App",
            capsules=[
                CapsuleInstance(id="c", capsule_id="chart"),
                CapsuleInstance(id="u", capsule_id="unknown"),
            ],
        )
        capsules = {"chart": web_only_capsule}
        assert collect_dependencies(composition, capsules, TargetPlatform.WEB) == ["recharts:^2.10.0"]
        assert collect_dependencies(composition, capsules, TargetPlatform.IOS) == []
