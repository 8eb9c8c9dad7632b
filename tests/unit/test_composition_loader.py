"""Tests for loading compositions from JSON."""

import json
from pathlib import Path

import pytest

from capsulekit.core.composition_loader import load_composition, parse_composition
from capsulekit.core.errors import CompositionError
from capsulekit.core.ir import TargetPlatform


class TestParseComposition:
    def test_editor_payload(self) -> None:
        composition = parse_composition(
            {
                "id": "comp-1",
                "name": "Notes",
                "targets": ["web", "android"],
                "capsules": [
                    {"id": "t1", "type": "text", "props": {"content": "Hello"}},
                    {"id": "b1", "capsuleId": "button", "props": {"text": "Save"}},
                ],
                "theme": {"colors": {"primary": "#123456", "text": {"primary": "#000000"}}},
            }
        )
        assert composition.targets == [TargetPlatform.WEB, TargetPlatform.ANDROID]
        assert [c.capsule_id for c in composition.capsules] == ["text", "button"]
        assert composition.theme.colors.primary == "#123456"
        assert composition.theme.colors.text.primary == "#000000"

    def test_invalid_payload(self) -> None:
        with pytest.raises(CompositionError, match="<data>"):
            parse_composition({"targets": ["web"]})


class TestLoadComposition:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"name": "Notes", "root": {"id": "r", "capsuleId": "card"}}))
        composition = load_composition(path)
        assert composition.name == "Notes"
        assert composition.root is not None

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CompositionError, match="Cannot read"):
            load_composition(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(CompositionError, match="Malformed JSON"):
            load_composition(path)

    def test_invalid_composition_names_file(self, tmp_path: Path) -> None:
        path = tmp_path / "invalid.json"
        path.write_text(json.dumps({"name": "X", "targets": ["watchos"]}))
        with pytest.raises(CompositionError, match="invalid.json"):
            load_composition(path)
