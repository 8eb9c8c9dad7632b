"""Tests for the composition and result IR models."""

import pytest
from pydantic import ValidationError

from capsulekit.core.ir import (
    ALL_PLATFORMS,
    AppComposition,
    CapsuleInstance,
    CompilationResult,
    GeneratedFile,
    TargetPlatform,
    ThemeConfig,
)


class TestAppComposition:
    def test_defaults(self) -> None:
        composition = AppComposition(name="App")
        assert composition.targets == list(ALL_PLATFORMS)
        assert composition.version == "1.0.0"
        assert composition.capsules == []
        assert composition.root is None
        assert isinstance(composition.theme, ThemeConfig)

    def test_null_targets_and_theme_use_defaults(self) -> None:
        composition = AppComposition.model_validate({"name": "App", "targets": None, "theme": None})
        assert composition.targets == list(ALL_PLATFORMS)
        assert composition.theme == ThemeConfig()

    def test_null_theme_fields_use_defaults(self) -> None:
        composition = AppComposition.model_validate(
            {
                "name": "App",
                "theme": {
                    "name": None,
                    "colors": {"primary": "#123456", "text": None},
                    "typography": {"fontFamily": None, "scale": None},
                    "spacing": None,
                    "borderRadius": None,
                    "shadows": None,
                },
            }
        )
        theme = composition.theme
        assert theme.colors.primary == "#123456"
        assert theme.colors.resolved()["text_primary"] == "#0f172a"
        assert theme.typography.font_family == "Inter"
        assert theme.typography.scale == "normal"
        assert theme.spacing == "normal"
        assert theme.border_radius == "md"
        assert theme.shadows is True
        assert theme.name == "Default"

    def test_null_colors_and_typography(self) -> None:
        theme = ThemeConfig.model_validate({"colors": None, "typography": None})
        assert theme == ThemeConfig()

    def test_name_is_required(self) -> None:
        with pytest.raises(ValidationError):
            AppComposition.model_validate({"targets": ["web"]})

    def test_unknown_target_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AppComposition.model_validate({"name": "App", "targets": ["watchos"]})

    def test_camel_case_json(self) -> None:
        composition = AppComposition.model_validate(
            {
                "name": "App",
                "targets": ["ios"],
                "platformConfig": {"ios": {"bundleId": "com.acme.app"}},
                "root": {"id": "r", "capsuleId": "card", "children": []},
            }
        )
        assert composition.platform_config[TargetPlatform.IOS] == {"bundleId": "com.acme.app"}
        assert composition.root is not None
        assert composition.root.capsule_id == "card"

    def test_root_wins_over_flat_list(self) -> None:
        root = CapsuleInstance(id="r", capsule_id="card")
        composition = AppComposition(
            name="App",
            root=root,
            capsules=[CapsuleInstance(id="x", capsule_id="text")],
        )
        assert composition.top_level_instances() == [root]

    def test_overrides_for_returns_copy(self) -> None:
        composition = AppComposition(
            name="App", platform_config={TargetPlatform.WEB: {"typescript": False}}
        )
        overrides = composition.overrides_for(TargetPlatform.WEB)
        overrides["typescript"] = True
        assert composition.platform_config[TargetPlatform.WEB] == {"typescript": False}
        assert composition.overrides_for(TargetPlatform.IOS) == {}


class TestCapsuleInstance:
    def test_flat_type_key(self) -> None:
        instance = CapsuleInstance.model_validate({"id": "b1", "type": "button", "props": {}})
        assert instance.capsule_id == "button"

    def test_explicit_capsule_id_wins_over_type(self) -> None:
        instance = CapsuleInstance.model_validate({"id": "b1", "type": "x", "capsuleId": "button"})
        assert instance.capsule_id == "button"

    def test_nested_order(self) -> None:
        child = CapsuleInstance(id="c", capsule_id="text")
        footer = CapsuleInstance(id="f", capsule_id="button")
        instance = CapsuleInstance(
            id="m", capsule_id="modal", children=[child], slots={"footer": [footer]}
        )
        assert instance.has_nested()
        assert [n.id for n in instance.nested()] == ["c", "f"]

    def test_empty_nested(self) -> None:
        instance = CapsuleInstance(id="m", capsule_id="modal", children=[], slots={"footer": []})
        assert not instance.has_nested()
        assert instance.nested() == []


class TestResults:
    def test_generated_file_size(self) -> None:
        generated = GeneratedFile(path="a.txt", content="hello")
        assert generated.size == 5
        assert generated.encoding == "utf-8"

    def test_result_lookup(self) -> None:
        result = CompilationResult.model_validate(
            {
                "platform": "web",
                "success": True,
                "files": [{"path": "index.html", "content": "<html>"}],
                "metadata": {
                    "capsuleCount": 1,
                    "totalFiles": 1,
                    "totalSize": 6,
                    "compiledAt": "2024-01-01T00:00:00+00:00",
                },
                "stats": {"fileCount": 1, "totalSize": 6, "compilationTime": 1.5},
            }
        )
        assert result.paths == ["index.html"]
        assert result.get_file("index.html") is not None
        assert result.get_file("missing") is None
        assert result.errors == []
