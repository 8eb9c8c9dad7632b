"""Tests for the SwiftUI compiler."""

import pytest

from capsulekit.compilers import IOSCompiler
from capsulekit.compilers.base import CompilationContext
from capsulekit.compilers.ios import render_swiftui, swift_literal, version_key
from capsulekit.core.ir import (
    AppComposition,
    CapsuleDefinition,
    CapsuleInstance,
    IOSAppConfig,
    PlatformImplementation,
    PropDefinition,
    PropType,
    TargetPlatform,
)


@pytest.fixture
def lottie_capsule() -> CapsuleDefinition:
    return CapsuleDefinition(
        id="lottie",
        name="Lottie",
        props=[PropDefinition(name="name", type=PropType.STRING, required=True)],
        platforms={
            TargetPlatform.IOS: PlatformImplementation(
                code="struct LottieView: View { let name: String; var body: some View { EmptyView() } }",
                dependencies=[
                    "https://github.com/airbnb/lottie-ios@4.4.0",
                    "https://github.com/acme/haptics.git",
                ],
                min_version="17.0",
            ),
        },
    )


class TestSwiftLiterals:
    def test_scalars(self) -> None:
        assert swift_literal("a\"b") == '"a\\"b"'
        assert swift_literal(True) == "true"
        assert swift_literal(3.0) == "3"
        assert swift_literal(None) == "nil"

    def test_collections(self) -> None:
        assert swift_literal(["a", 1]) == '["a", 1]'
        assert swift_literal({}) == "[:]"
        assert swift_literal({"k": False}) == '["k": false]'

    def test_version_key(self) -> None:
        assert version_key("16.4") > version_key("16.0")
        assert version_key("17") > version_key("16.4")
        assert max(["15.0", "16.0", "9.3"], key=version_key) == "16.0"


class TestRenderSwiftUI:
    def _ctx(self, registry) -> CompilationContext[IOSAppConfig]:
        return CompilationContext(
            composition=AppComposition(name="App"),
            config=IOSAppConfig(),
            platform=TargetPlatform.IOS,
            capsules={capsule.id: capsule for capsule in registry.get_all()},
        )

    def test_arguments_follow_schema_order(self, registry) -> None:
        ctx = self._ctx(registry)
        instance = CapsuleInstance(
            id="b", capsule_id="button", props={"onPress": "go", "disabled": True, "text": "Go"}
        )
        assert render_swiftui(ctx, instance, 0) == 'ButtonView(text: "Go", disabled: true, onPress: {})'

    def test_trailing_closure(self, registry) -> None:
        ctx = self._ctx(registry)
        instance = CapsuleInstance(
            id="c",
            capsule_id="card",
            children=[CapsuleInstance(id="t", capsule_id="text", props={"content": "Hi"})],
        )
        assert render_swiftui(ctx, instance, 1) == (
            '    CardView {\n        TextView(content: "Hi")\n    }'
        )

    def test_unknown_prop_warns_and_drops(self, registry) -> None:
        ctx = self._ctx(registry)
        instance = CapsuleInstance(id="t", capsule_id="text", props={"content": "Hi", "glow": True})
        assert render_swiftui(ctx, instance, 0) == 'TextView(content: "Hi")'
        assert [w.code for w in ctx.diagnostics.warnings] == ["UNKNOWN_PROP"]

    def test_missing_capsule_comment(self, registry) -> None:
        ctx = self._ctx(registry)
        assert render_swiftui(ctx, CapsuleInstance(id="x", capsule_id="ghost"), 2) == (
            "        // Capsule not found: ghost"
        )


class TestIOSCompiler:
    def test_identity(self) -> None:
        assert IOSCompiler.platform == TargetPlatform.IOS
        assert IOSCompiler.name == "iOS SwiftUI Compiler"

    @pytest.mark.asyncio
    async def test_file_layout(self, ios_compiler: IOSCompiler, sample_composition) -> None:
        result = await ios_compiler.compile(sample_composition)
        assert result.success
        assert result.paths == [
            "project.yml",
            "TaskBoard/Info.plist",
            "TaskBoard/TaskBoardApp.swift",
            "TaskBoard/ContentView.swift",
            "TaskBoard/Theme/Colors.swift",
            "TaskBoard/Theme/Theme.swift",
            "TaskBoard/Components/CardView.swift",
            "TaskBoard/Components/TextView.swift",
            "TaskBoard/Components/ButtonView.swift",
            "TaskBoard/Components/InputView.swift",
            "TaskBoard/Components/Components.swift",
            "TaskBoard/Screens/HomeScreen.swift",
            "README.md",
            ".gitignore",
            ".swiftlint.yml",
        ]
        assert result.stats.file_count == len(result.files)

    @pytest.mark.asyncio
    async def test_home_screen(self, ios_compiler: IOSCompiler, sample_composition) -> None:
        result = await ios_compiler.compile(sample_composition)
        screen = result.get_file("TaskBoard/Screens/HomeScreen.swift").content
        assert '                CardView(title: "Today") {' in screen
        assert '                    TextView(content: "Hello")' in screen
        assert '                    ButtonView(text: "Add", onPress: {})' in screen
        assert (
            '                InputView(label: "Task", placeholder: "What needs doing?")' in screen
        )

    @pytest.mark.asyncio
    async def test_empty_home_screen(self, ios_compiler: IOSCompiler, empty_composition) -> None:
        result = await ios_compiler.compile(empty_composition)
        screen = result.get_file("Empty/Screens/HomeScreen.swift").content
        assert "                EmptyView()" in screen

    @pytest.mark.asyncio
    async def test_colors_and_theme(self, ios_compiler: IOSCompiler, sample_composition) -> None:
        result = await ios_compiler.compile(sample_composition)
        colors = result.get_file("TaskBoard/Theme/Colors.swift").content
        assert "static let brandPrimary = Color(red: 0.231, green: 0.510, blue: 0.965)" in colors
        theme = result.get_file("TaskBoard/Theme/Theme.swift").content
        assert "static let cornerRadius: CGFloat = 8" in theme
        assert "static let spacingScale: CGFloat = 1" in theme

    @pytest.mark.asyncio
    async def test_project_yml_defaults(self, ios_compiler: IOSCompiler, sample_composition) -> None:
        result = await ios_compiler.compile(sample_composition)
        project = result.get_file("project.yml").content
        assert project.startswith("name: TaskBoard\n")
        assert "  bundleIdPrefix: com.capsulekit\n" in project
        assert '    iOS: "16.0"' in project
        assert "PRODUCT_BUNDLE_IDENTIFIER: com.capsulekit.app" in project
        assert "packages:" not in project
        assert "DEVELOPMENT_TEAM" not in project

    @pytest.mark.asyncio
    async def test_project_yml_packages(self, lottie_capsule) -> None:
        compiler = IOSCompiler()
        compiler.register_capsules([lottie_capsule])
        composition = AppComposition(
            name="Anim",
            capsules=[CapsuleInstance(id="l", capsule_id="lottie", props={"name": "intro"})],
            platform_config={
                TargetPlatform.IOS: {
                    "bundleId": "com.acme.anim",
                    "teamId": "TEAM42",
                    "capabilities": ["com.apple.developer.healthkit"],
                }
            },
        )
        result = await compiler.compile(composition)
        project = result.get_file("project.yml").content
        assert "  lottie-ios:\n    url: https://github.com/airbnb/lottie-ios\n    from: 4.4.0" in project
        assert "  haptics:\n    url: https://github.com/acme/haptics.git\n    branch: main" in project
        assert "      - package: lottie-ios" in project
        assert "      - package: haptics" in project
        assert '    iOS: "17.0"' in project
        assert "DEVELOPMENT_TEAM: TEAM42" in project
        assert "path: Anim/Anim.entitlements" in project
        assert "com.apple.developer.healthkit: true" in project
        assert "PRODUCT_BUNDLE_IDENTIFIER: com.acme.anim" in project

    @pytest.mark.asyncio
    async def test_deployment_target_keeps_higher_config(self, ios_compiler: IOSCompiler) -> None:
        composition = AppComposition(
            name="App",
            capsules=[CapsuleInstance(id="b", capsule_id="button", props={"text": "x"})],
            platform_config={TargetPlatform.IOS: {"minVersion": "14.0"}},
        )
        result = await ios_compiler.compile(composition)
        assert '    iOS: "15.0"' in result.get_file("project.yml").content

    @pytest.mark.asyncio
    async def test_app_name_fallback(self, ios_compiler: IOSCompiler) -> None:
        result = await ios_compiler.compile(AppComposition(name="!!!"))
        assert "App/AppApp.swift" in result.paths

    @pytest.mark.asyncio
    async def test_components_listing(self, ios_compiler: IOSCompiler, sample_composition) -> None:
        result = await ios_compiler.compile(sample_composition)
        listing = result.get_file("TaskBoard/Components/Components.swift").content
        assert 'static let all: [String] = ["CardView", "TextView", "ButtonView", "InputView"]' in listing
        card = result.get_file("TaskBoard/Components/CardView.swift").content
        assert "//  Capsule: card v1.0.0" in card
        assert "struct CardView<Content: View>: View" in card
