"""Tests for the shared compile template in compilers.base."""

import asyncio

import pytest
from pydantic import ValidationError

from capsulekit.compilers import WebCompiler
from capsulekit.compilers.base import (
    CompilationContext,
    Diagnostics,
    FileStep,
    create_result,
    merge_config,
)
from capsulekit.core.errors import CompilationCancelled
from capsulekit.core.ir import (
    AppComposition,
    CapsuleInstance,
    DesktopAppConfig,
    IOSAppConfig,
    TargetPlatform,
    WebAppConfig,
)


class _ExplodingCompiler(WebCompiler):
    """Web compiler whose third step raises."""

    def get_steps(self, ctx: CompilationContext[WebAppConfig]) -> list[FileStep]:
        steps = super().get_steps(ctx)

        def explode(ctx: CompilationContext[WebAppConfig]) -> None:
            raise RuntimeError("disk on fire")

        return [*steps[:2], explode, *steps[2:]]


# =============================================================================
# Helpers
# =============================================================================


class TestDiagnostics:
    def test_success_tracks_errors_only(self) -> None:
        diagnostics = Diagnostics()
        diagnostics.add_warning("W", "warned", suggestion="do better")
        assert diagnostics.success
        diagnostics.add_error("E", "broke", capsule_id="button")
        assert not diagnostics.success
        assert diagnostics.errors[0].capsule_id == "button"
        assert diagnostics.warnings[0].suggestion == "do better"

    def test_reset(self) -> None:
        diagnostics = Diagnostics()
        diagnostics.add_error("E", "broke")
        diagnostics.add_warning("W", "warned")
        diagnostics.reset()
        assert diagnostics.errors == []
        assert diagnostics.warnings == []


class TestMergeConfig:
    def test_camel_case_override(self) -> None:
        merged = merge_config(IOSAppConfig(), {"bundleId": "com.acme.notes", "teamId": "ABC"})
        assert merged.bundle_id == "com.acme.notes"
        assert merged.team_id == "ABC"
        assert merged.min_version == IOSAppConfig().min_version

    def test_snake_case_override(self) -> None:
        assert merge_config(IOSAppConfig(), {"bundle_id": "x.y"}).bundle_id == "x.y"

    def test_does_not_mutate_input(self) -> None:
        config = IOSAppConfig()
        merge_config(config, {"bundleId": "changed"})
        assert config.bundle_id == "com.capsulekit.app"

    def test_empty_override_returns_copy(self) -> None:
        config = WebAppConfig()
        merged = merge_config(config, {})
        assert merged == config
        assert merged is not config

    def test_shallow_merge_replaces_nested_model(self) -> None:
        merged = merge_config(DesktopAppConfig(), {"windowConfig": {"width": 1440}})
        assert merged.window_config.width == 1440
        assert merged.window_config.height == 800

    def test_invalid_override(self) -> None:
        with pytest.raises(ValidationError):
            merge_config(WebAppConfig(), {"typescript": "definitely"})


class TestCreateResult:
    def test_totals(self) -> None:
        ctx = CompilationContext(
            composition=AppComposition(name="App"),
            config=WebAppConfig(),
            platform=TargetPlatform.WEB,
            capsules={},
        )
        ctx.emit("a.txt", "abc")
        ctx.emit("b.txt", "de", "text")
        result = create_result(
            TargetPlatform.WEB, ctx.diagnostics, ctx.files, capsule_count=3, compilation_time=1.25
        )
        assert result.success
        assert result.metadata.total_files == 2
        assert result.metadata.total_size == 5
        assert result.metadata.capsule_count == 3
        assert result.metadata.compiled_at.endswith("+00:00")
        assert result.stats.file_count == 2
        assert result.stats.compilation_time == 1.25


# =============================================================================
# Compile template
# =============================================================================


class TestValidation:
    @pytest.mark.asyncio
    async def test_missing_name_fails_but_emits(self, web_compiler: WebCompiler) -> None:
        result = await web_compiler.compile(AppComposition(name="   "))
        assert not result.success
        assert [error.code for error in result.errors] == ["MISSING_NAME"]
        assert result.files

    @pytest.mark.asyncio
    async def test_no_capsules_warning(
        self, web_compiler: WebCompiler, empty_composition: AppComposition
    ) -> None:
        result = await web_compiler.compile(empty_composition)
        assert result.success
        warning = next(w for w in result.warnings if w.code == "NO_CAPSULES")
        assert warning.suggestion == "Add at least one capsule to the composition"

    @pytest.mark.asyncio
    async def test_unknown_capsule_warns_and_is_skipped(self, web_compiler: WebCompiler) -> None:
        composition = AppComposition(
            name="App", capsules=[CapsuleInstance(id="g1", capsule_id="ghost")]
        )
        result = await web_compiler.compile(composition)
        assert result.success
        warning = next(w for w in result.warnings if w.code == "CAPSULE_NOT_FOUND")
        assert warning.capsule_id == "ghost"
        page = result.get_file("src/pages/HomePage.tsx")
        assert page is not None
        assert "{/* Capsule not found: ghost */}" in page.content

    @pytest.mark.asyncio
    async def test_capsule_without_platform_impl(self, registry, web_only_capsule) -> None:
        from capsulekit.compilers import IOSCompiler

        compiler = IOSCompiler()
        compiler.register_capsules([*registry.get_all(), web_only_capsule])
        assert not compiler.supports_capsule("chart")

        composition = AppComposition(
            name="App",
            capsules=[
                CapsuleInstance(id="c1", capsule_id="chart"),
                CapsuleInstance(id="t1", capsule_id="text", props={"content": "hi"}),
            ],
        )
        result = await compiler.compile(composition)
        assert result.success
        codes = [w.code for w in result.warnings]
        assert "NO_IOS_IMPL" in codes
        assert "CAPSULE_NOT_FOUND" not in codes
        assert not any("Chart" in path for path in result.paths)

    @pytest.mark.asyncio
    async def test_unsupported_config_values_warn(self, web_compiler: WebCompiler) -> None:
        composition = AppComposition(
            name="App",
            capsules=[CapsuleInstance(id="t1", capsule_id="text")],
            platform_config={TargetPlatform.WEB: {"framework": "vue", "ssr": True}},
        )
        result = await web_compiler.compile(composition)
        assert result.success
        unsupported = [w for w in result.warnings if w.code == "UNSUPPORTED_CONFIG"]
        assert len(unsupported) == 2
        assert "framework=vue" in unsupported[0].message
        assert "framework=react" in unsupported[0].message
        assert "ssr=True" in unsupported[1].message
        assert result.get_file("src/App.tsx") is not None

    @pytest.mark.asyncio
    async def test_default_config_has_no_unsupported_warning(
        self, orchestrator, sample_composition
    ) -> None:
        results = await orchestrator.compile_all(
            sample_composition, [TargetPlatform.IOS, TargetPlatform.ANDROID, TargetPlatform.DESKTOP]
        )
        for result in results.values():
            assert all(w.code != "UNSUPPORTED_CONFIG" for w in result.warnings)


class TestCompileTemplate:
    @pytest.mark.asyncio
    async def test_stats_match_files(self, web_compiler: WebCompiler, sample_composition) -> None:
        result = await web_compiler.compile(sample_composition)
        assert result.success
        assert result.platform == TargetPlatform.WEB
        assert result.stats.file_count == len(result.files)
        assert result.stats.total_size == sum(f.size for f in result.files)
        assert result.metadata.capsule_count == web_compiler.capsule_count
        assert result.stats.compilation_time >= 0

    @pytest.mark.asyncio
    async def test_idempotent(self, web_compiler: WebCompiler, sample_composition) -> None:
        first = await web_compiler.compile(sample_composition)
        second = await web_compiler.compile(sample_composition)
        assert [(f.path, f.content) for f in first.files] == [
            (f.path, f.content) for f in second.files
        ]
        assert first.warnings == second.warnings

    @pytest.mark.asyncio
    async def test_diagnostics_do_not_leak_between_calls(self, web_compiler: WebCompiler) -> None:
        broken = AppComposition(name="", capsules=[CapsuleInstance(id="g", capsule_id="ghost")])
        clean = AppComposition(
            name="Clean", capsules=[CapsuleInstance(id="t", capsule_id="text", props={"content": "x"})]
        )
        assert not (await web_compiler.compile(broken)).success
        result = await web_compiler.compile(clean)
        assert result.success
        assert result.errors == []
        assert result.warnings == []

    @pytest.mark.asyncio
    async def test_concurrent_compiles_are_isolated(self, web_compiler: WebCompiler) -> None:
        plain = AppComposition(name="Plain", capsules=[CapsuleInstance(id="t", capsule_id="text")])
        js_only = AppComposition(
            name="Js Only",
            capsules=[CapsuleInstance(id="g", capsule_id="ghost")],
            platform_config={TargetPlatform.WEB: {"typescript": False}},
        )
        results = await asyncio.gather(*(web_compiler.compile(c) for c in [plain, js_only] * 3))
        for result in results[0::2]:
            assert result.get_file("tsconfig.json") is not None
            assert result.warnings == []
        for result in results[1::2]:
            assert result.get_file("tsconfig.json") is None
            assert [w.code for w in result.warnings] == ["CAPSULE_NOT_FOUND"]
        assert web_compiler.config.typescript is True

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_error(self, registry, sample_composition) -> None:
        compiler = _ExplodingCompiler()
        compiler.register_capsules(registry.get_all())
        result = await compiler.compile(sample_composition)
        assert not result.success
        assert [error.code for error in result.errors] == ["COMPILATION_FAILED"]
        assert "disk on fire" in result.errors[0].message
        assert result.paths == ["package.json", "tsconfig.json"]

    @pytest.mark.asyncio
    async def test_invalid_platform_config_is_reported(self, web_compiler: WebCompiler) -> None:
        composition = AppComposition(
            name="App", platform_config={TargetPlatform.WEB: {"typescript": "maybe"}}
        )
        result = await web_compiler.compile(composition)
        assert not result.success
        assert result.errors[0].code == "COMPILATION_FAILED"
        assert result.files == []

    @pytest.mark.asyncio
    async def test_cancelled_before_start(self, web_compiler: WebCompiler, sample_composition) -> None:
        event = asyncio.Event()
        event.set()
        with pytest.raises(CompilationCancelled):
            await web_compiler.compile(sample_composition, cancel_event=event)

    @pytest.mark.asyncio
    async def test_unset_event_does_not_cancel(
        self, web_compiler: WebCompiler, sample_composition
    ) -> None:
        result = await web_compiler.compile(sample_composition, cancel_event=asyncio.Event())
        assert result.success

    def test_configure_sets_defaults(self) -> None:
        compiler = WebCompiler()
        compiler.configure(typescript=False)
        assert compiler.config.typescript is False
