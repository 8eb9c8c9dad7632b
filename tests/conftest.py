"""Shared pytest fixtures for CapsuleKit tests."""

from pathlib import Path

import pytest

from capsulekit.capsules import CapsuleRegistry, reset_registry
from capsulekit.compilers import (
    AndroidCompiler,
    DesktopCompiler,
    IOSCompiler,
    MultiPlatformCompiler,
    WebCompiler,
    create_compiler,
    reset_default_compiler,
)
from capsulekit.core.ir import (
    AppComposition,
    CapsuleDefinition,
    CapsuleInstance,
    PlatformImplementation,
    PropDefinition,
    PropType,
    TargetPlatform,
    ThemeColors,
    ThemeConfig,
)


@pytest.fixture(autouse=True)
def _fresh_defaults():
    """Keep the module-level registry and orchestrator per test."""
    reset_registry()
    reset_default_compiler()
    yield
    reset_registry()
    reset_default_compiler()


@pytest.fixture
def example_dir() -> Path:
    """Return path to the bundled task board example."""
    return Path(__file__).parent.parent / "examples" / "task_board"


@pytest.fixture
def registry() -> CapsuleRegistry:
    """Return an isolated registry seeded with the built-in capsules."""
    return CapsuleRegistry.with_builtins()


@pytest.fixture
def web_only_capsule() -> CapsuleDefinition:
    """A capsule that only ships a web template."""
    return CapsuleDefinition(
        id="chart",
        name="Chart",
        props=[PropDefinition(name="series", type=PropType.ARRAY)],
        platforms={
            TargetPlatform.WEB: PlatformImplementation(
                code="export function Chart() { return null }",
                dependencies=["recharts:^2.10.0"],
            ),
            TargetPlatform.IOS: None,
        },
    )


@pytest.fixture
def sample_composition() -> AppComposition:
    """A small composition: a card holding a text and a button, then an input."""
    return AppComposition(
        name="Task Board",
        description="Track tasks",
        targets=[TargetPlatform.WEB, TargetPlatform.IOS, TargetPlatform.ANDROID],
        theme=ThemeConfig(colors=ThemeColors(primary="#3B82F6")),
        capsules=[
            CapsuleInstance(
                id="card-1",
                capsule_id="card",
                props={"title": "Today"},
                children=[
                    CapsuleInstance(id="text-1", capsule_id="text", props={"content": "Hello"}),
                    CapsuleInstance(
                        id="button-1",
                        capsule_id="button",
                        props={"text": "Add", "onPress": "addTask"},
                    ),
                ],
            ),
            CapsuleInstance(
                id="input-1",
                capsule_id="input",
                props={"label": "Task", "placeholder": "What needs doing?"},
            ),
        ],
    )


@pytest.fixture
def empty_composition() -> AppComposition:
    return AppComposition(name="Empty")


@pytest.fixture
def web_compiler(registry: CapsuleRegistry) -> WebCompiler:
    compiler = WebCompiler()
    compiler.register_capsules(registry.get_all())
    return compiler


@pytest.fixture
def ios_compiler(registry: CapsuleRegistry) -> IOSCompiler:
    compiler = IOSCompiler()
    compiler.register_capsules(registry.get_all())
    return compiler


@pytest.fixture
def android_compiler(registry: CapsuleRegistry) -> AndroidCompiler:
    compiler = AndroidCompiler()
    compiler.register_capsules(registry.get_all())
    return compiler


@pytest.fixture
def desktop_compiler(registry: CapsuleRegistry) -> DesktopCompiler:
    compiler = DesktopCompiler()
    compiler.register_capsules(registry.get_all())
    return compiler


@pytest.fixture
def orchestrator(registry: CapsuleRegistry) -> MultiPlatformCompiler:
    return create_compiler(registry)
