"""
Platform compilers for CapsuleKit.

Each compiler turns an AppComposition into a complete native project
for one platform. ``create_compiler`` wires all four into a
MultiPlatformCompiler; the module-level functions below delegate to a
default instance built from the default capsule registry.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..capsules import get_registry
from ..capsules.registry import CapsuleRegistry
from ..core.ir import AppComposition, CompilationResult, TargetPlatform
from ..core.settings import CompilerSettings
from .android import AndroidCompiler
from .base import CompilationContext, Diagnostics, PlatformCompiler, ProjectCompiler
from .desktop import DesktopCompiler
from .ios import IOSCompiler
from .orchestrator import MultiPlatformCompiler, summarize
from .output import resolve_output_path, write_result
from .web import WebCompiler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlatformInfo:
    """Display metadata for a target platform."""

    name: str
    framework: str
    output: str
    description: str
    icon: str
    color: str


PLATFORM_INFO: dict[TargetPlatform, PlatformInfo] = {
    TargetPlatform.IOS: PlatformInfo(
        name="iOS",
        framework="SwiftUI",
        output="Xcode Project",
        description="Native iOS app built with SwiftUI",
        icon="apple",
        color="#007AFF",
    ),
    TargetPlatform.ANDROID: PlatformInfo(
        name="Android",
        framework="Jetpack Compose",
        output="Android Studio Project",
        description="Native Android app built with Jetpack Compose",
        icon="android",
        color="#3DDC84",
    ),
    TargetPlatform.WEB: PlatformInfo(
        name="Web",
        framework="React + Vite",
        output="Vite Project",
        description="Single-page web app built with React, Vite and Tailwind",
        icon="globe",
        color="#646CFF",
    ),
    TargetPlatform.DESKTOP: PlatformInfo(
        name="Desktop",
        framework="Tauri + React",
        output="Tauri Project",
        description="Cross-platform desktop app built with Tauri and React",
        icon="desktop",
        color="#FFC131",
    ),
}

_COMPILER_TYPES: tuple[type[ProjectCompiler], ...] = (
    WebCompiler,
    IOSCompiler,
    AndroidCompiler,
    DesktopCompiler,
)


def create_compiler(
    registry: CapsuleRegistry | None = None,
    settings: CompilerSettings | None = None,
) -> MultiPlatformCompiler:
    """
    Build a MultiPlatformCompiler with all four platform compilers.

    Args:
        registry: Capsule source; the default registry when omitted
        settings: Loaded ``capsulekit.toml``; its platform sections seed
            each compiler's default config

    Returns:
        Orchestrator with web, iOS, Android and desktop compilers registered
    """
    registry = registry if registry is not None else get_registry()
    capsules = registry.get_all()

    orchestrator = MultiPlatformCompiler()
    for compiler_type in _COMPILER_TYPES:
        compiler = compiler_type()
        if settings is not None:
            overrides = settings.config_for(compiler.platform)
            if overrides:
                compiler.configure(**overrides)
        compiler.register_capsules(capsules)
        orchestrator.register_compiler(compiler)

    logger.debug("Created compiler with %d capsules", len(capsules))
    return orchestrator


# Default orchestrator instance
_default: MultiPlatformCompiler | None = None


def get_default_compiler() -> MultiPlatformCompiler:
    """Get the default orchestrator, built from the default registry on first call."""
    global _default
    if _default is None:
        _default = create_compiler()
    return _default


def reset_default_compiler() -> None:
    """Drop the default orchestrator so the next call rebuilds it."""
    global _default
    _default = None


def get_available_platforms() -> list[TargetPlatform]:
    return get_default_compiler().get_available_platforms()


async def compile_for_platform(
    composition: AppComposition,
    platform: TargetPlatform,
    *,
    cancel_event: asyncio.Event | None = None,
) -> CompilationResult:
    return await get_default_compiler().compile_for_platform(
        composition, platform, cancel_event=cancel_event
    )


async def compile_all(
    composition: AppComposition,
    platforms: Iterable[TargetPlatform] | None = None,
    *,
    cancel_event: asyncio.Event | None = None,
    timeout: float | None = None,
) -> dict[TargetPlatform, CompilationResult]:
    return await get_default_compiler().compile_all(
        composition, platforms, cancel_event=cancel_event, timeout=timeout
    )


__all__ = [
    # Compilers
    "PlatformCompiler",
    "ProjectCompiler",
    "WebCompiler",
    "IOSCompiler",
    "AndroidCompiler",
    "DesktopCompiler",
    "MultiPlatformCompiler",
    # Per-compile state
    "CompilationContext",
    "Diagnostics",
    # Platform metadata
    "PlatformInfo",
    "PLATFORM_INFO",
    # Entry points
    "create_compiler",
    "get_default_compiler",
    "reset_default_compiler",
    "get_available_platforms",
    "compile_for_platform",
    "compile_all",
    "summarize",
    # Output
    "resolve_output_path",
    "write_result",
]
