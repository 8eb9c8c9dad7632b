"""
CapsuleKit - multi-platform code generation from capsule compositions.

A composition is a tree of capsule instances plus a theme. CapsuleKit
compiles it into ready-to-build projects for web (React + Vite), iOS
(SwiftUI), Android (Jetpack Compose) and desktop (Tauri).
"""

from ._version import __version__
from .capsules import CapsuleRegistry, get_registry
from .compilers import (
    PLATFORM_INFO,
    MultiPlatformCompiler,
    compile_all,
    compile_for_platform,
    create_compiler,
    summarize,
    write_result,
)
from .core.composition_loader import load_composition, parse_composition
from .core.errors import CapsuleKitError
from .core.ir import (
    AppComposition,
    CapsuleDefinition,
    CapsuleInstance,
    CompilationResult,
    GeneratedFile,
    TargetPlatform,
    ThemeConfig,
)
from .core.settings import CompilerSettings, load_settings

__all__ = [
    "__version__",
    # IR
    "AppComposition",
    "CapsuleDefinition",
    "CapsuleInstance",
    "CompilationResult",
    "GeneratedFile",
    "TargetPlatform",
    "ThemeConfig",
    # Capsules
    "CapsuleRegistry",
    "get_registry",
    # Compilers
    "MultiPlatformCompiler",
    "PLATFORM_INFO",
    "create_compiler",
    "compile_all",
    "compile_for_platform",
    "summarize",
    "write_result",
    # Loading
    "load_composition",
    "parse_composition",
    "CompilerSettings",
    "load_settings",
    "CapsuleKitError",
]
