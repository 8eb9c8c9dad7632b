"""
CapsuleKit Intermediate Representation (IR) types.

Types are organized into submodules and re-exported here.
"""

from .base import FrozenIRModel, IRModel
from .capsules import (
    CapsuleCategory,
    CapsuleDefinition,
    PlatformImplementation,
    PropDefinition,
    PropType,
)
from .composition import AppComposition, CapsuleInstance, PropValue
from .platforms import (
    ALL_PLATFORMS,
    AndroidAppConfig,
    AndroidFramework,
    DesktopAppConfig,
    DesktopFramework,
    IOSAppConfig,
    IOSFramework,
    TargetPlatform,
    WebAppConfig,
    WebFramework,
    WebStyling,
    WindowConfig,
)
from .results import (
    CompilationError,
    CompilationMetadata,
    CompilationResult,
    CompilationStats,
    CompilationWarning,
    GeneratedFile,
    MultiPlatformSummary,
)
from .theme import (
    DEFAULT_COLORS,
    DEFAULT_FONT_FAMILY,
    BorderRadius,
    SpacingDensity,
    TextColors,
    ThemeColors,
    ThemeConfig,
    Typography,
    TypographyScale,
)

__all__ = [
    # Base
    "IRModel",
    "FrozenIRModel",
    # Platforms
    "TargetPlatform",
    "ALL_PLATFORMS",
    "WebAppConfig",
    "WebFramework",
    "WebStyling",
    "IOSAppConfig",
    "IOSFramework",
    "AndroidAppConfig",
    "AndroidFramework",
    "DesktopAppConfig",
    "DesktopFramework",
    "WindowConfig",
    # Capsules
    "CapsuleCategory",
    "CapsuleDefinition",
    "PlatformImplementation",
    "PropDefinition",
    "PropType",
    # Composition
    "AppComposition",
    "CapsuleInstance",
    "PropValue",
    # Theme
    "ThemeConfig",
    "ThemeColors",
    "TextColors",
    "Typography",
    "TypographyScale",
    "SpacingDensity",
    "BorderRadius",
    "DEFAULT_COLORS",
    "DEFAULT_FONT_FAMILY",
    # Results
    "GeneratedFile",
    "CompilationError",
    "CompilationWarning",
    "CompilationMetadata",
    "CompilationStats",
    "CompilationResult",
    "MultiPlatformSummary",
]
