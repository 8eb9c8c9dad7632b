"""Core CapsuleKit types and helpers shared by every compiler."""

from .errors import (
    CapsuleKitError,
    CapsuleTreeError,
    CompilationCancelled,
    CompilerNotFoundError,
    CompositionError,
    OutputError,
    RegistryError,
    SettingsError,
)
from .settings import CompilerSettings, load_settings
from .theme import ThemeProcessor

__all__ = [
    "CapsuleKitError",
    "CapsuleTreeError",
    "CompilationCancelled",
    "CompilerNotFoundError",
    "CompositionError",
    "OutputError",
    "RegistryError",
    "SettingsError",
    "CompilerSettings",
    "load_settings",
    "ThemeProcessor",
]
