"""
Error types for CapsuleKit registry, composition and compilation.

Ordinary input problems found while compiling are reported as
CompilationError entries on a result, never raised. The exceptions
below cover API misuse and I/O failures around compilation.
"""


class CapsuleKitError(Exception):
    """Base exception for all CapsuleKit errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class RegistryError(CapsuleKitError):
    """
    Raised when a capsule definition cannot be registered.

    Examples:
    - Definition with an empty id
    """

    pass


class CompositionError(CapsuleKitError):
    """
    Raised when a composition cannot be loaded.

    Examples:
    - Missing or unreadable composition file
    - Malformed JSON
    - Unknown target platform
    """

    pass


class CapsuleTreeError(CapsuleKitError):
    """Raised when an instance appears inside its own subtree."""

    pass


class CompilerNotFoundError(CapsuleKitError):
    """Raised when no compiler is registered for a requested platform."""

    def __init__(self, platform: str, available: list[str]):
        self.platform = platform
        self.available = available
        super().__init__(
            f"No compiler registered for platform '{platform}'. "
            f"Available platforms: {available}"
        )


class CompilationCancelled(CapsuleKitError):
    """Raised inside compile() when its cancel event has been set."""

    pass


class OutputError(CapsuleKitError):
    """Raised when generated files cannot be written to the output directory."""

    pass


class SettingsError(CapsuleKitError):
    """Raised when capsulekit.toml is malformed."""

    pass
