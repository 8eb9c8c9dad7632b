"""
Compilation result types for CapsuleKit IR.

A CompilationResult is built fresh by every compile() call and frozen
once returned.
"""

from __future__ import annotations

from pydantic import Field

from .base import FrozenIRModel
from .platforms import TargetPlatform


class GeneratedFile(FrozenIRModel):
    """One emitted project file. ``path`` is relative and '/'-separated."""

    path: str
    content: str
    encoding: str = "utf-8"
    language: str | None = None

    @property
    def size(self) -> int:
        return len(self.content)


class CompilationError(FrozenIRModel):
    code: str
    message: str
    capsule_id: str | None = None


class CompilationWarning(FrozenIRModel):
    code: str
    message: str
    capsule_id: str | None = None
    suggestion: str | None = None


class CompilationMetadata(FrozenIRModel):
    capsule_count: int
    total_files: int
    total_size: int
    compiled_at: str  # ISO-8601


class CompilationStats(FrozenIRModel):
    file_count: int
    total_size: int
    compilation_time: float  # milliseconds


class CompilationResult(FrozenIRModel):
    """Files and diagnostics produced by one platform compile."""

    platform: TargetPlatform
    success: bool
    files: list[GeneratedFile] = Field(default_factory=list)
    errors: list[CompilationError] = Field(default_factory=list)
    warnings: list[CompilationWarning] = Field(default_factory=list)
    metadata: CompilationMetadata
    stats: CompilationStats

    def get_file(self, path: str) -> GeneratedFile | None:
        for generated in self.files:
            if generated.path == path:
                return generated
        return None

    @property
    def paths(self) -> list[str]:
        return [generated.path for generated in self.files]


class MultiPlatformSummary(FrozenIRModel):
    """Roll-up of a compile_all batch."""

    success: bool
    total_platforms: int
    successful_platforms: int
    failed_platforms: list[TargetPlatform] = Field(default_factory=list)
