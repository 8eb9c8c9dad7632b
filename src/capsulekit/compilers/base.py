"""
Platform compiler contract.

A PlatformCompiler turns an AppComposition into a CompilationResult for
one target platform. ProjectCompiler is the template every bundled
compiler builds on:

1. create a call-scoped Diagnostics accumulator
2. merge the composition's platform overrides over the default config
3. validate the composition and resolve the capsules it uses
4. run the platform's ordered file steps
5. package files and diagnostics into a frozen result

Input problems end up as CompilationError / CompilationWarning entries.
Anything unexpected is caught and reported as a single
``COMPILATION_FAILED`` error, keeping whatever files were emitted.
"""

from __future__ import annotations

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_snake

from ..core.errors import CompilationCancelled
from ..core.ir import (
    AppComposition,
    CapsuleDefinition,
    CompilationError,
    CompilationMetadata,
    CompilationResult,
    CompilationStats,
    CompilationWarning,
    GeneratedFile,
    TargetPlatform,
    ThemeConfig,
)
from ..core.strings import to_pascal_case
from ..core.tree import used_capsule_ids

logger = logging.getLogger(__name__)

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass
class Diagnostics:
    """Errors and warnings collected during a single compile() call."""

    errors: list[CompilationError] = field(default_factory=list)
    warnings: list[CompilationWarning] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Whether compilation succeeded (no errors)."""
        return len(self.errors) == 0

    def add_error(self, code: str, message: str, capsule_id: str | None = None) -> None:
        self.errors.append(CompilationError(code=code, message=message, capsule_id=capsule_id))

    def add_warning(
        self,
        code: str,
        message: str,
        capsule_id: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        self.warnings.append(
            CompilationWarning(
                code=code, message=message, capsule_id=capsule_id, suggestion=suggestion
            )
        )

    def reset(self) -> None:
        self.errors.clear()
        self.warnings.clear()


def merge_config(config: ConfigT, overrides: Mapping[str, Any]) -> ConfigT:
    """
    Shallow-merge overrides over a config model, returning a new model.

    Override keys may be camelCase (as in composition JSON) or snake_case.
    The override wins for every key it sets. ``config`` is left untouched.

    Raises:
        pydantic.ValidationError: If an override has the wrong type
    """
    if not overrides:
        return config.model_copy(deep=True)
    normalized = {to_snake(key): value for key, value in overrides.items()}
    return type(config).model_validate({**config.model_dump(), **normalized})


def create_result(
    platform: TargetPlatform,
    diagnostics: Diagnostics,
    files: list[GeneratedFile],
    *,
    capsule_count: int,
    compilation_time: float = 0.0,
) -> CompilationResult:
    """Package files and diagnostics into a CompilationResult."""
    total_size = sum(generated.size for generated in files)
    return CompilationResult(
        platform=platform,
        success=diagnostics.success,
        files=list(files),
        errors=list(diagnostics.errors),
        warnings=list(diagnostics.warnings),
        metadata=CompilationMetadata(
            capsule_count=capsule_count,
            total_files=len(files),
            total_size=total_size,
            compiled_at=datetime.now(UTC).isoformat(),
        ),
        stats=CompilationStats(
            file_count=len(files),
            total_size=total_size,
            compilation_time=compilation_time,
        ),
    )


@dataclass
class CompilationContext(Generic[ConfigT]):
    """
    State owned by one compile() call.

    Attributes:
        composition: The composition being compiled (read only)
        config: Platform config after composition overrides were applied
        platform: Target platform
        capsules: The compiler's filtered capsule map
        diagnostics: Call-scoped error/warning accumulator
        files: Files emitted so far, in emission order
        components: Used capsules that resolved on this platform,
            in first-seen traversal order
    """

    composition: AppComposition
    config: ConfigT
    platform: TargetPlatform
    capsules: Mapping[str, CapsuleDefinition]
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    files: list[GeneratedFile] = field(default_factory=list)
    components: list[CapsuleDefinition] = field(default_factory=list)

    @property
    def theme(self) -> ThemeConfig:
        return self.composition.theme

    def get_capsule(self, capsule_id: str) -> CapsuleDefinition | None:
        return self.capsules.get(capsule_id)

    def emit(self, path: str, content: str, language: str | None = None) -> GeneratedFile:
        """Append a generated file and return it."""
        generated = GeneratedFile(path=path, content=content, language=language)
        self.files.append(generated)
        return generated


FileStep = Callable[[CompilationContext[Any]], None]


class PlatformCompiler(ABC):
    """
    Interface implemented by every platform compiler.

    Compilers are long lived. ``register_capsules`` is called once at
    setup; ``compile`` may then be awaited any number of times,
    including concurrently.
    """

    platform: ClassVar[TargetPlatform]
    name: ClassVar[str]

    @abstractmethod
    def register_capsules(self, capsules: Iterable[CapsuleDefinition]) -> None:
        """Make capsule definitions available to later compiles."""
        pass

    @abstractmethod
    async def compile(
        self,
        composition: AppComposition,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> CompilationResult:
        """
        Compile a composition for this platform.

        Never raises for input problems; those are reported on the result.

        Raises:
            CompilationCancelled: If ``cancel_event`` is set mid-compile
        """
        pass


class ProjectCompiler(PlatformCompiler, Generic[ConfigT]):
    """
    Template for compilers that emit a whole project.

    Subclasses set ``platform``, ``name`` and ``config_model`` and return
    their ordered file steps from ``get_steps``.
    """

    config_model: ClassVar[type[BaseModel]]
    # Config fields this compiler can only generate one value for
    fixed_options: ClassVar[dict[str, Any]] = {}

    def __init__(self, config: ConfigT | None = None):
        self.config: ConfigT = config if config is not None else self.config_model()  # type: ignore[assignment]
        self._capsules: dict[str, CapsuleDefinition] = {}
        self._unsupported: set[str] = set()

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def configure(self, **overrides: Any) -> None:
        """Replace the default config with one merged from ``overrides``."""
        self.config = merge_config(self.config, overrides)

    def register_capsules(self, capsules: Iterable[CapsuleDefinition]) -> None:
        """
        Keep the definitions that implement this compiler's platform.

        Ids of definitions without such an implementation are remembered
        so compile() can tell "unknown" apart from "not on this platform".
        """
        for capsule in capsules:
            if capsule.supports(self.platform):
                self._capsules[capsule.id] = capsule
                self._unsupported.discard(capsule.id)
            elif capsule.id not in self._capsules:
                self._unsupported.add(capsule.id)

    @property
    def capsule_count(self) -> int:
        return len(self._capsules)

    def get_capsule(self, capsule_id: str) -> CapsuleDefinition | None:
        return self._capsules.get(capsule_id)

    def supports_capsule(self, capsule_id: str) -> bool:
        return capsule_id in self._capsules

    # ------------------------------------------------------------------
    # Compile
    # ------------------------------------------------------------------

    @abstractmethod
    def get_steps(self, ctx: CompilationContext[ConfigT]) -> list[FileStep]:
        """Ordered file steps for this compile; may depend on ``ctx.config``."""
        pass

    async def compile(
        self,
        composition: AppComposition,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> CompilationResult:
        started = time.perf_counter()
        diagnostics = Diagnostics()
        files: list[GeneratedFile] = []
        logger.debug("Compiling '%s' for %s", composition.name, self.platform)

        try:
            self._check_cancelled(cancel_event)
            config = merge_config(self.config, composition.overrides_for(self.platform))
            ctx: CompilationContext[ConfigT] = CompilationContext(
                composition=composition,
                config=config,
                platform=self.platform,
                capsules=self._capsules,
                diagnostics=diagnostics,
                files=files,
            )
            self.validate(ctx)
            ctx.components = self.resolve_components(ctx)

            for step in self.get_steps(ctx):
                self._check_cancelled(cancel_event)
                step(ctx)
                await asyncio.sleep(0)
        except CompilationCancelled:
            logger.info("Compilation of '%s' for %s cancelled", composition.name, self.platform)
            raise
        except Exception as e:
            logger.exception("Compilation of '%s' for %s failed", composition.name, self.platform)
            diagnostics.add_error("COMPILATION_FAILED", str(e) or type(e).__name__)

        result = create_result(
            self.platform,
            diagnostics,
            files,
            capsule_count=self.capsule_count,
            compilation_time=(time.perf_counter() - started) * 1000,
        )
        logger.info(
            "Compiled '%s' for %s: %d files, %d errors, %d warnings",
            composition.name,
            self.platform,
            len(result.files),
            len(result.errors),
            len(result.warnings),
        )
        return result

    def validate(self, ctx: CompilationContext[ConfigT]) -> None:
        """Record composition-level errors and warnings."""
        composition = ctx.composition
        if not composition.name.strip():
            ctx.diagnostics.add_error("MISSING_NAME", "Composition name is required")
        if not composition.top_level_instances():
            ctx.diagnostics.add_warning(
                "NO_CAPSULES",
                "Composition contains no capsules",
                suggestion="Add at least one capsule to the composition",
            )
        for option, supported in self.fixed_options.items():
            value = getattr(ctx.config, option)
            if value != supported:
                ctx.diagnostics.add_warning(
                    "UNSUPPORTED_CONFIG",
                    f"{self.platform.value} option {option}={value} is not supported, "
                    f"generating {option}={supported}",
                    suggestion=f"Remove {option} from the {self.platform.value} config",
                )

    def resolve_components(self, ctx: CompilationContext[ConfigT]) -> list[CapsuleDefinition]:
        """
        Look up every used capsule in the filtered map.

        Unknown ids produce ``CAPSULE_NOT_FOUND``; ids registered without
        an implementation for this platform produce ``NO_<PLATFORM>_IMPL``.
        Both are skipped. A capsule whose display name maps to the same
        component name as an earlier one produces
        ``DUPLICATE_COMPONENT_NAME`` and is dropped from this compile's map.
        """
        components: list[CapsuleDefinition] = []
        by_name: dict[str, CapsuleDefinition] = {}
        dropped: set[str] = set()
        for capsule_id in used_capsule_ids(ctx.composition):
            capsule = self._capsules.get(capsule_id)
            if capsule is not None and capsule.supports(self.platform):
                name = to_pascal_case(capsule.name)
                first = by_name.setdefault(name, capsule)
                if first is not capsule:
                    ctx.diagnostics.add_warning(
                        "DUPLICATE_COMPONENT_NAME",
                        f'Capsule "{capsule_id}" and capsule "{first.id}" both '
                        f'produce component "{name}"; "{capsule_id}" is skipped',
                        capsule_id=capsule_id,
                    )
                    dropped.add(capsule_id)
                    continue
                components.append(capsule)
                continue

            if capsule_id in self._unsupported:
                code = f"NO_{self.platform.value.upper()}_IMPL"
                message = f'Capsule "{capsule_id}" has no {self.platform.value} implementation'
            else:
                code = "CAPSULE_NOT_FOUND"
                message = f'Capsule "{capsule_id}" not found in registry'
            logger.debug("Skipping capsule %s on %s: %s", capsule_id, self.platform, code)
            ctx.diagnostics.add_warning(code, message, capsule_id=capsule_id)
        if dropped:
            ctx.capsules = {k: v for k, v in ctx.capsules.items() if k not in dropped}
        return components

    def _check_cancelled(self, cancel_event: asyncio.Event | None) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise CompilationCancelled(f"Compilation for {self.platform} was cancelled")
