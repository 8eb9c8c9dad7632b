"""
Multi-platform orchestration.

MultiPlatformCompiler holds one compiler per platform and fans a
composition out to several of them concurrently.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Mapping

from ..core.errors import CompilerNotFoundError
from ..core.ir import (
    AppComposition,
    CompilationResult,
    MultiPlatformSummary,
    TargetPlatform,
)
from .base import Diagnostics, PlatformCompiler, create_result

logger = logging.getLogger(__name__)


class MultiPlatformCompiler:
    """
    Registry of platform compilers plus concurrent fan-out.

    One compiler is kept per platform; registering a second compiler for
    the same platform replaces the first.
    """

    def __init__(self) -> None:
        self._compilers: dict[TargetPlatform, PlatformCompiler] = {}

    def register_compiler(self, compiler: PlatformCompiler) -> None:
        self._compilers[compiler.platform] = compiler

    def get_compiler(self, platform: TargetPlatform) -> PlatformCompiler | None:
        return self._compilers.get(platform)

    def get_available_platforms(self) -> list[TargetPlatform]:
        return list(self._compilers)

    async def compile_for_platform(
        self,
        composition: AppComposition,
        platform: TargetPlatform,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> CompilationResult:
        """
        Compile for a single platform.

        Raises:
            CompilerNotFoundError: If no compiler is registered for ``platform``
            CompilationCancelled: If ``cancel_event`` is set mid-compile
        """
        compiler = self._compilers.get(platform)
        if compiler is None:
            raise CompilerNotFoundError(
                str(platform), [str(p) for p in self.get_available_platforms()]
            )
        return await compiler.compile(composition, cancel_event=cancel_event)

    async def compile_all(
        self,
        composition: AppComposition,
        platforms: Iterable[TargetPlatform] | None = None,
        *,
        cancel_event: asyncio.Event | None = None,
        timeout: float | None = None,
    ) -> dict[TargetPlatform, CompilationResult]:
        """
        Compile for several platforms concurrently.

        ``platforms`` wins over ``composition.targets`` when given. Each
        platform is compiled once, and results keep request order. A
        platform without a compiler gets a failed result carrying a
        ``COMPILER_NOT_FOUND`` error; the other platforms are unaffected.

        Raises:
            TimeoutError: If ``timeout`` seconds elapse first; outstanding
                compiles are cancelled
            CompilationCancelled: If ``cancel_event`` is set mid-compile
        """
        requested = list(dict.fromkeys(platforms if platforms is not None else composition.targets))
        logger.debug("Compiling '%s' for %s", composition.name, [str(p) for p in requested])

        gathered = asyncio.gather(
            *(self._compile_one(composition, platform, cancel_event) for platform in requested)
        )
        if timeout is not None:
            results = await asyncio.wait_for(gathered, timeout=timeout)
        else:
            results = await gathered
        return dict(zip(requested, results, strict=True))

    async def _compile_one(
        self,
        composition: AppComposition,
        platform: TargetPlatform,
        cancel_event: asyncio.Event | None,
    ) -> CompilationResult:
        compiler = self._compilers.get(platform)
        if compiler is None:
            logger.warning("No compiler registered for platform %s", platform)
            diagnostics = Diagnostics()
            diagnostics.add_error(
                "COMPILER_NOT_FOUND", f"No compiler registered for platform: {platform}"
            )
            return create_result(platform, diagnostics, [], capsule_count=0)
        return await compiler.compile(composition, cancel_event=cancel_event)


def summarize(results: Mapping[TargetPlatform, CompilationResult]) -> MultiPlatformSummary:
    """Roll a compile_all result map up into one summary."""
    failed = [platform for platform, result in results.items() if not result.success]
    return MultiPlatformSummary(
        success=not failed,
        total_platforms=len(results),
        successful_platforms=len(results) - len(failed),
        failed_platforms=failed,
    )
