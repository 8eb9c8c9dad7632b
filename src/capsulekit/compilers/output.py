"""
Writing compilation results to disk.

Generated paths are relative and '/'-separated. Anything absolute, or
anything that would resolve outside the output directory, is refused.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from ..core.errors import OutputError
from ..core.ir import CompilationResult, GeneratedFile

logger = logging.getLogger(__name__)


def resolve_output_path(output_dir: Path, generated: GeneratedFile) -> Path:
    """
    Map a generated file's path onto ``output_dir``.

    Raises:
        OutputError: If the path is absolute or escapes ``output_dir``
    """
    relative = PurePosixPath(generated.path)
    if relative.is_absolute() or not generated.path or "\\" in generated.path:
        raise OutputError(f"Refusing to write generated file with path '{generated.path}'")

    root = output_dir.resolve()
    target = (root / Path(*relative.parts)).resolve()
    if not target.is_relative_to(root):
        raise OutputError(f"Generated path '{generated.path}' escapes the output directory")
    return target


def write_result(result: CompilationResult, output_dir: Path) -> list[Path]:
    """
    Write every file of ``result`` under ``output_dir``.

    All paths are checked before anything is written.

    Returns:
        Written paths, in the result's file order

    Raises:
        OutputError: If a path is unsafe or a file cannot be written
    """
    targets = [(resolve_output_path(output_dir, generated), generated) for generated in result.files]

    written: list[Path] = []
    for target, generated in targets:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(generated.content, encoding=generated.encoding)
        except OSError as e:
            raise OutputError(f"Cannot write {target}: {e}") from e
        written.append(target)

    logger.info("Wrote %d %s files to %s", len(written), result.platform, output_dir)
    return written
