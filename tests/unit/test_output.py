"""Tests for writing compilation results to disk."""

from pathlib import Path

import pytest

from capsulekit.compilers import WebCompiler, resolve_output_path, write_result
from capsulekit.compilers.base import Diagnostics, create_result
from capsulekit.core.errors import OutputError
from capsulekit.core.ir import GeneratedFile, TargetPlatform


def _result(*files: GeneratedFile):
    return create_result(TargetPlatform.WEB, Diagnostics(), list(files), capsule_count=0)


class TestResolveOutputPath:
    def test_nested_path(self, tmp_path: Path) -> None:
        target = resolve_output_path(tmp_path, GeneratedFile(path="src/a/b.ts", content=""))
        assert target == tmp_path.resolve() / "src" / "a" / "b.ts"

    @pytest.mark.parametrize("path", ["/etc/passwd", "../outside.txt", "src/../../x", "", "a\\b.txt"])
    def test_unsafe_paths(self, tmp_path: Path, path: str) -> None:
        with pytest.raises(OutputError):
            resolve_output_path(tmp_path, GeneratedFile(path=path, content=""))

    def test_inner_dotdot_allowed(self, tmp_path: Path) -> None:
        target = resolve_output_path(tmp_path, GeneratedFile(path="src/../README.md", content=""))
        assert target == tmp_path.resolve() / "README.md"


class TestWriteResult:
    def test_writes_every_file(self, tmp_path: Path) -> None:
        result = _result(
            GeneratedFile(path="README.md", content="# Hi\n"),
            GeneratedFile(path="src/main.ts", content="console.log('é')\n"),
        )
        written = write_result(result, tmp_path / "out")
        assert written == [
            (tmp_path / "out" / "README.md").resolve(),
            (tmp_path / "out" / "src" / "main.ts").resolve(),
        ]
        assert (tmp_path / "out" / "src" / "main.ts").read_text(encoding="utf-8") == "console.log('é')\n"

    def test_nothing_written_when_any_path_is_unsafe(self, tmp_path: Path) -> None:
        result = _result(
            GeneratedFile(path="ok.txt", content="ok"),
            GeneratedFile(path="../escape.txt", content="nope"),
        )
        with pytest.raises(OutputError):
            write_result(result, tmp_path / "out")
        assert not (tmp_path / "out" / "ok.txt").exists()
        assert not (tmp_path / "escape.txt").exists()

    @pytest.mark.asyncio
    async def test_compiled_project_round_trip(
        self, tmp_path: Path, web_compiler: WebCompiler, sample_composition
    ) -> None:
        result = await web_compiler.compile(sample_composition)
        written = write_result(result, tmp_path)
        assert len(written) == result.stats.file_count
        assert (tmp_path / "src" / "pages" / "HomePage.tsx").is_file()
