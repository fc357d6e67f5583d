"""Compile generated C++ with an external compiler and run the binary.

Failures are reported as text in the result, never raised. Each call works
in its own scratch directory so concurrent compilations cannot clobber
each other's source or binary.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path

from .config import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass
class CompileResult:
    output: str
    success: bool


def _make_scratch_dir(compilation_id: int, settings: Settings) -> Path:
    parent = settings.scratch_dir or tempfile.gettempdir()
    return Path(tempfile.mkdtemp(prefix=f"flowc_{compilation_id}_", dir=parent))


def compile_and_run(cpp_source: str, compilation_id: int,
                    settings: Settings | None = None) -> CompileResult:
    """Compile ``cpp_source`` and run it, returning its output."""
    settings = settings or get_settings()

    try:
        workdir = _make_scratch_dir(compilation_id, settings)
        src_path = workdir / "program.cpp"
        src_path.write_text(cpp_source)
    except OSError as e:
        logger.warning("flow #%d: cannot write scratch source: %s", compilation_id, e)
        return CompileResult("Failed to write temp file", False)

    try:
        return _build_and_execute(src_path, workdir / "program", settings)
    finally:
        shutil.rmtree(workdir, ignore_errors=True)


def _build_and_execute(src_path: Path, bin_path: Path, settings: Settings) -> CompileResult:
    cmd = [settings.compiler, *settings.compiler_flags, "-o", str(bin_path), str(src_path)]
    try:
        build = subprocess.run(cmd, capture_output=True, text=True, errors="replace",
                               timeout=settings.compile_timeout)
    except FileNotFoundError:
        return CompileResult(f"{settings.compiler} not found", False)
    except OSError as e:
        return CompileResult(f"Failed to start {settings.compiler}: {e}", False)
    except subprocess.TimeoutExpired:
        return CompileResult(f"Compilation timed out after {settings.compile_timeout:g}s", False)

    if build.returncode != 0:
        return CompileResult(f"Compilation error:\n{build.stderr}", False)

    try:
        run = subprocess.run([str(bin_path)], capture_output=True, text=True, errors="replace",
                             timeout=settings.run_timeout)
    except subprocess.TimeoutExpired:
        return CompileResult(f"Execution timed out after {settings.run_timeout:g}s", False)
    except OSError as e:
        return CompileResult(f"Failed to run: {e}", False)

    if run.returncode != 0:
        return CompileResult(f"Runtime error:\n{run.stderr}", False)
    return CompileResult(run.stdout or "(no output)", True)
