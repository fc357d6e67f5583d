"""Tests for the flowc command-line driver."""

import shutil
import subprocess
import sys
from pathlib import Path

import pytest

from flowc.compiler.main import main
from flowc.service.config import get_settings

REPO_ROOT = Path(__file__).resolve().parents[4]

needs_gxx = pytest.mark.skipif(shutil.which("g++") is None, reason="g++ not installed")


@pytest.fixture
def flow_file(tmp_path):
    path = tmp_path / "hello.flow"
    path.write_text('say "hi"\nlet x = 1\n')
    return path


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_writes_cpp_next_to_input(flow_file, capsys):
    main([str(flow_file)])
    out_path = flow_file.with_suffix(".cpp")
    assert out_path.exists()
    assert 'std::cout << std::string("hi") << std::endl;' in out_path.read_text()
    assert f"Transpiled {flow_file} → {out_path}" in capsys.readouterr().out


def test_explicit_output(flow_file, tmp_path):
    target = tmp_path / "out" / "prog.cpp"
    target.parent.mkdir()
    main([str(flow_file), "-o", str(target)])
    assert "auto x = 1;" in target.read_text()


def test_emit_statements(flow_file, capsys):
    main([str(flow_file), "--emit-statements"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["Say(expr='\"hi\"', line=1)", "Let(name='x', expr='1', line=2)"]
    assert not flow_file.with_suffix(".cpp").exists()


def test_missing_input(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nope.flow")])
    assert exc.value.code == 1
    assert "not found" in capsys.readouterr().err


# --- --run ---

@needs_gxx
def test_run_prints_program_output(flow_file, monkeypatch, tmp_path, fresh_settings, capsys):
    monkeypatch.setenv("FLOWC_SCRATCH_DIR", str(tmp_path))
    monkeypatch.setenv("FLOWC_COMPILE_TIMEOUT", "60")
    main([str(flow_file), "--run"])
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "hi"
    assert flow_file.with_suffix(".cpp").exists()


def test_run_failure_exits_1(flow_file, monkeypatch, tmp_path, fresh_settings, capsys):
    monkeypatch.setenv("FLOWC_COMPILER", "flowc-test-no-such-compiler")
    monkeypatch.setenv("FLOWC_SCRATCH_DIR", str(tmp_path))
    with pytest.raises(SystemExit) as exc:
        main([str(flow_file), "--run"])
    assert exc.value.code == 1
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "flowc-test-no-such-compiler not found"


# --- Root entry point ---

def test_root_script_delegates_to_main(flow_file):
    proc = subprocess.run(
        [sys.executable, str(REPO_ROOT / "flowc.py"), str(flow_file), "--emit-statements"],
        capture_output=True, text=True, cwd=flow_file.parent,
    )
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.splitlines()[0] == "Say(expr='\"hi\"', line=1)"
