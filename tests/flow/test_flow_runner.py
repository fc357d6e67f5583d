"""Pytest runner for Flow test programs.

For each test_*.flow file in this directory:
1. Transpile to C++
2. Compile and run through the service runner (g++)
3. Assert success and "PASS" in stdout
4. Compare against golden expected output if available
"""

import glob
import os
import shutil

import pytest

from flowc.compiler import transpile
from flowc.service.config import Settings
from flowc.service.runner import compile_and_run

FLOW_TEST_DIR = os.path.dirname(__file__)


def get_flow_test_files():
    pattern = os.path.join(FLOW_TEST_DIR, "test_*.flow")
    return [os.path.basename(f) for f in sorted(glob.glob(pattern))]


@pytest.mark.skipif(shutil.which("g++") is None, reason="g++ not installed")
@pytest.mark.parametrize("flow_file", get_flow_test_files())
def test_flow_file(flow_file, tmp_path):
    flow_path = os.path.join(FLOW_TEST_DIR, flow_file)
    with open(flow_path, "r") as f:
        source = f.read()

    cpp_source = transpile(source)
    settings = Settings(scratch_dir=str(tmp_path), compile_timeout=60, run_timeout=10)
    result = compile_and_run(cpp_source, 1, settings)

    assert result.success, f"{result.output}\n\nGenerated C++:\n{cpp_source}"
    assert "PASS" in result.output, f"No PASS in output:\n{result.output}"

    # Compare against golden expected output if available
    expected_path = os.path.join(FLOW_TEST_DIR, "expected",
                                 flow_file.replace(".flow", ".stdout"))
    if os.path.exists(expected_path):
        with open(expected_path) as ef:
            expected = ef.read()
        assert result.output == expected, (
            f"Output mismatch vs golden file:\n"
            f"Expected:\n{expected}\nGot:\n{result.output}"
        )
