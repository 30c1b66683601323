import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent

EXPECTED_LINQ_OUTPUT = (
    "Fluent List:\n"
    "\t 2\n\t 6\n\t 10\n\t 14\n\t 18\n"
    "Query List:\n"
    "\t 2\n\t 6\n\t 10\n\t 14\n\t 18\n\t 22\n"
)


def run_module(module: str, *args: str, input_data: str = "") -> subprocess.CompletedProcess:
    """Runs `python -m <module>` from the project root."""
    return subprocess.run(
        [sys.executable, "-m", module, *args],
        input=input_data,
        capture_output=True,
        text=True,
        check=True,
        cwd=PROJECT_ROOT,
        env={**os.environ, "PYTHONPATH": str(PROJECT_ROOT)},
    )


def write_config(tmp_path: Path, level: str) -> str:
    config_file = tmp_path / "config.yml"
    config_file.write_text(f"logging:\n  level: {level}\n")
    return str(config_file)


def test_extension_module_runs_directly():
    result = run_module("sugarpipe.demos.extension", input_data="Hello\n")
    assert result.stdout == (
        "Type a string to fizzle and press enter\n"
        "\n"
        "You typed: Hello\n"
        "Fizzed String: HelloFizz\n"
    )


def test_extension_module_with_no_input():
    result = run_module("sugarpipe.demos.extension")
    assert result.returncode == 0
    assert result.stdout.endswith("You typed: \nFizzed String: Fizz\n")


def test_linq_module_runs_directly():
    result = run_module("sugarpipe.demos.linq")
    assert result.stdout == EXPECTED_LINQ_OUTPUT


def test_info_level_hides_stage_stream_events(tmp_path):
    result = run_module("sugarpipe.cli", "linq", "--config", write_config(tmp_path, "INFO"))
    assert result.stdout == EXPECTED_LINQ_OUTPUT
    assert "materialize_started" in result.stderr
    assert "materialize_finished" in result.stderr
    assert "stream_finished" not in result.stderr
    assert "aggregator_finished" not in result.stderr


def test_debug_level_shows_stage_stream_events(tmp_path):
    result = run_module("sugarpipe.cli", "linq", "--config", write_config(tmp_path, "DEBUG"))
    assert result.stdout == EXPECTED_LINQ_OUTPUT
    assert "stream_finished" in result.stderr
    assert "aggregator_finished" in result.stderr


def test_warning_level_hides_materialize_events(tmp_path):
    result = run_module("sugarpipe.cli", "linq", "--config", write_config(tmp_path, "WARNING"))
    assert result.stdout == EXPECTED_LINQ_OUTPUT
    assert "materialize_finished" not in result.stderr
