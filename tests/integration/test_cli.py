import os
import subprocess
import sys
from pathlib import Path

from click.testing import CliRunner

from sugarpipe.cli import cli

PYTHON_EXECUTABLE = sys.executable
PROJECT_ROOT = Path(__file__).parent.parent.parent
EXAMPLES_DIR = PROJECT_ROOT / "examples"

EXPECTED_LINQ_OUTPUT = (
    "Fluent List:\n"
    "\t 2\n\t 6\n\t 10\n\t 14\n\t 18\n"
    "Query List:\n"
    "\t 2\n\t 6\n\t 10\n\t 14\n\t 18\n\t 22\n"
)


def run_cli_command(args: list[str], input_data: str = "") -> subprocess.CompletedProcess:
    """Runs the CLI in a separate process via `python -m`."""
    command = [PYTHON_EXECUTABLE, "-m", "sugarpipe.cli"] + args
    env = os.environ.copy()
    if "PYTHONPATH" in env:
        env["PYTHONPATH"] = f"{PROJECT_ROOT}{os.pathsep}{env['PYTHONPATH']}"
    else:
        env["PYTHONPATH"] = str(PROJECT_ROOT)

    return subprocess.run(
        command,
        input=input_data,
        capture_output=True,
        text=True,
        check=True,
        env=env,
    )


def test_cli_fizzle_stdin_stdout():
    result = run_cli_command(["fizzle"], input_data="Hello\n")
    assert result.returncode == 0
    assert result.stdout == (
        "Type a string to fizzle and press enter\n"
        "\n"
        "You typed: Hello\n"
        "Fizzed String: HelloFizz\n"
    )


def test_cli_fizzle_empty_input():
    result = run_cli_command(["fizzle"], input_data="")
    assert result.returncode == 0
    assert "You typed: \n" in result.stdout
    assert "Fizzed String: Fizz\n" in result.stdout


def test_cli_linq_output():
    result = run_cli_command(["linq"])
    assert result.stdout == EXPECTED_LINQ_OUTPUT


def test_cli_linq_with_config():
    result = run_cli_command(["linq", "--config", str(EXAMPLES_DIR / "config" / "default.yml")])
    assert result.stdout == (
        "Fluent List:\n"
        "\t 2\n\t 6\n\t 10\n"
        "Query List:\n"
        "\t 2\n\t 6\n\t 10\n\t 14\n"
    )


def test_cli_logs_go_to_stderr_only():
    result = run_cli_command(["linq"])
    assert "materialize_finished" not in result.stdout
    assert "materialize_finished" in result.stderr


def test_cli_runner_fizzle():
    runner = CliRunner()
    result = runner.invoke(cli, ["fizzle"], input="Buzz\n")
    assert result.exit_code == 0
    assert "You typed: Buzz" in result.output
    assert "Fizzed String: BuzzFizz" in result.output


def test_cli_runner_bad_config(tmp_path):
    config_file = tmp_path / "bad.yml"
    config_file.write_text("key: value: oops")

    runner = CliRunner()
    result = runner.invoke(cli, ["linq", "--config", str(config_file)])
    assert result.exit_code != 0
    assert "Could not parse configuration file" in result.output


def test_cli_runner_bad_log_level(tmp_path):
    config_file = tmp_path / "config.yml"
    config_file.write_text("logging:\n  level: LOUD\n")

    runner = CliRunner()
    result = runner.invoke(cli, ["linq", "--config", str(config_file)])
    assert result.exit_code != 0
    assert "Unknown logging level" in result.output


def test_cli_runner_rejects_non_integer_setting(tmp_path):
    config_file = tmp_path / "config.yml"
    config_file.write_text("linq:\n  range_end: ten\n")

    runner = CliRunner()
    result = runner.invoke(cli, ["linq", "--config", str(config_file)])
    assert result.exit_code != 0
    assert "must be an integer" in result.output
    assert "Fluent List:" not in result.output
