import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent


def run_example(name: str) -> str:
    """Runs an example script as a separate process and returns its output."""
    process = subprocess.run(
        [sys.executable, f"examples/{name}.py"],
        capture_output=True,
        text=True,
        check=True,
        cwd=PROJECT_ROOT,
        env={**os.environ, "PYTHONPATH": str(PROJECT_ROOT)},
    )
    return process.stdout


def test_extension_methods_example():
    output = run_example("01_extension_methods")
    assert "fizzle('Hello') -> HelloFizz" in output
    assert "StringExtensions.fizzle('Hello') -> HelloFizz" in output
    assert "fizzle('') -> Fizz" in output
    assert "Mapped: ['FizzFizz', 'BuzzFizz']" in output


def test_lazy_queries_example():
    output = run_example("02_lazy_queries")
    assert "Fluent: [2, 6, 10, 14, 18]\nPiped: [2, 6, 10, 14, 18]" in output
    assert "--- After appending 11 ---\nFluent: [2, 6, 10, 14, 18, 22]" in output
    assert "Comprehension: [2, 6, 10, 14, 18, 22]" in output
    assert "Bound to [1, 2, 3]: [2, 6]" in output
    assert "Items out: 6" in output
