"""Test runner script for the workout log parser.

Runs the suite with pytest; ``--coverage``/``-c`` adds a coverage report.
Any other arguments are passed through to pytest (e.g. ``-k matcher``).
"""
import sys
import subprocess

COVERAGE_FLAGS = {"--coverage", "-c"}
PACKAGES = ("workout_parser", "app", "config", "core")


def build_command(extra_args, coverage=False):
    cmd = [sys.executable, "-m", "pytest", "tests/", "-v", "--tb=short"]
    if coverage:
        cmd += [f"--cov={package}" for package in PACKAGES]
        cmd += ["--cov-report=term-missing", "--cov-report=html"]
    return cmd + list(extra_args)


def run_tests(extra_args=(), coverage=False):
    """Run all tests with pytest."""
    print("=" * 70)
    print("Running Workout Parser Tests" + (" with Coverage Report" if coverage else ""))
    print("=" * 70)
    print()

    try:
        result = subprocess.run(build_command(extra_args, coverage), check=False)
    except FileNotFoundError:
        print("ERROR: pytest not found. Install it with: pip install -e '.[test]'")
        return 1

    if coverage and result.returncode == 0:
        print()
        print("=" * 70)
        print("Coverage report generated in htmlcov/index.html")
        print("=" * 70)
    return result.returncode


if __name__ == "__main__":
    args = sys.argv[1:]
    with_coverage = any(arg in COVERAGE_FLAGS for arg in args)
    passthrough = [arg for arg in args if arg not in COVERAGE_FLAGS]
    sys.exit(run_tests(passthrough, coverage=with_coverage))
