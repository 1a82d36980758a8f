"""End-to-end tests for the command-line entry."""
import io
import json
import sys

import pytest
from loguru import logger

from app.startup import EXIT_ERROR, EXIT_OK, EXIT_UNPARSEABLE, run_application
from workout_parser import SAMPLE_WORKOUT

ENV_VARS = (
    "WORKOUT_OUTPUT_FORMAT",
    "WORKOUT_INPUT_ENCODING",
    "WORKOUT_WEIGHT_UNIT",
    "WORKOUT_STRICT",
    "DEBUG",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_run(tmp_path, monkeypatch):
    """Run from an empty directory with a clean environment and restore logging afterwards."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def workout_file(tmp_path):
    path = tmp_path / "workout.txt"
    path.write_text(SAMPLE_WORKOUT, encoding="utf-8")
    return path


class TestRunApplication:
    """Tests for run_application."""

    def test_text_output(self, workout_file):
        # Arrange
        out = io.StringIO()

        # Act
        code = run_application([str(workout_file)], stdout=out)

        # Assert
        assert code == EXIT_OK
        output = out.getvalue()
        assert "Bench: 80kg x 8/8/6" in output
        assert "Push-up: BW x 15/12/10" in output
        assert "Dumbbell Rows: 10kg x 13, 34kg x 12" in output
        assert "Triceps Pushdown: 30kg x 12/10/10 (volume 960) .... arms tired" in output
        assert "6 exercises, 17 sets, 178 reps, volume 5.8k kg" in output

    def test_json_output(self, workout_file):
        out = io.StringIO()

        code = run_application([str(workout_file), "--format", "json"], stdout=out)

        assert code == EXIT_OK
        data = json.loads(out.getvalue())
        exercises = [line['exercise'] for line in data['lines'] if line['exercise']]
        assert exercises[0]['name'] == "Bench"
        assert exercises[0]['sets'] == [8, 8, 6]
        assert data['summary']['total_volume'] == 5788.0
        assert len(data['set_records']) == 17

    def test_json_without_summary(self, workout_file):
        out = io.StringIO()
        run_application([str(workout_file), "--format", "json", "--no-summary"], stdout=out)
        assert 'summary' not in json.loads(out.getvalue())

    def test_format_from_environment(self, workout_file, monkeypatch):
        monkeypatch.setenv("WORKOUT_OUTPUT_FORMAT", "json")
        out = io.StringIO()
        run_application([str(workout_file)], stdout=out)
        assert json.loads(out.getvalue())['summary']['exercise_count'] == 6

    def test_reads_stdin(self):
        out = io.StringIO()
        stdin = io.BytesIO(b"squat 3x5 140kg\n")

        code = run_application(["-", "--no-summary"], stdout=out, stdin=stdin)

        assert code == EXIT_OK
        assert out.getvalue() == "Squat: 140kg x 5/5/5 (volume 2.1k)\n"

    def test_comments_and_unparseable_lines_listed(self):
        out = io.StringIO()
        stdin = io.BytesIO(b"plank 45\nwarm up\ngood session .... really\n")

        run_application(["--no-summary"], stdout=out, stdin=stdin)

        assert out.getvalue() == "Plank: BW x 45\n? warm up\n# good session .... really\n"

    def test_exercises_only(self):
        out = io.StringIO()
        stdin = io.BytesIO(b"plank 45\nwarm up\n")

        run_application(["--no-summary", "--exercises-only"], stdout=out, stdin=stdin)

        assert out.getvalue() == "Plank: BW x 45\n"

    def test_strict_mode_reports_unparseable_lines(self):
        stdin = io.BytesIO(b"bench 80kg 8/8\nwarm up\n")

        code = run_application(["--strict"], stdout=io.StringIO(), stdin=stdin)

        assert code == EXIT_UNPARSEABLE

    def test_strict_mode_clean_input(self):
        stdin = io.BytesIO(b"bench 80kg 8/8\n")
        assert run_application(["--strict"], stdout=io.StringIO(), stdin=stdin) == EXIT_OK

    def test_missing_file(self, tmp_path):
        code = run_application([str(tmp_path / "missing.txt")], stdout=io.StringIO())
        assert code == EXIT_ERROR

    def test_invalid_argument(self, workout_file):
        out = io.StringIO()
        code = run_application([str(workout_file), "--format", "xml"], stdout=out)
        assert code == EXIT_ERROR
        assert out.getvalue() == ""

    def test_unknown_arguments_ignored(self, workout_file):
        assert run_application([str(workout_file), "--frobnicate"], stdout=io.StringIO()) == EXIT_OK
