"""Application startup and command-line entry.

Orchestrates configuration loading, logging setup, input reading, parsing
and rendering for the ``workout-parse`` command.
"""
from __future__ import annotations

import json
import sys
from typing import BinaryIO, List, Optional, TextIO

from loguru import logger

from app.text_import import read_workout_text
from app.use_cases import PreviewWorkoutTextUseCase, WorkoutPreview
from config.service import ConfigurationService, ConfigurationServiceFactory
from core.exceptions import ConfigurationError, TextImportError
from workout_parser.metrics import exercise_volume, format_volume
from workout_parser.models import ParsedExercise

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_UNPARSEABLE = 2

LOG_FORMAT = "[{time:YYYY-MM-DD HH:mm:ss}] {level}: {message}"


def configure_logging(level: str) -> None:
    """Route loguru output to stderr at ``level``."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)


def run_application(
    argv: Optional[List[str]] = None,
    stdout: Optional[TextIO] = None,
    stdin: Optional[BinaryIO] = None,
) -> int:
    """Main application entry point.

    Orchestrates the run:
    1. Parse configuration from all sources (defaults, file, env, CLI)
    2. Configure logging
    3. Read and decode the workout text
    4. Parse it through the preview use case
    5. Render text or JSON to stdout

    Returns:
        Exit code: 0 on success, 1 on configuration or input errors,
        2 in strict mode when some line could not be parsed
    """
    argv = sys.argv[1:] if argv is None else argv
    out = stdout or sys.stdout

    configure_logging("WARNING")
    try:
        config_service, unknown_args = ConfigurationServiceFactory.create_from_args(argv)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_ERROR

    configure_logging(config_service.log_level)
    logger.debug(f"Configuration: {config_service.to_dict()}")
    if unknown_args:
        logger.warning(f"Ignoring unknown arguments: {' '.join(unknown_args)}")

    try:
        text = read_workout_text(config_service.input_path, config_service.input_encoding, stdin=stdin)
    except TextImportError as e:
        logger.error(str(e))
        return EXIT_ERROR

    use_case = PreviewWorkoutTextUseCase(
        weight_unit=config_service.weight_unit,
        restart_set_numbering=config_service.restart_set_numbering,
    )
    result = use_case.execute(text)
    if result.is_failure():
        logger.error(str(result.error))
        return EXIT_ERROR

    preview = result.unwrap()
    if config_service.output_format == "json":
        out.write(render_json(preview, config_service) + "\n")
    else:
        out.write(render_text(preview, config_service))

    if config_service.strict and preview.has_errors:
        for line in preview.unparseable:
            logger.warning(f"Could not parse: {line.original_text.strip()}")
        return EXIT_UNPARSEABLE
    return EXIT_OK


def render_json(preview: WorkoutPreview, config_service: ConfigurationService) -> str:
    data = preview.to_dict(exercises_only=config_service.exercises_only)
    if not config_service.show_summary:
        del data['summary']
    return json.dumps(data, indent=2, ensure_ascii=False)


def render_text(preview: WorkoutPreview, config_service: ConfigurationService) -> str:
    """Readable listing, one output line per input line that carries content."""
    unit = config_service.weight_unit
    rows: List[str] = []

    for line in preview.lines:
        if line.exercise is not None:
            rows.append(_format_exercise(line.exercise, unit))
        elif config_service.exercises_only or line.is_blank:
            continue
        elif line.is_comment:
            rows.append(f"# {line.original_text.strip()}")
        else:
            rows.append(f"? {line.original_text.strip()}")

    if config_service.show_summary:
        summary = preview.summary
        rows.append("")
        rows.append(
            f"{summary.exercise_count} exercises, {summary.set_count} sets, "
            f"{summary.total_reps} reps, volume {format_volume(summary.total_volume)} {unit}"
        )

    return "".join(row + "\n" for row in rows)


def _format_exercise(exercise: ParsedExercise, unit: str) -> str:
    if exercise.detailed_sets is not None:
        sets = ", ".join(
            f"{_format_weight(s.weight, unit)} x {s.reps}" for s in exercise.detailed_sets
        )
    else:
        reps = "/".join(str(r) for r in exercise.sets)
        sets = f"{_format_weight(exercise.weight, unit)} x {reps}"

    row = f"{exercise.name}: {sets}"
    if not exercise.is_bodyweight:
        row += f" (volume {format_volume(exercise_volume(exercise))})"
    if exercise.notes:
        row += f" .... {exercise.notes}"
    return row


def _format_weight(weight: Optional[float], unit: str) -> str:
    if weight is None:
        return "BW"
    return f"{weight:g}{unit}"
