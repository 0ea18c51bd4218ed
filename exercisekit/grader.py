"""Run the configured exercises, score them and write a JSON report."""

from __future__ import annotations

import json
import shutil
import subprocess
import sys
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterator, Optional, Sequence

CONFIG_FILE = "exercise_config.json"
REPORT_FILE = "report.json"
EXERCISES_ROOT = Path("exercises")

_GREEN = "\x1b[32m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"


def _green(text: str) -> str:
    return f"{_GREEN}{text}{_RESET}"


def _red(text: str) -> str:
    return f"{_RED}{text}{_RESET}"


@dataclass
class Exercise:
    """One exercise: where it lives, how it is checked and what it is worth."""

    name: str
    path: str
    exercise_type: str
    score: int

    @classmethod
    def from_dict(cls, data: Any) -> Exercise:
        if not isinstance(data, dict):
            raise ValueError(f"an exercise must be an object, got {data!r}")
        try:
            name, path, kind, score = data["name"], data["path"], data["type"], data["score"]
        except KeyError as error:
            raise ValueError(f"exercise is missing the field {error.args[0]!r}") from None
        if not all(isinstance(text, str) for text in (name, path, kind)):
            raise ValueError("exercise name, path and type must be strings")
        if isinstance(score, bool) or not isinstance(score, int):
            raise ValueError("exercise score must be an integer")
        return cls(name=name, path=path, exercise_type=kind, score=score)


@dataclass
class ExerciseConfig:
    """The exercises, grouped by difficulty."""

    easy: list[Exercise] = field(default_factory=list)
    normal: list[Exercise] = field(default_factory=list)
    hard: list[Exercise] = field(default_factory=list)

    def __iter__(self) -> Iterator[Exercise]:
        """Yield the easy, then normal, then hard exercises."""
        yield from self.easy
        yield from self.normal
        yield from self.hard

    @classmethod
    def from_dict(cls, data: Any) -> ExerciseConfig:
        if not isinstance(data, dict):
            raise ValueError("the configuration must be a JSON object")
        levels = {}
        for level in ("easy", "normal", "hard"):
            if level not in data:
                raise ValueError(f"configuration is missing the field {level!r}")
            entries = data[level]
            if not isinstance(entries, list):
                raise ValueError(f"{level!r} must be a list of exercises")
            levels[level] = [Exercise.from_dict(entry) for entry in entries]
        return cls(**levels)


@dataclass
class ExerciseResult:
    name: str
    result: bool
    score: int


@dataclass
class Statistics:
    total_exercises: int = 0
    total_successes: int = 0
    total_failures: int = 0
    total_score: int = 0
    total_time: int = 0


@dataclass
class Report:
    """Per-exercise results and the totals over them."""

    exercises: list[ExerciseResult] = field(default_factory=list)
    statistics: Statistics = field(default_factory=Statistics)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_exercise_config(path: str | Path) -> ExerciseConfig:
    """Read the exercise configuration from a JSON file.

    Raises OSError when the file cannot be read and ValueError when its
    contents are not a valid configuration.
    """
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    return ExerciseConfig.from_dict(data)


def run_cargo_command(path: str | Path, command: str) -> bool:
    """Run ``cargo <command>`` in ``path``; return True when it succeeds."""
    try:
        completed = subprocess.run(["cargo", command], cwd=path, capture_output=True)
    except OSError:
        return False
    return completed.returncode == 0


def clean_target_directory(path: str | Path) -> None:
    """Remove the ``target`` build directory of a project, if there is one."""
    project = Path(path)
    target = project / "target"
    if not target.exists():
        return
    try:
        shutil.rmtree(target)
    except OSError as error:
        print(f"Failed to clean up target directory: {error}", file=sys.stderr)
    else:
        print(f"Successfully cleaned up target directory in: {project}")


def evaluate_single_file(path: str | Path) -> bool:
    """Compile a single source file as a test binary, run it and remove it."""
    source = Path(path)
    binary = source.with_suffix("")
    try:
        compiled = subprocess.run(
            ["rustc", "--test", str(source), "-o", str(binary)], capture_output=True
        )
    except OSError:
        print(f"Error executing rustc --test for {source}", file=sys.stderr)
        return False
    if compiled.returncode != 0:
        print(_red(f"{source}: COMPILATION FAILED"), file=sys.stderr)
        return False

    try:
        run = subprocess.run([str(binary)], capture_output=True)
    except OSError:
        print(f"Error running test executable for {source}", file=sys.stderr)
        passed = False
    else:
        passed = run.returncode == 0
        if passed:
            print(_green(f"{source}: TEST PASSED"))
        else:
            print(_red(f"{source}: TEST FAILED"))

    try:
        binary.unlink()
    except OSError as error:
        print(f"Failed to remove test binary {binary}: {error}", file=sys.stderr)
    else:
        print(f"Successfully removed test binary: {binary}")
    return passed


def evaluate_cargo_project(path: str | Path) -> bool:
    """Build, test and lint a project; it passes only when all three succeed."""
    project = Path(path)
    outcomes = [run_cargo_command(project, command) for command in ("build", "test", "clippy")]
    passed = all(outcomes)
    if passed:
        print(_green(f"{project}: PASSED"))
    else:
        print(_red(f"{project}: FAILED"))
    clean_target_directory(project)
    return passed


_EVALUATORS: dict[str, Callable[[Path], bool]] = {
    "single_file": evaluate_single_file,
    "cargo_project": evaluate_cargo_project,
}


def evaluate_exercise(exercise: Exercise, root: str | Path = EXERCISES_ROOT) -> bool:
    """Check one exercise found under ``root``; unknown types fail."""
    evaluator = _EVALUATORS.get(exercise.exercise_type)
    if evaluator is None:
        print(f"Unknown exercise type: {exercise.exercise_type}", file=sys.stderr)
        return False
    return evaluator(Path(root) / exercise.path)


def ask_to_continue() -> bool:
    """Ask whether to go on; anything but ``q`` means yes."""
    print("\nPress any key to continue, or 'q' to quit.")
    answer = sys.stdin.readline()
    return answer.strip().lower() != "q"


def evaluate_exercises(mode: str, config: ExerciseConfig, report: Report) -> None:
    """Evaluate every exercise in order and record the outcomes in ``report``.

    In ``watch`` mode the user is asked after each exercise whether to go on.
    """
    stats = report.statistics
    for exercise in config:
        print(f"\nEvaluating {exercise.exercise_type}: {exercise.name}")
        passed = evaluate_exercise(exercise)
        score = exercise.score if passed else 0
        report.exercises.append(ExerciseResult(name=exercise.name, result=passed, score=score))
        if passed:
            stats.total_successes += 1
        else:
            stats.total_failures += 1
        stats.total_score += score
        stats.total_exercises = stats.total_successes + stats.total_failures
        if mode == "watch" and not ask_to_continue():
            break


def save_report(path: str | Path, report: Report) -> None:
    """Write ``report`` as indented JSON to ``path``."""
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(report.to_dict(), handle, indent=2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Evaluate the exercises listed in the configuration file and report."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please provide a command: 'watch' or 'all'", file=sys.stderr)
        return 1
    mode = args[0]
    started = time.monotonic()

    try:
        config = load_exercise_config(CONFIG_FILE)
    except (OSError, ValueError) as error:
        print(f"Failed to load config file: {error}", file=sys.stderr)
        return 1

    report = Report()
    evaluate_exercises(mode, config, report)

    stats = report.statistics
    stats.total_time = int(time.monotonic() - started)
    stats.total_exercises = stats.total_successes + stats.total_failures

    print("\nSummary:")
    print(f"Total exercises: {stats.total_exercises}")
    print(f"Total successes: {stats.total_successes}")
    print(f"Total failures: {stats.total_failures}")
    print(f"Total score: {stats.total_score}")

    try:
        save_report(REPORT_FILE, report)
    except OSError as error:
        print(f"Error saving report: {error}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())