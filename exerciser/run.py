"""Running a single exercise, showing its output."""

from __future__ import annotations

from .exercise import CompilationError, Exercise, ExecutionError, Mode
from .ui import spinner, success, warn
from .verify import test


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run one exercise; raise ExerciseError if it fails."""
    match exercise.mode:
        case Mode.TEST:
            test(exercise, verbose)
        case Mode.COMPILE | Mode.CLIPPY:
            compile_and_run(exercise)


def compile_and_run(exercise: Exercise) -> None:
    """Compile a binary exercise and run it, printing what it writes."""
    try:
        with spinner(f"Compiling {exercise}...") as bar:
            print(f'Compiling: "{exercise.name}"')
            with exercise.compile() as compiled:
                bar.update(f"Running {exercise}...")
                output = compiled.run()
    except CompilationError as exc:
        warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
        print(exc.output.stderr)
        raise
    except ExecutionError as exc:
        print(exc.output.stdout)
        print(exc.output.stderr)
        warn(f"Ran {exercise} with errors")
        raise
    print(output.stdout)
    success(f"Successfully ran {exercise}")