"""Checking exercises in order, and the prompt shown while one is still pending."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from rich.console import Console
from rich.text import Text

from .exercise import CompilationError, Exercise, ExecutionError, ExerciseError, Mode
from .ui import no_emoji, spinner, success, warn

_SEPARATOR = "===================="


class RunMode(Enum):
    """Whether a passing exercise is followed by the completion prompt."""

    INTERACTIVE = "interactive"
    NON_INTERACTIVE = "non_interactive"


class ExerciseFailed(Exception):
    """Verification stopped at an exercise that failed or is not yet marked done."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"exercise {exercise} is not finished")
        self.exercise = exercise


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> None:
    """Check each exercise in turn; raise ExerciseFailed at the first that is not done."""
    for exercise in exercises:
        try:
            match exercise.mode:
                case Mode.TEST:
                    done = compile_and_test(exercise, RunMode.INTERACTIVE, verbose)
                case Mode.COMPILE:
                    done = _compile_and_run_interactively(exercise)
                case Mode.CLIPPY:
                    done = _compile_only(exercise)
        except ExerciseError:
            done = False
        if not done:
            raise ExerciseFailed(exercise)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run the test harness of an exercise without prompting."""
    compile_and_test(exercise, RunMode.NON_INTERACTIVE, verbose)


def _report_compile_failure(exercise: Exercise, error: CompilationError) -> None:
    warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
    print(error.output.stderr)


def _compile_only(exercise: Exercise) -> bool:
    try:
        with spinner(f"Compiling {exercise}..."):
            with exercise.compile():
                pass
    except CompilationError as exc:
        _report_compile_failure(exercise, exc)
        raise
    success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    try:
        with spinner(f"Compiling {exercise}...") as bar:
            with exercise.compile() as compiled:
                print(f'Compiling: "{exercise.name}"')
                bar.update(f"Running {exercise}...")
                output = compiled.run()
    except CompilationError as exc:
        _report_compile_failure(exercise, exc)
        raise
    except ExecutionError as exc:
        warn(f"Ran {exercise} with errors")
        print(exc.output.stdout)
        print(exc.output.stderr)
        raise
    success(f"Successfully ran {exercise}!")
    return prompt_for_completion(exercise, output.stdout)


def compile_and_test(exercise: Exercise, run_mode: RunMode, verbose: bool) -> bool:
    """Compile and run an exercise's tests; raise ExerciseError on failure.

    Returns whether the exercise counts as finished.
    """
    try:
        with spinner(f"Testing {exercise}..."):
            with exercise.compile() as compiled:
                output = compiled.run()
    except CompilationError as exc:
        _report_compile_failure(exercise, exc)
        raise
    except ExecutionError as exc:
        warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
        print(exc.output.stdout)
        raise
    if verbose:
        print(output.stdout)
    success(f"Successfully tested {exercise}")
    if run_mode is RunMode.INTERACTIVE:
        return prompt_for_completion(exercise, None)
    return True


def prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is and return False."""
    state = exercise.state()
    if state.is_done():
        return True

    emoji_free = no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if emoji_free
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    success_message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    console = _console()
    console.print()
    if emoji_free:
        console.print(Text(f"~*~ {success_message} ~*~"))
    else:
        console.print(Text(f"🎉 🎉  {success_message} 🎉 🎉"))
    console.print()

    if prompt_output is not None:
        console.print(Text("Output:"))
        console.print(Text(_SEPARATOR, style="bold"))
        console.print(Text(prompt_output))
        console.print(Text(_SEPARATOR, style="bold"))
        console.print()

    console.print(Text("You can keep working on this exercise,"))
    jump = Text("or jump into the next one by removing the ")
    jump.append("`I AM NOT DONE`", style="bold")
    jump.append(" comment:")
    console.print(jump)
    console.print()

    for context_line in state.context:
        line = Text()
        line.append(f"{context_line.number:>2}", style="bold blue")
        line.append(" ")
        line.append("|", style="blue")
        line.append("  ")
        line.append(context_line.line, style="bold" if context_line.important else "")
        console.print(line)

    return False