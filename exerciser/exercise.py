"""Exercises: their description, compilation, execution and completion state."""

from __future__ import annotations

import contextlib
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, ignoring any error."""
    with contextlib.suppress(OSError):
        os.remove(temp_file())


class Mode(Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class ExerciseState:
    """Done when there is no context; pending otherwise."""

    context: tuple[ContextLine, ...] = ()

    def is_done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str

    @classmethod
    def _from_process(cls, result: subprocess.CompletedProcess) -> ExerciseOutput:
        return cls(
            stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
            stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
        )


class ExerciseError(Exception):
    """A compile or run step failed; carries the process output."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


class CompilationError(ExerciseError):
    """The exercise did not compile."""


class ExecutionError(ExerciseError):
    """The compiled exercise exited unsuccessfully."""


class CompiledExercise:
    """A compiled exercise; closing it removes the temporary binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        return self.exercise.run()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def _capture(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True)


def _source_lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = field(default="")

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise CompilationError on failure."""
        path = str(self.path)
        match self.mode:
            case Mode.COMPILE:
                result = _capture(["rustc", path, "-o", temp_file(), *RUSTC_COLOR_ARGS])
            case Mode.TEST:
                result = _capture(
                    ["rustc", "--test", path, "-o", temp_file(), *RUSTC_COLOR_ARGS]
                )
            case Mode.CLIPPY:
                result = self._clippy()
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationError(ExerciseOutput._from_process(result))

    def _clippy(self) -> subprocess.CompletedProcess:
        name = self.name
        cargo_toml = (
            f'[package]\nname = "{name}"\nversion = "0.0.1"\nedition = "2018"\n'
            f'[[bin]]\nname = "{name}"\npath = "{name}.rs"'
        )
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml)
        except OSError as exc:
            message = (
                "Failed to write Clippy Cargo.toml file."
                if "NO_EMOJI" in os.environ
                else "Failed to write 📎 Clippy 📎 Cargo.toml file."
            )
            raise RuntimeError(message) from exc
        # Build a binary too so the exercise can be run; clippy reports any failure.
        _capture(["rustc", str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS])
        # A clean is needed for clippy to report every lint.
        _capture(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS]
        )
        return _capture(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ]
        )

    def run(self) -> ExerciseOutput:
        """Run the compiled binary; raise ExecutionError if it fails."""
        arg = "--show-output" if self.mode is Mode.TEST else ""
        result = _capture([temp_file(), arg])
        output = ExerciseOutput._from_process(result)
        if result.returncode != 0:
            raise ExecutionError(output)
        return output

    def state(self) -> ExerciseState:
        """Report whether the pending marker is still in the source."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return ExerciseState()
        lines = _source_lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise RuntimeError(f"pending marker in {self.path} spans several lines")
        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return ExerciseState(
            tuple(
                ContextLine(line=line, number=i + 1, important=i == matched)
                for i, line in enumerate(lines)
                if first <= i <= last
            )
        )

    def looks_done(self) -> bool:
        """True when the pending marker has been removed."""
        return self.state().is_done()

    def __str__(self) -> str:
        return str(self.path)


def parse_exercises(text: str) -> list[Exercise]:
    """Parse the TOML exercise list."""
    data = tomllib.loads(text)
    try:
        entries = data["exercises"]
        return [
            Exercise(
                name=entry["name"],
                path=Path(entry["path"]),
                mode=Mode(entry["mode"]),
                hint=entry["hint"],
            )
            for entry in entries
        ]
    except KeyError as exc:
        raise ValueError(f"missing field {exc.args[0]!r} in exercise list") from exc


def load_exercises(path: str | os.PathLike) -> list[Exercise]:
    """Read and parse an exercise list file."""
    return parse_exercises(Path(path).read_text(encoding="utf-8"))