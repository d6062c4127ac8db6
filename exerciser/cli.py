"""Command-line entry point: running, verifying and watching exercises."""

from __future__ import annotations

import argparse
import os
import queue
import subprocess
import sys
import threading
from collections.abc import Callable, Iterable
from enum import Enum
from itertools import chain, dropwhile
from pathlib import Path, PurePath

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, ExerciseError, load_exercises
from .run import run
from .ui import no_emoji
from .verify import ExerciseFailed, verify

VERSION = "4.7.0"
HOMEWORKS_DIR = "./homeworks"

_HELP = "\n".join(
    [
        "Commands available to you in watch mode:",
        "  hint  - prints the current exercise's hint",
        "  clear - clears the screen",
        "  quit  - quits watch mode",
        "  help  - displays this help message",
        "",
        "Watch mode automatically re-evaluates the current exercise",
        "when you edit a file's contents.",
    ]
)


class WatchStatus(Enum):
    """How a watch session ended."""

    FINISHED = "finished"
    UNFINISHED = "unfinished"


class ExerciseNotFound(LookupError):
    """No exercise matched the requested name."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = _Parser(
        prog="exerciser",
        description="A collection of small exercises to get you used to writing and reading code",
    )
    parser.add_argument(
        "--nocapture", action="store_true", help="show outputs from the test exercises"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="show the executable version"
    )
    commands = parser.add_subparsers(dest="command", metavar="<command>")
    commands.add_parser("verify", help="verifies all exercises according to the recommended order")
    run_parser = commands.add_parser("run", help="runs/tests a single exercise")
    run_parser.add_argument("name", help="the name of the exercise")
    hint_parser = commands.add_parser("hint", help="returns a hint for the given exercise")
    hint_parser.add_argument("name", help="the name of the exercise")
    homework_parser = commands.add_parser(
        "homework", help="watches and checks the exercises of one homework"
    )
    homework_parser.add_argument("name", help="the day of the homework")
    return parser


def find_exercise(name: str, exercises: Iterable[Exercise]) -> Exercise:
    """Find an exercise by name; "next" means the first one not yet done."""
    if name == "next":
        found = next((e for e in exercises if not e.looks_done()), None)
        if found is None:
            raise ExerciseNotFound(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((e for e in exercises if e.name == name), None)
    if found is None:
        raise ExerciseNotFound(f"No exercise found for '{name}'!")
    return found


def homework_exercise_names(homework_dir: str | os.PathLike) -> set[str]:
    """Names of the entries in a homework directory."""
    directory = Path(homework_dir)
    try:
        return {entry.name for entry in directory.iterdir()}
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise FileNotFoundError(
            "Can't find homework. Have you run the wrong homework number?"
        ) from exc


def _homework_topic(exercise: Exercise) -> str | None:
    parts = exercise.path.as_posix().split("/")
    return parts[2] if len(parts) > 3 else None


def filter_homework(exercises: Iterable[Exercise], names: Iterable[str]) -> list[Exercise]:
    """Keep the exercises whose third path component is one of the given names."""
    wanted = set(names)
    return [e for e in exercises if _homework_topic(e) in wanted]


def handle_shell_command(command: str, hint: str | None) -> tuple[str | None, bool]:
    """Answer one watch-shell command: the text to print and whether to quit."""
    command = command.strip()
    match command:
        case "hint":
            return hint, False
        case "clear":
            return "\x1b[2J\x1b[1;1H", False
        case "quit":
            return "Bye!", True
        case "help":
            return _HELP, False
        case _:
            return f"unknown command: {command}", False


def spawn_watch_shell(
    failed_hint: Callable[[], str | None], should_quit: threading.Event
) -> threading.Thread:
    """Read commands from stdin in a background thread until input ends."""
    print(
        "Welcome to watch mode! You can type 'help' to get an overview of the "
        "commands you can use here."
    )

    def shell() -> None:
        while True:
            try:
                line = sys.stdin.readline()
            except (OSError, ValueError) as exc:
                print(f"error reading command: {exc}")
                return
            if not line:
                return
            message, quit_requested = handle_shell_command(line, failed_hint())
            if quit_requested:
                should_quit.set()
            if message is not None:
                print(message)

    thread = threading.Thread(target=shell, name="watch-shell", daemon=True)
    thread.start()
    return thread


class _SharedHint:
    def __init__(self, hint: str | None) -> None:
        self._lock = threading.Lock()
        self._hint = hint

    def get(self) -> str | None:
        with self._lock:
            return self._hint

    def set(self, hint: str | None) -> None:
        with self._lock:
            self._hint = hint


class _RustFileHandler(FileSystemEventHandler):
    def __init__(self, events: queue.Queue[Path]) -> None:
        super().__init__()
        self._events = events

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type not in ("created", "modified"):
            return
        path = Path(os.fsdecode(event.src_path))
        if path.suffix == ".rs":
            self._events.put(path)


def _clear_screen() -> None:
    print("\x1bc")


def _ends_with(filepath: PurePath, path: PurePath) -> bool:
    parts = PurePath(path).parts
    own = filepath.parts
    return len(parts) <= len(own) and own[len(own) - len(parts):] == parts


def homework(
    exercises: Iterable[Exercise], verbose: bool, homework_number: str
) -> WatchStatus:
    """Verify one homework's exercises and keep re-checking them as files change."""
    exercises = list(exercises)
    print(f"exercises: {[exercise.name for exercise in exercises]}")
    print(f"exercise count: {len(exercises)}")

    events: queue.Queue[Path] = queue.Queue()
    observer = Observer()
    try:
        observer.schedule(_RustFileHandler(events), HOMEWORKS_DIR, recursive=True)
        observer.start()
    except OSError as exc:
        raise RuntimeError(f"could not watch {HOMEWORKS_DIR}: {exc}") from exc

    try:
        _clear_screen()
        names = homework_exercise_names(Path(HOMEWORKS_DIR) / f"homework{homework_number}")
        selected = filter_homework(exercises, names)
        print("\n")

        try:
            verify(selected, verbose)
        except ExerciseFailed as exc:
            hint = _SharedHint(exc.exercise.hint)
        else:
            return WatchStatus.FINISHED

        should_quit = threading.Event()
        print("Spawning homework watch shell")
        spawn_watch_shell(hint.get, should_quit)
        while True:
            try:
                changed = events.get(timeout=1)
            except queue.Empty:
                changed = None
            if changed is not None and changed.exists():
                filepath = changed.resolve()
                pending = chain(
                    dropwhile(lambda e: not _ends_with(filepath, e.path), selected),
                    (
                        e
                        for e in selected
                        if not e.looks_done() and not _ends_with(filepath, e.path)
                    ),
                )
                _clear_screen()
                try:
                    verify(pending, verbose)
                except ExerciseFailed as exc:
                    hint.set(exc.exercise.hint)
                else:
                    return WatchStatus.FINISHED
            if should_quit.is_set():
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


def rustc_exists() -> bool:
    """True when the compiler can be started and reports its version."""
    try:
        result = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return result.returncode == 0


def _homework_command(exercises: list[Exercise], verbose: bool, name: str) -> int:
    try:
        status = homework(exercises, verbose, name)
    except FileNotFoundError as exc:
        print(f"Error: {exc}")
        return 1
    except RuntimeError as exc:
        print(f"Error: Could not watch your progress. Error message was {exc}.")
        print(
            "Most likely you've run out of disk space or your 'inotify limit' "
            "has been reached."
        )
        return 1
    if status is WatchStatus.FINISHED:
        emoji = "★" if no_emoji() else "🎉"
        print(f"{emoji} All exercises completed! {emoji}")
        print(f"\n{FINISH_LINE}\n")
    else:
        print("We hope you're enjoying the exercises!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `exerciser homework` again"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print(f"\n{WELCOME}\n")

    if not Path("info.toml").exists():
        print(f"{Path(sys.argv[0]).resolve()} must be run from the exercises directory")
        print("Try changing into the directory that holds info.toml!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install the compiler, check the README.")
        return 1

    exercises = load_exercises("info.toml")
    verbose = args.nocapture

    if args.command is None:
        print(f"{DEFAULT_OUT}\n")
        return 0

    print("\n\nEND\n\n")

    match args.command:
        case "run" | "hint":
            try:
                exercise = find_exercise(args.name, exercises)
            except ExerciseNotFound as exc:
                print(exc)
                return 1
            if args.command == "hint":
                print(exercise.hint)
                return 0
            try:
                run(exercise, verbose)
            except ExerciseError:
                return 1
        case "verify":
            try:
                verify(exercises, verbose)
            except ExerciseFailed:
                return 1
        case "homework":
            return _homework_command(exercises, verbose, args.name)
    return 0


DEFAULT_OUT = """Thanks for installing exerciser!

Is this your first time? Don't worry, these exercises were made for beginners!
Before you get started, here's a couple of notes about how it operates:

1. The central concept is that you solve exercises. These exercises usually
   have some sort of syntax error in them, which will cause them to fail
   compilation or testing. Sometimes there's a logic error instead of a syntax
   error. No matter what error, it's your job to find it and fix it!
   You'll know when you fixed it because then, the exercise will compile and
   you will be able to move on to the next exercise.
2. If you run a homework in watch mode, it'll automatically start with the
   first exercise. Don't get confused by an error message popping up as soon
   as you start! This is part of the exercise that you're supposed to solve,
   so open the exercise file in an editor and start your detective work!
3. If you're stuck on an exercise, there is a helpful hint you can view by typing
   'hint' (in watch mode), or running `exerciser hint exercise_name`.
4. If an exercise doesn't make sense to you, feel free to ask for help!

Got all that? Great! To get started, run `exerciser homework <number>` in order
to get the first exercise. Make sure to have your editor open!"""

FINISH_LINE = r"""+----------------------------------------------------+
|      You made it to the End of this Homework!      |
+--------------------------  ------------------------+
                          \\/
     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒
   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒
   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒
 ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒
   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓
     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒
       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒
         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒
           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒
             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒
           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒
         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒
       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒
       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒
           ▒▒  ▒▒                      ▒▒  ▒▒

We hope you enjoyed working through these exercises!
If you noticed any issues, please don't hesitate to report them.
You can also contribute your own exercises to help the greater community!"""

WELCOME = """       welcome to...

   e x e r c i s e r
   -----------------"""