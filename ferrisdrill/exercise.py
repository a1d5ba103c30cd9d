"""Exercises: their description, compilation, running and completion state."""

import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

_RUSTC_COLOR_ARGS = ("--color", "always")
_RUSTC_EDITION_ARGS = ("--edition", "2021")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = Path("./exercises/clippy/Cargo.toml")


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_ThreadId{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, if there is one."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


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
class State:
    """Completion state: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


@dataclass
class ExerciseOutput:
    """Captured output of a compiler or binary run."""

    stdout: str
    stderr: str
    success: bool = True


class CompilationFailed(Exception):
    """Raised when an exercise does not compile."""

    def __init__(self, output: ExerciseOutput):
        super().__init__("compilation failed")
        self.output = output


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _lines(source: str) -> list[str]:
    parts = source.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self):
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def _rustc(self, *extra: str) -> list[str]:
        return ["rustc", *extra, str(self.path), "-o", temp_file(),
                *_RUSTC_COLOR_ARGS, *_RUSTC_EDITION_ARGS]

    def _compile_clippy(self) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        CLIPPY_CARGO_TOML_PATH.write_text(cargo_toml)
        # Build a binary too, so clippy exercises can be run afterwards.
        subprocess.run(self._rustc(), capture_output=True)
        manifest = str(CLIPPY_CARGO_TOML_PATH)
        subprocess.run(
            ["cargo", "clean", "--manifest-path", manifest, *_RUSTC_COLOR_ARGS],
            capture_output=True,
        )
        return subprocess.run(
            ["cargo", "clippy", "--manifest-path", manifest, *_RUSTC_COLOR_ARGS,
             "--", "-D", "warnings", "-D", "clippy::float_cmp"],
            capture_output=True,
        )

    def compile(self) -> "CompiledExercise":
        """Compile the exercise; raise CompilationFailed with the output on error."""
        if self.mode is Mode.COMPILE:
            proc = subprocess.run(self._rustc(), capture_output=True)
        elif self.mode is Mode.TEST:
            proc = subprocess.run(self._rustc("--test"), capture_output=True)
        else:
            proc = self._compile_clippy()

        if proc.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise CompilationFailed(
            ExerciseOutput(_decode(proc.stdout), _decode(proc.stderr), success=False)
        )

    def _run(self) -> ExerciseOutput:
        arg = "--show-output" if self.mode is Mode.TEST else ""
        proc = subprocess.run([temp_file(), arg], capture_output=True)
        return ExerciseOutput(
            _decode(proc.stdout), _decode(proc.stderr), success=proc.returncode == 0
        )

    def state(self) -> State:
        """Return Done, or the lines around the first "I AM NOT DONE" marker."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (i for i, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)), None
        )
        if matched is None:
            raise RuntimeError(f"marker spans several lines in {self.path}")

        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return State(tuple(
            ContextLine(line=line, number=i + 1, important=i == matched)
            for i, line in enumerate(lines)
            if low <= i <= high
        ))

    def looks_done(self) -> bool:
        """Whether the marker comment has been removed."""
        return self.state().done


class CompiledExercise:
    """A compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise):
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the compiled binary and capture its output."""
        return self.exercise._run()

    def close(self) -> None:
        """Remove the compiled binary."""
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> "CompiledExercise":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


@dataclass
class _ExerciseList:
    exercises: list[Exercise] = field(default_factory=list)


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Read the list of exercises from a TOML file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    try:
        entries = data["exercises"]
        return _ExerciseList([
            Exercise(name=e["name"], path=Path(e["path"]),
                     mode=Mode(e["mode"]), hint=e["hint"])
            for e in entries
        ]).exercises
    except KeyError as missing:
        raise ValueError(f"missing field {missing} in {path}") from None