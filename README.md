# ferrisdrill

Building blocks for a course of small exercises. Each exercise is a source
file with a deliberate mistake in it; the learner fixes it, the file is
compiled and checked, and once the `I AM NOT DONE` marker comment is removed
the exercise counts as done.

The package also carries worked solutions, in plain Python, for many of the
course topics.

## Requirements

- Python 3.11 or later, no third-party dependencies
- `rustc` on your `PATH` to compile exercises (and `cargo` for the lint
  exercises)

## Installation

```
pip install ferrisdrill
```

## The course description

A course directory holds an `info.toml` file and an `exercises/` folder.
`info.toml` lists the exercises in the recommended order:

```toml
[[exercises]]
name = "intro1"
path = "exercises/intro/intro1.rs"
mode = "compile"
hint = "No hints this time ;)"

[[exercises]]
name = "tests1"
path = "exercises/tests/tests1.rs"
mode = "test"
hint = "Make the assertion pass."
```

`mode` is one of `compile`, `test` or `clippy` (the `Mode` enum in
`ferrisdrill.exercise`). A missing field raises `ValueError`.

## Exercises

```python
from ferrisdrill.exercise import CompilationFailed, load_exercises

exercises = load_exercises("info.toml")

for exercise in exercises:
    state = exercise.state()
    if state.done:
        continue
    print(f"{exercise.name} is pending:")
    for line in state.context:
        marker = ">" if line.important else " "
        print(f"{marker}{line.number:>3} | {line.line}")
```

- `Exercise.state()` reads the file. It returns a `State` whose `done` is true
  when no `// I AM NOT DONE` line is present; otherwise `context` holds
  `ContextLine` items for the marker line and up to two lines on each side.
- `Exercise.looks_done()` is a shortcut for `exercise.state().done`.
- `Exercise.compile()` calls `rustc` (with `--test` in test mode) and returns a
  `CompiledExercise`, or raises `CompilationFailed`, whose `output` holds the
  captured `stdout` and `stderr`. In clippy mode it also writes
  `exercises/clippy/Cargo.toml` and runs `cargo clean` and `cargo clippy`
  with warnings treated as errors.
- `CompiledExercise.run()` runs the binary (with `--show-output` in test mode)
  and returns an `ExerciseOutput` with `stdout`, `stderr` and `success`.
  The binary is a temporary file in the current directory; `close()`, or
  leaving a `with` block, removes it.

```python
try:
    with exercise.compile() as compiled:
        result = compiled.run()
        print(result.stdout if result.success else result.stderr)
except CompilationFailed as failure:
    print(failure.output.stderr)
```

## Editor support

`ferrisdrill.project.RustAnalyzerProject` builds a `rust-project.json` so that
rust-analyzer treats each exercise file as its own crate:

```python
from ferrisdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()          # RUST_SRC_PATH, or asks `rustc --print sysroot`
project.exercises_to_json("./exercises")
if project.crates:
    project.write_to_disk("./rust-project.json")
```

Every crate is given edition 2021 and the `test` cfg.

## Terminal output

`ferrisdrill.ui` has `warn(message)` and `success(message)`, which print a
red or green status line, and `bold(text)` and `blue(text)`. Colours are used
when standard output is a terminal, or when `CLICOLOR_FORCE` is set to
something other than `0`; `CLICOLOR=0` turns them off. Setting `NO_EMOJI`
swaps the emoji markers for `!` and `✓`.

## Worked solutions

`ferrisdrill.drills` has these modules: `basics`, `quizzes`, `errors`,
`hashmaps`, `messages`, `iterators`, `structs`, `traits`, `smart_pointers` and
`concurrency`.

```python
from ferrisdrill.drills.quizzes import Append, Trim, Uppercase, calculate_price_of_apples, transformer
from ferrisdrill.drills.errors import parse_pos_nonzero
from ferrisdrill.drills.iterators import factorial

calculate_price_of_apples(41)                     # 41
transformer([("hello", Uppercase()), (" hi ", Trim()), ("foo", Append(2))])
                                                  # ['HELLO', 'hi', 'foobarbar']
parse_pos_nonzero("42")                           # PositiveNonzeroInteger(value=42)
factorial(4)                                      # 24
```

Where a solution can fail it raises: `parse_pos_nonzero` raises
`ParseIntError` or `CreationError`, `divide` raises `NotDivisibleError` or
`DivideByZeroError`, and `Package` refuses a weight that is not positive.

## What this package does not do

- There is no command-line program: no interactive runner, no watch mode that
  rechecks files on save, no command to print hints, list progress or reset
  an exercise. Use the classes above from your own script.
- There is no routine that checks a whole list of exercises in order with a
  progress bar and stops at the first failure; loop over `load_exercises()`
  yourself as shown above.
- The worked solutions do not cover the type-conversion topic.

## Running the tests

```
pip install "ferrisdrill[test]"
pytest
```