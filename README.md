# exerciser

A terminal companion for working through small programming exercises. Each
exercise is a source file with a hint. The exerciser compiles it, then runs
the program or its tests, and tells you whether you are done.

## Installation

```
pip install .
```

The exercises are built with `rustc`, and clippy-mode exercises also use
`cargo clippy`. At start-up the command runs `rustc --version`. If that fails
it prints a message and exits with status 1.

## Setting up an exercise directory

Run the command from a directory that holds an `info.toml` file. The file lists
the exercises in their recommended order:

```toml
[[exercises]]
name = "variables1"
path = "homeworks/homework5/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable before you print it."
```

Every entry needs `name`, `path`, `mode` and `hint`. `mode` is one of:

- `compile`: build the file and run the program;
- `test`: build the file as a test harness and run it with `--show-output`;
- `clippy`: write `./exercises/clippy/Cargo.toml` for the exercise, build it,
  and run clippy with warnings treated as errors.

If `info.toml` is missing from the current directory, the command exits with
status 1. The compiled binary is written to a temporary file in the current
directory and removed afterwards.

## Marking an exercise as pending

An exercise counts as unfinished while its file still holds a comment line
reading `I AM NOT DONE`. When such an exercise builds and passes, the exerciser
shows the line numbers and text around the marker, with two lines on either
side. Remove the marker to move on.

## Commands

```
exerciser                    # welcome text and a short introduction
exerciser -v                 # print the version
exerciser verify             # check every exercise in order, stop at the first not done
exerciser run NAME           # build and run (or test) a single exercise
exerciser run next           # the first exercise whose marker is still present
exerciser hint NAME          # print the hint for an exercise
exerciser homework NUMBER    # watch one homework set, e.g. `exerciser homework 5`
```

Put `--nocapture` before the subcommand to print the output of test exercises:

```
exerciser --nocapture run NAME
```

`verify` and `run` exit with status 1 when an exercise fails to build or run.
`verify` also exits with status 1 when an exercise still carries its marker.
An unknown exercise name gives status 1, and so does a usage error.

### Homework watch mode

`exerciser homework NUMBER` lists the entries of `./homeworks/homeworkNUMBER/`.
It keeps the exercises whose path has one of those names as its third
component, for example `topic` in `homeworks/homework5/topic/file.rs`, and
verifies them. If one is not done, it watches `./homeworks` for created or
modified source files. On each change it checks again from the changed exercise
onwards. You can type these commands while it runs:

| command | effect                                   |
|---------|------------------------------------------|
| `hint`  | print the hint of the failing exercise   |
| `clear` | clear the screen                         |
| `quit`  | leave watch mode                         |
| `help`  | list these commands                      |

When every exercise in the set passes, the exerciser prints a congratulation
and exits. A homework number with no directory gives an error and status 1.

## Output

Status lines are coloured and use emoji. A spinner on standard error shows
progress while an exercise is built. Set the `NO_EMOJI` environment variable to
get plain symbols instead of emoji.

## Library

The package also holds worked solutions and small simulations that you can
import:

- `exerciser.exercise`: `Exercise`, `Mode`, `load_exercises` and
  `parse_exercises` for reading `info.toml`. `Exercise.state()` and
  `Exercise.looks_done()` check for the pending marker.
- `exerciser.homeworks.basics`, `containers`, `messages`, `ownership`,
  `errors` and `traits`: worked homework solutions, for example `bigger`,
  `fizz_if_foo`, `fruit_basket`, `vec_loop`, `ReportCard`, `State`,
  `fill_vec`, `parse_pos_nonzero` and `append_bar`.
- `exerciser.chain`: an in-memory model of on-chain programs.
  `chain.pubkey` provides `Pubkey`, base58 helpers, `create_program_address`
  and `find_program_address`. `chain.runtime` provides a `Runtime` that
  registers processors, dispatches `Instruction`s and creates accounts. On top
  of these sit example programs:
  - a lottery (`chain.lottery.LotteryProgram`);
  - rock-paper-scissors with commit and reveal (`chain.rps.Game`);
  - a weighted-vote consortium (`chain.consortium.ConsortiumProgram`);
  - hello and cross-program calls (`chain.hello`);
  - a greeting counter (`chain.counter`);
  - an nth-prime computation (`chain.compute.nth_prime`);
  - program-derived accounts (`chain.pda.create_pda`, `write_pda`).

```python
from exerciser.homeworks.errors import total_cost
from exerciser.chain.compute import nth_prime

total_cost("34")   # 171
nth_prime(10)      # 29
```

## What it does not do

- There is no `list` command that shows done and pending exercises, and no
  `watch` command over the whole exercise list. Watching works only per
  homework set.
- `exerciser.chain` does not talk to any network or ledger. Accounts live in
  memory, and signatures are not checked: the caller's key is taken as given.

## Running the tests

```
pip install .[test]
pytest
```