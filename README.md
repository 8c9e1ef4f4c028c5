# pipekit

`pipekit` runs two commands connected by a pipe. The first command reads an
input file. The second command writes to an output file. It does the same job
as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

The package also has small helpers for characters, numbers, byte buffers,
strings, a singly linked list and writing to file descriptors.

## Installation

```sh
pip install .
```

## Command line

```sh
pipekit infile "cmd1 args" "cmd2 args" outfile
```

How the command works:

- Each command is split on single spaces, and empty pieces are dropped. There
  is no quoting and no escaping.
- The first word of a command is looked up in the directories of the search
  path. The first `dir/name` that is an executable file is run.
- The output file is created with mode `0644`. If it already exists, it is
  truncated.
- If the input or the output file cannot be opened, a message of the form
  `pipex: <reason>` goes to standard error, and the pipeline still runs.
  A missing input file reads as empty. If the output file cannot be opened,
  the second command writes to standard output.
- If a command cannot be found, that step produces no output, and no message
  is printed.
- The first command runs to completion before the second starts. Its whole
  output is held in memory and then fed to the second command.

Exit status:

- 1 if the command is not given exactly four arguments.
- 1 if the environment has no search path.
- Otherwise, the exit status of the second command.
- 0 if the second command could not be started.

The search path is the first environment entry whose text begins with `PA`.
Everything after its first five characters (`PATH=` for `PATH`) is split on
`:`.

Example:

```sh
pipekit input.txt "grep error" "wc -l" count.txt
```

## Library

```python
from pipekit.pipeline import PipexError, find_path, resolve_command, run_pipeline

dirs = find_path({"PATH": "/usr/bin:/bin"})   # ['/usr/bin', '/bin']
print(resolve_command("ls", dirs))            # e.g. '/usr/bin/ls', or None

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt")
```

`find_path` and `run_pipeline` accept the environment in either of two forms:

- a mapping
- an iterable of `KEY=VALUE` strings

`run_pipeline` uses `os.environ` when no environment is given. It raises
`PipexError` when there is no search path. `main(argv=None)` is the command's
entry point, and it returns the exit status.

### Helper modules

- `pipekit.ctype`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper`, `tolower`. ASCII only. Each takes an integer code point or a
  one-character string.
- `pipekit.numbers`: `atoi` and `itoa`. `atoi` skips leading whitespace,
  accepts one sign and stops at the first non-digit. A value outside the
  32-bit signed range gives -1 for a positive sign and 0 for a negative sign.
- `pipekit.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp`, `calloc`. These work on `bytearray` and `bytes`. `memmove` moves
  bytes within one buffer, between two offsets.
- `pipekit.text`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, `substr`, `strjoin`, `strtrim`, `split_words`, `strmapi`,
  `striteri`, `strlcpy`, `strlcat`.
  - The search functions return an index, or `None` when nothing is found.
  - `strlcpy` and `strlcat` return a pair: the resulting string and the
    length needed.
- `pipekit.linkedlist`: `Node` and `LinkedList`, with these methods:
  - `push_front`, `push_back`, `last`
  - `clear(delete=None)`
  - `for_each`
  - `map(f, delete=None)`
  - `len()` and iteration over the contents
- `pipekit.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`. Each writes
  to a file descriptor, or to an object that has `fileno()`.

## What it does not do

- It runs exactly two commands; longer pipelines are not supported.
- There is no here-document input.
- There is no appending to the output file.
- There is no shell syntax: no quoting, globbing or variable expansion inside
  a command.

## Tests

```sh
pip install ".[test]"
pytest
```