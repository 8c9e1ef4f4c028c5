"""Run two commands as a pipeline between an input file and an output file.

``pipex infile "cmd1 args" "cmd2 args" outfile`` behaves like the shell
line ``< infile cmd1 args | cmd2 args > outfile``. Commands are split on
single spaces and looked up in the directories listed in ``PATH``.
"""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from pipekit.text import split_words

Environment = Union[Mapping[str, str], Iterable[str]]

PROGRAM = "pipex"
OUTFILE_MODE = 0o644


class PipexError(Exception):
    """Raised when the pipeline cannot be set up at all."""


def _entries(env: Environment) -> List[str]:
    if isinstance(env, Mapping):
        return [f"{key}={value}" for key, value in env.items()]
    return list(env)


def _as_mapping(env: Environment) -> dict:
    if isinstance(env, Mapping):
        return dict(env)
    result = {}
    for entry in env:
        key, _, value = entry.partition("=")
        result[key] = value
    return result


def find_path(env: Environment) -> Optional[List[str]]:
    """The directories of the search path, or None when the environment has none.

    The first ``KEY=VALUE`` entry whose text begins with ``PA`` is taken as the
    path entry; everything after its first five characters is split on ``:``,
    dropping empty pieces.
    """
    for entry in _entries(env):
        if entry.startswith("PA"):
            return split_words(entry[5:], ":")
    return None


def resolve_command(name: str, dirs: Iterable[str]) -> Optional[str]:
    """The first ``dir/name`` that is an executable file, or None."""
    if not name:
        return None
    for directory in dirs:
        candidate = f"{directory}/{name}"
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
    return None


def _report(error: OSError) -> None:
    print(f"{PROGRAM}: {error.strerror}", file=sys.stderr)


def _run(
    command: str,
    dirs: Sequence[str],
    env: dict,
    stdin,
    stdout,
    data: Optional[bytes] = None,
) -> Optional[subprocess.CompletedProcess]:
    args = split_words(command, " ")
    executable = resolve_command(args[0], dirs) if args else None
    if executable is None:
        return None
    if data is not None:
        return subprocess.run(
            args, executable=executable, env=env, input=data, stdout=stdout
        )
    return subprocess.run(
        args, executable=executable, env=env, stdin=stdin, stdout=stdout
    )


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Environment] = None,
) -> int:
    """Feed ``infile`` through ``cmd1`` then ``cmd2`` into ``outfile``.

    The output file is created or truncated with mode 0644. A file that cannot
    be opened is reported on standard error and the pipeline still runs: a
    missing input reads as empty, a missing output leaves standard output in
    place. A command that cannot be found produces nothing. Returns the exit
    status of the second command, or 0 when it could not be started.
    """
    if env is None:
        env = os.environ
    dirs = find_path(env)
    if dirs is None:
        raise PipexError("no search path in the environment")
    child_env = _as_mapping(env)

    in_fd: Optional[int] = None
    out_fd: Optional[int] = None
    failure: Optional[OSError] = None
    try:
        in_fd = os.open(infile, os.O_RDONLY)
    except OSError as error:
        failure = error
    try:
        out_fd = os.open(
            outfile, os.O_CREAT | os.O_RDWR | os.O_TRUNC, OUTFILE_MODE
        )
    except OSError as error:
        failure = error
    if failure is not None:
        _report(failure)

    try:
        first = _run(
            cmd1,
            dirs,
            child_env,
            stdin=in_fd if in_fd is not None else subprocess.DEVNULL,
            stdout=subprocess.PIPE,
        )
        piped = first.stdout if first is not None and first.stdout else b""
        second = _run(
            cmd2,
            dirs,
            child_env,
            stdin=None,
            stdout=out_fd,
            data=piped,
        )
    finally:
        for fd in (in_fd, out_fd):
            if fd is not None:
                os.close(fd)
    return second.returncode if second is not None else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        return 1
    infile, cmd1, cmd2, outfile = args
    try:
        return run_pipeline(infile, cmd1, cmd2, outfile, os.environ)
    except PipexError:
        return 1


if __name__ == "__main__":
    sys.exit(main())