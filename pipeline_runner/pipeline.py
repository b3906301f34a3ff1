"""Running a chain of commands between an input file and an output file.

The arguments follow the form ``infile cmd1 cmd2 ... cmdN outfile``, or
``here_doc LIMITER cmd1 ... cmdN outfile``. In the second form, the first
command reads lines typed on standard input up to the limiter, and the
output file is appended to instead of truncated.
"""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from dataclasses import dataclass
from typing import IO, Mapping, Optional, Sequence, Union

from .command import CommandError, resolve_command
from .linereader import LineReader
from .output import write_line, write_str

HEREDOC = "here_doc"
PROMPT = "heredoc > "

_Stdin = Union[int, IO[bytes], None]


class PipelineError(Exception):
    """The pipeline could not be set up."""


@dataclass(frozen=True)
class Arguments:
    """A parsed command line."""

    infile: Optional[str]
    commands: tuple[str, ...]
    outfile: str
    limiter: Optional[str] = None

    @property
    def heredoc(self) -> bool:
        """True when input comes from a here-document."""
        return self.limiter is not None


def parse_args(argv: Sequence[str]) -> Arguments:
    """Parse arguments given without the program name."""
    args = list(argv)
    if len(args) < 4 or (args[0] == HEREDOC and len(args) < 5):
        raise PipelineError("invalid arguments")
    if args[0] == HEREDOC:
        return Arguments(
            infile=None,
            commands=tuple(args[2:-1]),
            outfile=args[-1],
            limiter=args[1],
        )
    return Arguments(infile=args[0], commands=tuple(args[1:-1]), outfile=args[-1])


def read_heredoc(limiter: str, source=None, prompt_stream=None) -> str:
    """Collect input lines until one starting with ``limiter`` or end of input.

    A prompt is written before every line is read. The limiter line is not
    part of the result.
    """
    source = sys.stdin if source is None else source
    prompt_stream = sys.stdout if prompt_stream is None else prompt_stream
    reader = LineReader(source)
    collected: list[str] = []
    while True:
        write_str(PROMPT, prompt_stream)
        flush = getattr(prompt_stream, "flush", None)
        if flush is not None:
            flush()
        line = reader.read_line()
        if line is None or line.startswith(limiter):
            break
        collected.append(line)
    return "".join(collected)


def _report(message: str) -> None:
    write_line(message, sys.stderr)
    sys.stderr.flush()


def _spawn(
    arg: str,
    stdin: _Stdin,
    stdout: _Stdin,
    env: Optional[Mapping[str, str]],
) -> Optional[subprocess.Popen]:
    try:
        path, words = resolve_command(arg, env)
    except CommandError as exc:
        _report(f"Error: {exc}")
        return None
    try:
        return subprocess.Popen(
            words,
            executable=path,
            stdin=stdin,
            stdout=stdout,
            env=None if env is None else dict(env),
        )
    except OSError as exc:
        _report(f"Error: execve: {exc.strerror or exc}")
        return None


def _open_input(args: Arguments) -> _Stdin:
    if args.heredoc:
        text = read_heredoc(args.limiter)
        handle = tempfile.TemporaryFile()
        handle.write(text.encode("utf-8", "surrogateescape"))
        handle.seek(0)
        return handle
    try:
        return open(args.infile, "rb")
    except OSError as exc:
        _report(f"Error: open: {exc.strerror or exc}")
        return None


def _open_output(args: Arguments) -> Optional[int]:
    mode = os.O_APPEND if args.heredoc else os.O_TRUNC
    try:
        return os.open(args.outfile, os.O_WRONLY | os.O_CREAT | mode, 0o666)
    except OSError as exc:
        _report(f"Error: open: {exc.strerror or exc}")
        return None


def run_pipeline(
    args: Arguments, env: Optional[Mapping[str, str]] = None
) -> list[int]:
    """Run every command, each feeding the next, and return their exit statuses.

    A command that cannot be started, or whose input or output file cannot be
    opened, counts as failed with status 1; the rest of the chain still runs
    and the command after it sees empty input.
    """
    if not args.commands:
        raise PipelineError("invalid arguments")
    source = _open_input(args)
    stdin: _Stdin = source if source is not None else None
    started: list[Optional[subprocess.Popen]] = []
    last = len(args.commands) - 1
    try:
        for position, arg in enumerate(args.commands):
            if position == last:
                out_fd = _open_output(args)
                if stdin is None or out_fd is None:
                    started.append(None)
                else:
                    started.append(_spawn(arg, stdin, out_fd, env))
                if out_fd is not None:
                    os.close(out_fd)
            else:
                proc = _spawn(arg, stdin, subprocess.PIPE, env) if stdin is not None else None
                started.append(proc)
            if stdin is not None and stdin is not subprocess.DEVNULL:
                stdin.close()
            if position != last:
                proc = started[-1]
                stdin = proc.stdout if proc is not None else subprocess.DEVNULL
    finally:
        if source is not None and not source.closed:
            source.close()
    return [1 if proc is None else proc.wait() for proc in started]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    try:
        args = parse_args(sys.argv[1:] if argv is None else argv)
    except PipelineError as exc:
        _report(f"Error: {exc}")
        return 1
    try:
        run_pipeline(args)
    except (OSError, PipelineError) as exc:
        _report(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())