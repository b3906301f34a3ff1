# pipeline-runner

Connect a chain of commands the way a shell pipe does: read from an input
file, pass the data through every command in turn, and write the result to
an output file.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
pipeline-runner INFILE CMD1 CMD2 [CMD3 ...] OUTFILE
```

behaves like the shell line

```
< INFILE CMD1 | CMD2 | CMD3 ... > OUTFILE
```

The output file is created if it does not exist (mode 0666 before the
umask) and truncated if it does.

### Here-documents

```
pipeline-runner here_doc LIMITER CMD1 CMD2 [CMD3 ...] OUTFILE
```

behaves like

```
CMD1 << LIMITER | CMD2 | CMD3 ... >> OUTFILE
```

Lines are read from standard input, each after a `heredoc > ` prompt on
standard output, until a line that starts with `LIMITER` is entered or the
input ends. The limiter line is not passed on. The output file is appended
to rather than truncated.

### Examples

```
pipeline-runner input.txt "grep error" "wc -l" count.txt
pipeline-runner here_doc END "sort" "uniq -c" summary.txt
```

### Commands

Each command is split on spaces, and empty words are dropped; there is no
quoting. A command whose first word starts with `/`, `./` or `..` is used
as given and must exist. Any other command is used directly if it is
executable as named, and otherwise looked up in the directories of `PATH`
in order.

At least two commands are needed, that is four arguments in all (five
with `here_doc`). With fewer, `Error: invalid arguments` is written to
standard error and the exit status is 1.

When the input file cannot be opened, the output file cannot be opened, or
a command cannot be found or started, a message starting with `Error:` is
written to standard error and the rest of the chain still runs; the command
after a failed one reads empty input. Such failures do not change the exit
status, which is 0 once the chain has been started.

## What it does not do

This is not a shell. Commands get no quoting, globbing, variable expansion
or redirection of their own, and the exit statuses of the commands are not
reflected in the program's exit status.

## Library use

The same work can be done from Python. `parse_args` takes the arguments
without the program name:

```python
import os
from pipeline_runner.pipeline import parse_args, run_pipeline

args = parse_args(["input.txt", "grep error", "wc -l", "count.txt"])
statuses = run_pipeline(args, dict(os.environ))
```

`run_pipeline` returns the exit status of every command, with 1 for a
command that could not be started. `parse_args` raises `PipelineError` on
too few arguments and returns an `Arguments` value with `infile`,
`commands`, `outfile`, `limiter` and the `heredoc` property.
`read_heredoc(limiter, source, prompt_stream)` collects here-document text
on its own.

Other modules:

- `pipeline_runner.command`: `resolve_command(arg, env)` returns the
  executable path and argument list for a command, raising `CommandError`
  when it cannot be found; also `split_command`, `is_explicit_path` and
  `find_in_path`.
- `pipeline_runner.linereader`: `LineReader(fd, buffer_size)` reads a file
  descriptor (or an object with `fileno()`) one line at a time through
  `read_line()` or iteration; lines keep their newline.
- `pipeline_runner.output`: `write_char`, `write_str`, `write_line` and
  `write_number` write to a text stream or a file descriptor.
- `pipeline_runner.strings`: string helpers with C-style edge cases —
  `split`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`,
  `strlcat`, `strjoin`, `substr`, `strtrim`, `strmapi`, `striteri`.
- `pipeline_runner.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), `to_upper`, `to_lower`, and 32-bit
  `atoi` / `itoa`.
- `pipeline_runner.memory`: byte-buffer helpers `memset`, `bzero`,
  `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`.