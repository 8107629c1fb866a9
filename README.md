# pipex

`pipex` runs two commands connected by a pipe. The first command reads from
an input file, and the second command writes to an output file. It works like
this shell line:

```
< infile cmd1 | cmd2 > outfile
```

## Usage

```
pipex infile "cmd1 args" "cmd2 args" outfile
```

For example:

```
pipex input.txt "grep error" "wc -l" count.txt
```

`pipex` needs exactly four non-empty arguments. With any other arguments, it
prints `No found word E/error, please, check it.` to standard output and
exits with status 1. It does the same when a command contains no words, for
example a command made only of spaces.

### How commands are split

Each command is split into words on the space character only. A word that
begins with a single or double quote runs up to the next quote of the same
kind, or to the end of the text, and the quotes are removed. An unquoted word
ends at a space or at any quote character. For example, `"awk '{print $1}'"`
gives the two words `awk` and `{print $1}`.

`pipex` finds each command by searching the directories listed in `PATH`, in
order.

### Files

`pipex` creates or truncates the output file with mode `0644` before it opens
the input file. When a file cannot be opened, `pipex` writes
`<file>: <reason>` to standard error.

- If the input file cannot be opened, the second command still runs, with
  empty input.
- If the output file cannot be opened, the first command still runs, and the
  result is 1.
- If neither file can be opened, no command runs, and the result is 1.

### Exit status

- The exit status of the second command, when it runs. If a signal killed
  that command, the status is 0.
- `127` when a command is not found in any `PATH` directory. The message is
  `<name>: command not found`.
- `127` when `PATH` is missing or empty. The message is
  `<name>: No such file or directory`.
- `1` when a command is found but cannot be started, when the output file
  cannot be opened, or when the arguments are unusable.

## Library use

You can also use the parts of the command on their own:

```python
from pipex.words import split_command
from pipex.lookup import resolve_command, find_command
from pipex.runner import run_pipeline, validate_arguments, check_commands, UsageError

split_command("grep 'two words'")        # ['grep', 'two words']
resolve_command("ls", {"PATH": "/bin:/usr/bin"})   # e.g. '/bin/ls', or None

status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", {"PATH": "/usr/bin:/bin"})
```

- `resolve_command(command, env=None)` searches the `PATH` of `env`. When
  `env` is not given, it uses the process environment. It returns the full
  path, or `None` when no directory holds an executable of that name. It
  raises `FileNotFoundError` when `PATH` is unset or empty.
- `find_command(directories, command)` returns the first executable
  `directory/command`, or `None`.
- `validate_arguments(argv)` returns the four arguments as a tuple. It raises
  `UsageError` unless there are exactly four and none is empty.
- `check_commands(commands)` returns the words of each command. It raises
  `UsageError` if any command has no words.
- `run_pipeline(infile, first, last, outfile, env=None)` runs the pipeline and
  returns the exit status described above.
- `pipex.runner.main(argv=None)` is the entry point of the `pipex` command.

`pipex.fmt` has two functions:

- `format_string(template, *args)` expands the conversions
  `%s %d %i %u %c %x %X %p %%`. An unknown conversion gives the character
  that follows the `%`. A `%` at the very end of the template gives a NUL
  character.
- `printf(template, *args)` writes the result to standard output and returns
  its length.

`pipex.textutil` has small string helpers:

- `atoi(text)` returns a 32-bit signed value. It gives 0 when there is more
  than one sign character or no digits.
- `itoa(n)` converts an integer to text.
- `split(text, sep)` splits on one character and drops empty pieces.
- `strtrim(text, chars)` removes the given characters from both ends.
- `strnstr(haystack, needle, n)` returns the index of the first match within
  the first `n` characters, or `None`.

## What it does not do

`pipex` runs exactly two commands. It does not handle longer pipelines,
here-documents, or appending to the output file. Commands are not passed
through a shell, so variables, globs and redirections inside a command are
not expanded.

## Running the tests

Install the package with the `test` extra, then run `pytest`.