# minishell

A small interactive command shell. It reads a line, splits it into
tokens, replaces `$NAME` variables with values from its own copy of the
environment, and runs the resulting commands, either on their own or
joined by pipes.

## What it supports

- Pipelines: `ls | grep py | wc -l`
- Redirections: `< file`, `> file`, `>> file`, and here-documents with `<< DELIM`
- Variable expansion outside single quotes: `echo $HOME`
- Builtins: `echo` (with `-n`), `cd` (with `~` and `-`), `pwd`, `export`,
  `unset`, `env` and `exit`
- Any other command is looked up in the directories listed in `PATH`

## Installation

```
pip install .
```

## Usage

Start the interactive prompt:

```
minishell
```

The prompt is `minishell$ `. Command-line arguments are ignored. Lines
are read one at a time and an empty line does nothing. Ctrl-C at the
prompt starts a fresh line. End of input (Ctrl-D) prints `exit` and
leaves the shell with status 1.

```
minishell$ export GREETING=hello
minishell$ echo $GREETING world > out.txt
minishell$ cat < out.txt
hello world
minishell$ cat << END | wc -l
> one
> two
> END
2
minishell$ exit 3
```

A command that cannot be found in `PATH` reports
`minishell: <name>cmd not found` and gives status 127. `exit` with no
argument leaves with status 0. With a number it leaves with that number
modulo 256. With a non-numeric argument it reports the error and leaves
with status 255. With more than one argument it reports an error and the
shell keeps running.

## Using it from Python

The shell can also be driven from code, for example to run a batch of
lines against a prepared environment. The environment is given as
`NAME=value` entries:

```python
from minishell.executor import Shell
from minishell.cli import run

shell = Shell(["PATH=/usr/bin:/bin", "HOME=/tmp"])
status = run(shell, ["echo hello", "pwd"])
```

`run` returns the status the shell would exit with: the status given to
`exit`, or 1 once the lines run out, after writing `exit`.

These pieces can also be used on their own:

- `minishell.lexer.tokenize` turns a line into `Token`s.
- `minishell.expander.expand` substitutes variables in those tokens.
- `minishell.parser.parse` produces a list of `Command` objects, each with
  its `argv` and `Redirect`s.
- `Shell.execute` runs that list.
- `minishell.environ.Environment` holds the ordered environment entries.
- `minishell.redirections.open_redirections` opens a command's
  redirection targets and here-documents.

The package also has small helper modules:

- `minishell.text` classifies characters, converts numbers and searches
  strings.
- `minishell.textops` provides substring, join, trim, split and indexed
  mapping.
- `minishell.buffers` fills, copies, searches and does bounded copies on
  `bytearray`s.
- `minishell.linkedlist` provides a singly linked list.
- `minishell.output` writes characters, strings and numbers to a stream.

## What it does not do

- Quotes do not group words. Quote characters are dropped and the text
  between them is still split at spaces, so `echo "a  b"` prints `a b`.
  A `$NAME` inside single quotes is left out of the command altogether.
- `$?` is not replaced with the last status. It expands to nothing, like
  any unset variable.
- A pipeline always reports status 0, whatever its commands returned.
  Builtins in a pipeline run on a copy of the shell, so changes they make
  (`cd`, `export`, `exit`) do not last.
- There are no `;`, `&&`, `||`, subshells, globbing, job control or
  script files. Input is read only from the interactive prompt, or from
  the lines passed to `run`.

## Running the tests

```
pip install .[test]
pytest
```