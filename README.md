# marvelsh

A small interactive shell. It reads a line at the `marvel$ ` prompt, splits it
into tokens, strips quotes, expands `$VARIABLES` from its environment, checks
the syntax and then either runs a builtin or starts an external program.

## Installing

```
pip install .
```

## Running

```
marvelsh
```

Type commands at the `marvel$ ` prompt. End the session with `exit` or with
end-of-file (Ctrl-D), which prints `exit`.

## What it understands

- Words, single-quoted `'...'` and double-quoted `"..."` strings. An unclosed
  quote makes the whole line be ignored.
- Operators `|`, `<`, `>`, `>>` and `<<`. A pipe at the start or end of a line,
  two pipes in a row, or a redirection not followed by a word is reported as
  ``bash: syntax error near unexpected token `...'``.
- `$NAME` expansion in words, using the environment the shell started with.
  Unknown variables expand to nothing; a `$` at the end of a word or followed
  by a space or another `$` is kept as is.

## Builtins

A command whose first word starts with `echo`, `cd`, `pwd`, `export`, `unset`,
`env` or `exit` is treated as a builtin.

| Command | What it does |
|---------|--------------|
| `echo [-n] args...` | Prints its arguments separated by single spaces; `-`, `-n`, `-nn`, ... suppress the newline. Single-quoted text is printed as is, double-quoted text has its variables expanded, and `$` followed by digits prints the digits |
| `cd [dir \| ~ \| -]` | Changes directory (`~` or no argument: `HOME`, `-`: `OLDPWD`), then updates `OLDPWD` and `PWD` if those variables exist |
| `pwd` | Prints the `PWD` variable |
| `env` | Prints every `KEY=value` pair |
| `exit [n]` | Prints `exit` and leaves the shell with status `n` (default 0, taken modulo 256). A non-numeric argument leaves with status 2; more than one argument prints `too many arguments` and stays |

Any other command is looked up in `/bin/` unless it is already given as a
`/bin/...` path, and is run with the shell's environment. A program that cannot
be started is reported on standard error as `Couldn't execute: ...`.

## What it does not do

- Pipelines are checked and parsed, but only the first command of a line is
  run; the rest are not started and no pipe is set up between them.
- Redirections (`<`, `>`, `>>`, `<<`) are parsed into `Redirection` objects but
  never applied: no file is opened and no here-document is read.
- `export` and `unset` are recognised as builtin names but do nothing.
- Programs are not searched for on `PATH`, only under `/bin/`.
- There is no exit status variable (`$?`) and no signal handling.

## Using it as a library

The stages of the shell are available separately:

```python
from marvelsh.tokens import tokenize, manage_quotes
from marvelsh.expander import expand
from marvelsh.syntax import check_syntax
from marvelsh.parser import parse_tokens
from marvelsh.environment import env_init, format_env

env = env_init(["HOME=/home/user", "USER=user"])
tokens = manage_quotes(tokenize('echo "$USER" | cat > out.txt'))
tokens = expand(tokens, env)
check_syntax(tokens)
commands = parse_tokens(tokens)
# commands[0].args == ["echo", "user"]
# commands[1].args == ["cat"], commands[1].redirections[0].file == "out.txt"
```

- `tokenize` raises `UnclosedQuoteError` when a quote is left open.
- `check_syntax` returns `False` for an empty token list, `True` for a valid
  one, and raises `ShellSyntaxError` on a bad one.
- `marvelsh.builtins` provides `echo`, `pwd` and `exit_shell`, which return the
  text to print, and `cd`, which raises `OSError` on failure. `exit_shell`
  raises `ShellExit`, carrying `status` and `output`.
- `marvelsh.executor.run_command` runs a `Command`; `marvelsh.cli.process_line`
  runs one whole line, writing output to a given stream.

## Running the tests

```
pip install .[test]
pytest
```