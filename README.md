# mkproj

`mkproj` creates new projects by running a small scripting language. A
configuration file holds one section for each project type. Each section is
a list of commands. The commands can create directories, write files, read
input, print messages and branch on variables.

## Installation

```
pip install .
```

## Usage

```
mkproj -t TYPE [-c CONFIG] [-D NAME=VALUE ...]
```

- `-t TYPE` selects the section to run. This option is required.
- `-c CONFIG` sets the configuration file. The default is `$HOME/.mkproj`.
- `-D NAME=VALUE` sets a variable before the script runs. You can give it
  more than once. `-D NAME` with no value sets the variable to the empty
  string.

If an error occurs, the command prints the message to standard error and
exits with status 1.

## The configuration language

A section starts with `@@TYPE:`. Execution begins on the line after that
marker and stops at the next line that starts with `@@`. Each line is one
command, and the first character of the line selects the command.

Tokens are separated by spaces, tabs or commas. Some tokens have a special form:

- `"text"` is a string. It may contain the escapes `\n`, `\r`, `\t` and
  `\xHH`. Any other character after a backslash stands for itself.
- `$name` is replaced by the value of a variable. A variable that was never
  set is empty. `$$` gives a literal `$`.

Lists are built with `cons`. When a list is printed, its items are joined
with `, `.

| Command | Meaning |
|---|---|
| `\ name value` | Set a variable. |
| `\ name ( op args … )` | Set a variable from an expression. |
| `> tokens…` | Print to standard output. `>2` prints to standard error and `>0` discards the output. |
| `< name` | Read one line from standard input into `name`. |
| `~ dir` | Create a directory. An error, such as the directory already existing, is ignored. |
| `\| text` | Append the rest of the line to the file named by `$output`. |
| `\|\| text` | Truncate that file first, then write the text. |
| `\|$ name` | Write the value of a variable instead of the text. |
| `\|&` | Do not add a newline. This flag combines with the others. |
| `@label:` | Define a label. |
| `@.label:` | Define a local label. It is searched for after the most recent non-local label that was executed. |
| `%label` / `%$name` | Jump to a label, or to the label whose name is stored in a variable. |
| `?name %label` | Jump to the label if the variable `name` is not empty. |
| `?( op args … ) %label` | Jump to the label if the result of the expression is not empty. |
| `#call %label` / `#return` | Call a labelled block, and return from it. |
| `#include path` | Insert another file at this point in the script. |
| `#execute path` | Run another file with the same variables. |

In `?` and `#call` the first character of the label token is dropped, so
write the label as `%label`.

The expression operators are:

- `eq a b`: true if the two atoms are equal.
- `not a`: true if `a` is empty.
- `cat a b`: `a` and `b` joined together.
- `cons a b`: a list with head `a` and tail `b`.
- `car l`: the first item of the list `l`.
- `cdr l`: the rest of the list `l`.
- `atom a`: true if `a` is not a list.
- `curdir`: the directory of the file that is running.

Inside an expression, `\ name value` sets another variable. Any other word is
taken as a literal value. "True" is the string `true` and "false" is the
empty string.

### Example

```
@@c:
< name
~ $name
\ output ( cat $name "/main.c" )
|| int main(void) { return 0; }
> "Created " $name "\n"
@@
```

To run it:

```
mkproj -t c
```

## Using it from Python

```python
import sys

from mkproj.interpreter import Interpreter
from mkproj.variables import Variables

variables = Variables()
variables.set("name", "demo")
Interpreter(variables, sys.stdin, sys.stdout, sys.stderr).run(
    '@@demo:\n> "hello " $name "\\n"\n@@\n', "demo", "inline"
)
```

- `mkproj.variables.Variables` holds the variables. It has `set`, `get`, `in`
  and `len`. `get` returns an empty string for an unset name.
- `mkproj.interpreter.Interpreter` runs scripts with `run(source, type_name,
  file_path)`. An empty `type_name` runs the script from its start. The streams
  default to the `sys` streams.
- `mkproj.parser.Parser` and `mkproj.parser.is_identifier` are the line and
  token reader that the interpreter uses.
- `mkproj.support.read_file` reads a file. Any error raises
  `mkproj.support.MkprojError`. The same exception is raised for an error in a
  script.