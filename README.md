# printlib

A very small library for writing text to a stream, plus a command that
appends words read from standard input to a log file.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library

```python
import io
from printlib.printer import print_text

buffer = io.StringIO()
print_text("hello", buffer)
assert buffer.getvalue() == "hello"
```

`printlib.printer.print_text(text, out=None)` writes `text` to `out` exactly
as it is, with no newline added. Any text stream with a `write` method will
do, including files opened for writing. When `out` is left out, the text goes
to standard output.

`printlib.examples` has two short examples:

- `hello_stdout()` writes `hello` to standard output.
- `hello_file(path="log.txt")` writes `hello` to the file at `path`,
  replacing what was there before.

## Command

`printlib-demo` reads whitespace-separated words from standard input and
appends each one on its own line to the file named by the `LOG_PATH`
environment variable:

```
echo "one two three" | LOG_PATH=words.log printlib-demo
```

The file is created if it does not exist; existing content is kept. If
`LOG_PATH` is not set, the command prints
`undefined environment variable: LOG_PATH` to standard error and exits
with status 1.

From Python, `printlib.demo.append_words(words, log_path)` does the same for
any iterable of words, and `printlib.demo.main()` runs the command and returns
its exit status.