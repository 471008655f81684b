"""Usage examples of print_text."""

from printlib.printer import print_text


def hello_stdout():
    print_text("hello")


def hello_file(path="log.txt"):
    with open(path, "w", encoding="utf-8") as out:
        print_text("hello", out)