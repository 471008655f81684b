"""Append words read from standard input to the file named by LOG_PATH."""

import os
import sys

from printlib.printer import print_text


def append_words(words, log_path):
    """Append each word to ``log_path``, one per line."""
    for word in words:
        with open(log_path, "a", encoding="utf-8") as out:
            print_text(word, out)
            out.write("\n")


def main(argv=None):
    log_path = os.environ.get("LOG_PATH")
    if log_path is None:
        print("undefined environment variable: LOG_PATH", file=sys.stderr)
        return 1
    append_words((word for line in sys.stdin for word in line.split()), log_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())