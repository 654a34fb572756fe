"""Small I/O helpers shared by the command-line driver."""

import os
import sys

def open_maybe_stdin(f : str, mode="r"):
    """Open file f, or open standard input if f is "-".

    In any case, the caller is responsible for closing the returned handle.
    The safest usage of this function is

        with open_maybe_stdin(path) as f:
            ...
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdin.fileno()), mode)
    return open(f, mode)

def read_file(filename):
    """Returns the contents of a file (or stdin, for "-") as a single string."""
    with open_maybe_stdin(filename) as f:
        return f.read()
