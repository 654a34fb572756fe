"""Indented, timed log messages.

Nothing is printed unless the `verbose` option is set.  Output goes to
stderr so it never mixes with results printed by the command-line driver.

Important functions:
 - task: a context manager to wrap one phase of work
 - event: print a message, indented under the active tasks
 - dump_profile: write accumulated task durations to a file

Each thread keeps its own task stack; polynomials may be used from several
threads at once.
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import sys
import threading

from sparsepoly.opts import Option

verbose = Option("verbose", bool, False, description="Log tasks and events to stderr")

_local = threading.local()
_times_lock = threading.Lock()
_times = defaultdict(float)
_begin = datetime.datetime.now()

def _stack():
    stack = getattr(_local, "stack", None)
    if stack is None:
        stack = _local.stack = []
    return stack

def _indent(depth):
    return "  " * depth

def log(string):
    if verbose.value:
        print(string, file=sys.stderr)

def task_begin(name, **kwargs):
    stack = _stack()
    stack.append((name, datetime.datetime.now()))
    if not verbose.value:
        return
    details = ""
    if kwargs:
        details = " [" + ", ".join("{}={}".format(k, v) for k, v in kwargs.items()) + "]"
    log("{}{}{}...".format(_indent(len(stack) - 1), name, details))

def task_end():
    stack = _stack()
    key = tuple(name for name, start in stack)
    name, start = stack.pop()
    duration = (datetime.datetime.now() - start).total_seconds()
    with _times_lock:
        _times[key] += duration
    if not verbose.value:
        return
    log("{}Finished {} [duration={:.3}s]".format(_indent(len(stack)), name, duration))

@contextmanager
def task(name, **kwargs):
    try:
        yield task_begin(name, **kwargs)
    finally:
        task_end()

def event(name):
    if not verbose.value:
        return
    log(_indent(len(_stack())) + name)

def profile():
    """Accumulated durations, keyed by the tuple of enclosing task names."""
    with _times_lock:
        return dict(_times)

def dump_profile(path):
    duration = (datetime.datetime.now() - _begin).total_seconds()
    times = profile()
    with open(path, "w") as f:
        f.write("Total duration: {:.3} seconds\n\n".format(duration))
        for k in sorted(times, key=times.get, reverse=True):
            f.write("{:16.3} {}\n".format(times[k], ", ".join(k)))
