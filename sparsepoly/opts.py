"""Tools to define local options.

Several sparsepoly modules have local switches, e.g. whether construction
merges duplicate exponents or how many digits the printer shows.  Each module
declares an Option next to the code that reads it:

    merge_input_terms = Option("merge-input-terms", bool, False)
    ...
    if merge_input_terms.value:
        ...

`setup` adds every Option defined so far to an argparse parser and `read`
copies the parsed values back.  Tests that flip an option should use
`override` (or `snapshot`/`restore`) so other tests see the defaults.
"""

from contextlib import contextmanager

# All Option objects that have ever been created, by name.
_OPTS = {}

# Default values for options.  The `restore` procedure needs this to override
# values for options in modules that have not been imported yet.
_DEFAULT_VALUE_OVERRIDES = {}

class Option(object):
    def __init__(self, name, type, default, description="", metavar=None, minimum=None):
        assert type in (bool, str, int)
        assert minimum is None or type is int
        assert name not in _OPTS, "option {} defined twice".format(name)
        self.name = name
        self.description = description
        self.type = type
        self.default = default
        self.value = _DEFAULT_VALUE_OVERRIDES.get(name, default)
        self.metavar = metavar
        self.minimum = minimum
        _OPTS[name] = self

    def __bool__(self):
        raise Exception(
            "An attempt was made to convert an Option to a boolean. " +
            "If you intended to read the value of this Option, use `_.value`. " +
            "If you intended to check whether this object is None, use `_ is None`.")

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.value)

    def argname(self):
        if self.type is bool:
            return ("no-" + self.name) if self.default else self.name
        return self.name

    def convert(self, raw):
        if self.type is not int:
            return raw
        try:
            value = int(raw)
        except (TypeError, ValueError):
            raise ValueError("option --{} expects an integer, got {!r}".format(self.name, raw))
        if self.minimum is not None and value < self.minimum:
            raise ValueError("option --{} must be at least {}, got {}".format(self.name, self.minimum, value))
        return value

def lookup(name):
    return _OPTS[name]

def setup(parser):
    for o in _OPTS.values():
        flag = "--" + o.argname()
        if o.type is bool:
            parser.add_argument(flag, action="store_true", default=False, help=o.description)
        else:
            default_note = "default={!r}".format(o.default)
            parser.add_argument(flag, metavar=o.metavar, default=o.default,
                help="{} ({})".format(o.description, default_note) if o.description else default_note)

def read(args):
    for o in _OPTS.values():
        raw = getattr(args, o.argname().replace("-", "_"))
        if o.type is bool:
            o.value = (not raw) if o.default else raw
        else:
            o.value = o.convert(raw)

def snapshot():
    """Produce a snapshot of current option values."""
    return { name : o.value for name, o in _OPTS.items() }

def restore(snap):
    """Restore a snapshot of option values."""
    global _DEFAULT_VALUE_OVERRIDES

    for name, o in _OPTS.items():
        o.value = snap.get(name, o.value)

    # Options in modules that have not been imported yet pick these up when
    # they are constructed.
    _DEFAULT_VALUE_OVERRIDES = dict(snap)

@contextmanager
def override(**values):
    """Temporarily set option values.

    Keyword names use underscores in place of dashes, so

        with override(merge_input_terms=True):
            ...

    sets the "merge-input-terms" option for the duration of the block.
    """
    snap = snapshot()
    try:
        for key, value in values.items():
            o = lookup(key.replace("_", "-"))
            o.value = o.convert(value)
        yield
    finally:
        restore(snap)
