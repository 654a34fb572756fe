"""Render polynomials as text.

Two formats are supported:

 - "plain": every stored term as <coef>x^<exp>, separated by spaces, with a
   "+" in front of each positive coefficient except the first rendered
   term, e.g. "4x^2 +5x^1 +2x^0".
 - "compact": conventional notation, e.g. "4x^2+5x+2" or "-x^3+0.5".

Both skip zero coefficients, and the zero polynomial renders as "".
"""

from sparsepoly.opts import Option

precision = Option("precision", int, 6, metavar="DIGITS", minimum=0,
    description="Significant digits used when printing coefficients")

def format_coefficient(c, digits=None):
    if digits is None:
        digits = precision.value
    return "{:.{}g}".format(c, digits)

def _plain(terms, digits):
    parts = []
    for c, e in terms:
        if c == 0:
            continue
        sign = "+" if parts and c > 0 else ""
        parts.append("{}{}x^{}".format(sign, format_coefficient(c, digits), e))
    return " ".join(parts)

def _compact(terms, digits):
    s = ""
    for c, e in terms:
        if c == 0:
            continue
        if s and c > 0:
            s += "+"
        if e == 0:
            s += format_coefficient(c, digits)
            continue
        if c == 1:
            pass
        elif c == -1:
            s += "-"
        else:
            s += format_coefficient(c, digits)
        s += "x" if e == 1 else "x^{}".format(e)
    return s

_FORMATS = {
    "plain"   : _plain,
    "compact" : _compact,
}

def pprint(p, format="plain", digits=None):
    """Render a Polynomial (or any iterable of (coefficient, exponent) pairs)."""
    try:
        render = _FORMATS[format]
    except KeyError:
        raise ValueError("unknown format {!r}; expected one of {}".format(format, ", ".join(sorted(_FORMATS))))
    if digits is None:
        digits = precision.value
    return render(getattr(p, "terms", p), digits)
