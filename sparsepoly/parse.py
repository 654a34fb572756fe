"""Read polynomials from text.

Two input syntaxes are understood:

 - term lists: a count N followed by N coefficient/exponent pairs,
   e.g. "3  3 2  2 0  -1 1".  Whitespace (including newlines) separates
   numbers.
 - expressions: e.g. "3x^2 + 2", "-0.5*x**3 - x + 7".

The important functions are:
 - parse_term_list: str -> (Term, ...)
 - parse_terms:     str -> (Term, ...), from an expression
 - parse_polynomial: str -> Polynomial, from an expression
 - read_session:    str -> (Polynomial, Polynomial, float)

Syntax errors raise ParseError.  Well-formed input with a bad value, such as
a negative exponent, raises the error Term raises for it.
"""

# builtin
import threading

# 3rd party
from ply import lex, yacc

# ours
from sparsepoly.polynomials import Polynomial, PolynomialError, Term

class ParseError(PolynomialError):
    pass

def _where(tok):
    return "line {}, position {}".format(tok.lineno, tok.lexpos)

# Lexer ########################################################################

tokens = ("FLOAT", "NUM", "POWER", "TIMES", "PLUS", "MINUS", "X")

def make_lexer():

    # Function rules are tried in the order they are defined, before any of
    # the string rules, so "**" wins over "*" and floats win over ints.

    def t_FLOAT(t):
        r"(\d+\.\d*|\.\d+)([eE][-+]?\d+)?|\d+[eE][-+]?\d+"
        t.value = float(t.value)
        return t

    def t_NUM(t):
        r"\d+"
        t.value = int(t.value)
        return t

    def t_POWER(t):
        r"\^|\*\*"
        return t

    t_TIMES = r"\*"
    t_PLUS  = r"\+"
    t_MINUS = r"-"
    t_X     = r"[xX]"

    # Define a rule so we can track line numbers
    def t_newline(t):
        r"\n+"
        t.lexer.lineno += len(t.value)

    t_ignore = " \t\r"

    def t_error(t):
        raise ParseError("at line {}, position {}: illegal character {!r}".format(
            t.lexer.lineno, t.lexpos, t.value[0]))

    return lex.lex()

_lexer = make_lexer()
def tokenize(s):
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Term lists ###################################################################

def _next_token(toks, expected):
    tok = next(toks, None)
    if tok is None:
        raise ParseError("unexpected end of input; expected {}".format(expected))
    return tok

def _read_number(toks, expected):
    tok = _next_token(toks, expected)
    sign = 1
    if tok.type in ("PLUS", "MINUS"):
        if tok.type == "MINUS":
            sign = -1
        tok = _next_token(toks, expected)
    if tok.type not in ("NUM", "FLOAT"):
        raise ParseError("at {}: expected {}, got {!r}".format(_where(tok), expected, tok.value))
    return sign * tok.value

def _expect_end(toks):
    tok = next(toks, None)
    if tok is not None:
        raise ParseError("at {}: unexpected trailing input {!r}".format(_where(tok), tok.value))

def read_term_list(toks):
    """Consume a count followed by that many coefficient/exponent pairs.

    `toks` is an iterator of tokens (see `tokenize`); tokens after the last
    pair are left unread, so several term lists can be read from one stream.
    """
    toks = iter(toks)
    count = _read_number(toks, "a term count")
    if not isinstance(count, int) or count < 0:
        raise ParseError("term count must be a non-negative integer, got {}".format(count))
    res = []
    for i in range(1, count + 1):
        c = _read_number(toks, "the coefficient of term {}".format(i))
        e = _read_number(toks, "the exponent of term {}".format(i))
        res.append(Term(c, e))
    return tuple(res)

def parse_term_list(s):
    toks = tokenize(s)
    res = read_term_list(toks)
    _expect_end(toks)
    return res

def read_session(s):
    """Read two term lists followed by a point to evaluate them at."""
    toks = tokenize(s)
    p1 = Polynomial(read_term_list(toks))
    p2 = Polynomial(read_term_list(toks))
    x = float(_read_number(toks, "a value for x"))
    _expect_end(toks)
    return (p1, p2, x)

# Expressions ##################################################################

def make_parser():
    start = "expression"

    def p_expression(p):
        """expression : signed_term
                      | expression PLUS term
                      | expression MINUS term"""
        if len(p) == 2:
            p[0] = [p[1]]
        elif p[2] == "+":
            p[0] = p[1] + [p[3]]
        else:
            c, e = p[3]
            p[0] = p[1] + [(-c, e)]

    def p_signed_term(p):
        """signed_term : term
                       | PLUS term
                       | MINUS term"""
        if len(p) == 2:
            p[0] = p[1]
        elif p[1] == "+":
            p[0] = p[2]
        else:
            c, e = p[2]
            p[0] = (-c, e)

    def p_term_constant(p):
        """term : number"""
        p[0] = (p[1], 0)

    def p_term(p):
        """term : monomial
                | number monomial
                | number TIMES monomial"""
        coefficient = 1 if len(p) == 2 else p[1]
        p[0] = (coefficient, p[len(p) - 1])

    def p_monomial(p):
        """monomial : X
                    | X POWER exponent"""
        p[0] = p[3] if len(p) == 4 else 1

    def p_exponent(p):
        """exponent : number
                    | MINUS number"""
        p[0] = -p[2] if len(p) == 3 else p[1]

    def p_number(p):
        """number : NUM
                  | FLOAT"""
        p[0] = p[1]

    def p_error(p):
        if p is None:
            raise ParseError("unexpected end of expression")
        raise ParseError("at {}: unexpected {!r}".format(_where(p), p.value))

    return yacc.yacc(debug=False, write_tables=False)

_parser = make_parser()

# LRParser.parse keeps its state stacks on the parser object.
_parser_lock = threading.Lock()

def parse_terms(s):
    """Parse an expression into Terms, in the order they are written."""
    with _parser_lock:
        pairs = _parser.parse(s, lexer=_lexer.clone())
    return tuple(Term(c, e) for c, e in pairs)

def parse_polynomial(s) -> Polynomial:
    return Polynomial(parse_terms(s))
