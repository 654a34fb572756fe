#!/usr/bin/env python

"""
Main entry point for the sparsepoly calculator. Run with --help for options.

Reads two polynomials, prints them with their sum and product, and
evaluates both at a point.  Input is either a session file (two term lists
followed by x; see sparsepoly.parse) or expressions given on the command
line.
"""

import sys
import argparse

from sparsepoly import common
from sparsepoly import logging
from sparsepoly import opts
from sparsepoly import parse
from sparsepoly.polynomials import PolynomialError
from sparsepoly.pprint import format_coefficient, pprint

def _read_operands(args):
    if args.first is not None or args.second is not None:
        if args.first is None or args.second is None:
            raise PolynomialError("--first and --second must be given together")
        with logging.task("parsing expressions"):
            return (parse.parse_polynomial(args.first), parse.parse_polynomial(args.second), args.at)
    with logging.task("reading session", file=args.file or "stdin"):
        return parse.read_session(common.read_file(args.file or "-"))

def run(argv=None):
    """Entry point for the sparsepoly executable.

    This procedure reads argv (default: sys.argv) and prints the results to
    stdout.  Errors in the input are reported on stderr with exit status 1.
    """

    parser = argparse.ArgumentParser(description="Sparse polynomial calculator.")
    parser.add_argument("-a", "--first", metavar="EXPR", default=None, help="First polynomial, e.g. \"3x^2+2\"")
    parser.add_argument("-b", "--second", metavar="EXPR", default=None, help="Second polynomial")
    parser.add_argument("-x", "--at", metavar="X", type=float, default=None, help="Point to evaluate both polynomials at")
    parser.add_argument("-f", "--format", choices=("plain", "compact"), default="plain", help="Output notation; default=plain")
    parser.add_argument("--profile", metavar="FILE", default=None, help="Write task timings to FILE")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    parser.add_argument("file", nargs="?", default=None, help="Session file: two term lists then x (omit to use stdin)")
    args = parser.parse_args(argv)
    try:
        opts.read(args)
    except ValueError as e:
        parser.error(str(e))

    def show(p):
        return pprint(p, format=args.format)

    try:
        p1, p2, x = _read_operands(args)
        with logging.task("arithmetic", first_terms=len(p1), second_terms=len(p2)):
            total = p1 + p2
            product = p1 * p2
        print("First polynomial: {}".format(show(p1)))
        print("Second polynomial: {}".format(show(p2)))
        print("Sum: {}".format(show(total)))
        print("Product: {}".format(show(product)))
        if x is not None:
            with logging.task("evaluating", x=x):
                for name, p in (("P1", p1), ("P2", p2)):
                    print("{}({}) = {}".format(name, format_coefficient(x), format_coefficient(p.evaluate(x))))
    except (PolynomialError, OSError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)
    finally:
        if args.profile:
            logging.dump_profile(args.profile)

if __name__ == "__main__":
    run()
