""" Expression syntax checker.

Check whether an expression is valid, without evaluating it.
"""

import argparse
import sys
from .base import base_parser, source_parser, LogSetup, read_expression
from .. import api


parser = argparse.ArgumentParser(
    description=__doc__, parents=[base_parser, source_parser])


def check(args=None):
    """ Check the syntax of an expression """
    args = parser.parse_args(args)
    with LogSetup(args):
        source = read_expression(args)
        if api.check_syntax(source):
            print('Syntax OK!')
        else:
            print('Bad syntax!')
            sys.exit(1)


if __name__ == '__main__':
    check()
