""" Expression evaluator and translator.

Parse an expression, then print its value together with its translations
to Lisp and to C. The expression is read from standard input when it is
not given on the command line.

.. code::

    $ sel-run "(4+8)*15"

"""

import argparse
import sys
from .base import base_parser, source_parser, LogSetup, read_expression
from .. import api
from ..common import EvaluationError


parser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.RawDescriptionHelpFormatter,
    parents=[base_parser, source_parser])
parser.add_argument(
    '--ast', help='Print the syntax tree', action='store_true',
    default=False)
parser.add_argument(
    '--emit', help='Which results to print', default='all',
    choices=['all', 'eval', 'lisp', 'c'])


def value_text(ast):
    """ Evaluate the tree and format the value as decimal text """
    value = api.evaluate(ast)
    try:
        return str(value)
    except ValueError:
        raise EvaluationError(
            'Result of evaluation has too many digits to print')


backends = [
    ('eval', 'Result of evaluation', value_text),
    ('lisp', 'Translation to Lisp', api.to_lisp),
    ('c', 'Translation to C', api.to_c),
]


def run(args=None):
    """ Evaluate and translate an expression """
    args = parser.parse_args(args)
    with LogSetup(args):
        source = read_expression(args)
        result = api.try_parse(source)
        if not result.ok:
            print('Bad syntax!')
            sys.exit(1)

        if args.ast:
            print(api.dump_ast(result.ast))

        if args.emit == 'all':
            outputs = [
                (title, backend(result.ast))
                for _, title, backend in backends]
            print('\n\n'.join(
                '{}:\n\n{}'.format(title, text) for title, text in outputs))
        else:
            for name, _, backend in backends:
                if name == args.emit:
                    print(backend(result.ast))


if __name__ == '__main__':
    run()
