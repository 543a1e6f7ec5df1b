"""
The api module contains a set of handy functions to parse, evaluate and
translate expressions.
"""

import logging
from .common import ParseError
from .lang.expr import Scanner, Parser, Prog
from .lang.expr import Evaluator, LispGenerator, CGenerator, render_tree

# When using 'from sel.api import *' include the following:
__all__ = [
    'ParseResult', 'check_syntax', 'dump_ast', 'evaluate', 'parse',
    'to_c', 'to_lisp', 'try_parse']

logger = logging.getLogger('sel.api')


class ParseResult:
    """ Outcome of parsing: either a tree, or the reason why there is none """
    __slots__ = ('ast', 'error')

    def __init__(self, ast=None, error=None):
        assert (ast is None) != (error is None)
        self.ast = ast
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def __bool__(self):
        return self.ok

    def __repr__(self):
        if self.ok:
            return 'ParseResult(ok)'
        return 'ParseResult(error={!r})'.format(self.error.msg)


def parse(source):
    """ Parse an expression into an abstract syntax tree.

    Args:
        source: the expression text.

    Returns:
        The Prog node at the root of the tree.

    Raises:
        ParseError: when the text is not a valid expression.

    .. doctest::

        >>> from sel.api import parse
        >>> ast = parse('2+3')
        >>> print(ast[0])
        Plus [PLUS, "+"]
    """
    if not isinstance(source, str):
        raise TypeError('Expected source text, got {!r}'.format(source))
    logger.debug('Parsing "%s"', source)
    return Parser(Scanner(source).tokens()).parse()


def try_parse(source):
    """ Parse an expression without raising on syntax errors.

    Returns:
        A ParseResult which holds the tree, or the ParseError.
    """
    try:
        ast = parse(source)
    except ParseError as ex:
        logger.debug('Syntax error: %s', ex.msg)
        return ParseResult(error=ex)
    return ParseResult(ast=ast)


def check_syntax(source):
    """ Check whether the source text is a valid expression """
    return try_parse(source).ok


def get_ast(source_or_ast):
    """ Return a tree for either source text or an already parsed tree """
    if isinstance(source_or_ast, Prog):
        return source_or_ast
    return parse(source_or_ast)


def evaluate(source_or_ast):
    """ Compute the integer value of an expression.

    .. doctest::

        >>> from sel.api import evaluate
        >>> evaluate('4+8*15')
        124
    """
    return Evaluator().visit(get_ast(source_or_ast))


def to_lisp(source_or_ast):
    """ Translate an expression into Lisp source text """
    return LispGenerator().visit(get_ast(source_or_ast))


def to_c(source_or_ast):
    """ Translate an expression into a C program printing its value """
    return CGenerator().visit(get_ast(source_or_ast))


def dump_ast(source_or_ast):
    """ Render the syntax tree of an expression, one node per line """
    return render_tree(get_ast(source_or_ast))
