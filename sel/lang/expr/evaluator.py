""" Evaluate an expression tree to an integer. """

import logging
import math
from ...common import EvaluationError
from .visitor import ExpressionVisitor


class Evaluator(ExpressionVisitor):
    """ Computes the integer value of an expression

    Powers are computed with floating point exponentiation and truncated
    to an integer, so large powers are not exact.
    """
    logger = logging.getLogger('sel.eval')

    def visit_prog(self, node):
        return self.visit(node[0])

    def visit_plus(self, node):
        return self.visit(node[0]) + self.visit(node[1])

    def visit_times(self, node):
        return self.visit(node[0]) * self.visit(node[1])

    def visit_pow(self, node):
        base = self.visit(node[0])
        exponent = self.visit(node[1])
        try:
            return int(math.pow(base, exponent))
        except OverflowError:
            self.logger.debug('Overflow in %s ** %s', base, exponent)
            raise EvaluationError(
                'Result of power {} ** {} is out of range'.format(
                    base, exponent))

    def visit_int(self, node):
        lexeme = node.anchor_token.val
        try:
            return int(lexeme)
        except ValueError:
            raise EvaluationError(
                'Integer literal with {} digits is too long'.format(
                    len(lexeme)))
