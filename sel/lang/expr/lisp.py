""" Translate an expression tree into Lisp (Clojure) source text. """

from .visitor import ExpressionVisitor


class LispGenerator(ExpressionVisitor):
    """ Generates a Lisp expression for a tree """
    header = "(require '[clojure.math.numeric-tower :refer [expt]])\n"

    def visit_prog(self, node):
        return self.header + self.visit(node[0])

    def visit_plus(self, node):
        return self.form('+', node)

    def visit_times(self, node):
        return self.form('*', node)

    def visit_pow(self, node):
        return self.form('expt', node)

    def visit_int(self, node):
        return node.anchor_token.val

    def form(self, operator, node):
        """ Render a binary node as a prefix form """
        return '({} {} {})'.format(
            operator, self.visit(node[0]), self.visit(node[1]))
