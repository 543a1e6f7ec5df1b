""" Translate an expression tree into a C program.

The program prints the value of the expression. Powers use the pow
function of the C math library, so the program must be linked against it.
"""

from .visitor import ExpressionVisitor


MAIN_TEMPLATE = """#include <stdio.h>
#include <math.h>

int main(void) {{
    printf("%d",{});
    return 0;
}}"""


class CGenerator(ExpressionVisitor):
    """ Generates C source text for a tree """
    def visit_prog(self, node):
        return MAIN_TEMPLATE.format(self.visit(node[0]))

    def visit_plus(self, node):
        return '({}+{})'.format(self.visit(node[0]), self.visit(node[1]))

    def visit_times(self, node):
        return '({}*{})'.format(self.visit(node[0]), self.visit(node[1]))

    def visit_pow(self, node):
        return '((int) pow({}, {}))'.format(
            self.visit(node[0]), self.visit(node[1]))

    def visit_int(self, node):
        return node.anchor_token.val
