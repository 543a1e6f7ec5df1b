"""
    Visitor classes.
"""

import io


class ExpressionVisitor:
    """ Interface of the tree walking back-ends.

    There is one method per node kind. Each node calls the method for its
    own kind from `accept`, so no type tests are needed to dispatch.
    Implementations visit the children of a node themselves, in the order
    they need their results.
    """
    def visit(self, node):
        """ Visit a node and return the result for it """
        return node.accept(self)

    def visit_prog(self, node):  # pragma: no cover
        raise NotImplementedError()

    def visit_plus(self, node):  # pragma: no cover
        raise NotImplementedError()

    def visit_times(self, node):  # pragma: no cover
        raise NotImplementedError()

    def visit_pow(self, node):  # pragma: no cover
        raise NotImplementedError()

    def visit_int(self, node):  # pragma: no cover
        raise NotImplementedError()


class Visitor:
    """
        Visitor that can visit all nodes in the AST
        and run pre and post functions.
    """
    def __init__(self, pre=None, post=None):
        self.pre = pre
        self.post = post

    def visit(self, node):
        """ Visit a node and all its descendants """
        self.do(node)

    def do(self, node):
        """ Visit a single node """
        # Run pre function:
        if self.pre:
            self.pre(node)

        # Descent into subnodes:
        for child in node:
            self.do(child)

        # run post function
        if self.post:
            self.post(node)


class AstPrinter:
    """ Prints an AST as text """
    def print_ast(self, node, f):
        self.indent = 0
        self.f = f
        visitor = Visitor(self.print1, self.print2)
        visitor.visit(node)

    def print1(self, node):
        print(' ' * self.indent + str(node), file=self.f)
        self.indent += 2

    def print2(self, _):
        self.indent -= 2


def print_ast(node, file=None):
    """ Display an abstract syntax tree, one node per line """
    AstPrinter().print_ast(node, file)


def render_tree(node):
    """ Render an abstract syntax tree to text """
    f = io.StringIO()
    print_ast(node, f)
    return f.getvalue()
