""" Abstract syntax tree of the expression language.

The tree is built bottom-up by the parser and is read only afterwards.
Each node kind dispatches to its own visitor method in `accept`.
"""

from ..common import Token
from .tokens import TokenCategory


class Node:
    """ Base class of all nodes in the syntax tree

    A node owns an ordered tuple of child nodes and optionally an anchor
    token. The anchor is the operator or literal token that produced the
    node.
    """
    __slots__ = ('children', 'anchor_token')
    kind = 'Node'
    arity = None

    def __init__(self, *children, anchor_token=None):
        if self.arity is not None and len(children) != self.arity:
            raise ValueError('{} takes {} children, got {}'.format(
                self.kind, self.arity, len(children)))
        for child in children:
            if not isinstance(child, Node):
                raise ValueError('{!r} is not a node'.format(child))
        if anchor_token is not None and not isinstance(anchor_token, Token):
            raise ValueError('{!r} is not a token'.format(anchor_token))
        object.__setattr__(self, 'children', tuple(children))
        object.__setattr__(self, 'anchor_token', anchor_token)

    def __setattr__(self, name, value):
        raise AttributeError('Syntax tree nodes are immutable')

    def __getitem__(self, index):
        return self.children[index]

    def __iter__(self):
        return iter(self.children)

    def __len__(self):
        return len(self.children)

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return (self.kind, self.anchor_token, self.children) == \
            (other.kind, other.anchor_token, other.children)

    def __hash__(self):
        return hash((self.kind, self.anchor_token, self.children))

    def __repr__(self):
        if self.anchor_token is None:
            args = ', '.join(map(repr, self.children))
        else:
            args = ', '.join(
                [repr(c) for c in self.children] + [repr(self.anchor_token)])
        return '{}({})'.format(self.kind, args)

    def __str__(self):
        if self.anchor_token is None:
            return self.kind
        return '{} {}'.format(self.kind, self.anchor_token)

    def accept(self, visitor):  # pragma: no cover
        raise NotImplementedError()


class Prog(Node):
    """ Root of the tree, holding the top-level expression """
    __slots__ = ()
    kind = 'Prog'
    arity = 1

    def accept(self, visitor):
        return visitor.visit_prog(self)


class BinaryOperation(Node):
    """ Operation with a left and a right operand """
    __slots__ = ()
    arity = 2

    @property
    def left(self):
        return self.children[0]

    @property
    def right(self):
        return self.children[1]


class Plus(BinaryOperation):
    __slots__ = ()
    kind = 'Plus'

    def accept(self, visitor):
        return visitor.visit_plus(self)


class Times(BinaryOperation):
    __slots__ = ()
    kind = 'Times'

    def accept(self, visitor):
        return visitor.visit_times(self)


class Pow(BinaryOperation):
    __slots__ = ()
    kind = 'Pow'

    def accept(self, visitor):
        return visitor.visit_pow(self)


class Int(Node):
    """ Integer literal """
    __slots__ = ()
    kind = 'Int'
    arity = 0

    def __init__(self, anchor_token):
        if not isinstance(anchor_token, Token) or \
                anchor_token.typ is not TokenCategory.INT:
            raise ValueError('Int needs an INT token, got {!r}'.format(
                anchor_token))
        if not anchor_token.val or not anchor_token.val.isdecimal():
            raise ValueError('Invalid integer literal {!r}'.format(
                anchor_token.val))
        super().__init__(anchor_token=anchor_token)

    def accept(self, visitor):
        return visitor.visit_int(self)
