""" Recursive descent parser for the expression language.

LL(1) grammar:

.. code::

    Prog ::= Exp EOF
    Exp  ::= Term ('+' Term)*
    Term ::= Pow  ('*' Pow)*
    Pow  ::= Fact ('**' Pow)?
    Fact ::= INT | '(' Exp ')'

Each rule is a method returning the tree for that rule. '+' and '*' fold
to the left, '**' nests to the right.
"""

import logging
from ..tools.recursivedescent import RecursiveDescentParser
from .tokens import TokenCategory
from . import nodes as ast


class Parser(RecursiveDescentParser):
    """ Parses a sequence of tokens into an abstract syntax tree """
    logger = logging.getLogger('sel.parser')

    def __init__(self, tokens):
        super().__init__()
        self.init_lexer(tokens)

    def parse(self) -> ast.Prog:
        """ Parse the whole token sequence """
        self.logger.debug('Parsing expression')
        return self.parse_prog()

    def parse_prog(self) -> ast.Prog:
        result = ast.Prog(self.parse_exp())
        self.consume(TokenCategory.EOF)
        return result

    def parse_exp(self) -> ast.Node:
        result = self.parse_term()
        while self.peek == TokenCategory.PLUS:
            operator = self.consume(TokenCategory.PLUS)
            result = ast.Plus(
                result, self.parse_term(), anchor_token=operator)
        return result

    def parse_term(self) -> ast.Node:
        result = self.parse_pow()
        while self.peek == TokenCategory.TIMES:
            operator = self.consume(TokenCategory.TIMES)
            result = ast.Times(
                result, self.parse_pow(), anchor_token=operator)
        return result

    def parse_pow(self) -> ast.Node:
        result = self.parse_fact()
        if self.peek == TokenCategory.POW:
            operator = self.consume(TokenCategory.POW)
            result = ast.Pow(
                result, self.parse_pow(), anchor_token=operator)
        return result

    def parse_fact(self) -> ast.Node:
        """ Literal and parenthesis expression parsing """
        token = self.consume([TokenCategory.INT, TokenCategory.OPEN_PAR])
        if token.typ == TokenCategory.INT:
            return ast.Int(token)
        result = self.parse_exp()
        self.consume(TokenCategory.CLOSE_PAR)
        return result
