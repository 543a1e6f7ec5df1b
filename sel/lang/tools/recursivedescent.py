from collections.abc import Iterable
from ..common import Token
from ...common import ParseError


def type_name(typ):
    """ Printable name of a token type, which may be an enum member """
    return getattr(typ, "name", typ)


def make_comma_or(parts):
    parts = list(map(lambda x: f'"{type_name(x)}"', parts))
    if len(parts) > 1:
        last = parts[-1]
        first = parts[:-1]
        return ", ".join(first) + " or " + last
    else:
        return "".join(parts)


class RecursiveDescentParser:
    """Base class for recursive descent parsers

    The parser holds a single token of look-ahead, which is pulled
    from the token iterator on demand.
    """

    def __init__(self):
        self.token = None  # The current token under cursor
        self.tokens = None  # Iterable of tokens
        self._look_ahead = []

    def init_lexer(self, tokens: Iterable[Token]):
        """Initialize the parser with the given tokens (an iterator)"""
        self.tokens = iter(tokens)
        self.token = next(self.tokens, None)
        self._look_ahead = []

    def error(self, msg):
        """Raise a parse error"""
        raise ParseError(msg)

    # Lexer helpers:
    def consume(self, typ) -> Token:
        """Assert that the next token is typ, and if so, return it.

        If typ is a list or tuple, consume one of the given types.
        """
        assert typ is not None
        expected_types = typ if isinstance(typ, (list, tuple, set)) else [typ]

        tok = self.next_token()
        if tok is not None and tok.typ in expected_types:
            return tok
        else:
            expected = make_comma_or(expected_types)
            if tok is None:
                self.error(f"Expected {expected}, got end of input")
            self.backup_token(tok)
            self.error(f'Expected {expected}, got "{type_name(tok.typ)}"')

    def has_consumed(self, typ) -> bool:
        """Checks if the look-ahead token is of type typ, and if so
        eats the token and returns true"""
        if self.peek == typ:
            self.next_token()
            return True
        return False

    def next_token(self) -> Token:
        """Advance to the next token"""
        tok = self.token
        if self._look_ahead:
            self.token = self._look_ahead.pop(0)
        else:
            self.token = next(self.tokens, None)
        return tok

    def backup_token(self, token: Token):
        """Push one token back to the front of the tokens"""
        self._look_ahead.insert(0, self.token)
        self.token = token

    @property
    def peek(self):
        """Look at the next token to parse without popping it"""
        if self.token:
            return self.token.typ

    @property
    def at_end(self):
        return self.peek is None
