""" Lexical analyzer part. Splits the input text into tokens. """

from ..tools.baselex import BaseLexer
from .tokens import TokenCategory


class Scanner(BaseLexer):
    """ Generates a sequence of tokens from an expression

    The token patterns are tried in order. '**' must be tried before '*',
    otherwise the power operator is split into two multiplications.
    Unknown characters become BAD_TOKEN tokens, which the parser rejects.
    """
    def __init__(self, text):
        self.text = text

        def emit(category):
            return lambda typ, val: (category, val)

        tok_spec = [
            ('INT', r'\d+', emit(TokenCategory.INT)),
            ('PLUS', r'[+]', emit(TokenCategory.PLUS)),
            ('POW', r'[*][*]', emit(TokenCategory.POW)),
            ('TIMES', r'[*]', emit(TokenCategory.TIMES)),
            ('OPEN_PAR', r'[(]', emit(TokenCategory.OPEN_PAR)),
            ('CLOSE_PAR', r'[)]', emit(TokenCategory.CLOSE_PAR)),
            ('SKIP', r'\s', None),
            ('BAD_TOKEN', r'.', emit(TokenCategory.BAD_TOKEN)),
            ]
        super().__init__(tok_spec)

    def tokens(self):
        """ Return a single pass iterator over the tokens, terminated by
        exactly one EOF token """
        return self.tokenize(self.text, eof=TokenCategory.EOF)

    def __iter__(self):
        return self.tokens()


def tokenize(text):
    """ Tokenize an expression """
    return Scanner(text).tokens()
