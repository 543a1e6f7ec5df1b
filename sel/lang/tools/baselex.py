import logging
import re
from ...common import CompilerError
from ..common import Token


class BaseLexer:
    """ Base class for a lexer.

    This class can be overridden to create a lexer. It joins the given
    token specification into a single regular expression alternation,
    so the order of the specification is the priority of the patterns.

    Each entry of the specification is a tuple (name, pattern, func).
    The function is called with the name and the matched text and must
    return a (typ, val) tuple for the token to emit. When func is None,
    or returns None, the text is skipped.
    """
    logger = logging.getLogger('sel.lexer')

    def __init__(self, tok_spec):
        tok_re = '|'.join(
            '(?P<{}>{})'.format(pair[0], pair[1]) for pair in tok_spec)
        self.gettok = re.compile(tok_re).match
        self.func_map = {pair[0]: pair[2] for pair in tok_spec}
        self.pos = 0

    def tokenize(self, txt, eof=None):
        """ Generator that generates lexical tokens from text.

        Optionally yield the given end of file token type.
        """
        self.pos = 0
        self.txt = txt
        mo = self.gettok(txt)
        while mo:
            typ = mo.lastgroup
            val = mo.group(typ)
            func = self.func_map[typ]
            new_pos = mo.end()
            if func:
                res = func(typ, val)
                if res:
                    typ, val = res
                    token = Token(typ, val)
                    self.logger.debug('Token %s', token)
                    yield token
            self.pos = new_pos
            mo = self.gettok(txt, self.pos)
        if len(txt) != self.pos:
            char = txt[self.pos]
            raise CompilerError(
                'Unexpected char: {0} (0x{1:X})'.format(char, ord(char)))
        if eof is not None:
            yield Token(eof, None)
