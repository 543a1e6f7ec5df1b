class Token:
    """
    Token is used in the lexical analyzer. The lexical analyzer takes
    a text and splits it into tokens.

    A token is immutable once created.
    """

    __slots__ = ["typ", "val"]

    def __init__(self, typ, val):
        object.__setattr__(self, "typ", typ)
        object.__setattr__(self, "val", val)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.typ, self.val) == (other.typ, other.val)

    def __hash__(self):
        return hash((self.typ, self.val))

    def __repr__(self):
        return "Token({}, {!r})".format(self.typ, self.val)

    def __str__(self):
        name = getattr(self.typ, "name", self.typ)
        val = "" if self.val is None else self.val
        return '[{}, "{}"]'.format(name, val)
