""" Token categories of the expression language. """

import enum


class TokenCategory(enum.Enum):
    INT = 1
    PLUS = 2
    TIMES = 3
    POW = 4
    OPEN_PAR = 5
    CLOSE_PAR = 6
    EOF = 7
    BAD_TOKEN = 8
