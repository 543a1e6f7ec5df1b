""" A front end for a tiny arithmetic expression language, implemented in
pure Python.

Expressions are tokenized, parsed into an abstract syntax tree and then
evaluated or translated into Lisp or C source text.

Example usage:

>>> from sel import api
>>> api.evaluate('(4+8)*15')
180
>>> api.to_lisp('2+3')
"(require '[clojure.math.numeric-tower :refer [expt]])\\n(+ 2 3)"

"""

# Define version here. Used in docs, and setup script:
__version_info__ = (0, 2, 0)
__version__ = '.'.join(map(str, __version_info__))
