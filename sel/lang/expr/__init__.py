""" Front-end for the simple expression language.

.. graphviz::

   digraph expr {
   rankdir="LR"
   1 [label="source text"]
   10 [label="scanner" ]
   20 [label="parser" ]
   30 [label="syntax tree" ]
   40 [label="evaluator"]
   41 [label="lisp generator"]
   42 [label="c generator"]
   1 -> 10
   10 -> 20
   20 -> 30
   30 -> 40
   30 -> 41
   30 -> 42
   }

"""

from .tokens import TokenCategory
from .lexer import Scanner, tokenize
from .parser import Parser
from .nodes import Node, Prog, Plus, Times, Pow, Int
from .visitor import ExpressionVisitor, Visitor, AstPrinter
from .visitor import print_ast, render_tree
from .evaluator import Evaluator
from .lisp import LispGenerator
from .cgen import CGenerator
from .grammar import create_grammar

__all__ = [
    'AstPrinter', 'CGenerator', 'Evaluator', 'ExpressionVisitor', 'Int',
    'LispGenerator', 'Node', 'Parser', 'Plus', 'Pow', 'Prog', 'Scanner',
    'Times', 'TokenCategory', 'Visitor', 'create_grammar', 'print_ast',
    'render_tree', 'tokenize']
