""" The expression grammar written out as BNF.

The repetitions of the parser are written as tail rules, so that the
grammar can be checked for the LL(1) property:

.. code::

    Prog     -> Exp EOF
    Exp      -> Term ExpTail
    ExpTail  -> PLUS Term ExpTail | EPS
    Term     -> Pow TermTail
    TermTail -> TIMES Pow TermTail | EPS
    Pow      -> Fact PowTail
    PowTail  -> POW Pow | EPS
    Fact     -> INT | OPEN_PAR Exp CLOSE_PAR

"""

from ..tools.grammar import Grammar
from .tokens import TokenCategory


def create_grammar():
    """ Create the grammar of the expression language """
    g = Grammar()
    g.add_terminals(
        category.name for category in TokenCategory
        if category is not TokenCategory.BAD_TOKEN)
    g.add_production('Prog', ['Exp', 'EOF'])
    g.add_production('Exp', ['Term', 'ExpTail'])
    g.add_production('ExpTail', ['PLUS', 'Term', 'ExpTail'])
    g.add_production('ExpTail', [])
    g.add_production('Term', ['Pow', 'TermTail'])
    g.add_production('TermTail', ['TIMES', 'Pow', 'TermTail'])
    g.add_production('TermTail', [])
    g.add_production('Pow', ['Fact', 'PowTail'])
    g.add_production('PowTail', ['POW', 'Pow'])
    g.add_production('PowTail', [])
    g.add_production('Fact', ['INT'])
    g.add_production('Fact', ['OPEN_PAR', 'Exp', 'CLOSE_PAR'])
    g.start_symbol = 'Prog'
    return g
