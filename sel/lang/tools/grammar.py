""" Grammar description and LL(1) analysis.

A grammar is given in plain BNF: each production has a single sequence of
symbols as right hand side. Repetitions must be written as tail rules with
an empty (epsilon) alternative.
"""

import itertools
import logging


class ParserGenerationException(Exception):
    """ Raised when something is wrong with a grammar """
    pass


class Grammar:
    """ Defines a grammar of a language """
    def __init__(self):
        self.terminals = set()
        self.nonterminals = set()
        self.productions = []
        self.start_symbol = None

    def __repr__(self):
        return 'Grammar with {} rules and {} terminals'.format(
            len(self.productions), len(self.terminals))

    def add_terminals(self, terminals):
        """ Add all terminals to terminals for this grammar """
        for terminal in terminals:
            self.add_terminal(terminal)

    def add_terminal(self, name):
        """ Add a terminal name """
        if name in self.nonterminals:
            raise ParserGenerationException(
                "Cannot redefine non-terminal {0} as terminal".format(name))
        self.terminals.add(name)

    def add_production(self, name, symbols):
        """ Add a production rule to the grammar """
        if name in self.terminals:
            raise ParserGenerationException(
                "Cannot redefine terminal {0}".format(name))
        production = Production(name, symbols)
        self.productions.append(production)
        self.nonterminals.add(name)
        return production

    def dump(self, file=None):
        """ Print this grammar """
        print_grammar(self, file=file)

    def productions_for_name(self, name):
        """ Retrieve all productions for a non terminal """
        return [p for p in self.productions if p.name == name]

    @property
    def symbols(self):
        """ Get all the symbols defined by this grammar """
        return self.nonterminals | self.terminals

    def is_terminal(self, name):
        """ Check if a name is a terminal """
        return name in self.terminals

    def is_nonterminal(self, name):
        """ Check if a name is a non-terminal """
        return name in self.nonterminals

    def check_symbols(self):
        """ Checks no symbols are undefined """
        if self.start_symbol not in self.nonterminals:
            raise ParserGenerationException(
                'Start symbol {0} undefined'.format(self.start_symbol))
        for production in self.productions:
            for symbol in production.symbols:
                if symbol not in self.symbols:
                    raise ParserGenerationException(
                        'Symbol {0} undefined'.format(symbol))


class Production:
    """ Production rule for a grammar. It consists of a left hand side
        non-terminal and a list of symbols as right hand side.
        The right hand side may contain terminals and non-terminals.
    """
    def __init__(self, name, symbols):
        self.name = name
        self.symbols = tuple(symbols)

    def __repr__(self):
        rhs = ' '.join(map(str, self.symbols)) if self.symbols else 'EPS'
        return '{} -> {}'.format(self.name, rhs)

    @property
    def is_epsilon(self):
        """ Checks if this rule is an epsilon rule """
        return len(self.symbols) == 0


def print_grammar(g, file=None):
    """ Pretty print a grammar """
    print(g, file=file)
    for production in g.productions:
        print(production, file=file)


def calculate_nullable(grammar):
    """ Determine for each symbol whether it can derive the empty string """
    nullable = {symbol: False for symbol in grammar.symbols}
    while True:
        some_change = False
        for rule in grammar.productions:
            if not nullable[rule.name] and \
                    all(nullable[beta] for beta in rule.symbols):
                nullable[rule.name] = True
                some_change = True
        if not some_change:
            break
    return nullable


def calculate_first_sets(grammar):
    """
        Calculate first sets for each grammar symbol
        This is a dictionary which maps each grammar symbol
        to a set of terminals that can be encountered first
        when looking for the symbol.
    """
    nullable = calculate_nullable(grammar)
    first = {}
    for terminal in grammar.terminals:
        first[terminal] = {terminal}

    for nt in grammar.nonterminals:
        first[nt] = set()

    while True:
        some_change = False
        for rule in grammar.productions:
            for beta in rule.symbols:
                if first[beta] - first[rule.name]:
                    first[rule.name] |= first[beta]
                    some_change = True
                if not nullable[beta]:
                    break
        if not some_change:
            break
    return first


def first_of_sequence(symbols, first, nullable):
    """ Return the first set of a sequence of symbols, and whether the
    whole sequence can derive the empty string """
    result = set()
    for symbol in symbols:
        result |= first[symbol]
        if not nullable[symbol]:
            return result, False
    return result, True


def calculate_follow_sets(grammar):
    """ Calculate the set of terminals that can follow each non-terminal """
    nullable = calculate_nullable(grammar)
    first = calculate_first_sets(grammar)
    follow = {nt: set() for nt in grammar.nonterminals}

    while True:
        some_change = False
        for rule in grammar.productions:
            for index, symbol in enumerate(rule.symbols):
                if not grammar.is_nonterminal(symbol):
                    continue
                rest = rule.symbols[index + 1:]
                rest_first, rest_nullable = first_of_sequence(
                    rest, first, nullable)
                new = set(rest_first)
                if rest_nullable:
                    new |= follow[rule.name]
                if new - follow[symbol]:
                    follow[symbol] |= new
                    some_change = True
        if not some_change:
            break
    return follow


def predict_sets(grammar):
    """ Map each production to the look-ahead terminals selecting it """
    nullable = calculate_nullable(grammar)
    first = calculate_first_sets(grammar)
    follow = calculate_follow_sets(grammar)
    predict = {}
    for rule in grammar.productions:
        rule_first, rule_nullable = first_of_sequence(
            rule.symbols, first, nullable)
        if rule_nullable:
            rule_first = rule_first | follow[rule.name]
        predict[rule] = rule_first
    return predict


def check_ll1(grammar):
    """ Check that one token of look-ahead selects a unique production.

    Raises ParserGenerationException on the first conflict found.
    """
    logger = logging.getLogger('sel.grammar')
    grammar.check_symbols()
    predict = predict_sets(grammar)
    for name in sorted(grammar.nonterminals, key=str):
        rules = grammar.productions_for_name(name)
        for rule1, rule2 in itertools.combinations(rules, 2):
            overlap = predict[rule1] & predict[rule2]
            if overlap:
                raise ParserGenerationException(
                    'LL(1) conflict on {} between {} and {}'.format(
                        ', '.join(sorted(map(str, overlap))), rule1, rule2))
    logger.debug('%s is LL(1)', grammar)


def is_ll1(grammar):
    """ Check if the grammar can be parsed with one token of look-ahead """
    try:
        check_ll1(grammar)
    except ParserGenerationException:
        return False
    return True
