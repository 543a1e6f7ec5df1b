"""
   Error handling routines
   Logging format
"""


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


class CompilerError(Exception):
    """ Base class of all errors raised while processing an expression """
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __repr__(self):
        return '"{}"'.format(self.msg)

    def print(self, file=None):
        """ Print the error message """
        print(self.msg, file=file)


class ParseError(CompilerError):
    """ The input is not a sentence of the expression grammar """
    pass


class EvaluationError(CompilerError):
    """ An expression could not be evaluated to an integer """
    pass
