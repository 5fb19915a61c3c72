

class BlispError(Exception):
    """ Base class for all blisp errors"""
    pass

class BlispReadError(BlispError):
    """ Reported when a line cannot be read into a form (e.g. unterminated list)"""
    pass

class BlispUnboundSymbol(BlispError):
    """ Reported when a symbol is used before it is bound"""
    pass

class BlispSyntaxError(BlispError):
    """ Reported when a special form has a malformed binding or parameter list"""

class BlispArityError(BlispError):
    """ Reported when the number of arguments passed to a function is incorrect"""

class BlispTypeError(BlispError):
    """ Reported when the types of arguments passed to a function are incorrect"""

class BlispDomainError(BlispError):
    """ Reported when an operation is undefined for its operands (division by zero,
    overflow) or evaluation nests deeper than the interpreter stack allows"""
