class SprigError(Exception):
    """ Base class for all Sprig errors"""
    pass

class SprigUnboundSymbol(SprigError):
    """ Raised when a symbol is looked up before it is bound"""
    pass

class SprigNonNumericOperand(SprigError):
    """ Raised when an arithmetic operator receives a non-number"""

class SprigNotAList(SprigError):
    """ Raised when a list operation receives something other than a list"""

class SprigArityError(SprigError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class SprigTypeError(SprigError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class SprigNotCallable(SprigError):
    """ Raised when the head of a call does not evaluate to a function"""

class SprigSyntaxError(SprigError):
    """ Raised when there is a syntax error"""

class SprigUnmatchedParen(SprigSyntaxError):
    """ Raised when parentheses in the source are not balanced"""
