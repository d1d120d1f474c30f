

class IotaError(Exception):
    """ Base class for all iota errors"""
    pass

class IotaSyntaxError(IotaError):
    """ Raised on malformed source text or a malformed special form"""

class IotaUnboundVariable(IotaError):
    """ Raised when a symbol is looked up or set before it is bound"""

class IotaRuntimeError(IotaError):
    """ Raised when a host-level fault occurs while applying a procedure"""

class IotaTypeError(IotaRuntimeError):
    """ Raised when a value of the wrong type is applied or passed to a primitive"""

class IotaArityError(IotaRuntimeError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""
