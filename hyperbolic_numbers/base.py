class InvertibilityError(ZeroDivisionError):
    """Thrown if there's an attempt to invert a hyperbolic number which
    is a zero divisor, i.e. whose quadratic norm vanishes.

    """
    def __init__(self, value, message=None):
        if message is None:
            message = "{} is not invertible (zero divisor)".format(value)
        super().__init__(message)
        self.value = value

class DomainError(ValueError):
    """Thrown if a function is evaluated at a hyperbolic number outside
    of the set where it is defined.

    """
    def __init__(self, value, message):
        super().__init__(message)
        self.value = value
