class PreconditionError(ValueError):
    """An error indicating that an operation of the tree was called outside of its domain"""


class NotCoprimeError(PreconditionError):
    """An error indicating that a numerator and denominator are not an irreducible pair"""

    def __init__(self, p, q):
        super().__init__(f'{p}/{q} is not an irreducible fraction')


class BadAncestorError(PreconditionError):
    """An error indicating that a fraction was requested from a node that is not one of its ancestors"""

    def __init__(self, ancestor, p, q):
        super().__init__(f'{ancestor} is not an ancestor of {p}/{q} in the Stern-Brocot tree')


class NullFractionError(RuntimeError):
    """An error indicating that the null fraction was used as if it were a node of the tree"""

    def __init__(self, operation):
        super().__init__(f'cannot call {operation} on the null fraction')
