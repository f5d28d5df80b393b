from fractions import Fraction as _Rational
from math import gcd
from numbers import Integral
from typing import List, Tuple

from sternbrocot.exceptions import NotCoprimeError, PreconditionError


def check_pair(p, q):
    """
    make sure p/q is a fraction of the tree, that is p >= 0, q >= 0 and gcd(p, q) == 1

    :raise PreconditionError: if either member is not an integer or is negative
    :raise NotCoprimeError: if p/q is reducible (or 0/0)
    """
    if not (isinstance(p, Integral) and isinstance(q, Integral)):
        raise PreconditionError(f'{p!r}/{q!r} is not a pair of integers')
    if p < 0 or q < 0:
        raise PreconditionError(f'{p}/{q} has a negative member')
    if gcd(p, q) != 1:
        raise NotCoprimeError(p, q)


def continued_fraction(p, q) -> List:
    """
    the canonical continued fraction of p/q, computed by the euclidean algorithm

    >>> continued_fraction(5, 3)
    [1, 1, 2]
    >>> continued_fraction(0, 1)
    [0]
    >>> continued_fraction(1, 0)
    []
    """
    ret = []
    while q:
        a, r = divmod(p, q)
        ret.append(a)
        p, q = q, r
    return ret


def slope_key(p, q) -> Tuple:
    """
    a sort key ordering non-negative fractions by value, 1/0 being the largest
    """
    if q:
        return 0, _Rational(p, q)
    return 1, 0
