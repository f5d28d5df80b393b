from sternbrocot.exceptions import PreconditionError, NotCoprimeError, BadAncestorError, NullFractionError
from sternbrocot.fraction import Fraction
from sternbrocot.tree import SternBrocot, instance, fraction, zero_over_one, one_over_zero, display
from sternbrocot._version import __version__

__all__ = ['SternBrocot', 'Fraction', 'instance', 'fraction', 'zero_over_one', 'one_over_zero', 'display',
           'PreconditionError', 'NotCoprimeError', 'BadAncestorError', 'NullFractionError', '__version__']
