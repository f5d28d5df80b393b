from __future__ import annotations

from itertools import takewhile
from typing import TYPE_CHECKING, Iterator, List, Optional, TextIO, Tuple

from sternbrocot.exceptions import NullFractionError, PreconditionError
from sternbrocot.node import Node

if TYPE_CHECKING:
    from sternbrocot.tree import SternBrocot


def _previous(node: Node) -> Optional[Node]:
    # the ascendant of smaller depth lies right of even nodes and left of odd ones
    return node.ascendant_left if node.k % 2 else node.ascendant_right


class Fraction:
    """
    A handle on a node of a Stern-Brocot tree, or the null fraction 0/0 if it has no node.

    Handles are cheap to copy and compare, two handles are equal iff they refer to the same node.
    """
    __slots__ = '_node', '_tree'

    def __init__(self, node: Optional[Node] = None, tree: Optional[SternBrocot] = None):
        self._node = node
        self._tree = tree

    def _get(self, operation: str) -> Node:
        if self._node is None:
            raise NullFractionError(operation)
        return self._node

    def _wrap(self, node: Optional[Node]) -> Fraction:
        return Fraction(node, self._tree)

    def _check_inner(self, node: Node, operation: str):
        """
        make sure the node is neither 0/1, 1/0 nor the virtual ancestor
        """
        tree = self._tree
        if node is tree.zero or node is tree.infinity or node is tree.virtual:
            raise PreconditionError(f'{operation} is undefined for {self}')

    @property
    def tree(self) -> Optional[SternBrocot]:
        return self._tree

    def null(self) -> bool:
        """
        :return: whether this is the null fraction
        """
        return self._node is None

    def p(self):
        return self._get('p').p

    def q(self):
        return self._get('q').q

    def u(self) -> int:
        """
        :return: the last coefficient of the continued fraction
        """
        return self._get('u').u

    def k(self) -> int:
        """
        :return: the index of the last coefficient of the continued fraction
        """
        return self._get('k').k

    def even(self) -> bool:
        return self._get('even').k % 2 == 0

    def odd(self) -> bool:
        return self._get('odd').k % 2 == 1

    def left(self) -> Fraction:
        """
        :return: the left descendant, built if it does not exist yet
        """
        node = self._get('left')
        return self._wrap(self._tree.descend(node, left=True))

    def right(self) -> Fraction:
        """
        :return: the right descendant, built if it does not exist yet
        """
        node = self._get('right')
        return self._wrap(self._tree.descend(node, left=False))

    def father(self, m: Optional[int] = None) -> Fraction:
        """
        Without m, the father in O(1): [u0, ..., uk] => [u0, ..., uk - 1].

        With m, a quotient between 1 and uk - 1, the father [u0, ..., m], in O(uk - m).
        Reaching it in constant time would require storing more links in each node.
        """
        node = self._get('father')
        if node.k < 0 or node is self._tree.zero:
            raise PreconditionError(f'{self} has no father')
        if m is None:
            return self._wrap(node.ascendant_right if node.k % 2 else node.ascendant_left)
        if not 1 <= m < node.u:
            raise PreconditionError(f'quotient {m} is out of range [1, {node.u - 1}] for {self}')
        ret = self
        for _ in range(node.u - m):
            ret = ret.father()
        return ret

    def previous_partial(self) -> Fraction:
        """
        :return: the ascendant of smaller depth in O(1): [u0, ..., u(k-1), uk] => [u0, ..., u(k-1)]
        """
        node = self._get('previous_partial')
        if node is self._tree.virtual:
            raise PreconditionError(f'{self} has no previous partial')
        return self._wrap(_previous(node))

    def inverse(self) -> Fraction:
        """
        :return: q/p in O(1), the null fraction for the virtual ancestor
        """
        return self._wrap(self._get('inverse').inverse)

    def _convergents(self, node: Node) -> Iterator[Tuple[int, Node]]:
        """
        yield the pairs (j, node of [u0, ..., uj]) for j going from k down to -2
        """
        j = node.k
        current = node
        previous = _previous(node)
        while True:
            yield j, current
            if previous is None:
                return
            # the convergent before the previous one is its ascendant on the side of the current one
            before = previous.ascendant_left if current.less(previous) else previous.ascendant_right
            j, current, previous = j - 1, previous, before

    def partial(self, kp: int) -> Fraction:
        """
        :param kp: the depth of the partial fraction, between -2 and k()
        :return: the partial fraction [u0, ..., u(kp)], in O(k() - kp)
        """
        node = self._get('partial')
        if not -2 <= kp <= node.k:
            raise PreconditionError(f'depth {kp} is out of range [-2, {node.k}] for {self}')
        for j, current in self._convergents(node):
            if j == kp:
                return self._wrap(current)

    def reduced(self, i: int) -> Fraction:
        """
        :param i: between 0 and k() + 2
        :return: the partial fraction [u0, ..., u(k-i)]
        """
        node = self._get('reduced')
        if not 0 <= i <= node.k + 2:
            raise PreconditionError(f'reduction {i} is out of range [0, {node.k + 2}] for {self}')
        return self.partial(node.k - i)

    def get_split(self) -> Tuple[Fraction, Fraction]:
        """
        Splitting formula in O(1), undefined for 0/1 and 1/0.

        :return: the pair (f1, f2) of ascendants such that this is the mediant of f1 and f2
        """
        node = self._get('get_split')
        self._check_inner(node, 'get_split')
        return self._wrap(node.ascendant_left), self._wrap(node.ascendant_right)

    def get_split_berstel(self) -> Tuple[Fraction, int, Fraction, int]:
        """
        Berstel splitting formula in O(1), undefined for 0/1 and 1/0.

        :return: (f1, nb1, f2, nb2) such that this is nb1 repetitions of the left pattern f1 combined with nb2
         repetitions of the right pattern f2. nb1 is 1 for even fractions and nb2 is 1 for odd fractions.
        """
        node = self._get('get_split_berstel')
        self._check_inner(node, 'get_split_berstel')
        if node.k % 2:
            previous = node.ascendant_left
            return self._wrap(previous), node.u, self._wrap(previous.ascendant_right), 1
        previous = node.ascendant_right
        before = previous.ascendant_left
        if before is self._tree.virtual:
            before = self._tree.zero
        return self._wrap(before), 1, self._wrap(previous), node.u

    def cfrac(self) -> List[int]:
        """
        :return: the coefficients [u0, ..., uk] of the continued fraction, in O(k())
        """
        node = self._get('cfrac')
        # a partial ending with 1 is stored in its shorter form, one level up
        ret = [current.u if current.k == j else 1
               for j, current in takewhile(lambda c: c[0] >= 0, self._convergents(node))]
        ret.reverse()
        return ret

    def mediant(self, other: Fraction) -> Fraction:
        """
        :param other: a fraction adjacent to this one in the tree
        :return: the fraction (p + other.p) / (q + other.q)
        """
        node = self._get('mediant')
        other_node = other._get('mediant')
        if other._tree is not self._tree:
            raise PreconditionError(f'{self} and {other} belong to different trees')
        # only neighbours in the tree, whose determinant is 1, have their mediant as a child
        if abs(node.p * other_node.q - other_node.p * node.q) != 1:
            raise PreconditionError(f'{self} and {other} are not adjacent in the tree')
        if node.size >= other_node.size:
            parent, outer = node, other_node
        else:
            parent, outer = other_node, node
        return self._wrap(self._tree.descend(parent, left=outer.less(parent)))

    def equals(self, p1, q1) -> bool:
        node = self._get('equals')
        return node.p == p1 and node.q == q1

    def less_than(self, p1, q1) -> bool:
        node = self._get('less_than')
        return node.p * q1 < p1 * node.q

    def more_than(self, p1, q1) -> bool:
        node = self._get('more_than')
        return node.p * q1 > p1 * node.q

    def __eq__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._node is other._node

    def __hash__(self):
        return hash(id(self._node))

    def _comparable(self, other) -> Node:
        ret = other._get('compare')
        if other._tree is not self._tree:
            raise PreconditionError(f'{self} and {other} belong to different trees')
        return ret

    def __lt__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._get('compare').less(self._comparable(other))

    def __gt__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._comparable(other).less(self._get('compare'))

    def __le__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return not self._comparable(other).less(self._get('compare'))

    def __ge__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return not self._get('compare').less(self._comparable(other))

    def self_display(self, out: TextIO, details=True):
        """
        write the fraction to a text stream
        """
        node = self._node
        if node is None:
            out.write('[Fraction null]')
        elif details:
            out.write(f'[Fraction {node.p}/{node.q} u={node.u} k={node.k}]')
        else:
            out.write(f'{node.p}/{node.q}')

    def __str__(self):
        if self._node is None:
            return '0/0'
        return f'{self._node.p}/{self._node.q}'

    def __repr__(self):
        if self._node is None:
            return 'Fraction()'
        return f'Fraction({self._node.p}, {self._node.q})'
