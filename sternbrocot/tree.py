from __future__ import annotations

from threading import RLock
from typing import Callable, Iterator, Optional, TextIO

from sortedcontainers import SortedKeyList

from sternbrocot.exceptions import BadAncestorError, PreconditionError
from sternbrocot.fraction import Fraction
from sternbrocot.logger import init_logger
from sternbrocot.node import Node
from sternbrocot.util import check_pair, slope_key

logger = init_logger(__name__)


def _node_key(node: Node):
    return slope_key(node.p, node.q)


class SternBrocot:
    """
    The Stern-Brocot tree of irreducible fractions, built lazily along the paths that are requested.

    Each fraction has a single node, created the first time a descent reaches it and kept for the lifetime of the
    tree. Building nodes is serialized by a lock, navigating existing nodes is not.
    """

    def __init__(self, integer: Callable = int):
        """
        :param integer: the integral type of numerators and denominators
        """
        self.integer = integer
        zero = integer(0)
        one = integer(1)

        self.nb_fractions = 0
        self._lock = RLock()

        # the convergent of index -2, ascendant of both 0/1 and 1/0
        self.virtual = Node(zero, one, 0, -2)
        self.zero = Node(zero, one, 0, 0, ascendant_left=self.virtual)
        self.infinity = Node(one, zero, 0, -1, ascendant_left=self.virtual)
        self.one = Node(one, one, 1, 0, ascendant_left=self.zero, ascendant_right=self.infinity)

        self.zero.ascendant_right = self.infinity
        self.zero.descendant_right = self.one
        self.zero.inverse = self.infinity
        self.infinity.descendant_left = self.one
        self.infinity.inverse = self.zero
        self.one.inverse = self.one

        self._slopes = SortedKeyList((self.zero, self.one, self.infinity), key=_node_key)

    def zero_over_one(self) -> Fraction:
        return Fraction(self.zero, self)

    def one_over_zero(self) -> Fraction:
        return Fraction(self.infinity, self)

    def _new_child(self, node: Node, left: bool) -> Node:
        """
        create, but do not link, a descendant of node
        """
        odd = node.k % 2 == 1
        if left:
            ascendant = node.ascendant_left
            extends = odd
        else:
            ascendant = node.ascendant_right
            extends = not odd
        if ascendant is None or ascendant is self.virtual:
            raise PreconditionError(f'{node.p}/{node.q} has no {"left" if left else "right"} descendant')
        # going towards the previous partial lengthens the last quotient, going away starts a new one
        if extends:
            u, k = node.u + 1, node.k
        else:
            u, k = 2, node.k + 1
        p = self.integer(node.p + ascendant.p)
        q = self.integer(node.q + ascendant.q)
        if left:
            return Node(p, q, u, k, ascendant_left=ascendant, ascendant_right=node)
        return Node(p, q, u, k, ascendant_left=node, ascendant_right=ascendant)

    def descend(self, node: Node, left: bool) -> Node:
        """
        get a descendant of node, building it (along with its inverse) if it does not exist yet

        :param node: the parent node
        :param left: whether to get the left descendant or the right one
        """
        ret = node.descendant_left if left else node.descendant_right
        if ret is not None:
            return ret
        with self._lock:
            ret = node.descendant_left if left else node.descendant_right
            if ret is not None:
                return ret
            ret = self._new_child(node, left)
            # the inverse of a left descendant is the right descendant of the inverse, and vice versa
            mirror_parent = node.inverse
            mirror = mirror_parent.descendant_right if left else mirror_parent.descendant_left
            new_mirror = mirror is None
            if new_mirror:
                mirror = self._new_child(mirror_parent, not left)
            ret.inverse = mirror
            mirror.inverse = ret
            # links are published only once both nodes are complete
            self._register(ret)
            if new_mirror:
                self._register(mirror)
            if left:
                node.descendant_left = ret
                if new_mirror:
                    mirror_parent.descendant_right = mirror
            else:
                node.descendant_right = ret
                if new_mirror:
                    mirror_parent.descendant_left = mirror
        return ret

    def _register(self, node: Node):
        self._slopes.add(node)
        self.nb_fractions += 1

    def _deepest_ancestor(self, p, q) -> Node:
        """
        find the deepest built node from which p/q can be reached.

        Since built nodes are closed under ancestry, it is the deeper of the two built nodes around p/q
        """
        slopes = self._slopes
        i = slopes.bisect_key_left(slope_key(p, q))
        above = slopes[i]
        if above.p == p and above.q == q:
            return above
        below = slopes[i - 1]
        return below if below.size > above.size else above

    def _check_ancestor(self, ancestor: Fraction, p, q) -> Node:
        node = ancestor._node
        if node is None or node is self.virtual or ancestor.tree is not self:
            raise BadAncestorError(ancestor, p, q)
        if node.p == p and node.q == q:
            return node
        lower = node.ascendant_left
        upper = node.ascendant_right
        if lower.p * q >= p * lower.q or (upper is not None and p * upper.q >= upper.p * q):
            raise BadAncestorError(ancestor, p, q)
        return node

    def fraction(self, p, q, ancestor: Optional[Fraction] = None) -> Fraction:
        """
        Get the fraction p/q, building the nodes leading to it if needed. The complexity is bounded by twice the
        sum of the partial quotients of p/q.

        :param p: the numerator (>= 0)
        :param q: the denominator (>= 0), coprime with p
        :param ancestor: an ancestor of p/q in the tree to descend from, by default the deepest ancestor that
         already exists
        """
        check_pair(p, q)
        p = self.integer(p)
        q = self.integer(q)
        if q == 0:
            return self.one_over_zero()
        if p == 0:
            return self.zero_over_one()

        if ancestor is None:
            with self._lock:
                current = self._deepest_ancestor(p, q)
        else:
            current = self._check_ancestor(ancestor, p, q)

        steps = 0
        while not (current.p == p and current.q == q):
            current = self.descend(current, left=current.p * q > p * current.q)
            steps += 1
        if steps:
            logger.debug('reached %s/%s in %d steps, %d fractions built', p, q, steps, self.nb_fractions)
        return Fraction(current, self)

    def __len__(self):
        return len(self._slopes)

    def __contains__(self, item):
        p, q = item
        with self._lock:
            slopes = self._slopes
            i = slopes.bisect_key_left(slope_key(p, q))
            return i < len(slopes) and slopes[i].p == p and slopes[i].q == q

    def fractions(self) -> Iterator[Fraction]:
        """
        :return: all the fractions built so far, in increasing order
        """
        with self._lock:
            nodes = list(self._slopes)
        return (Fraction(n, self) for n in nodes)

    def __iter__(self):
        return self.fractions()

    @staticmethod
    def display(out: TextIO, f: Fraction):
        f.self_display(out)

    def is_valid(self) -> bool:
        """
        check that the four fixed nodes of the tree are consistent
        """
        v, z, i, o = self.virtual, self.zero, self.infinity, self.one
        checks = (
            ('virtual 0/1 values', (v.p, v.q, v.u, v.k) == (0, 1, 0, -2)),
            ('0/1 values', (z.p, z.q, z.u, z.k) == (0, 1, 0, 0)),
            ('1/0 values', (i.p, i.q, i.u, i.k) == (1, 0, 0, -1)),
            ('1/1 values', (o.p, o.q, o.u, o.k) == (1, 1, 1, 0)),
            ('0/1 links', z.ascendant_left is v and z.ascendant_right is i
             and z.descendant_left is None and z.descendant_right is o),
            ('1/0 links', i.ascendant_left is v and i.ascendant_right is None
             and i.descendant_left is o and i.descendant_right is None),
            ('1/1 ascendants', o.ascendant_left is z and o.ascendant_right is i),
            ('1/1 descendants', (o.descendant_left is None or o.descendant_left.ascendant_right is o)
             and (o.descendant_right is None or o.descendant_right.ascendant_left is o)),
            ('inverses', z.inverse is i and i.inverse is z and o.inverse is o),
        )
        for name, ok in checks:
            if not ok:
                logger.warning('invalid Stern-Brocot tree: inconsistent %s', name)
                return False
        return True

    def __str__(self):
        return f'<SternBrocot with {len(self)} fractions>'


_instance = SternBrocot()


def instance() -> SternBrocot:
    """
    :return: the tree shared by the whole process
    """
    return _instance


def fraction(p, q, ancestor: Optional[Fraction] = None) -> Fraction:
    return _instance.fraction(p, q, ancestor)


def zero_over_one() -> Fraction:
    return _instance.zero_over_one()


def one_over_zero() -> Fraction:
    return _instance.one_over_zero()


display = SternBrocot.display
