from __future__ import annotations

from typing import Optional


class Node:
    """
    A node of the Stern-Brocot tree: the irreducible fraction p/q, along with links to its neighbours in the tree.

    The continued fraction of p/q is [u0, ..., uk], u is its last coefficient and k its index.
    The two ascendants are the fractions whose mediant is p/q, the left one being smaller than p/q.
    The descendants are the two children of the node, None until they are built.
    """
    __slots__ = ('p', 'q', 'u', 'k',
                 'ascendant_left', 'ascendant_right', 'descendant_left', 'descendant_right', 'inverse')

    def __init__(self, p, q, u: int, k: int,
                 ascendant_left: Optional[Node] = None, ascendant_right: Optional[Node] = None,
                 descendant_left: Optional[Node] = None, descendant_right: Optional[Node] = None,
                 inverse: Optional[Node] = None):
        self.p = p
        self.q = q
        self.u = u
        self.k = k
        self.ascendant_left = ascendant_left
        self.ascendant_right = ascendant_right
        self.descendant_left = descendant_left
        self.descendant_right = descendant_right
        self.inverse = inverse

    def less(self, other: Node) -> bool:
        """
        :return: whether this node's fraction is smaller than other's
        """
        return self.p * other.q < other.p * self.q

    @property
    def size(self):
        """
        :return: p + q, which strictly grows from a node to its descendants
        """
        return self.p + self.q

    def __repr__(self):
        return f'<Node {self.p}/{self.q} u={self.u} k={self.k}>'
