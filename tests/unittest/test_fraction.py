from io import StringIO

from pytest import raises

from sternbrocot import SternBrocot, Fraction, fraction, zero_over_one, one_over_zero, PreconditionError, \
    NullFractionError
from sternbrocot.util import continued_fraction

PAIRS = [(1, 1), (2, 1), (1, 2), (5, 3), (3, 5), (8, 5), (13, 8), (10, 3), (7, 5), (1, 9), (9, 1), (355, 113),
         (89, 55), (2, 7)]


def test_one():
    one = fraction(1, 1)
    assert one.k() == 0
    assert one.u() == 1
    assert one.father() == zero_over_one()
    assert one.get_split() == (zero_over_one(), one_over_zero())
    assert zero_over_one().mediant(one_over_zero()) == one
    assert one_over_zero().mediant(zero_over_one()) == one
    assert one.inverse() == one


def test_roots():
    assert zero_over_one().k() == 0
    assert zero_over_one().u() == 0
    assert one_over_zero().k() == -1
    assert zero_over_one().right() == fraction(1, 1)
    assert one_over_zero().left() == fraction(1, 1)
    assert zero_over_one().inverse() == one_over_zero()
    assert one_over_zero().previous_partial() == zero_over_one().partial(-2)
    assert zero_over_one().previous_partial() == one_over_zero()
    with raises(PreconditionError):
        zero_over_one().left()
    with raises(PreconditionError):
        one_over_zero().right()
    with raises(PreconditionError):
        zero_over_one().father()
    with raises(PreconditionError):
        one_over_zero().father()


def test_five_thirds():
    f = fraction(5, 3)
    assert f.cfrac() == [1, 1, 2] == continued_fraction(5, 3)
    assert f.k() == 2
    assert f.u() == 2
    assert f.even()
    assert not f.odd()
    assert f.father() == fraction(3, 2)
    assert f.previous_partial() == fraction(2, 1)
    assert f.get_split() == (fraction(3, 2), fraction(2, 1))
    assert f.get_split_berstel() == (fraction(1, 1), 1, fraction(2, 1), 2)


def test_inverse():
    f = fraction(8, 5)
    assert f.inverse().equals(5, 8)
    assert f.inverse() == fraction(5, 8)
    assert f.k() == 3
    assert f.inverse().k() == 4
    for p, q in PAIRS:
        f = fraction(p, q)
        assert f.inverse().inverse() == f
        assert f.inverse().equals(q, p)


def test_virtual_inverse():
    assert zero_over_one().partial(-2).inverse().null()


def test_descendants():
    assert fraction(1, 1).left() == fraction(1, 2)
    assert fraction(1, 1).right() == fraction(2, 1)
    assert fraction(2, 1).left() == fraction(3, 2)
    assert fraction(1, 2).right() == fraction(2, 3)
    for p, q in PAIRS:
        f = fraction(p, q)
        assert f.left().father() == f
        assert f.right().father() == f
        assert f.left() < f < f.right()


def test_father_quotient():
    f = fraction(10, 3)
    assert f.cfrac() == [3, 3]
    assert f.father() == fraction(7, 2)
    assert f.father(2) == fraction(7, 2)
    assert f.father(1) == fraction(4, 1)
    with raises(PreconditionError):
        f.father(3)
    with raises(PreconditionError):
        f.father(0)
    with raises(PreconditionError):
        fraction(1, 1).father(1)


def test_partial():
    f = fraction(13, 8)
    assert f.cfrac() == [1, 1, 1, 1, 2]
    assert f.partial(4) == f
    assert f.partial(3) == fraction(5, 3)
    assert f.partial(2) == fraction(3, 2)
    assert f.partial(1) == fraction(2, 1)
    assert f.partial(0) == fraction(1, 1)
    assert f.partial(-1) == one_over_zero()
    assert f.partial(-2).equals(0, 1)
    assert f.partial(-2) != zero_over_one()
    with raises(PreconditionError):
        f.partial(5)
    with raises(PreconditionError):
        f.partial(-3)


def test_reduced():
    f = fraction(5, 3)
    assert f.reduced(0) == f
    assert f.reduced(1) == fraction(2, 1)
    assert f.reduced(2) == fraction(1, 1)
    assert f.reduced(3) == one_over_zero()
    assert f.reduced(4).equals(0, 1)
    with raises(PreconditionError):
        f.reduced(5)
    assert fraction(1, 2).reduced(1) == zero_over_one()


def test_cfrac():
    assert one_over_zero().cfrac() == []
    assert zero_over_one().cfrac() == [0]
    assert fraction(1, 1).cfrac() == [1]
    assert fraction(1, 2).cfrac() == [0, 2]
    assert fraction(5, 8).cfrac() == [0, 1, 1, 1, 2]
    for p, q in PAIRS:
        assert fraction(p, q).cfrac() == continued_fraction(p, q)


def test_split():
    for p, q in PAIRS:
        f1, f2 = fraction(p, q).get_split()
        assert f1.p() + f2.p() == p
        assert f1.q() + f2.q() == q
        assert f1 < fraction(p, q) < f2
    with raises(PreconditionError):
        zero_over_one().get_split()
    with raises(PreconditionError):
        one_over_zero().get_split()


def test_split_berstel():
    for p, q in PAIRS:
        f = fraction(p, q)
        f1, nb1, f2, nb2 = f.get_split_berstel()
        if f.even():
            assert nb1 == 1
        else:
            assert nb2 == 1
        assert nb1 * f1.p() + nb2 * f2.p() == p
        assert nb1 * f1.q() + nb2 * f2.q() == q
        assert f1 < f < f2
    assert fraction(3, 1).get_split_berstel() == (zero_over_one(), 1, one_over_zero(), 3)
    assert fraction(1, 3).get_split_berstel() == (zero_over_one(), 3, one_over_zero(), 1)
    with raises(PreconditionError):
        one_over_zero().get_split_berstel()


def test_mediant():
    assert fraction(1, 1).mediant(fraction(2, 1)) == fraction(3, 2)
    assert fraction(1, 2).mediant(fraction(1, 3)) == fraction(2, 5)
    assert fraction(8, 5).mediant(fraction(5, 3)) == fraction(13, 8)
    with raises(PreconditionError):
        fraction(1, 1).mediant(fraction(3, 1))
    with raises(NullFractionError):
        fraction(1, 1).mediant(Fraction())


def test_mediant_not_adjacent():
    t = SternBrocot()
    with raises(PreconditionError):
        t.fraction(1, 1).mediant(t.fraction(1, 1))
    assert t.nb_fractions == 0
    with raises(PreconditionError):
        t.one_over_zero().mediant(t.fraction(1, 2))
    built = t.nb_fractions
    with raises(PreconditionError):
        t.fraction(2, 1).mediant(t.fraction(1, 2))
    assert t.nb_fractions == built
    assert t.one_over_zero().mediant(t.zero_over_one()) == t.fraction(1, 1)
    assert t.fraction(2, 1).mediant(t.fraction(1, 1)) == t.fraction(3, 2)


def test_comparisons_across_trees():
    a = SternBrocot().fraction(3, 2)
    b = SternBrocot().fraction(3, 2)
    with raises(PreconditionError):
        a <= b
    with raises(PreconditionError):
        a < b
    with raises(PreconditionError):
        a > b
    with raises(PreconditionError):
        a >= b


def test_virtual_ordering():
    virtual = zero_over_one().partial(-2)
    assert virtual != zero_over_one()
    assert virtual <= zero_over_one()
    assert virtual >= zero_over_one()
    assert not virtual < zero_over_one()


def test_comparisons():
    f = fraction(5, 3)
    assert f.equals(5, 3)
    assert not f.equals(10, 6)
    assert f.less_than(2, 1)
    assert f.more_than(3, 2)
    assert not f.less_than(5, 3)
    assert fraction(1, 2) < fraction(2, 3) < fraction(1, 1) < fraction(3, 2) < one_over_zero()
    assert fraction(3, 2) > fraction(1, 1)
    assert fraction(3, 2) >= fraction(3, 2)
    assert fraction(3, 2) <= fraction(3, 2)
    ordered = sorted(fraction(p, q) for (p, q) in PAIRS)
    assert [(g.p(), g.q()) for g in ordered] == sorted(PAIRS, key=lambda pq: pq[0] / pq[1])
    assert len({fraction(5, 3), fraction(5, 3), fraction(3, 5)}) == 2


def test_null():
    n = Fraction()
    assert n.null()
    assert not fraction(1, 1).null()
    assert n == Fraction()
    assert n != fraction(1, 1)
    assert str(n) == '0/0'
    with raises(NullFractionError):
        n.p()
    with raises(NullFractionError):
        n.left()
    with raises(NullFractionError):
        n.cfrac()


def test_display():
    out = StringIO()
    fraction(5, 3).self_display(out)
    assert out.getvalue() == '[Fraction 5/3 u=2 k=2]'
    out = StringIO()
    fraction(5, 3).self_display(out, details=False)
    assert out.getvalue() == '5/3'
    out = StringIO()
    Fraction().self_display(out)
    assert out.getvalue() == '[Fraction null]'
    assert str(fraction(5, 3)) == '5/3'
    assert repr(fraction(5, 3)) == 'Fraction(5, 3)'
