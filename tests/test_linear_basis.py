import pytest

from contestlib.linear_basis import LinearBasis, intersect


def span(basis, weight=0):
    values = []
    k = 0
    while True:
        try:
            values.append(basis.kth(k, weight))
        except IndexError:
            return values
        k += 1


def brute_span(vectors):
    result = {0}
    for v in vectors:
        result |= {x ^ v for x in result}
    return result


def make(d, vectors):
    basis = LinearBasis(d)
    for v in vectors:
        basis.insert(v)
    return basis


def test_insert_reports_growth():
    basis = LinearBasis(3)
    assert basis.insert(0b011) is True
    assert basis.insert(0b110) is True
    assert basis.insert(0b101) is False
    assert basis.insert(0) is False


def test_min_xor_of_spanned_vector_is_zero():
    basis = make(4, [0b1010, 0b0110, 0b0001])
    for v in brute_span([0b1010, 0b0110, 0b0001]):
        assert basis.min_xor(v) == 0


def test_kth_enumerates_span_in_order():
    vectors = [0b10110, 0b01101, 0b00111, 0b10001]
    basis = make(5, vectors)
    values = span(basis)
    assert values == sorted(brute_span(vectors))


def test_kth_out_of_range_raises():
    basis = make(3, [0b001])
    with pytest.raises(IndexError):
        basis.kth(2)
    with pytest.raises(ValueError):
        basis.kth(-1)


def test_union_spans_both():
    a = make(4, [0b0011, 0b0100])
    b = make(4, [0b1000, 0b0110])
    assert set(span(a + b)) == brute_span([0b0011, 0b0100, 0b1000, 0b0110])


def test_intersection_of_spans():
    a = make(3, [0b011, 0b110])
    b = make(3, [0b101, 0b111])
    common = brute_span([0b011, 0b110]) & brute_span([0b101, 0b111])
    assert set(span(intersect(a, b))) == common


def test_intersection_with_itself_is_same_span():
    vectors = [0b1100, 0b0110, 0b0011]
    a = make(4, vectors)
    assert set(span(intersect(a, a.copy()))) == brute_span(vectors)


def test_weighted_insert_keeps_heavier_vector():
    basis = LinearBasis(2)
    basis.insert(0b11, weight=1)
    basis.insert(0b10, weight=5)
    assert span(basis, weight=5) == [0, 0b10]
    assert set(span(basis)) == {0, 1, 2, 3}


def test_dimension_mismatch_raises():
    with pytest.raises(ValueError):
        LinearBasis(2) + LinearBasis(3)
    with pytest.raises(ValueError):
        intersect(LinearBasis(2), LinearBasis(3))