import pytest

from plonkcore.field import Fr, batch_inversion, get_msb


def test_inverse_multiplies_to_one():
    for raw in (1, 2, 7, 123456789, Fr.MODULUS - 1):
        a = Fr(raw)
        assert a * a.inverse() == Fr.one()


def test_inverse_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Fr(0).inverse()


def test_reduction_and_negation():
    assert Fr(-1) == Fr(Fr.MODULUS - 1)
    assert Fr(Fr.MODULUS) == Fr.zero()
    assert -Fr(3) + Fr(3) == Fr.zero()


def test_division_matches_inverse():
    a, b = Fr(99), Fr(17)
    assert (a / b) * b == a


def test_pow_negative_exponent():
    a = Fr(11)
    assert a.pow(-3) * a.pow(3) == Fr.one()


def test_fermat():
    a = Fr(987654321)
    assert a.pow(Fr.MODULUS - 1) == Fr.one()


def test_bytes_round_trip():
    for raw in (0, 1, 2**200 + 5, Fr.MODULUS - 1):
        a = Fr(raw)
        data = a.to_bytes()
        assert len(data) == 32
        assert Fr.from_bytes(data) == a


def test_bytes_are_little_endian():
    assert Fr(1).to_bytes() == b"\x01" + bytes(31)


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        Fr.from_bytes(bytes(31))


def test_from_bytes_unreduced():
    with pytest.raises(ValueError):
        Fr.from_bytes(Fr.MODULUS.to_bytes(32, "little"))


@pytest.mark.parametrize("log2_size", [1, 2, 8, 16, 28])
def test_root_of_unity_is_primitive(log2_size):
    root = Fr.root_of_unity(log2_size)
    assert root.pow(1 << log2_size) == Fr.one()
    assert root.pow(1 << (log2_size - 1)) == Fr(-1)


def test_root_of_unity_order_zero():
    assert Fr.root_of_unity(0) == Fr.one()


def test_root_of_unity_too_large():
    with pytest.raises(ValueError):
        Fr.root_of_unity(29)


def test_batch_inversion_matches_single():
    values = [Fr(3), Fr(0), Fr(10), Fr(-5)]
    inverted = batch_inversion(values)
    assert inverted[0] == Fr(3).inverse()
    assert inverted[1] == Fr.zero()
    assert inverted[2] == Fr(10).inverse()
    assert inverted[3] == Fr(-5).inverse()


def test_batch_inversion_empty():
    assert batch_inversion([]) == []


def test_get_msb_powers_of_two():
    for k in range(0, 64):
        assert get_msb(1 << k) == k
        assert get_msb((1 << (k + 1)) - 1) == k


def test_get_msb_zero():
    assert get_msb(0) == 0


def test_get_msb_negative():
    with pytest.raises(ValueError):
        get_msb(-1)