import pytest

from algolib.modint import DEFAULT_MOD, ModInt, normalize


@pytest.mark.parametrize("value", [-10**12, -8, -7, -1, 0, 3, 7, 14, 10**15 + 3])
def test_normalize_range_and_congruence(value):
    r = normalize(value, 7)
    assert 0 <= r < 7
    assert (r - value) % 7 == 0


def test_normalize_rejects_bad_modulus():
    with pytest.raises(ValueError):
        normalize(5, 0)


def test_default_modulus():
    assert ModInt.mod == DEFAULT_MOD == 998244353
    assert ModInt(-1) == ModInt.mod - 1


@pytest.mark.parametrize("a,b", [(3, 4), (DEFAULT_MOD - 1, 2), (123456789, 987654321)])
def test_arithmetic_round_trips(a, b):
    x, y = ModInt(a), ModInt(b)
    assert (x + y) - y == x
    assert (x * y) / y == x
    assert x * x.inv() == 1
    assert -x + x == 0
    assert int(x + b) == (a + b) % DEFAULT_MOD
    assert int(b - x) == (b - a) % DEFAULT_MOD


def test_mixed_int_operands():
    x = ModInt(10)
    assert 5 + x == x + 5
    assert 3 * x == x * 3
    assert (1 / x) * x == 1


def test_fermat_and_negative_power():
    x = ModInt(123)
    assert x.power(DEFAULT_MOD - 1) == 1
    assert x.power(-1) == x.inv()
    assert x ** 3 == x * x * x
    assert x.power(0) == 1


def test_zero_has_no_inverse():
    with pytest.raises(ZeroDivisionError):
        ModInt(0).inv()
    with pytest.raises(ZeroDivisionError):
        ModInt(1) / 0


def test_known_primitive_roots():
    assert ModInt.primitive_root() == 3
    assert ModInt.with_modulus(1_000_000_007).primitive_root() == 5
    assert ModInt.with_modulus(786433).primitive_root() == 10


@pytest.mark.parametrize("mod", [7, 13, 101])
def test_computed_primitive_root_generates_group(mod):
    cls = ModInt.with_modulus(mod)
    r = cls(cls.primitive_root())
    assert len({int(r.power(k)) for k in range(mod - 1)}) == mod - 1


def test_with_modulus_is_cached_and_independent():
    seven = ModInt.with_modulus(7)
    assert seven is ModInt.with_modulus(7)
    assert seven(9) == seven(2)
    assert seven.mod == 7
    assert ModInt.mod == DEFAULT_MOD


def test_mixing_moduli_raises():
    seven = ModInt.with_modulus(7)
    with pytest.raises(TypeError):
        seven(1) + ModInt(1)


def test_non_integer_operand_raises():
    with pytest.raises(TypeError):
        ModInt(1) + 1.5
    with pytest.raises(TypeError):
        ModInt("5")


def test_parse_round_trip():
    assert str(ModInt.parse("12345")) == "12345"
    assert ModInt.parse("-5") == -ModInt(5)
    with pytest.raises(ValueError):
        ModInt.parse("abc")


def test_ordering_and_hash():
    assert ModInt(3) < ModInt(5)
    assert ModInt(5) > 3
    assert sorted([ModInt(9), ModInt(2), ModInt(4)]) == [ModInt(2), ModInt(4), ModInt(9)]
    assert hash(ModInt(DEFAULT_MOD + 4)) == hash(ModInt(4))
    assert int(ModInt(DEFAULT_MOD + 4)) == 4