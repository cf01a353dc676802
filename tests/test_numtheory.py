import pytest

from cipherplay.numtheory import is_prime, mod_inverse, mod_pow, random_prime


@pytest.mark.parametrize(
    "a, n, expected",
    [(3, 40, 27), (7, 40, 23), (9, 40, 9), (7, 60, 43), (13, 60, 37), (17, 120, 113)],
)
def test_mod_inverse_known_pairs(a, n, expected):
    assert mod_inverse(a, n) == expected


@pytest.mark.parametrize("a, n", [(3, 40), (65537, 1000000), (5, 19), (12, 77)])
def test_mod_inverse_is_inverse(a, n):
    assert a * mod_inverse(a, n) % n == 1


@pytest.mark.parametrize("a, n", [(2, 4), (0, 19), (15, 55)])
def test_mod_inverse_missing(a, n):
    with pytest.raises(ValueError):
        mod_inverse(a, n)


def test_mod_inverse_bad_modulus():
    with pytest.raises(ValueError):
        mod_inverse(3, 0)


@pytest.mark.parametrize("p", [5, 11, 13, 19, 65537])
@pytest.mark.parametrize("a", [2, 3, 4])
def test_mod_pow_fermat(a, p):
    assert mod_pow(a, p - 1, p) == 1


def test_mod_pow_result_in_range():
    for base in range(0, 50):
        assert 0 <= mod_pow(base, 11, 14) < 14


def test_mod_pow_rejects_zero_modulus():
    with pytest.raises(ValueError):
        mod_pow(2, 3, 0)


def test_mod_pow_rejects_negative_exponent():
    with pytest.raises(ValueError):
        mod_pow(2, -1, 7)


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 19, 65537])
def test_is_prime_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize("n", [0, 1, 4, 9, 14, 40, 55, 77, 143])
def test_is_prime_composites(n):
    assert is_prime(n) is False


def test_random_prime_in_range():
    for _ in range(5):
        p = random_prime(1 << 16, 1 << 20)
        assert (1 << 16) <= p <= (1 << 20)
        assert is_prime(p)
        assert p % 2 == 1


def test_random_prime_bad_range():
    with pytest.raises(ValueError):
        random_prime(10, 5)