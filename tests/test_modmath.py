"""Tests for the modular arithmetic helpers."""

import pytest

from prime_kit.core.modmath import crt, gcd, lcm, mod_inverse, mod_pow


class TestModHelpers:
    """Tests for pow, inverse, gcd and lcm wrappers."""

    def test_mod_pow(self):
        """Test modular exponentiation."""
        assert mod_pow(4, 13, 497) == 445
        assert mod_pow(2, 10**18, 1_000_003) == pow(2, 10**18, 1_000_003)

    def test_mod_inverse(self):
        """Test modular inverse."""
        assert mod_inverse(3, 11) == 4
        assert (mod_inverse(17, 3120) * 17) % 3120 == 1

    def test_mod_inverse_not_invertible(self):
        """Test that a non-invertible value raises error."""
        with pytest.raises(ValueError):
            mod_inverse(2, 4)

    def test_gcd_lcm(self):
        """Test gcd and lcm."""
        assert gcd(12, 18) == 6
        assert lcm(4, 6) == 12
        assert gcd(2**100, 6**50) == 2**50


class TestCrt:
    """Tests for the Chinese remainder theorem."""

    def test_classic_system(self):
        """Test x = 2 (3), 3 (5), 2 (7)."""
        assert crt([2, 3, 2], [3, 5, 7]) == 23

    def test_single_congruence(self):
        """Test a one-element system."""
        assert crt([12], [5]) == 2

    def test_big_moduli(self):
        """Test with large coprime moduli."""
        moduli = [2**61 - 1, 2**89 - 1, 2**107 - 1]
        x = 123456789 ** 5
        residues = [x % m for m in moduli]
        assert crt(residues, moduli) == x

    def test_length_mismatch(self):
        """Test that mismatched lengths raise error."""
        with pytest.raises(ValueError):
            crt([1, 2], [3])

    def test_empty(self):
        """Test that an empty system raises error."""
        with pytest.raises(ValueError):
            crt([], [])

    def test_non_coprime_moduli(self):
        """Test that shared factors raise error."""
        with pytest.raises(ValueError):
            crt([1, 2], [4, 6])
