"""Tests for the factorizer and its splitting stages."""

import numpy as np
import pytest
import sympy

import prime_kit.factorization.factorizer as factorizer_module
from prime_kit.config import FactorizerConfig
from prime_kit.factorization import (
    Factorization,
    Factorizer,
    factor,
    pollard_rho_brent,
    pollard_pm1,
    ecm_phase1,
)
from prime_kit.primality.generation import random_safe_prime


class TestFactor:
    """Tests for the factor function."""

    def test_project_euler_composite(self):
        """Test 600851475143 = 71 * 839 * 1471 * 6857."""
        n = 600851475143
        f = factor(n)
        assert f.complete
        assert f.factors == {71: 1, 839: 1, 1471: 1, 6857: 1}
        assert f.reconstruct() == n

    def test_prime_returns_itself(self):
        """Test that a prime factors as itself."""
        p = 1000003
        f = factor(p)
        assert f.complete
        assert f.factors == {p: 1}

    def test_zero(self):
        """Test the zero special case."""
        f = factor(0)
        assert f.factors == {0: 1}
        assert f.complete
        assert f.method == "zero"
        assert f.reconstruct() == 0

    def test_one(self):
        """Test that 1 has no factors."""
        f = factor(1)
        assert f.factors == {}
        assert f.method == "trial"
        assert f.reconstruct() == 1

    def test_negative(self):
        """Test that the sign becomes a -1 entry."""
        f = factor(-12)
        assert f.factors == {-1: 1, 2: 2, 3: 1}
        assert f.reconstruct() == -12
        assert factor(-1).factors == {-1: 1}

    def test_trial_only(self):
        """Test that small factors stay in trial division."""
        f = factor(2**10 * 3**5 * 9973)
        assert f.factors == {2: 10, 3: 5, 9973: 1}
        assert f.method == "trial"

    def test_semiprime_uses_rho(self):
        """Test that two factors above the trial bound are split by rho."""
        p = int(sympy.nextprime(10**9))
        q = int(sympy.nextprime(10**10))
        f = factor(p * q, rng=np.random.default_rng(1))
        assert f.factors == {p: 1, q: 1}
        assert f.method.startswith("trial+rho")
        assert f.unresolved == ()

    def test_prime_power(self):
        """Test a cube of a prime above the trial bound."""
        p = int(sympy.nextprime(10**5))
        f = factor(7 * p**3, rng=np.random.default_rng(2))
        assert f.factors == {7: 1, p: 3}

    def test_large_prime_cofactor(self):
        """Test a big prime cofactor accepted by the prime screen."""
        p = 2**89 - 1
        f = factor(6 * p)
        assert f.factors == {2: 1, 3: 1, p: 1}
        assert f.method == "trial"

    def test_fermat_number(self):
        """Test F6 = 2^64 + 1 = 274177 * 67280421310721."""
        f = factor(2**64 + 1, rng=np.random.default_rng(3))
        assert f.factors == {274177: 1, 67280421310721: 1}

    def test_agrees_with_sympy(self):
        """Test a spread of inputs against sympy.factorint."""
        rng = np.random.default_rng(11)
        for n in (
            123456789012345678,
            10**18 + 9,
            2**62 - 1,
            3**40 + 2,
            999_999_999_989 * 1_000_003,
        ):
            assert factor(n, rng=rng).factors == sympy.factorint(n), n

    def test_round_trip(self):
        """Test reconstruct() == n over a signed range."""
        for n in range(-300, 300):
            f = factor(n)
            assert f.complete
            assert f.reconstruct() == n, n

    def test_keys_sorted(self):
        """Test ascending key order."""
        f = factor(-2 * 3 * 5 * 7 * 11)
        assert list(f.factors) == [-1, 2, 3, 5, 7, 11]


class TestFactorization:
    """Tests for the Factorization record."""

    def test_str(self):
        """Test the human-readable form."""
        assert str(factor(100)) == "2^2 * 5^2"
        assert str(factor(1)) == "1"
        assert str(factor(30)) == "2 * 3 * 5"

    def test_primes(self):
        """Test that sentinels are excluded from primes()."""
        assert factor(-60).primes() == [2, 3, 5]
        assert factor(0).primes() == []

    def test_to_dict(self):
        """Test dictionary conversion."""
        d = factor(12).to_dict()
        assert d['factors'] == {'2': 2, '3': 1}
        assert d['complete'] is True
        assert d['method'] == "trial"
        assert d['unresolved'] == []

    def test_frozen(self):
        """Test that fields cannot be reassigned."""
        f = Factorization({2: 1}, True, "trial")
        with pytest.raises(AttributeError):
            f.complete = False


class TestFactorizer:
    """Tests for the Factorizer class."""

    def test_seeded_runs_agree(self):
        """Test that equal seeds give equal results."""
        n = int(sympy.nextprime(10**8)) * int(sympy.nextprime(10**9))
        a = Factorizer(rng=np.random.default_rng(9)).factor(n)
        b = Factorizer(rng=np.random.default_rng(9)).factor(n)
        assert a == b

    def test_custom_trial_limit(self):
        """Test that a small trial bound pushes work to the stack."""
        f = Factorizer(FactorizerConfig(trial_limit=10)).factor(13 * 17)
        assert f.factors == {13: 1, 17: 1}
        assert "rho" in f.method

    def test_unsplittable_cofactor(self, monkeypatch):
        """Test that a cofactor no stage can split is accepted as-is."""
        monkeypatch.setattr(factorizer_module, "pollard_rho_brent", lambda *a, **k: 1)
        monkeypatch.setattr(factorizer_module, "pollard_pm1", lambda *a, **k: 1)
        monkeypatch.setattr(factorizer_module, "ecm_phase1", lambda *a, **k: 1)

        m = int(sympy.nextprime(10**9)) * int(sympy.nextprime(10**10))
        f = factor(4 * m)
        assert f.complete
        assert f.factors == {2: 2, m: 1}
        assert f.unresolved == (m,)
        assert f.method == "trial+rho+p-1+ecm1"
        assert f.reconstruct() == 4 * m

    def test_config_validation(self):
        """Test that invalid bounds raise error."""
        with pytest.raises(ValueError):
            FactorizerConfig(trial_limit=1)
        with pytest.raises(ValueError):
            FactorizerConfig(mr_rounds=0)
        with pytest.raises(ValueError):
            FactorizerConfig(pm1_bound=1)

    def test_config_dict_round_trip(self):
        """Test to_dict / from_dict, ignoring unknown keys."""
        cfg = FactorizerConfig(pm1_bound=1000)
        d = cfg.to_dict()
        d['unknown'] = 1
        assert FactorizerConfig.from_dict(d) == cfg


class TestPollardRho:
    """Tests for Pollard rho (Brent)."""

    def test_even(self):
        """Test the even fast path."""
        assert pollard_rho_brent(2 * 1000003) == 2

    def test_small_semiprime(self):
        """Test 8051 = 83 * 97."""
        assert pollard_rho_brent(8051, np.random.default_rng(0)) in (83, 97)

    def test_returns_proper_divisor(self):
        """Test a larger semiprime."""
        p, q = int(sympy.nextprime(10**7)), int(sympy.nextprime(10**8))
        d = pollard_rho_brent(p * q, np.random.default_rng(4))
        assert d in (p, q)

    def test_tiny_input(self):
        """Test inputs too small to split."""
        assert pollard_rho_brent(3) == 1


class TestPollardPm1:
    """Tests for Pollard p-1 stage 1."""

    def test_smooth_factor(self):
        """Test that 65537 (p - 1 = 2^16) is found next to a safe prime."""
        q = random_safe_prime(40, np.random.default_rng(8))
        assert pollard_pm1(65537 * q) == 65537

    def test_no_smooth_factor(self):
        """Test two safe primes, neither with smooth p - 1."""
        rng = np.random.default_rng(8)
        p = random_safe_prime(40, rng)
        q = random_safe_prime(44, rng)
        assert pollard_pm1(p * q, bound=2000) == 1


class TestEcmPhase1:
    """Tests for the ECM sketch's contract."""

    def test_even(self):
        """Test the even fast path."""
        assert ecm_phase1(2 * 8051) == 2

    def test_contract(self):
        """Test that the result is 1 or a proper divisor."""
        for n in (8051, 455459, 1000003 * 1000033):
            d = ecm_phase1(n, bound=500, curves=3, rng=np.random.default_rng(1))
            assert d == 1 or (1 < d < n and n % d == 0)
