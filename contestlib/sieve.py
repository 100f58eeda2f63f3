"""Linear sieve for primes and multiplicative functions."""

from __future__ import annotations


class LinearSieve:
    """Primes and multiplicative functions on 1..n in linear time.

    ``min_factor[i]`` is the smallest prime factor of i, ``exponent[i]`` its
    exponent in i, ``divisor_count[i]`` the number of divisors, ``phi`` is
    Euler's totient and ``mu`` the Moebius function.
    """

    def __init__(self, n):
        if n < 1:
            raise ValueError("n must be at least 1")
        self.n = n
        self.primes = []
        self.min_factor = [0] * (n + 1)
        self.exponent = [0] * (n + 1)
        self.divisor_count = [0] * (n + 1)
        self.phi = [0] * (n + 1)
        self.mu = [0] * (n + 1)
        self.divisor_count[1] = self.phi[1] = self.mu[1] = 1
        mark, d, facnum, phi, mu = (
            self.min_factor,
            self.exponent,
            self.divisor_count,
            self.phi,
            self.mu,
        )
        for i in range(2, n + 1):
            if mark[i] == 0:
                self.primes.append(i)
                mark[i] = i
                d[i] = 1
                facnum[i] = 2
                phi[i] = i - 1
                mu[i] = -1
            for p in self.primes:
                v = i * p
                if v > n:
                    break
                mark[v] = p
                if i % p == 0:
                    d[v] = d[i] + 1
                    facnum[v] = facnum[i] // (d[i] + 1) * (d[v] + 1)
                    phi[v] = phi[i] * p
                    mu[v] = 0
                    break
                d[v] = 1
                facnum[v] = facnum[i] * 2
                phi[v] = phi[i] * (p - 1)
                mu[v] = -mu[i]