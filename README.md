# contestlib

A collection of algorithms and data structures of the kind used in
programming contests, written in plain Python with no dependencies.
Everything is a library: import the module you need and call it.

## Contents

**Number theory**
- `contestlib.modint`: `ModInt`, integers modulo a fixed modulus
  (998244353 by default) with `pow` and `inverse`, and the generic
  `power(base, exponent)` helper.
- `contestlib.factorization`: `is_prime` (deterministic Miller–Rabin),
  `pollard_rho` and `factorize` (sorted prime factors with multiplicity).
- `contestlib.modular`: `mod_log(a, b, p)` (baby-step giant-step) and
  `mod_sqrt(a, p)` (Tonelli–Shanks); both return `None` when there is no solution.
- `contestlib.sieve`: `LinearSieve(n)` with `primes`, `min_factor`, `exponent`,
  `divisor_count`, `phi` and `mu` for `1..n`.
- `contestlib.continued_fraction`: `continued_fraction(check, stop)` walks the
  Stern–Brocot tree towards the threshold of a monotone predicate.

**Numerical**
- `contestlib.ntt`: `ntt` and exact `convolve` modulo an NTT-friendly prime.
- `contestlib.fft`: complex `fft` and `convolve_float`, `convolve_int`,
  `convolve_mod` (arbitrary modulus below 2**31).
- `contestlib.walsh`: `fwt_or`, `fwt_and`, `fwt_xor`, `fwt_eval`.
- `contestlib.subset`: `subset_zeta`, `subset_convolution`.
- `contestlib.polynomial`: `Polynomial` with `mod_xk`, `derivative`, `integral`,
  `inv`, `ln`, `exp`, `pow`; `fps_coeff` and `linear_recurrence_kth`.
- `contestlib.matrix`: `Matrix` with `+`, `-`, `*`, `transpose`, `gaussian`,
  `inverse`; `solve_linear` returns a solution or `None`.
- `contestlib.linear_basis`: weighted XOR `LinearBasis` (`insert`, `min_xor`,
  `kth`, union with `+`) and `intersect`.
- `contestlib.berlekamp_massey`: `BerlekampMassey` with `recurrence`, `length`
  and `kth_term`.
- `contestlib.z3_vector`: `Z3Vector`, bit-parallel vectors over the integers modulo 3.
- `contestlib.simplex`: `simplex(a, b, c)` returning `(SimplexStatus, x)`.
- `contestlib.lagrange`: `lagrange_interpolate`, `lagrange_consecutive`.
- `contestlib.integrate`: `simpson`, `adaptive_simpson`.
- `contestlib.ternary_search`: `recursive_ternary_search`.
- `contestlib.matroid`: `matroid_intersection`.

**Strings**
- `contestlib.kmp`: `KMP` with `fail` and `match`.
- `contestlib.z_function`: `ZFunction` with `z` and `match`.
- `contestlib.manacher`: `manacher`.
- `contestlib.lyndon`: `duval` (Lyndon factorization).
- `contestlib.hashing`: `PairHash` and `StringHash` for double hashing.
- `contestlib.aho_corasick`: `AhoCorasick` with `insert`, `build`, `query`.
- `contestlib.suffix_array`: `SuffixArray`, `SuffixArrayLCP` (with `lcp`),
  `CyclicSuffixArray`.
- `contestlib.suffix_automaton`: `SuffixAutomaton` (with `calc_occurrence` and
  `reversed_prefix_tree`), `build_trie` and `GeneralSuffixAutomaton`.
- `contestlib.palindrome_tree`: `PalindromeTree`.

## Example

```python
from contestlib.factorization import factorize
from contestlib.modular import mod_sqrt
from contestlib.ntt import convolve
from contestlib.kmp import KMP

factorize(600851475143)            # [71, 839, 1471, 6857]
mod_sqrt(2, 7)                     # 4
convolve([1, 2, 3], [2, 3, 4])     # [2, 7, 16, 17, 12]
KMP("aba").match("ababa")          # [True, False, True, False, False]
```

## What is not included

The package has no helpers for binary gcd, the extended Euclidean algorithm,
the Chinese remainder theorem, Euler's totient of a single number, floor sums
or primitive roots; use `math.gcd` and the tools above instead. There is no
command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```