"""
config.py - scrypt cost parameters.

Responsibilities:
- Hold the immutable (N, r, p, dkLen) tuple used for every derivation
- Check the memory ceiling against what scrypt actually allocates
- Load the process-wide parameters from the environment

The "constrained" profile halves N and r relative to the upstream default so a
single derivation fits a tight CPU budget (roughly 8 MiB and a quarter of the
work). Credentials are only verifiable with the parameters that created them,
so switching profiles invalidates every stored credential.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .errors import ConfigError


ENV_PREFIX = "CREDVAULT_SCRYPT_"
DEFAULT_PROFILE = "constrained"


def _is_power_of_two(value: int) -> bool:
    return value > 1 and (value & (value - 1)) == 0


@dataclass(frozen=True)
class CostParameters:
    """
    scrypt knobs. ``maxmem`` is the per-derivation memory ceiling in bytes.

    The ceiling is checked here, when the parameters are built; the scrypt
    primitive sizes its own buffers and is never handed ``maxmem``.
    """

    n: int
    r: int
    p: int
    dklen: int
    maxmem: Optional[int] = field(default=None)

    def __post_init__(self) -> None:
        for name in ("n", "r", "p", "dklen"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if not _is_power_of_two(self.n):
            raise ConfigError(f"n must be a power of two greater than 1, got {self.n}")
        if self.maxmem is None:
            object.__setattr__(self, "maxmem", 2 * 128 * self.r * (self.n + self.p))
        if self.maxmem < self.required_memory:
            raise ConfigError(
                f"maxmem={self.maxmem} is below the {self.required_memory} bytes "
                f"scrypt needs for n={self.n} r={self.r} p={self.p}"
            )

    @property
    def required_memory(self) -> int:
        # V array (N + 2 blocks) plus the p-lane B buffer
        return 128 * self.r * (self.n + 2) + 128 * self.r * self.p

    @property
    def memory_mib(self) -> float:
        return self.required_memory / (1024 * 1024)

    def as_dict(self) -> Dict[str, int]:
        return {
            "n": self.n,
            "r": self.r,
            "p": self.p,
            "dklen": self.dklen,
            "maxmem": int(self.maxmem),
        }


CONSTRAINED = CostParameters(n=8192, r=8, p=1, dklen=64)
RECOMMENDED = CostParameters(n=16384, r=16, p=1, dklen=64)

PROFILES: Dict[str, CostParameters] = {
    "constrained": CONSTRAINED,
    "recommended": RECOMMENDED,
}


def _parse_int(name: str, value: Optional[str]) -> Optional[int]:
    """Convert an environment string to int; None when unset, error when garbage."""
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None


def get_profile(name: str) -> CostParameters:
    try:
        return PROFILES[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(PROFILES))
        raise ConfigError(f"unknown scrypt profile {name!r} (known: {known})") from None


def with_overrides(
    base: CostParameters,
    n: Optional[int] = None,
    r: Optional[int] = None,
    p: Optional[int] = None,
    dklen: Optional[int] = None,
    maxmem: Optional[int] = None,
) -> CostParameters:
    """Return ``base`` with any non-None field replaced."""
    n = base.n if n is None else n
    r = base.r if r is None else r
    p = base.p if p is None else p
    dklen = base.dklen if dklen is None else dklen
    if maxmem is None and (n, r, p) != (base.n, base.r, base.p):
        # the old ceiling was sized for the old parameters
        return CostParameters(n=n, r=r, p=p, dklen=dklen)
    return CostParameters(n=n, r=r, p=p, dklen=dklen, maxmem=base.maxmem if maxmem is None else maxmem)


def load_cost_parameters(environ: Optional[Mapping[str, str]] = None) -> CostParameters:
    """
    Build the process-wide parameters.

    Priority: explicit CREDVAULT_SCRYPT_{N,R,P,DKLEN,MAXMEM} > CREDVAULT_SCRYPT_PROFILE > default profile.
    """
    env = os.environ if environ is None else environ
    base = get_profile(env.get(ENV_PREFIX + "PROFILE") or DEFAULT_PROFILE)
    overrides = {
        key: _parse_int(ENV_PREFIX + key.upper(), env.get(ENV_PREFIX + key.upper()))
        for key in ("n", "r", "p", "dklen", "maxmem")
    }
    return with_overrides(base, **overrides)
