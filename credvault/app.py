"""
app.py - CLI entrypoint

Commands list:
- hash: prompt for a password and print its credential string
- verify: check a password against a credential string
- params: show the effective scrypt cost parameters
- bench: time hash/verify for each profile (optionally against a CPU budget)
- attack: brute-force demo (PIN search against a credential)

Cost parameters come from CREDVAULT_SCRYPT_* environment variables unless
overridden with --profile/--n/--r/--p.
"""

from __future__ import annotations

import argparse
import getpass
import logging
import sys
from typing import List, Optional

from . import attack
from . import bench
from . import config
from .auth import CredentialHasher
from .errors import ConfigError, CredentialError, MalformedCredentialError


logger = logging.getLogger("credvault")


def _prompt_secret(prompt: str = "Password: ") -> str:
    return getpass.getpass(prompt)


def _cost_parameters(args: argparse.Namespace) -> config.CostParameters:
    base = config.get_profile(args.profile) if args.profile else config.load_cost_parameters()
    return config.with_overrides(base, n=args.n, r=args.r, p=args.p)


def cmd_hash(args: argparse.Namespace) -> int:
    hasher = CredentialHasher(_cost_parameters(args))
    secret = _prompt_secret()
    print(hasher.hash_sync(secret))
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    hasher = CredentialHasher(_cost_parameters(args))
    secret = _prompt_secret()

    ok = hasher.check_sync(args.credential, secret)
    print("OK: password matches" if ok else "FAIL: password rejected")
    return 0 if ok else 1


def cmd_params(args: argparse.Namespace) -> int:
    params = _cost_parameters(args)
    for key, value in params.as_dict().items():
        print(f"{key}={value}")
    print(f"memory_mib={params.memory_mib:.2f}")
    return 0


def cmd_bench(args: argparse.Namespace) -> int:
    if args.profile or any(v is not None for v in (args.n, args.r, args.p)):
        profiles = {"selected": _cost_parameters(args)}
    else:
        profiles = dict(config.PROFILES)

    print("== SCRYPT PROFILE BENCH ==")
    for row in bench.bench_profiles(profiles, rounds=args.rounds, budget_ms=args.budget_ms):
        print(row)
    return 0


def cmd_attack(args: argparse.Namespace) -> int:
    hasher = CredentialHasher(_cost_parameters(args))
    try:
        found, seconds, attempts = attack.bruteforce_pin(args.credential, digits=args.digits, hasher=hasher)
    except MalformedCredentialError as exc:
        print(f"FAIL: cannot attack malformed credential ({exc.reason})")
        return 1
    print(f"Attack=pin digits={args.digits} attempts={attempts} seconds={seconds:.3f} found={found}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="credvault")
    p.add_argument("--profile", choices=sorted(config.PROFILES), help="scrypt cost profile")
    p.add_argument("--n", type=int, help="scrypt CPU/memory cost (power of two)")
    p.add_argument("--r", type=int, help="scrypt block size")
    p.add_argument("--p", type=int, help="scrypt parallelization")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("hash", help="Hash a password into a credential string")
    s.set_defaults(func=cmd_hash)

    s = sub.add_parser("verify", help="Verify a password against a credential string")
    s.add_argument("credential")
    s.set_defaults(func=cmd_verify)

    s = sub.add_parser("params", help="Show effective cost parameters")
    s.set_defaults(func=cmd_params)

    s = sub.add_parser("bench", help="Run benchmarks")
    s.add_argument("--rounds", type=int, default=5)
    s.add_argument("--budget-ms", type=float, default=None, help="Per-verify CPU budget to compare against")
    s.set_defaults(func=cmd_bench)

    s = sub.add_parser("attack", help="Run offline PIN brute-force demo against a credential")
    s.add_argument("credential")
    s.add_argument("--digits", type=int, default=4)
    s.set_defaults(func=cmd_attack)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except ConfigError as exc:
        print(f"FAIL: invalid configuration: {exc}", file=sys.stderr)
        return 2
    except CredentialError as exc:
        logger.error("credential operation failed: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
