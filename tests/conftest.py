import pytest

from credvault.auth import CredentialHasher
from credvault.config import CostParameters


FAST = CostParameters(n=1024, r=8, p=1, dklen=64)


@pytest.fixture(autouse=True)
def _clean_scrypt_env(monkeypatch):
    for key in ("PROFILE", "N", "R", "P", "DKLEN", "MAXMEM"):
        monkeypatch.delenv(f"CREDVAULT_SCRYPT_{key}", raising=False)


@pytest.fixture()
def fast_params():
    return FAST


@pytest.fixture()
def hasher():
    return CredentialHasher(FAST)
