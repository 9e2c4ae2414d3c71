import pytest

from credvault.attack import bruteforce_pin
from credvault.errors import MalformedCredentialError


def test_bruteforce_finds_short_pin(hasher):
    credential = hasher.hash_sync("7")

    found, seconds, attempts = bruteforce_pin(credential, digits=1, hasher=hasher)

    assert found == "7"
    assert attempts == 8
    assert seconds >= 0


def test_bruteforce_exhausts_space(hasher):
    credential = hasher.hash_sync("not-a-pin")

    found, _seconds, attempts = bruteforce_pin(credential, digits=1, hasher=hasher)

    assert found is None
    assert attempts == 10


def test_bruteforce_rejects_malformed(hasher):
    with pytest.raises(MalformedCredentialError):
        bruteforce_pin("nope", digits=1, hasher=hasher)


def test_bruteforce_needs_digits(hasher):
    with pytest.raises(ValueError):
        bruteforce_pin("ab:cd", digits=0, hasher=hasher)
