import re

import pytest

from credvault import app


FAST_ARGS = ["--n", "1024", "--r", "8", "--p", "1"]


@pytest.fixture()
def password(monkeypatch):
    state = {"value": "s3cr3t"}
    monkeypatch.setattr(app.getpass, "getpass", lambda prompt="": state["value"])
    return state


def _hash(capsys):
    assert app.main(FAST_ARGS + ["hash"]) == 0
    return capsys.readouterr().out.strip()


def test_hash_then_verify(password, capsys):
    credential = _hash(capsys)
    assert re.fullmatch(r"[0-9a-f]{32}:[0-9a-f]{128}", credential)

    assert app.main(FAST_ARGS + ["verify", credential]) == 0
    assert "OK: password matches" in capsys.readouterr().out

    password["value"] = "wrong"
    assert app.main(FAST_ARGS + ["verify", credential]) == 1
    assert "FAIL: password rejected" in capsys.readouterr().out


def test_verify_malformed_looks_like_wrong_password(password, capsys):
    assert app.main(FAST_ARGS + ["verify", "not-a-valid-format"]) == 1

    assert capsys.readouterr().out.strip() == "FAIL: password rejected"


def test_params_shows_profile(capsys):
    assert app.main(["--profile", "recommended", "params"]) == 0

    out = capsys.readouterr().out
    assert "n=16384" in out
    assert "r=16" in out
    assert "memory_mib=" in out


def test_params_reads_environment(monkeypatch, capsys):
    monkeypatch.setenv("CREDVAULT_SCRYPT_N", "4096")

    assert app.main(["params"]) == 0
    assert "n=4096" in capsys.readouterr().out


def test_invalid_cost_parameters_exit_2(capsys):
    assert app.main(["--n", "1000", "params"]) == 2
    assert "invalid configuration" in capsys.readouterr().err


def test_bench_selected_profile(capsys):
    assert app.main(FAST_ARGS + ["bench", "--rounds", "1", "--budget-ms", "60000"]) == 0

    out = capsys.readouterr().out
    assert "SCRYPT PROFILE BENCH" in out
    assert "'profile': 'selected'" in out


def test_attack_finds_pin(password, capsys):
    password["value"] = "3"
    credential = _hash(capsys)

    assert app.main(FAST_ARGS + ["attack", credential, "--digits", "1"]) == 0
    assert "found=3" in capsys.readouterr().out


def test_attack_malformed(capsys):
    assert app.main(FAST_ARGS + ["attack", "nope", "--digits", "1"]) == 1
    assert "malformed" in capsys.readouterr().out


def test_bench_rejects_zero_cost_override(capsys):
    assert app.main(["--n", "0", "bench", "--rounds", "1"]) == 2

    captured = capsys.readouterr()
    assert "invalid configuration" in captured.err
    assert "SCRYPT PROFILE BENCH" not in captured.out
