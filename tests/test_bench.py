from credvault import bench


def test_bench_hash_and_verify_report_medians(fast_params):
    hash_row = bench.bench_hash(fast_params, rounds=2)
    verify_row = bench.bench_verify(fast_params, rounds=2)

    assert hash_row["metric"] == "scrypt_hash_median_ms"
    assert verify_row["metric"] == "scrypt_verify_median_ms"
    assert hash_row["value"] > 0
    assert verify_row["n"] == fast_params.n


def test_bench_profiles_against_budget(fast_params):
    generous = bench.bench_profiles({"fast": fast_params}, rounds=1, budget_ms=60_000)
    impossible = bench.bench_profiles({"fast": fast_params}, rounds=1, budget_ms=0)

    assert generous[0]["profile"] == "fast"
    assert generous[0]["memory_mib"] > 0
    assert generous[0]["within_budget"] is True
    assert impossible[0]["within_budget"] is False


def test_bench_profiles_without_budget(fast_params):
    rows = bench.bench_profiles({"fast": fast_params}, rounds=1)

    assert "within_budget" not in rows[0]
