import secrets
import threading

import numpy as np
import pytest

from dicephrase.core.entropy import (
    EntropyPool,
    SecureRandom,
    hash_entropy,
    load_entropy_from_file,
)
from dicephrase.core.errors import RandomnessFailure
from dicephrase.core.security import secure_zero


def test_secure_random_within_bound():
    source = SecureRandom()
    draws = [source.randbelow(6) for _ in range(500)]

    assert all(0 <= d < 6 for d in draws)
    assert set(draws) == {0, 1, 2, 3, 4, 5}


def test_secure_random_rejects_non_positive_bound():
    with pytest.raises(ValueError):
        SecureRandom().randbelow(0)


@pytest.mark.parametrize("error", [OSError("no entropy device"), NotImplementedError("no urandom")])
def test_secure_random_wraps_platform_failure(monkeypatch, error):
    def broken(bound):
        raise error

    monkeypatch.setattr(secrets, "randbelow", broken)

    with pytest.raises(RandomnessFailure) as exc:
        SecureRandom().randbelow(6)

    assert exc.value.__cause__ is error


def test_secure_random_is_safe_to_share_between_threads():
    source = SecureRandom()
    results = []

    def worker():
        results.extend(source.randbelow(6) for _ in range(100))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 400
    assert all(0 <= r < 6 for r in results)


def test_entropy_pool_single_byte_draws():
    pool = EntropyPool(bytes([0, 5, 7, 251]))

    assert pool.randbelow(6) == 0
    assert pool.randbelow(6) == 5
    assert pool.randbelow(6) == 1
    assert pool.bytes_used == 3
    assert pool.bytes_remaining == 1


def test_entropy_pool_rejects_biased_bytes():
    # 252..255 would bias a d6, so they are skipped
    pool = EntropyPool(bytes([252, 253, 254, 255, 9]))

    assert pool.randbelow(6) == 3
    assert pool.bytes_used == 5


def test_entropy_pool_multi_byte_draws():
    pool = EntropyPool(bytes([0x01, 0x00]))

    assert pool.randbelow(7776) == 256


def test_entropy_pool_bound_of_one_consumes_nothing():
    pool = EntropyPool(b"")

    assert pool.randbelow(1) == 0


def test_entropy_pool_exhausted():
    pool = EntropyPool(np.array([1], dtype=np.uint8))
    pool.randbelow(6)

    with pytest.raises(RandomnessFailure):
        pool.randbelow(6)


def test_entropy_pool_wipe():
    data = np.array([1, 2, 3, 4], dtype=np.uint8)
    pool = EntropyPool(data)
    pool.wipe()

    assert pool.bytes_remaining == 0
    with pytest.raises(RandomnessFailure):
        pool.randbelow(6)


def test_hash_entropy_preserves_length():
    raw = np.arange(200, dtype=np.uint8)

    for algo in ("sha256", "sha512"):
        whitened = hash_entropy(raw, algo)
        assert len(whitened) == len(raw)
        assert whitened.flags.writeable
        assert not np.array_equal(whitened, raw)


def test_hash_entropy_unknown_algorithm():
    with pytest.raises(ValueError):
        hash_entropy(np.zeros(4, dtype=np.uint8), "md5")


def test_load_entropy_from_file(tmp_path):
    path = tmp_path / "capture.bin"
    path.write_bytes(bytes(range(64)))

    raw = load_entropy_from_file(str(path), apply_hash=False)
    whitened = load_entropy_from_file(str(path))

    assert raw.tolist() == list(range(64))
    assert len(whitened) == 64
    assert whitened.tolist() != raw.tolist()


def test_load_entropy_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_entropy_from_file(str(tmp_path / "missing.bin"))


def test_secure_zero():
    array = np.array([1, 2, 3], dtype=np.uint8)
    buffer = bytearray(b"abc")

    secure_zero(array)
    secure_zero(buffer)

    assert array.tolist() == [0, 0, 0]
    assert buffer == bytearray(3)
