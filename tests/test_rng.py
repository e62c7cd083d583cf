import pytest

from py_sharpshooter.rng import Mulberry32, combine_seed, string_hash, to_seed


class TestMulberry32:

    def test_same_seed_same_sequence(self):
        a = Mulberry32(12345)
        b = Mulberry32(12345)
        assert [a.next() for _ in range(20)] == [b.next() for _ in range(20)]

    def test_different_seeds_diverge_on_first_draw(self):
        assert Mulberry32(1).next() != Mulberry32(2).next()

    def test_range(self):
        rng = Mulberry32(987654321)
        for _ in range(2000):
            value = rng.next()
            assert 0.0 <= value < 1.0

    def test_state_wraps_to_32_bits(self):
        rng = Mulberry32(-1)
        assert rng.state == 0xFFFFFFFF
        for _ in range(100):
            rng.next()
            assert 0 <= rng.state <= 0xFFFFFFFF

    def test_uniform_and_symmetric(self):
        rng = Mulberry32(7)
        for _ in range(500):
            assert 2.0 <= rng.uniform(2.0, 3.0) < 3.0
            assert -0.5 <= rng.symmetric(0.5) < 0.5

    def test_mean_is_centered(self):
        rng = Mulberry32(2024)
        n = 5000
        mean = sum(rng.next() for _ in range(n)) / n
        assert mean == pytest.approx(0.5, abs=0.02)


class TestHashing:

    def test_djb2_values(self):
        assert string_hash("") == 5381
        assert string_hash("a") == 5381 * 33 + 97
        assert string_hash("ab") == (5381 * 33 + 97) * 33 + 98

    def test_string_hash_is_32_bit(self):
        h = string_hash("daily-challenge-2026-10-18" * 10)
        assert 0 <= h <= 0xFFFFFFFF

    def test_string_hash_stable_and_distinct(self):
        assert string_hash("level-1") == string_hash("level-1")
        assert string_hash("level-1") != string_hash("level-2")

    def test_non_ascii_uses_code_units(self):
        # U+00E9 is a single UTF-16 code unit
        assert string_hash("é") == 5381 * 33 + 0xE9
        # a lone surrogate is hashed as its code unit
        assert string_hash("seed\ud800") == (string_hash("seed") * 33 + 0xD800) % 2 ** 32

    @pytest.mark.parametrize("seed, expected", [
        (42, 42),
        (2 ** 32 + 5, 5),
        ("a", 5381 * 33 + 97),
    ])
    def test_to_seed(self, seed, expected):
        assert to_seed(seed) == expected

    def test_combine_seed(self):
        assert combine_seed(1, 0) == 2654435761
        assert combine_seed(0, 3) == 3
        assert combine_seed(0, 3, stride=1000) == 3000
        assert combine_seed(10, 1) != combine_seed(10, 2)
        assert 0 <= combine_seed(2 ** 31, 12345) <= 0xFFFFFFFF
