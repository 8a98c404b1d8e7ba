"""Tests for the ChaCha8-backed random source."""

import pytest

from ecosim.util.chacha import ChaCha8Random, chacha_block, key_from_bytes, key_from_u64


class TestChaCha8Random:
    def test_same_seed_same_stream(self):
        a = ChaCha8Random(bytes(32))
        b = ChaCha8Random(bytes(32))
        assert [a.getrandbits(32) for _ in range(50)] == [b.getrandbits(32) for _ in range(50)]

    def test_int_seed_is_deterministic(self):
        assert ChaCha8Random(42).getrandbits(64) == ChaCha8Random(42).getrandbits(64)

    def test_different_seeds_differ(self):
        assert ChaCha8Random(1).getrandbits(64) != ChaCha8Random(2).getrandbits(64)

    def test_streams_are_independent(self):
        a = ChaCha8Random(bytes(32), stream=0)
        b = ChaCha8Random(bytes(32), stream=1)
        assert a.stream == 0 and b.stream == 1
        assert [a.getrandbits(32) for _ in range(8)] != [b.getrandbits(32) for _ in range(8)]

    def test_words_follow_block_order(self):
        rng = ChaCha8Random(bytes(32))
        key = key_from_bytes(bytes(32))
        expected = chacha_block(key, 0, 0) + chacha_block(key, 1, 0)
        assert [rng.getrandbits(32) for _ in range(32)] == expected

    def test_u64_is_low_word_first(self):
        words = ChaCha8Random(7)
        wide = ChaCha8Random(7)
        low = words.getrandbits(32)
        high = words.getrandbits(32)
        assert wide.getrandbits(64) == low | (high << 32)

    def test_u64_spans_block_boundary(self):
        words = ChaCha8Random(9)
        wide = ChaCha8Random(9)
        for _ in range(15):
            words.getrandbits(32)
            wide.getrandbits(32)
        low = words.getrandbits(32)
        high = words.getrandbits(32)
        assert wide.getrandbits(64) == low | (high << 32)

    def test_short_draw_uses_top_bits(self):
        a = ChaCha8Random(11)
        b = ChaCha8Random(11)
        assert a.getrandbits(8) == b.getrandbits(32) >> 24

    def test_random_in_unit_interval(self):
        rng = ChaCha8Random(3)
        assert all(0.0 <= rng.random() < 1.0 for _ in range(500))

    def test_stdlib_helpers_work(self):
        rng = ChaCha8Random(3)
        assert 0 <= rng.randrange(10) < 10
        assert rng.choice("abc") in "abc"

    def test_state_round_trip(self):
        rng = ChaCha8Random(5)
        rng.getrandbits(32)
        state = rng.getstate()
        first = [rng.getrandbits(32) for _ in range(20)]
        rng.setstate(state)
        assert [rng.getrandbits(32) for _ in range(20)] == first

    def test_reseed_restarts_stream(self):
        rng = ChaCha8Random(5)
        first = rng.getrandbits(32)
        rng.seed(5)
        assert rng.getrandbits(32) == first

    def test_rejects_wrong_key_length(self):
        with pytest.raises(ValueError):
            ChaCha8Random(bytes(16))

    def test_rejects_unsupported_seed_type(self):
        with pytest.raises(TypeError):
            ChaCha8Random(1.5)


class TestKeyExpansion:
    def test_u64_key_has_eight_words(self):
        key = key_from_u64(0)
        assert len(key) == 8
        assert all(0 <= word <= 0xFFFFFFFF for word in key)

    def test_small_seeds_are_mixed(self):
        assert key_from_u64(0) != key_from_u64(1)
        assert any(word != 0 for word in key_from_u64(0))
