"""ChaCha8 keystream exposed as a ``random.Random``.

The simulation threads a single ``random.Random`` through every operation.
``ChaCha8Random`` is a drop-in subclass whose bits come from the 8-round
ChaCha block function (64-bit block counter, 64-bit stream id), so runs are
reproducible across platforms and interpreter versions, and a zero key
reproduces the reference test vectors used in the test-suite.

Example:
    rng = ChaCha8Random(bytes(32))
    sim = Simulation.random(rng)
"""

import os
import random
from typing import Union

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

# "expand 32-byte k"
_CONSTANTS = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)
_DOUBLE_ROUNDS = 4
_KEY_BYTES = 32

_PCG_MULTIPLIER = 6364136223846793005
_PCG_INCREMENT = 11634580027462260723

SeedType = Union[None, int, bytes, bytearray]


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) & _MASK32) | (value >> (32 - shift))


def _quarter_round(x: list, a: int, b: int, c: int, d: int) -> None:
    x[a] = (x[a] + x[b]) & _MASK32
    x[d] = _rotl(x[d] ^ x[a], 16)
    x[c] = (x[c] + x[d]) & _MASK32
    x[b] = _rotl(x[b] ^ x[c], 12)
    x[a] = (x[a] + x[b]) & _MASK32
    x[d] = _rotl(x[d] ^ x[a], 8)
    x[c] = (x[c] + x[d]) & _MASK32
    x[b] = _rotl(x[b] ^ x[c], 7)


def chacha_block(key: tuple, counter: int, stream: int, double_rounds: int = _DOUBLE_ROUNDS) -> list:
    """Compute one 16-word ChaCha block.

    Args:
        key: Eight 32-bit key words
        counter: 64-bit block counter
        stream: 64-bit stream id (nonce)
        double_rounds: Column+diagonal round pairs (4 for ChaCha8)

    Returns:
        Sixteen 32-bit output words
    """
    state = [
        *_CONSTANTS,
        *key,
        counter & _MASK32,
        (counter >> 32) & _MASK32,
        stream & _MASK32,
        (stream >> 32) & _MASK32,
    ]
    x = list(state)
    for _ in range(double_rounds):
        _quarter_round(x, 0, 4, 8, 12)
        _quarter_round(x, 1, 5, 9, 13)
        _quarter_round(x, 2, 6, 10, 14)
        _quarter_round(x, 3, 7, 11, 15)
        _quarter_round(x, 0, 5, 10, 15)
        _quarter_round(x, 1, 6, 11, 12)
        _quarter_round(x, 2, 7, 8, 13)
        _quarter_round(x, 3, 4, 9, 14)
    return [(mixed + original) & _MASK32 for mixed, original in zip(x, state)]


def key_from_u64(value: int) -> tuple:
    """Expand a 64-bit integer seed into eight key words with PCG32.

    The state is advanced before every output so that low-entropy seeds
    (0, 1, 42, ...) still produce well-mixed keys.
    """
    state = value & _MASK64
    words = []
    for _ in range(_KEY_BYTES // 4):
        state = (state * _PCG_MULTIPLIER + _PCG_INCREMENT) & _MASK64
        xorshifted = (((state >> 18) ^ state) >> 27) & _MASK32
        rot = state >> 59
        words.append(((xorshifted >> rot) | (xorshifted << ((32 - rot) & 31))) & _MASK32)
    return tuple(words)


def key_from_bytes(seed: bytes) -> tuple:
    """Read a 32-byte seed as eight little-endian key words."""
    if len(seed) != _KEY_BYTES:
        raise ValueError(f"ChaCha8 seed must be {_KEY_BYTES} bytes, got {len(seed)}")
    return tuple(int.from_bytes(seed[i:i + 4], "little") for i in range(0, _KEY_BYTES, 4))


class ChaCha8Random(random.Random):
    """``random.Random`` backed by the ChaCha8 keystream.

    Words are emitted block by block in keystream order. ``getrandbits``
    assembles wider values from consecutive words, least significant word
    first, so ``getrandbits(64)`` is ``low | high << 32``.

    Args:
        seed: 32 key bytes, an int (expanded with PCG32), or None for
            operating-system entropy
        stream: 64-bit stream id; distinct ids give independent streams for
            the same key
    """

    VERSION = 1

    def __init__(self, seed: SeedType = None, *, stream: int = 0) -> None:
        self._stream = stream & _MASK64
        super().__init__(seed)

    def seed(self, a: SeedType = None, version: int = 2) -> None:
        if a is None:
            key = key_from_bytes(os.urandom(_KEY_BYTES))
        elif isinstance(a, (bytes, bytearray)):
            key = key_from_bytes(bytes(a))
        elif isinstance(a, int):
            key = key_from_u64(a)
        else:
            raise TypeError(
                f"ChaCha8Random seed must be None, int or 32 bytes, not {type(a).__name__}"
            )
        self._key = key
        self._counter = 0
        self._buffer: list = []
        self._index = 0
        self.gauss_next = None

    def _next_word(self) -> int:
        if self._index >= len(self._buffer):
            self._buffer = chacha_block(self._key, self._counter, self._stream)
            self._counter = (self._counter + 1) & _MASK64
            self._index = 0
        word = self._buffer[self._index]
        self._index += 1
        return word

    def getrandbits(self, k: int) -> int:
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        result = 0
        shift = 0
        while k > 0:
            word = self._next_word()
            if k < 32:
                word >>= 32 - k
            result |= word << shift
            shift += 32
            k -= 32
        return result

    def random(self) -> float:
        """Uniform float in [0, 1) from the top 53 bits of a 64-bit draw."""
        return (self.getrandbits(64) >> 11) * (2.0**-53)

    def getstate(self) -> tuple:
        return (
            self.VERSION,
            self._key,
            self._stream,
            self._counter,
            tuple(self._buffer),
            self._index,
            self.gauss_next,
        )

    def setstate(self, state: tuple) -> None:
        version = state[0]
        if version != self.VERSION:
            raise ValueError(
                f"state with version {version} passed to ChaCha8Random.setstate "
                f"of version {self.VERSION}"
            )
        _, key, stream, counter, buffer, index, gauss_next = state
        self._key = tuple(key)
        self._stream = stream
        self._counter = counter
        self._buffer = list(buffer)
        self._index = index
        self.gauss_next = gauss_next

    @property
    def stream(self) -> int:
        return self._stream

