"""Random streams.

Systems that need randomness accept an injected source. When the caller does
not provide one and the field carries a seed, a stream is derived from that
seed, the field's turn and a stream name so that replays of the same action
sequence are reproducible. Without a seed the stream is seeded from OS
entropy.
"""

import hashlib
import random
from typing import Optional

SEED_BITS = 32


def derive_stream_seed(master_seed: int, stream_name: str) -> int:
    """Derive a deterministic child RNG seed from (master_seed, stream_name)."""
    digest = hashlib.sha256(f"{master_seed}:{stream_name}".encode("utf-8")).digest()
    return int.from_bytes(digest[:8], byteorder="big", signed=False)


def draw_seed() -> int:
    """Return a fresh seed drawn from OS entropy."""
    return random.Random().getrandbits(SEED_BITS)


def derive_rng(seed: Optional[int], turn: int, stream_name: str) -> random.Random:
    """Return a ``random.Random`` for ``stream_name`` at ``turn``.

    A ``None`` seed gives an unseeded (entropy-backed) generator.
    """
    if seed is None:
        return random.Random()
    return random.Random(derive_stream_seed(seed, f"{stream_name}:{turn}"))
