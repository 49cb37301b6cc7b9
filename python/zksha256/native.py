import logging
from typing import Generic

from zksha256.constants import initial_state
from zksha256.helpers import BLOCK_BITS, hex_to_bits, pad, split_blocks, to_bits
from zksha256.sha_round import sha_round
from zksha256.types import F, Digest, get_field

logger = logging.getLogger(__name__)


class NativeSha256(Generic[F]):
    """One-shot SHA256 over field bits.

    Pads the whole message, then folds the compression function over every
    block starting from the initial hash values.
    """

    def __init__(self, field: F = None):
        self.field = get_field() if field is None else field

    def hash(self, message: bytes) -> Digest:
        return self.hash_bits(to_bits(message, self.field))

    def hash_hex(self, hex_str: str) -> Digest:
        return self.hash_bits(hex_to_bits(hex_str, self.field))

    def hash_bits(self, bits) -> Digest:
        padded, _ = pad(bits, BLOCK_BITS, self.field)
        return self.hash_padded(padded)

    def hash_padded(self, padded_bits) -> Digest:
        """Hash a message that has already been padded to whole blocks."""
        blocks = split_blocks(padded_bits, BLOCK_BITS)
        state = initial_state(self.field)
        for i, block in enumerate(blocks):
            logger.debug("native sha256: block %d/%d", i + 1, len(blocks))
            state = sha_round(block, state, self.field)
        return Digest(state)
