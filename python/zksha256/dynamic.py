import logging
from typing import Generic, Optional

from zksha256.constants import initial_state
from zksha256.errors import ConfigurationError
from zksha256.helpers import BLOCK_BITS, pad, split_blocks, to_bits
from zksha256.sha_round import sha_round
from zksha256.types import F, Digest, check_bits, get_field

logger = logging.getLogger(__name__)


class DynamicSha256(Generic[F]):
    """Block-at-a-time SHA256 over field bits.

    ``digest_index`` is the number of blocks already folded into ``state``.
    Each call to :meth:`step` compresses the block at that index and advances
    it by one, so hashing can be interleaved with other work, checkpointed and
    resumed later with a new instance.

    An instance is not safe to share between threads.
    """

    def __init__(self, padded_preimage, digest_index: int = 0,
                 state: Optional[Digest] = None, field: F = None):
        self.field = get_field() if field is None else field
        self.padded_preimage = padded_preimage
        self._blocks = split_blocks(padded_preimage, BLOCK_BITS)

        if not 0 <= digest_index < len(self._blocks):
            raise ConfigurationError(
                f"Digest index {digest_index} is out of range for {len(self._blocks)} blocks.")
        if state is None and digest_index != 0:
            raise ConfigurationError("Resuming past the first block requires the prior state.")

        self.init_state = None if state is None else Digest(state)
        if self.init_state is not None:
            if type(self.init_state[0][0]) is not self.field:
                raise ConfigurationError("The prior state belongs to a different field.")
            for word in self.init_state:
                check_bits(word)
        self._state = initial_state(self.field) if state is None else self.init_state
        self._digest_index = digest_index

    @classmethod
    def from_message(cls, message: bytes, field: F = None) -> "DynamicSha256[F]":
        if field is None:
            field = get_field()
        padded, _ = pad(to_bits(message, field), BLOCK_BITS, field)
        return cls(padded, field=field)

    @property
    def digest_index(self) -> int:
        return self._digest_index

    @property
    def total_blocks(self) -> int:
        return len(self._blocks)

    @property
    def finished(self) -> bool:
        return self._digest_index == len(self._blocks)

    @property
    def state(self) -> Digest:
        return Digest(self._state)

    def step(self) -> Digest:
        """Compress the next block and return the updated state."""
        if self.finished:
            raise ConfigurationError(
                f"All {len(self._blocks)} blocks have already been processed.")
        logger.debug("dynamic sha256: block %d/%d", self._digest_index + 1, len(self._blocks))
        self._state = sha_round(self._blocks[self._digest_index], self._state, self.field)
        self._digest_index += 1
        return Digest(self._state)

    def hash(self) -> Digest:
        """Process every remaining block and return the final digest."""
        while not self.finished:
            self.step()
        return Digest(self._state)

    def checkpoint(self):
        """Return ``(digest_index, state)`` for resuming in a new instance."""
        return self._digest_index, Digest(self._state)
