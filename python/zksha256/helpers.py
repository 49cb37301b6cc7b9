import binascii
from typing import Any, List

from zksha256.errors import ConfigurationError, FormatError, InvariantViolation
from zksha256.types import Word32, check_bits, get_field, int_from_bits, int_to_bits

BLOCK_BITS = 512
LENGTH_BITS = 64

# Byte and hex conversions. Bits are big-endian field elements.

def to_bits(data: bytes, field=None) -> List[Any]:
    """Expand bytes into field bits, most significant bit of each byte first."""
    if field is None:
        field = get_field()
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise FormatError(f"Expected bytes, got {type(data).__name__}.")
    zero, one = field(0), field(1)
    return [one if (byte >> i) & 1 else zero for byte in bytes(data) for i in range(7, -1, -1)]


def bits_to_bytes(bits) -> bytes:
    if len(bits) % 8:
        raise FormatError(f"Bit length {len(bits)} is not a whole number of bytes.")
    return bytes(int_from_bits(bits[i:i + 8]) for i in range(0, len(bits), 8))


def hex_to_bits(hex_str: str, field=None) -> List[Any]:
    """Decode a hex string into field bits; odd length or non-hex input is rejected."""
    try:
        data = binascii.unhexlify(hex_str)
    except (binascii.Error, TypeError, ValueError) as exc:
        raise FormatError(f"Invalid hex: {hex_str!r}") from exc
    return to_bits(data, field)


def bits_to_hex(bits) -> str:
    return bits_to_bytes(bits).hex()

# Padding

def pad(bits, block_bits: int = BLOCK_BITS, field=None):
    """Pad a bit message the SHA256 way.

    Appends a single 1 bit, the fewest 0 bits that leave the length congruent
    to ``block_bits - 64`` modulo ``block_bits``, and the original bit length
    as a 64-bit big-endian integer.

    Returns ``(padded_bits, original_bit_length)``.
    """
    if block_bits <= LENGTH_BITS or block_bits % 8:
        raise ConfigurationError(f"Unusable block size {block_bits}.")
    if field is None:
        field = get_field()

    padded = list(bits)
    bit_length = len(padded)
    padded.append(field(1))
    zeros = (block_bits - LENGTH_BITS - len(padded)) % block_bits
    padded.extend(field(0) for _ in range(zeros))
    padded.extend(int_to_bits(bit_length, LENGTH_BITS, field))

    if len(padded) % block_bits:
        raise InvariantViolation("Padding did not complete properly!")
    return padded, bit_length


def split_blocks(padded_bits, block_bits: int = BLOCK_BITS) -> List[List[Any]]:
    if len(padded_bits) == 0 or len(padded_bits) % block_bits:
        raise InvariantViolation(
            f"Input must be padded to {block_bits}-bit blocks, got {len(padded_bits)} bits.")
    check_bits(padded_bits)
    return [list(padded_bits[i:i + block_bits]) for i in range(0, len(padded_bits), block_bits)]


def block_words(block) -> List[Word32]:
    """Cut a 512-bit block into its 16 message words."""
    if len(block) != BLOCK_BITS:
        raise InvariantViolation(f"Chunk must be {BLOCK_BITS} bits, got {len(block)}.")
    check_bits(block)
    return [Word32(block[i:i + 32]) for i in range(0, BLOCK_BITS, 32)]

# Bitwise logic expressed with field operations only.

def and_(a: Word32, b: Word32) -> Word32:
    return Word32(x * y for x, y in zip(a, b))


def or_(a: Word32, b: Word32) -> Word32:
    return Word32(x + y - x * y for x, y in zip(a, b))


def xor(a: Word32, b: Word32) -> Word32:
    out = []
    for x, y in zip(a, b):
        xy = x * y
        out.append(x + y - xy - xy)
    return Word32(out)


def not_(a: Word32) -> Word32:
    return Word32(type(x)(1) - x for x in a)


def xors(*words: Word32) -> Word32:
    out = words[0]
    for w in words[1:]:
        out = xor(out, w)
    return out


def rotate_right(word: Word32, n: int) -> Word32:
    if n < 0:
        raise FormatError(f"Rotation amount must be non-negative, got {n}.")
    n %= Word32.width
    if n == 0:
        return Word32(word)
    return Word32(word[-n:] + word[:-n])


def shift_right(word: Word32, n: int) -> Word32:
    if n < 0:
        raise FormatError(f"Shift amount must be non-negative, got {n}.")
    zero = type(word[0])(0)
    n = min(n, Word32.width)
    return Word32((zero,) * n + tuple(word[:Word32.width - n]))


def _add_pair(a: Word32, b: Word32) -> Word32:
    result = [None] * Word32.width
    carry = type(a[0])(0)
    for i in range(Word32.width - 1, -1, -1):
        x, y = a[i], b[i]
        xy = x * y
        half = x + y - xy - xy
        hc = half * carry
        result[i] = half + carry - hc - hc
        # the two carry terms are never both 1, so their sum is their OR
        carry = xy + hc
    return Word32(result)


def add32(*words: Word32) -> Word32:
    """Add words modulo 2^32 with a ripple-carry adder over field bits."""
    if len(words) < 2:
        raise FormatError("add32 needs at least two operands.")
    total = words[0]
    for w in words[1:]:
        total = _add_pair(total, w)
    return total
