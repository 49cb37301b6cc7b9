import logging
import os
from typing import TypeVar, Generic, Any

from mpyc import finfields

from zksha256.errors import ConfigurationError, FormatError

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Any)
N = TypeVar('N')
F = TypeVar('F')

FIELD_ENV_VAR = "ZKSHA256_FIELD"

bn256_scalar_field_modulus = 21888242871839275222246405745257275088548364400416034343698204186575808495617
bls12_381_scalar_field_modulus = 52435875175126190479447740508185965837690552500527637822603658699938581184513
curve25519_scalar_field_modulus = 7237005577332262213973186563042994240857116359379907606001950938285454250989
pasta_base_field_modulus = 0x40000000000000000000000000000000224698fc094cf91b992d30ed00000001

SUPPORTED_FIELDS = {
    "bn256": bn256_scalar_field_modulus,
    "bls12_381": bls12_381_scalar_field_modulus,
    "curve25519": curve25519_scalar_field_modulus,
    "pasta": pasta_base_field_modulus,
}

field = None
_fields = {}


def field_for(value):
    """Return the prime field for a curve name or modulus, creating it once."""
    if value is None:
        value = "bls12_381"
    if isinstance(value, str):
        if value.isdigit():
            value = int(value)
        elif value in SUPPORTED_FIELDS:
            value = SUPPORTED_FIELDS[value]
        else:
            raise ConfigurationError(
                "The only supported scalar fields are those of the following curves: "
                + ", ".join(SUPPORTED_FIELDS) + ".")
    if value not in SUPPORTED_FIELDS.values():
        raise ConfigurationError(f"Unsupported field modulus {value}.")
    if value not in _fields:
        _fields[value] = finfields.GF(value)
    return _fields[value]


def set_modulus(value=None):
    """Set the process-wide default field and return it."""
    global field
    field = field_for(value)
    logger.debug("default field set to GF(%d)", field.modulus)
    return field


def get_field():
    if field is None:
        return set_modulus(os.environ.get(FIELD_ENV_VAR))
    return field


def bit_value(bit) -> int:
    """Read a field bit back as the integer 0 or 1."""
    kind = type(bit)
    if bit == kind(0):
        return 0
    if bit == kind(1):
        return 1
    raise FormatError(f"{bit!r} is not a binary field element.")


def check_bits(bits) -> None:
    """Raise FormatError unless every element is the field's zero or one."""
    for bit in bits:
        bit_value(bit)


def int_to_bits(n: int, width: int = 32, field=None) -> list:
    if field is None:
        field = get_field()
    zero, one = field(0), field(1)
    return [one if (n >> (width - 1 - i)) & 1 else zero for i in range(width)]


def int_from_bits(bits) -> int:
    result = 0
    for bit in bits:
        result = (result << 1) | bit_value(bit)
    return result


class Array(Generic[T, N]):
    pass


class Word32(tuple):
    """A 32-bit register as 32 field bits, most significant bit first."""

    width = 32

    def __new__(cls, bits):
        bits = tuple(bits)
        if len(bits) != cls.width:
            raise FormatError(f"A word holds {cls.width} bits, got {len(bits)}.")
        return super().__new__(cls, bits)

    @classmethod
    def from_int(cls, n: int, field=None) -> "Word32":
        return cls(int_to_bits(n, cls.width, field))

    def to_int(self) -> int:
        return int_from_bits(self)

    def __repr__(self):
        try:
            return f"Word32(0x{self.to_int():08x})"
        except FormatError:
            return f"Word32({tuple(self)!r})"


class Digest(tuple):
    """The eight output registers of SHA256."""

    size = 8

    def __new__(cls, words):
        words = tuple(w if isinstance(w, Word32) else Word32(w) for w in words)
        if len(words) != cls.size:
            raise FormatError(f"A digest holds {cls.size} words, got {len(words)}.")
        return super().__new__(cls, words)

    def words(self) -> list[int]:
        return [w.to_int() for w in self]

    def to_bytes(self) -> bytes:
        return b"".join(w.to_bytes(4, "big") for w in self.words())

    def hex(self) -> str:
        return self.to_bytes().hex()

    def __repr__(self):
        return f"Digest({self.hex()})"
