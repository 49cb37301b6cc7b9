from __future__ import annotations

import os
from zksha256.__about__ import __author__, __version__
from zksha256.errors import Sha256Error, FormatError, InvariantViolation, ConfigurationError
from zksha256.types import FIELD_ENV_VAR, Word32, Digest, set_modulus, get_field
from zksha256.helpers import (
    to_bits, bits_to_bytes, hex_to_bits, bits_to_hex, pad,
    and_, or_, xor, not_, rotate_right, shift_right, add32,
)
from zksha256.constants import initial_state, round_constants
from zksha256.sha_round import sha_round
from zksha256.native import NativeSha256
from zksha256.dynamic import DynamicSha256

# Default field for every engine, overridable per call with field=
set_modulus(os.environ.get(FIELD_ENV_VAR))

__all__ = [
    "__version__",
    "__author__",
    "Sha256Error",
    "FormatError",
    "InvariantViolation",
    "ConfigurationError",
    "Word32",
    "Digest",
    "set_modulus",
    "get_field",
    "to_bits",
    "bits_to_bytes",
    "hex_to_bits",
    "bits_to_hex",
    "pad",
    "and_",
    "or_",
    "xor",
    "not_",
    "rotate_right",
    "shift_right",
    "add32",
    "initial_state",
    "round_constants",
    "sha_round",
    "NativeSha256",
    "DynamicSha256",
]
