class Sha256Error(Exception):
    """Base class for every error raised by zksha256."""


class FormatError(Sha256Error, ValueError):
    """Malformed hex, byte or bit input, or a word of the wrong width."""


class InvariantViolation(Sha256Error, RuntimeError):
    """A padded message or block is not aligned to the block size.

    Padding always produces aligned output, so seeing this means the bits were
    built or sliced incorrectly somewhere upstream.
    """


class ConfigurationError(Sha256Error, ValueError):
    """Bad engine parameters: digest index out of range, unknown field, etc."""
