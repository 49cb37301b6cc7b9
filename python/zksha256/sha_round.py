from zksha256.constants import round_constants
from zksha256.errors import InvariantViolation
from zksha256.helpers import add32, and_, block_words, not_, rotate_right, shift_right, xors
from zksha256.types import Array, Word32, check_bits


def sigma0(x: Word32) -> Word32:
    return xors(rotate_right(x, 7), rotate_right(x, 18), shift_right(x, 3))


def sigma1(x: Word32) -> Word32:
    return xors(rotate_right(x, 17), rotate_right(x, 19), shift_right(x, 10))


def extend(w: Array[Word32, 64], i: int) -> Word32:
    return add32(sigma1(w[i-2]), w[i-7], sigma0(w[i-15]), w[i-16])


def temp1(e: Word32, f: Word32, g: Word32, h: Word32, k: Word32, w: Word32) -> Word32:
    # ch := (e and f) xor ((not e) and g)
    ch = xors(and_(e, f), and_(not_(e), g))

    # S1 := (e rightrotate 6) xor (e rightrotate 11) xor (e rightrotate 25)
    S1 = xors(rotate_right(e, 6), rotate_right(e, 11), rotate_right(e, 25))

    return add32(h, S1, ch, k, w)


def temp2(a: Word32, b: Word32, c: Word32) -> Word32:
    # maj := (a and b) xor (a and c) xor (b and c)
    maj = xors(and_(a, b), and_(a, c), and_(b, c))

    # S0 := (a rightrotate 2) xor (a rightrotate 13) xor (a rightrotate 22)
    S0 = xors(rotate_right(a, 2), rotate_right(a, 13), rotate_right(a, 22))

    return add32(S0, maj)


def message_schedule(block) -> list:
    """Expand one block (16 words, or 512 bits) into the 64-word schedule."""
    if len(block) == 16:
        words = [Word32(word) for word in block]
        for word in words:
            check_bits(word)
    else:
        words = block_words(block)
    w = words + [None] * 48
    for i in range(16, 64):
        w[i] = extend(w, i)
    return w


def sha_round(block, current: Array[Word32, 8], field=None) -> tuple:
    """Run the SHA256 compression function over one block.

    ``current`` is the 8-word chaining state. The returned state is a new
    tuple; neither input is modified.
    """
    if len(current) != 8:
        raise InvariantViolation(f"State must have 8 words, got {len(current)}.")
    for word in current:
        check_bits(word)
    if field is None:
        field = type(current[0][0])
    k = round_constants(field)
    w = message_schedule(block)

    a, b, c, d, e, f, g, h = current

    for i in range(0, 64):
        t1 = temp1(e, f, g, h, k[i], w[i])
        t2 = temp2(a, b, c)

        h = g
        g = f
        f = e
        e = add32(d, t1)
        d = c
        c = b
        b = a
        a = add32(t1, t2)

    return tuple(add32(old, new) for old, new in zip(current, (a, b, c, d, e, f, g, h)))
