"""ppc_opcodes.py: Python implementations of the PPC rotate-and-mask opcodes
being decoded, over 32-bit register values."""

WORD_MASK = 0xffffffff

def generate_bitmask(mb: int, me: int) -> int:
    """Sets bits mb through me, where bit 0 is the most significant. If mb is
    past me, the mask wraps around from bit 31 back to bit 0."""
    if not 0 <= mb < 32 or not 0 <= me < 32:
        raise ValueError("Argument values must be between 0 and 31.")
    x = WORD_MASK >> mb
    y = (WORD_MASK << 31 - me) & WORD_MASK  # The & truncates to 32-bit
    if mb <= me: return x & y
    else: return x | y

def complement(value: int) -> int:
    """Bitwise NOT within 32 bits."""
    return ~value & WORD_MASK

def rotl(rx: int, sh: int) -> int:
    if not 0 <= sh < 32:
        raise ValueError("Shift amount must be between 0 and 31.")
    return ((rx << sh) & WORD_MASK) | (rx >> ((32 - sh) & 31))

def rlwinm(rs: int, sh: int, mb: int, me: int) -> int:
    return rotl(rs, sh) & generate_bitmask(mb, me)

def rlwimi(ra: int, rs: int, sh: int, mb: int, me: int) -> int:
    m = generate_bitmask(mb, me)
    r = rotl(rs, sh)
    return (r & m) | (ra & complement(m))

def rlwnm(rs: int, rb: int, mb: int, me: int) -> int:
    """Only the low 5 bits of rb are used as the rotate amount."""
    return rotl(rs, rb & 31) & generate_bitmask(mb, me)
