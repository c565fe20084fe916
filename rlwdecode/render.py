"""render.py: Explains a decoded instruction as equivalent C-like
statements."""
from .datatypes import DecodedInstruction
from .mnemonics import Family
from .ppc_opcodes import WORD_MASK, complement

ALTERNATES = "Could also be:"
FLAGS_NOTE = "Also sets EQ (= 0), GT (> 0), LT (< 0), and SO flags"


def render(decoded: DecodedInstruction) -> str:
    """Returns the explanation text, one statement or note per line."""
    lines = _RENDERERS[decoded.family](decoded)
    if decoded.sets_flags:
        lines.append(FLAGS_NOTE)
    return ''.join(line + '\n' for line in lines)


def _hex(value: int) -> str:
    return f"0x{value:X}"


def _rlwinm(decoded: DecodedInstruction) -> list[str]:
    """Rotate and AND with mask. Plain masks, shifts, and power of two
    multiplies and divides all end up as rlwinm."""
    d, s, sh, m = decoded.dest, decoded.source, decoded.shift, decoded.bitmask
    if d == s and sh == 0:
        lines = [f"{d} &= {_hex(m)};",
                 ALTERNATES,
                 f"{d} &= ~{_hex(complement(m))};"]
    elif sh == 0:
        lines = [f"{d} = {s} & {_hex(m)};",
                 ALTERNATES,
                 f"{d} = {s} & ~{_hex(complement(m))};"]
    # n*2^m gets compiled to a rotate that clears the bits rotated in at the bottom
    elif m == complement((1 << sh) - 1):
        lines = [f"{d} = {s} << {sh};",
                 ALTERNATES,
                 f"{d} = {s}*{1 << sh};"]
    # Same for division, with the bits rotated in at the top cleared
    elif m == complement((((1 << (32 - sh)) - 1) << sh) & WORD_MASK):
        lines = [f"{d} = {s} >> {32 - sh};",
                 ALTERNATES,
                 f"{d} = {s}/{1 << (32 - sh)};"]
    else:
        lines = [f"{d} = ({s} << {sh}) & {_hex(m)};",
                 ALTERNATES,
                 f"{d} = ({s} << {sh}) & ~{_hex(complement(m))};",
                 f"{d} = ({s} >> {32 - sh}) & {_hex(m)};",
                 # (a & 0xFF) << 4 is emitted as (a << 4) & 0xFF0
                 f"{d} = ({s} & {_hex(m >> sh)}) << {sh};"]
    lines.append(_bits_accessed(decoded))
    return lines


def _rlwimi(decoded: DecodedInstruction) -> list[str]:
    """Rotate and insert the masked bits into the destination."""
    d, s, sh, m = decoded.dest, decoded.source, decoded.shift, decoded.bitmask
    if d == s and sh == 0:
        return [f"{d} = {d};"]
    if sh == 0:
        return [f"{d} = ({s} & {_hex(m)}) | ({d} & {_hex(complement(m))});",
                ALTERNATES,
                f"{d} = ({s} & ~{_hex(complement(m))}) | ({d} & ~{_hex(m)});"]
    return [f"{d} = (({s} << {sh}) & {_hex(m)}) | ({d} & {_hex(complement(m))});",
            ALTERNATES,
            f"{d} = (({s} << {sh}) & ~{_hex(complement(m))}) | ({d} & ~{_hex(m)});"]


def _rlwnm(decoded: DecodedInstruction) -> list[str]:
    """Rotate by a register and AND with mask."""
    d, s, rb, m = decoded.dest, decoded.source, decoded.params.shift_register, decoded.bitmask
    return [f"{d} = ({s} << {rb}) & {_hex(m)};",
            ALTERNATES,
            f"{d} = ({s} << {rb}) & ~{_hex(complement(m))};",
            _bits_accessed(decoded)]


def bit_range(decoded: DecodedInstruction) -> tuple[int, int]:
    """Which bits of the source the mask picks out, counting from the least
    significant bit."""
    params = decoded.params
    start_bit = _normalize(31 - params.mask_end - params.shift)
    end_bit = _normalize(31 - params.mask_start - params.shift)
    return start_bit, end_bit


def _normalize(bit: int) -> int:
    if bit < 0:
        bit += 32
    # mod 31 rather than 32, matching existing output
    if bit > 31:
        bit %= 31
    return bit


def _bits_accessed(decoded: DecodedInstruction) -> str:
    start_bit, end_bit = bit_range(decoded)
    if abs(end_bit - start_bit) + 1 > 1:
        return f"Other info: accesses bits {start_bit}-{end_bit}"
    return f"Other info: accesses bit {start_bit}"


_RENDERERS = {
    Family.RLWINM: _rlwinm,
    Family.RLWIMI: _rlwimi,
    Family.RLWNM: _rlwnm,
    }
