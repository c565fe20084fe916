"""params.py: Expands each mnemonic's operands into the rotate amount and mask
bits the underlying rlwinm, rlwimi or rlwnm instruction actually encodes."""
from typing import NamedTuple, Optional
from .mnemonics import Mnemonic
from .errors import InvalidOperand, MaskOutOfRange

WORD_BITS = 32


class CanonicalParameters(NamedTuple):
    """Rotate amount and inclusive mask range, bit 0 being the most
    significant. shift_register is set instead of a literal shift for
    rlwnm and rotlw."""
    shift: int
    mask_start: int
    mask_end: int
    shift_register: Optional[str] = None


def derive(mnemonic: Mnemonic, operands: list) -> CanonicalParameters:
    """Takes the typed operands that follow the two registers and returns the
    canonical parameters for the mnemonic."""
    params = _FORMULAS[mnemonic](*operands)
    if not (0 <= params.mask_start < WORD_BITS and 0 <= params.mask_end < WORD_BITS):
        raise MaskOutOfRange(f"Mask bits {params.mask_start}-{params.mask_end} "
                             f"must be between 0 and {WORD_BITS - 1}")
    if params.shift_register is None:
        params = params._replace(shift=_shift(mnemonic, params.shift))
    return params


def _shift(mnemonic: Mnemonic, shift: int) -> int:
    """Checks the derived rotate amount. A rotate by 32 from the simplified
    mnemonics is the same as no rotate at all."""
    if mnemonic in (Mnemonic.RLWINM, Mnemonic.RLWIMI):
        limit = WORD_BITS - 1
    else:
        limit = WORD_BITS
    if not 0 <= shift <= limit:
        raise InvalidOperand(f"Shift amount {shift} must be between 0 and {limit}")
    return shift % WORD_BITS


def _direct(n: int, mb: int, me: int) -> CanonicalParameters:
    return CanonicalParameters(n, mb, me)


def _rlwnm(rb: str, mb: int, me: int) -> CanonicalParameters:
    return CanonicalParameters(0, mb, me, rb)


def _rotlw(rb: str) -> CanonicalParameters:
    return CanonicalParameters(0, 0, 31, rb)


# n: bit count, b: bit position, as in the simplified mnemonic operands
_FORMULAS = {
    Mnemonic.RLWINM: _direct,
    Mnemonic.RLWIMI: _direct,
    Mnemonic.RLWNM: _rlwnm,
    Mnemonic.ROTLWI: lambda n: CanonicalParameters(n, 0, 31),
    Mnemonic.ROTRWI: lambda n: CanonicalParameters(32 - n, 0, 31),
    Mnemonic.SLWI: lambda n: CanonicalParameters(n, 0, 31 - n),
    Mnemonic.SRWI: lambda n: CanonicalParameters(32 - n, n, 31),
    Mnemonic.CLRLWI: lambda n: CanonicalParameters(0, n, 31),
    Mnemonic.CLRRWI: lambda n: CanonicalParameters(0, 0, 31 - n),
    Mnemonic.EXTLWI: lambda n, b: CanonicalParameters(b, 0, n - 1),
    Mnemonic.EXTRWI: lambda n, b: CanonicalParameters(b + n, 32 - n, 31),
    Mnemonic.CLRLSLWI: lambda n, b: CanonicalParameters(b, n - b, 31 - b),
    Mnemonic.INSLWI: lambda n, b: CanonicalParameters(32 - b, b, b + n - 1),
    Mnemonic.INSRWI: lambda n, b: CanonicalParameters(32 - (b + n), b, b + n - 1),
    Mnemonic.ROTLW: _rotlw,
    }
