"""Contains custom data classes that are passed between decoding stages."""

from dataclasses import dataclass
from .mnemonics import Family, MnemonicInfo
from .params import CanonicalParameters


@dataclass(frozen=True)
class DecodedInstruction:
    """A fully validated instruction, reduced to the canonical parameters of
    the rlwinm, rlwimi or rlwnm instruction it stands for."""
    info: MnemonicInfo
    dest: str
    source: str
    params: CanonicalParameters
    bitmask: int
    sets_flags: bool = False

    @property
    def family(self) -> Family:
        return self.info.family

    @property
    def shift(self) -> int:
        return self.params.shift
