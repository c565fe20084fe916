"""line.py: Splits an instruction string into its operand fields."""
import re
from .mnemonics import MnemonicInfo, FLAG_SUFFIX


def split_fields(instruction: str) -> list[str]:
    """Splits the instruction on commas. The first field still holds the
    mnemonic along with the destination register."""
    return instruction.split(',')


def operands(fields: list[str], info: MnemonicInfo) -> list[str]:
    """Removes the mnemonic and the flag suffix from the first field, and all
    whitespace from every field, leaving only the operands."""
    first = fields[0].replace(info.name, '').replace(FLAG_SUFFIX, '')
    return [_strip_whitespace(field) for field in [first] + fields[1:]]


def _strip_whitespace(field: str) -> str:
    return re.sub(r'\s+', '', field)
