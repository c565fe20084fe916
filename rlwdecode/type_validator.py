"""type_validator.py: Validates the operands of an instruction to ensure they
are the expected types for that mnemonic, and returns them as typed objects."""
import re
from typing import Callable
from .mnemonics import Mnemonic
from .errors import InvalidRegister, InvalidOperand

REGISTER_COUNT = 32
_DECIMAL = re.compile(r'[0-9]+')
_UNSIGNED = re.compile(r'\+?[0-9]+')


def validate(mnemonic: Mnemonic, operands: list[str]) -> list:
    """Validates the operands of a given mnemonic and returns them as typed
    operands."""
    validators = _MNEMONICS[mnemonic]
    if len(operands) != len(validators):
        raise InvalidOperand(f"Expected {len(validators)} operands but received {len(operands)}")
    return [val(operand) for val, operand in zip(validators, operands)]


def is_register(untyped: str) -> bool:
    """A general-purpose register name, r0 through r31. Leading zeros such as
    r01 are not accepted."""
    if len(untyped) < 2 or len(untyped) > 3 or untyped[0] != 'r':
        return False
    if 'r0' in untyped and len(untyped) > 2:
        return False
    if not _DECIMAL.fullmatch(untyped[1:]):
        return False
    return int(untyped[1:]) < REGISTER_COUNT


def _register(untyped: str) -> str:
    if not is_register(untyped):
        raise InvalidRegister(f"'{untyped}' is not a valid register")
    return untyped


def _integer(untyped: str) -> int:
    """An unsigned decimal integer, optionally with a leading +."""
    if _UNSIGNED.fullmatch(untyped):
        return int(untyped)
    raise InvalidOperand(f"'{untyped}' is not an unsigned integer")


_MNEMONICS: dict[Mnemonic, list[Callable]] = {
    Mnemonic.RLWINM: [_register, _register, _integer, _integer, _integer],
    Mnemonic.EXTLWI: [_register, _register, _integer, _integer],
    Mnemonic.EXTRWI: [_register, _register, _integer, _integer],
    Mnemonic.ROTLWI: [_register, _register, _integer],
    Mnemonic.ROTRWI: [_register, _register, _integer],
    Mnemonic.SLWI: [_register, _register, _integer],
    Mnemonic.SRWI: [_register, _register, _integer],
    Mnemonic.CLRLWI: [_register, _register, _integer],
    Mnemonic.CLRRWI: [_register, _register, _integer],
    Mnemonic.CLRLSLWI: [_register, _register, _integer, _integer],
    Mnemonic.RLWIMI: [_register, _register, _integer, _integer, _integer],
    Mnemonic.INSLWI: [_register, _register, _integer, _integer],
    Mnemonic.INSRWI: [_register, _register, _integer, _integer],
    Mnemonic.RLWNM: [_register, _register, _register, _integer, _integer],
    Mnemonic.ROTLW: [_register, _register, _register],
    }
