from dataclasses import dataclass


@dataclass
class DecodeError(Exception):
    """Raised when an instruction can't be decoded."""
    message: str


class UnknownMnemonic(DecodeError):
    """Raised when no mnemonic matches the first field and field count."""
    pass


class InvalidRegister(DecodeError):
    """Raised when a register operand isn't a valid GPR name."""
    pass


class InvalidOperand(DecodeError):
    """Raised when a numeric operand is malformed or out of range."""
    pass


class MaskOutOfRange(DecodeError):
    """Raised when a derived mask bit falls outside 0-31."""
    pass
