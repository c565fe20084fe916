"""decoder.py: Decodes rotate-and-mask instructions into an explanation of
what they do."""
from pathlib import Path
from typing import Iterable, Optional
from . import logger
from . import line
from . import mnemonics
from . import params
from .datatypes import DecodedInstruction
from .errors import DecodeError
from .ppc_opcodes import generate_bitmask
from .render import render
from .type_validator import validate

COMMENT = '#'


def parse(instruction: str) -> DecodedInstruction:
    """Validates an instruction string and reduces it to its canonical
    parameters. Raises a DecodeError if anything about it is invalid."""
    fields = line.split_fields(instruction)
    info = mnemonics.classify(fields[0], len(fields))
    dest, source, *operands = validate(info.mnemonic, line.operands(fields, info))
    canonical = params.derive(info.mnemonic, operands)
    return DecodedInstruction(
        info=info,
        dest=dest,
        source=source,
        params=canonical,
        bitmask=generate_bitmask(canonical.mask_start, canonical.mask_end),
        sets_flags=mnemonics.sets_flags(fields[0]),
        )


def decode(instruction: str) -> Optional[str]:
    """Returns an explanation of the instruction, or None if it can't be
    decoded."""
    try:
        decoded = parse(instruction)
    except DecodeError as e:
        logger.debug(f"Couldn't decode '{instruction.strip()}': {e.message}")
        return None
    return render(decoded)


def decode_lines(lines: Iterable[str]) -> list[tuple[int, str, Optional[str]]]:
    """Decodes one instruction per line, skipping blank lines and comments.
    Returns the line number, instruction, and explanation of each."""
    results = []
    for line_number, text in enumerate(lines):
        instruction = text.split(COMMENT)[0].strip()
        if not instruction:
            continue
        result = decode(instruction)
        if result is None:
            logger.error(f"Unable to decode instruction: {instruction}", line_number)
        results.append((line_number, instruction, result))
    return results


def decode_file(path: Path) -> list[tuple[int, str, Optional[str]]]:
    """Decodes every instruction in a text file."""
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        lines = f.read().splitlines()
    logger.push_file(path)
    try:
        return decode_lines(lines)
    finally:
        logger.pop_file()
