#!/usr/bin/env python3
"""rlwinm-decoder.py: Explains PowerPC rotate-and-mask instructions (rlwinm,
   rlwimi, rlwnm and their simplified mnemonics) as C-like statements"""

import sys, getopt
from rlwdecode import decoder
import rlwdecode.logger as logger

USAGE_TEXT = """\
Usage: rlwinm-decoder.py [options] [instruction]

[instruction]  A rotate-and-mask instruction, e.g. "rlwinm r3, r4, 2, 0, 29".
               If omitted, instructions are read interactively.
-i             A text file with one instruction per line to decode.
-h, --help     Displays this usage text.
--silent       Suppress log output; only decode results are printed.
--debug        Log the reason an instruction could not be decoded.
"""


def main(argv):
    input_file = None
    silent = False
    debug = False
    try:
        opts, args = getopt.getopt(argv[1:],'i:h',['help','silent','debug'])
    except getopt.GetoptError:
        print(USAGE_TEXT)
        sys.exit(2)
    for opt, arg in opts:
        if opt in ('-h', '--help'):
            print(USAGE_TEXT)
            sys.exit()
        elif opt == '-i': input_file = arg
        elif opt == '--silent': silent = True
        elif opt == '--debug': debug = True
        else:
            print(USAGE_TEXT)
            sys.exit(2)
    if input_file and args:
        print(USAGE_TEXT)
        sys.exit(2)
    logger.silent_log = silent
    logger.debug_log = debug

    if input_file:
        try:
            results = decoder.decode_file(input_file)
        except OSError as e:
            if debug: raise
            logger.error(f"Couldn't read input file: {e}")
            sys.exit(1)
        for line_number, instruction, result in results:
            if result is not None:
                print(f"{instruction}\n{result}")
        sys.exit()

    if args:
        result = decoder.decode(' '.join(args))
        if result is None:
            logger.error("Unable to decode instruction")
            sys.exit(10)
        print(result, end='')
        sys.exit()

    while True:
        try:
            instruction = input("Instruction: ")
        except EOFError:
            break
        if not instruction.strip():
            break
        result = decoder.decode(instruction)
        if result is None:
            logger.error("Unable to decode instruction")
        else:
            print(result)
    sys.exit()




if __name__ == "__main__":
    main(sys.argv)
