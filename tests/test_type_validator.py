import unittest

from rlwdecode.errors import InvalidOperand, InvalidRegister
from rlwdecode.mnemonics import Mnemonic
from rlwdecode.type_validator import is_register, validate


class RegisterTests(unittest.TestCase):
    def test_valid_registers(self):
        for n in range(32):
            self.assertTrue(is_register(f"r{n}"), f"r{n}")

    def test_invalid_registers(self):
        for name in ["r32", "r", "rA", "r0x", "r01", "r09", "R3", "r+5", "x3", "r100", ""]:
            self.assertFalse(is_register(name), name)


class ValidateTests(unittest.TestCase):
    def test_rlwinm(self):
        self.assertEqual(validate(Mnemonic.RLWINM, ["r3", "r4", "2", "0", "29"]),
                         ["r3", "r4", 2, 0, 29])

    def test_plus_sign_operand(self):
        self.assertEqual(validate(Mnemonic.RLWINM, ["r3", "r4", "+2", "0", "+29"]),
                         ["r3", "r4", 2, 0, 29])

    def test_hex_rejected(self):
        for operand in ["0x2", "0x1D", "0X1"]:
            with self.assertRaises(InvalidOperand):
                validate(Mnemonic.SLWI, ["r3", "r4", operand])

    def test_rlwnm_shift_is_register(self):
        self.assertEqual(validate(Mnemonic.RLWNM, ["r3", "r4", "r5", "0", "31"]),
                         ["r3", "r4", "r5", 0, 31])
        with self.assertRaises(InvalidRegister):
            validate(Mnemonic.RLWNM, ["r3", "r4", "5", "0", "31"])
        with self.assertRaises(InvalidRegister):
            validate(Mnemonic.ROTLW, ["r3", "r4", "r32"])

    def test_bad_registers(self):
        with self.assertRaises(InvalidRegister):
            validate(Mnemonic.SLWI, ["r3", "rA", "2"])
        with self.assertRaises(InvalidRegister):
            validate(Mnemonic.SLWI, ["r32", "r4", "2"])

    def test_bad_integers(self):
        for operand in ["a", "-1", "", "2.0", "++2", "+", "0x"]:
            with self.assertRaises(InvalidOperand):
                validate(Mnemonic.SLWI, ["r3", "r4", operand])

    def test_operand_count(self):
        with self.assertRaises(InvalidOperand):
            validate(Mnemonic.SLWI, ["r3", "r4"])


if __name__ == "__main__":
    unittest.main()
