import unittest
import sys
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from config.config import NOTATION_CONFIG
from notation import (
    BracketMismatchError,
    InvalidTokenError,
    convert,
    infix_to_postfix,
    operator_priority,
    validate_infix,
)


class TestOperatorPriority(unittest.TestCase):
    def test_multiplicative_operators_bind_tighter(self):
        self.assertEqual(operator_priority('*'), 2)
        self.assertEqual(operator_priority('/'), 2)
        self.assertEqual(operator_priority('+'), 1)
        self.assertEqual(operator_priority('-'), 1)

    def test_brackets_and_unknown_characters_are_lowest(self):
        self.assertEqual(operator_priority('('), -1)
        self.assertEqual(operator_priority(')'), -1)
        self.assertEqual(operator_priority('a'), -1)


class TestInfixToPostfix(unittest.TestCase):
    def test_empty_infix_gives_empty_postfix(self):
        self.assertEqual(infix_to_postfix(""), "")

    def test_single_operators(self):
        self.assertEqual(infix_to_postfix("13+5"), "13 5 +")
        self.assertEqual(infix_to_postfix("13-5"), "13 5 -")
        self.assertEqual(infix_to_postfix("13/5"), "13 5 /")
        self.assertEqual(infix_to_postfix("13*5"), "13 5 *")

    def test_single_number(self):
        self.assertEqual(infix_to_postfix("42"), "42")

    def test_multiplication_before_addition_and_subtraction(self):
        self.assertEqual(infix_to_postfix("13+5*2"), "13 5 2 * +")
        self.assertEqual(infix_to_postfix("13-5*2"), "13 5 2 * -")
        self.assertEqual(infix_to_postfix("2*3+4"), "2 3 * 4 +")

    def test_division_before_addition_and_subtraction(self):
        self.assertEqual(infix_to_postfix("13+5/2"), "13 5 2 / +")
        self.assertEqual(infix_to_postfix("13-5/2"), "13 5 2 / -")

    def test_equal_precedence_is_left_associative(self):
        self.assertEqual(infix_to_postfix("13-5-2"), "13 5 - 2 -")
        self.assertEqual(infix_to_postfix("8/4/2"), "8 4 / 2 /")

    def test_brackets_change_priority(self):
        self.assertEqual(infix_to_postfix("(13+5)*2"), "13 5 + 2 *")
        self.assertEqual(infix_to_postfix("2*(3+4)"), "2 3 4 + *")
        self.assertEqual(infix_to_postfix("1+(2*3)-4"), "1 2 3 * + 4 -")

    def test_nested_brackets(self):
        self.assertEqual(infix_to_postfix("((1+2))"), "1 2 +")
        self.assertEqual(infix_to_postfix("(1+(2-3))*4"), "1 2 3 - + 4 *")

    def test_convert_is_the_same_function(self):
        self.assertIs(convert, infix_to_postfix)


class TestBracketMismatch(unittest.TestCase):
    def test_missing_open_bracket(self):
        with self.assertRaises(BracketMismatchError) as ctx:
            infix_to_postfix("13+5)*2")
        self.assertEqual(ctx.exception.bracket, ')')
        self.assertEqual(ctx.exception.position, 4)

    def test_missing_close_bracket(self):
        with self.assertRaises(BracketMismatchError) as ctx:
            infix_to_postfix("(13+5*2")
        self.assertEqual(ctx.exception.bracket, '(')
        self.assertEqual(ctx.exception.position, 0)

    def test_reversed_brackets(self):
        with self.assertRaises(BracketMismatchError):
            infix_to_postfix(")(")

    def test_lonely_open_bracket(self):
        with self.assertRaises(BracketMismatchError):
            infix_to_postfix("(")

    def test_message(self):
        with self.assertRaises(BracketMismatchError) as ctx:
            infix_to_postfix("(1")
        self.assertEqual(str(ctx.exception), "Brackets mismatch. Check your expression.")


class TestInputValidation(unittest.TestCase):
    def test_strict_mode_rejects_letters(self):
        with self.assertRaises(InvalidTokenError) as ctx:
            infix_to_postfix("1+a")
        self.assertEqual(ctx.exception.token, 'a')
        self.assertEqual(ctx.exception.position, 2)

    def test_strict_mode_rejects_whitespace(self):
        with self.assertRaises(InvalidTokenError) as ctx:
            infix_to_postfix("1 + 2")
        self.assertEqual(ctx.exception.position, 1)

    def test_validate_infix_accepts_full_alphabet(self):
        validate_infix("0123456789+-*/()")

    def test_permissive_mode_keeps_unknown_characters_as_operators(self):
        self.assertEqual(infix_to_postfix("1a2", strict=False), "1 2 a")

    def test_default_mode_follows_config(self):
        with mock.patch.dict(NOTATION_CONFIG, {"strict_input": False}):
            self.assertEqual(infix_to_postfix("1a2"), "1 2 a")
        with self.assertRaises(InvalidTokenError):
            infix_to_postfix("1a2")


if __name__ == "__main__":
    unittest.main()
