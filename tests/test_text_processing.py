import unittest

from application.services.query_parser import QueryParser
from domain.errors import DocumentValidationError, ValidationReason
from infrastructure.text_processing.whitespace_splitter import WhitespaceSplitter, is_valid_word, split_into_words


class TestSplitIntoWords(unittest.TestCase):
    def test_splits_on_whitespace_runs(self):
        self.assertEqual(split_into_words("  cat  in\tthe city "), ["cat", "in", "the", "city"])

    def test_empty_input(self):
        self.assertEqual(split_into_words(""), [])
        self.assertEqual(split_into_words("   "), [])

    def test_case_is_preserved(self):
        self.assertEqual(split_into_words("Cat NY"), ["Cat", "NY"])

    def test_control_characters_are_invalid(self):
        self.assertTrue(is_valid_word("sparrow"))
        self.assertTrue(is_valid_word(""))
        self.assertFalse(is_valid_word("s\x12parrow"))
        self.assertFalse(is_valid_word("\x00"))
        self.assertFalse(is_valid_word("\x1f"))
        self.assertTrue(is_valid_word(" "))


class TestQueryParser(unittest.TestCase):
    def setUp(self) -> None:
        self.parser = QueryParser(WhitespaceSplitter(), {"and", "with"})

    def test_plus_and_minus_words(self):
        query = self.parser.parse("funny -rat pet -rat funny")
        self.assertEqual(query.plus_words, {"funny", "pet"})
        self.assertEqual(query.minus_words, {"rat"})

    def test_stop_words_dropped(self):
        query = self.parser.parse("cat and -with dog")
        self.assertEqual(query.plus_words, {"cat", "dog"})
        self.assertEqual(query.minus_words, set())

    def test_double_minus(self):
        with self.assertRaises(DocumentValidationError) as ctx:
            self.parser.parse("--fluffy")
        self.assertEqual(ctx.exception.reason, ValidationReason.DOUBLE_MINUS_WORD)

    def test_empty_minus(self):
        with self.assertRaises(DocumentValidationError) as ctx:
            self.parser.parse("fluffy -")
        self.assertEqual(ctx.exception.reason, ValidationReason.EMPTY_MINUS_WORD)

    def test_invalid_character(self):
        with self.assertRaises(DocumentValidationError) as ctx:
            self.parser.parse("-s\x12parrow")
        self.assertEqual(ctx.exception.reason, ValidationReason.INVALID_CHARACTER)

    def test_empty_token(self):
        with self.assertRaises(DocumentValidationError) as ctx:
            self.parser.parse_word("")
        self.assertEqual(ctx.exception.reason, ValidationReason.EMPTY_TOKEN)

    def test_inner_dash_is_plain_word(self):
        query = self.parser.parse("well-known -pre-war")
        self.assertEqual(query.plus_words, {"well-known"})
        self.assertEqual(query.minus_words, {"pre-war"})


if __name__ == "__main__":
    unittest.main()
