from charm.dictionary import Dictionary, TokensDefinition
from charm.errors import (
    MissingDefinitionNameError,
    UnterminatedDefinitionError,
    WordNotDefinedError,
)
import charm.lex as lex
from charm.lex import Keyword, KeywordToken, NumberToken, OpToken
import json
import unittest


class TestSmallExamples(unittest.TestCase):
    def setUp(self) -> None:
        self.dictionary = Dictionary.with_builtins()

    def test_numbers_words_and_keywords(self) -> None:
        tokens = lex.tokenize('10 -3 +4 dup if else then do', self.dictionary)
        self.assertEqual(
            tokens,
            [
                NumberToken(10),
                NumberToken(-3),
                NumberToken(4),
                OpToken('dup', self.dictionary['dup']),
                KeywordToken(Keyword.IF),
                KeywordToken(Keyword.ELSE),
                KeywordToken(Keyword.THEN),
                KeywordToken(Keyword.DO),
            ],
        )

    def test_minus_sign_alone_is_a_word(self) -> None:
        (token,) = lex.tokenize('-', self.dictionary)
        self.assertEqual(token, OpToken('-', self.dictionary['-']))

    def test_locations(self) -> None:
        tokens = lex.tokenize('  1\t dup', self.dictionary, line=7)
        self.assertEqual([t.start for t in tokens], [(7, 2), (7, 5)])

    def test_empty_input(self) -> None:
        self.assertEqual(lex.tokenize(' \t\n', self.dictionary), [])

    def test_lexer_interface(self) -> None:
        lexer = lex.Lexer(self.dictionary)
        lexer.input('1 2')
        self.assertEqual(lexer.token(), NumberToken(1))
        self.assertEqual(lexer.token(), NumberToken(2))
        self.assertIsNone(lexer.token())


class TestWordResolution(unittest.TestCase):
    def setUp(self) -> None:
        self.dictionary = Dictionary.with_builtins()

    def test_undefined_word(self) -> None:
        with self.assertRaises(WordNotDefinedError) as cm:
            lex.tokenize('1 2 frob +', self.dictionary)
        self.assertEqual(cm.exception.word, 'frob')
        self.assertEqual(cm.exception.location, (1, 4))
        self.assertEqual(cm.exception.source, '1 2 frob +')

    def test_words_are_case_sensitive(self) -> None:
        with self.assertRaises(WordNotDefinedError):
            lex.tokenize('DUP', self.dictionary)
        with self.assertRaises(WordNotDefinedError):
            lex.tokenize('IF', self.dictionary)

    def test_out_of_range_literal_is_not_a_number(self) -> None:
        (token,) = lex.tokenize('9223372036854775807', self.dictionary)
        self.assertEqual(token, NumberToken(2**63 - 1))
        (token,) = lex.tokenize('-9223372036854775808', self.dictionary)
        self.assertEqual(token, NumberToken(-(2**63)))
        with self.assertRaises(WordNotDefinedError):
            lex.tokenize('9223372036854775808', self.dictionary)

    def test_partial_numbers_are_not_numbers(self) -> None:
        for word in ['1.5', '0x10', '1_000', '12abc']:
            with self.subTest(word=word):
                with self.assertRaises(WordNotDefinedError):
                    lex.tokenize(word, self.dictionary)

    def test_dictionary_comes_before_keywords(self) -> None:
        self.dictionary.define('if', '1')
        (token,) = lex.tokenize('if', self.dictionary)
        self.assertIsInstance(token, OpToken)

    def test_semicolon_outside_definition(self) -> None:
        with self.assertRaises(WordNotDefinedError):
            lex.tokenize(';', self.dictionary)


class TestDefinitions(unittest.TestCase):
    def setUp(self) -> None:
        self.dictionary = Dictionary.with_builtins()

    def test_definition_is_installed_and_emits_no_tokens(self) -> None:
        tokens = lex.tokenize(':  double  dup   + ;', self.dictionary)
        self.assertEqual(tokens, [])
        self.assertEqual(
            self.dictionary['double'], TokensDefinition('double', 'dup +')
        )

    def test_body_is_not_resolved(self) -> None:
        lex.tokenize(': later undefined-yet ;', self.dictionary)
        self.assertEqual(self.dictionary['later'].body, 'undefined-yet')

    def test_definition_usable_later_on_same_line(self) -> None:
        tokens = lex.tokenize(': double dup + ; 10 double', self.dictionary)
        self.assertEqual(
            tokens,
            [
                NumberToken(10),
                OpToken('double', TokensDefinition('double', 'dup +')),
            ],
        )

    def test_empty_body(self) -> None:
        lex.tokenize(': noop ;', self.dictionary)
        self.assertEqual(self.dictionary['noop'].body, '')

    def test_redefinition_overwrites(self) -> None:
        lex.tokenize(': + * ;', self.dictionary)
        self.assertEqual(self.dictionary['+'], TokensDefinition('+', '*'))

    def test_ops_snapshot_definition(self) -> None:
        lex.tokenize(': word 1 ;', self.dictionary)
        (token,) = lex.tokenize('word', self.dictionary)
        lex.tokenize(': word 2 ;', self.dictionary)
        self.assertEqual(token.definition.body, '1')

    def test_unterminated_definition(self) -> None:
        with self.assertRaises(UnterminatedDefinitionError) as cm:
            lex.tokenize('1 : half 2 /', self.dictionary)
        self.assertEqual(cm.exception.word, 'half')
        self.assertEqual(cm.exception.location, (1, 2))
        self.assertNotIn('half', self.dictionary)

    def test_unterminated_definition_without_name(self) -> None:
        with self.assertRaises(UnterminatedDefinitionError) as cm:
            lex.tokenize(':', self.dictionary)
        self.assertIsNone(cm.exception.word)

    def test_definition_without_name(self) -> None:
        with self.assertRaises(MissingDefinitionNameError):
            lex.tokenize(': ;', self.dictionary)

    def test_earlier_definitions_survive_a_later_error(self) -> None:
        with self.assertRaises(WordNotDefinedError):
            lex.tokenize(': one 1 ; nope', self.dictionary)
        self.assertIn('one', self.dictionary)


class TestTokenEncoder(unittest.TestCase):
    def test_encoding(self) -> None:
        dictionary = Dictionary.with_builtins()
        tokens = lex.tokenize('1 dup if', dictionary)
        self.assertEqual(
            json.loads(json.dumps(tokens, cls=lex.TokenEncoder)),
            [
                {'type': 'number', 'value': 1, 'start': [1, 0]},
                {
                    'type': 'op',
                    'name': 'dup',
                    'definition': 'native',
                    'start': [1, 2],
                },
                {'type': 'keyword', 'keyword': 'if', 'start': [1, 6]},
            ],
        )
