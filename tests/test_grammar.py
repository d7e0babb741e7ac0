import unittest, importlib

from minsky import grammar
from minsky.interface import RawRule, RawProgram, M3SyntaxError
from boozetools.parsing.interface import ParseError, END_OF_TOKENS

class TestWellFormed(unittest.TestCase):
	def test_00_smoke_test(self):
		self.assertEqual(RawProgram(2, (RawRule(0, (1, -1), 0),)), grammar.parse("tapes: 2\n0 [1, -1] 0"))

	def test_01_rules_keep_source_order(self):
		raw = grammar.parse("""
			tapes: 3
			0 [1, -1, 2] 1
			1 [0, 1, 0] 2
		""")
		self.assertEqual(3, raw.num_tapes)
		self.assertEqual([
			RawRule(0, (1, -1, 2), 1),
			RawRule(1, (0, 1, 0), 2),
		], list(raw.rules))

	def test_02_layout_and_comments_are_free_form(self):
		text = "tapes:3 // header\n 0[1,-1,2]1// first\n1\n[\n0 ,\t1,0\n]\n// nothing here\n2 // last"
		self.assertEqual(grammar.parse("tapes: 3\n0 [1, -1, 2] 1\n1 [0, 1, 0] 2"), grammar.parse(text))

	def test_03_delta_vectors(self):
		for vector, expect in [
			('[]', ()),
			('[5]', (5,)),
			('[5,]', (5,)),
			('[1, 2, 3,]', (1, 2, 3)),
			('[+4, -0, 007]', (4, 0, 7)),
		]:
			with self.subTest(vector=vector):
				self.assertEqual(expect, grammar.parse("tapes: 1\n0 %s 0"%vector).rules[0].deltas)

	def test_04_semantic_nonsense_is_not_a_syntax_error(self):
		# Counts and signs are checked later, when the program gets built.
		for text in ["tapes: 0\n0 [] 0", "tapes: -3\n0 [1] 0", "tapes: 2\n0 [1] 0", "tapes: 1\n-1 [0] -2"]:
			with self.subTest(text=text):
				self.assertIsInstance(grammar.parse(text), RawProgram)

	def test_05_largest_literals(self):
		raw = grammar.parse("tapes: 2\n0 [9223372036854775807, -9223372036854775808] 0")
		self.assertEqual((2**63-1, -2**63), raw.rules[0].deltas)

	def test_06_deterministic(self):
		text = "tapes: 2\n0 [-1, 1] 0\n0 [0, 0] 1"
		self.assertEqual(grammar.parse(text), grammar.parse(text))

	def test_07_module_definition_survives_a_fresh_import(self):
		# Scanner and parse tables are both built at import time.
		fresh = importlib.reload(grammar)
		self.assertEqual(RawProgram(1, (RawRule(0, (1,), 0),)), fresh.parse("tapes: 1\n0 [1] 0"))
		self.assertEqual(RawProgram(2, (RawRule(0, (), 1),)), fresh.parse("tapes: 2\n0 [] 1"))


class TestSyntaxErrors(unittest.TestCase):
	def fails(self, text) -> M3SyntaxError:
		with self.assertRaises(M3SyntaxError) as context:
			grammar.parse(text)
		return context.exception

	def test_00_is_a_parse_error(self):
		self.assertIsInstance(self.fails(""), ParseError)

	def test_01_empty_text(self):
		error = self.fails("")
		self.assertEqual((0, 1, 1), (error.position, error.line, error.column))
		self.assertIsNone(error.found)
		self.assertEqual(('tapes:',), error.expected)

	def test_02_missing_header(self):
		error = self.fails("0 [1] 0")
		self.assertEqual(0, error.position)
		self.assertEqual(('tapes:',), error.expected)

	def test_03_header_without_rules(self):
		text = "tapes: 2\n"
		error = self.fails(text)
		self.assertEqual(len(text), error.position)
		self.assertIsNone(error.found)
		self.assertEqual(('integer',), error.expected)

	def test_04_missing_bracket(self):
		error = self.fails("tapes: 1\n0 1] 0")
		self.assertEqual((11, 2, 3), (error.position, error.line, error.column))
		self.assertEqual('1', error.found)
		self.assertEqual(('[',), error.expected)

	def test_05_unclosed_bracket(self):
		error = self.fails("tapes: 1\n0 [1 0")
		self.assertEqual('0', error.found)
		self.assertEqual((',', ']'), error.expected)

	def test_06_trailing_garbage(self):
		error = self.fails("tapes: 1\n0 [1] 0 ]")
		self.assertEqual(']', error.found)
		self.assertEqual((2, 9), (error.line, error.column))
		self.assertEqual(tuple(sorted([END_OF_TOKENS, 'integer'])), error.expected)

	def test_07_lonely_comma(self):
		error = self.fails("tapes: 1\n0 [,] 0")
		self.assertEqual(',', error.found)
		self.assertEqual((']', 'integer'), error.expected)

	def test_08_not_an_integer(self):
		for text, position in [
			("tapes: 1\n0 [x] 0", 12),
			("tapes: 1\n0 [--1] 0", 12),
			("tapes: 1\n0 [1.5] 0", 13),
			("tapes two\n0 [1] 0", 0),
		]:
			with self.subTest(text=text):
				error = self.fails(text)
				self.assertEqual(position, error.position)
				self.assertEqual(text[position], error.found)
				self.assertEqual((), error.expected)

	def test_09_literal_out_of_range(self):
		for literal in ['9223372036854775808', '-9223372036854775809', '99999999999999999999']:
			with self.subTest(literal=literal):
				error = self.fails("tapes: 1\n0 [%s] 0"%literal)
				self.assertEqual((2, 4), (error.line, error.column))
				self.assertEqual(literal, error.found)
				self.assertIn('out of range', str(error))

	def test_10_message_mentions_place_and_expectations(self):
		message = str(self.fails("tapes: 1\n0 1] 0"))
		self.assertIn('line 2, column 3', message)
		self.assertIn("'1'", message)
		self.assertIn('[', message)


if __name__ == '__main__':
	unittest.main()
