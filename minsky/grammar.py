"""
The M3 notation: a scanner and an LR(1) grammar, courtesy of MiniScan and MiniParse.

A program looks like this:

	tapes: 2          // how many counters the machine has
	0 [-1, 1] 0       // in state 0, move one unit from tape 0 to tape 1, and stay in state 0
	0 [0, 0] 1        // otherwise, go to state 1 (which has no rules, so the machine halts)

Which is to say: the word ``tapes:`` and a tape count, followed by one or more rules.
Each rule is a current state, a bracketed delta vector, and a next state.
The vector may be empty, and may carry a single trailing comma.
Whitespace (newlines included) and ``//`` comments may appear between any two tokens,
so the line structure above is only a convention.

Integers are optionally signed decimal literals. The grammar is happy to accept
a negative state or a tape count of zero: those are semantic problems, and the
``machine`` module deals with them. The same goes for a delta vector of the wrong
width. The scanner does insist that literals fit in a signed 64-bit word.
"""

from boozetools.parsing import miniparse
from boozetools.parsing.interface import UnexpectedTokenError, UnexpectedEndOfTextError, ERROR_SYMBOL
from boozetools.scanning import miniscan
from boozetools.scanning.interface import ScannerBlocked
from boozetools.support.failureprone import SourceText

from .interface import RawRule, RawProgram, M3SyntaxError

SMALLEST_LITERAL, LARGEST_LITERAL = -2**63, 2**63-1

###################################################################################
#  Scanner:
###################################################################################

lexemes = miniscan.Definition("M3")
lexemes.ignore(r'\s+')
lexemes.ignore(r'\x2f\x2f.*') # Slashes are the trailing-context operator, hence the hex escapes.
lexemes.token('tapes:', 'tapes:')

@lexemes.on(r'[-+]?\d+')
def integer(yy):
	value = int(yy.match())
	if not SMALLEST_LITERAL <= value <= LARGEST_LITERAL:
		raise M3SyntaxError(yy.left, found=yy.match(), reason="integer literal %s is out of range"%yy.match())
	yy.token('integer', value)

@lexemes.on(r'[\[\],]')
def punctuation(yy):
	yy.token(yy.match())

###################################################################################
#  Grammar:
###################################################################################

grammar = miniparse.MiniParse('program', method='LR1')

@grammar.rule('program', 'tapes: .integer .rules')
def program(num_tapes, rules): return RawProgram(num_tapes, tuple(rules))

@grammar.rule('rules', 'rule')
def first_rule(rule): return [rule]
@grammar.rule('rules', '.rules .rule')
def next_rule(rules, rule):
	rules.append(rule)
	return rules

@grammar.rule('rule', '.integer [ .deltas ] .integer')
def one_rule(current_state, deltas, next_state): return RawRule(current_state, tuple(deltas), next_state)

grammar.rule('deltas', '')(list)
grammar.renaming('deltas', 'integers', '.integers ,')

@grammar.rule('integers', 'integer')
def first_integer(value): return [value]
@grammar.rule('integers', '.integers , .integer')
def next_integer(values, value):
	values.append(value)
	return values

###################################################################################
#  And the public face of all that:
###################################################################################

def expected_terminals(state_id) -> tuple:
	""" Which terminals would the parse table accept in the given state? """
	hfa, _ = grammar.get_hfa_and_combine()
	return tuple(sorted(
		terminal for terminal_id, terminal in enumerate(hfa.terminals)
		if terminal != ERROR_SYMBOL and hfa.get_action(state_id, terminal_id)
	))

def parse(text:str) -> RawProgram:
	"""
	Turn M3 source text into a RawProgram, or raise M3SyntaxError.
	Pure function of the text: no I/O, and the same text always gives an equal result.
	"""
	scanner = lexemes.scan(text)
	try:
		return grammar.parse(scanner)
	except UnexpectedTokenError as ex:
		error = M3SyntaxError(scanner.left, expected_terminals(ex.pds.state), scanner.match())
	except UnexpectedEndOfTextError as ex:
		error = M3SyntaxError(len(text), expected_terminals(ex.pds.state))
	except ScannerBlocked as ex:
		error = M3SyntaxError(ex.position, (), text[ex.position], reason="unrecognized character %r"%text[ex.position])
	except M3SyntaxError as ex:
		error = ex
	error.line, column = SourceText(text).find_row_col(error.position)
	error.column = column + 1
	raise error from None
