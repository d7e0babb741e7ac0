"""
The semantic model of a Magnificent Minsky Machine, and the step that checks a RawProgram into one.

A machine has some number of tapes (unbounded non-negative counters) and a list of rules.
Each rule names the state it fires in, a vector of adjustments (one per tape), and the
state to move to afterward. Rule order matters: see the ``interpreter`` module.

Construction is all-or-nothing. A Program that exists is well-formed:
	* it has at least one tape,
	* every rule's delta vector has exactly one entry per tape,
	* and every state mentioned is a non-negative integer.
Nothing is ever added to or removed from a Program after that.
"""
from typing import NamedTuple, Iterable

from boozetools.support import pretty
from boozetools.support.failureprone import SourceText

from .interface import RawProgram, InvalidTapeCount, TapeCountMismatch, NegativeState, M3SyntaxError
from . import grammar

class Rule(NamedTuple):
	current_state: int
	deltas: tuple
	next_state: int

	def is_eligible(self, state:int, tapes) -> bool:
		"""
		Could this rule fire on the given configuration? The state must match, and
		no tape may be driven below zero. (This is the "guarded decrement".)
		Widths are not compared: the caller must pass as many tapes as there are deltas.
		"""
		return self.current_state == state and all(t + d >= 0 for t, d in zip(tapes, self.deltas))

	def as_text(self) -> str:
		return "%d [%s] %d"%(self.current_state, ", ".join(map(str, self.deltas)), self.next_state)


class Program:
	"""
	An immutable, validated M3 program.

	The constructor raises a ConfigError subclass rather than build something
	malformed; prefer ``build(raw)`` when starting from parser output.
	"""
	def __init__(self, num_tapes:int, rules:Iterable[Rule]):
		if num_tapes <= 0: raise InvalidTapeCount(num_tapes)
		checked = []
		for index, (current_state, deltas, next_state) in enumerate(rules):
			deltas = tuple(deltas)
			if len(deltas) != num_tapes: raise TapeCountMismatch(index, num_tapes, len(deltas))
			if current_state < 0 or next_state < 0: raise NegativeState(index)
			checked.append(Rule(current_state, deltas, next_state))
		self.__num_tapes = num_tapes
		self.__rules = tuple(checked)

	@property
	def num_tapes(self) -> int: return self.__num_tapes

	@property
	def rules(self) -> tuple: return self.__rules

	def __len__(self): return len(self.__rules)
	def __iter__(self): return iter(self.__rules)

	def __eq__(self, other):
		if not isinstance(other, Program): return NotImplemented
		return self.__num_tapes == other.num_tapes and self.__rules == other.rules

	def __hash__(self): return hash((self.__num_tapes, self.__rules))

	def __repr__(self): return "<Program: %d tapes, %d rules>"%(self.__num_tapes, len(self.__rules))

	def states(self) -> list:
		""" Every machine state that any rule mentions, in order. """
		return sorted({r.current_state for r in self.__rules} | {r.next_state for r in self.__rules})

	def to_text(self) -> str:
		""" Canonical M3 source text for this program. It parses back into an equal Program. """
		return "\n".join(["tapes: %d"%self.__num_tapes] + [r.as_text() for r in self.__rules]) + "\n"

	def display(self):
		head = ['#', 'state'] + ['t%d'%i for i in range(self.__num_tapes)] + ['next']
		body = [[i, r.current_state, *r.deltas, r.next_state] for i, r in enumerate(self.__rules)]
		pretty.print_grid([head] + body)


def build(raw:RawProgram) -> Program:
	""" Check the parser's output into a Program. Rules keep their source order. """
	return Program(raw.num_tapes, raw.rules)

def load(path) -> Program:
	"""
	Read, parse, and build the M3 program stored at ``path``.
	Syntax errors get a located complaint on STDERR before they propagate.
	"""
	with open(path, encoding='utf-8') as fh: text = fh.read()
	try: raw = grammar.parse(text)
	except M3SyntaxError as ex:
		ex.filename = str(path)
		SourceText(text, filename=str(path)).complain(slice(ex.position, ex.position+1), message=ex.describe())
		raise
	return build(raw)
