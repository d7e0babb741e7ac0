"""
Interface Definitions: the records that pass between the stages of the M3 pipeline,
and the exceptions each stage may raise.

The pipeline is   text --parse--> RawProgram --build--> Program --run--> MachineResult
and each arrow has exactly one family of failure:

	parse: M3SyntaxError -- the token stream does not fit the grammar.
	build: ConfigError -- the text parsed, but it does not describe a machine.
	run: ConfigError (for a bad initial tape vector, before any step executes)
		or TapeIndexError, which means something is broken inside the interpreter.
"""
from typing import NamedTuple, Optional

from boozetools.parsing.interface import ParseError

class RawRule(NamedTuple):
	""" One rule exactly as it appeared in the source text. Nothing is checked yet. """
	current_state: int
	deltas: tuple
	next_state: int

class RawProgram(NamedTuple):
	""" The parser's sole output. Rule order is source order, and it matters. """
	num_tapes: int
	rules: tuple

class MachineResult(NamedTuple):
	"""
	What a run reports: the tape vector and step count at the point execution stopped,
	whether the machine actually halted (as opposed to hitting the step limit),
	and the machine state it stopped in.
	"""
	final_tapes: tuple
	step_count: int
	halted: bool
	final_state: int = 0


class M3SyntaxError(ParseError):
	"""
	Raised when source text does not match the M3 grammar.
	Parameters are:
		the string offset where it happened,
		a tuple of the terminal symbols which would have been acceptable there,
		the offending text (None at end of input).
	Line and column (both counting from one) are filled in from the source text.
	"""
	def __init__(self, position:int, expected=(), found:Optional[str]=None, *, line=None, column=None, reason=None):
		super().__init__(position, tuple(expected), found)
		self.position, self.expected, self.found = position, tuple(expected), found
		self.line, self.column = line, column
		self.reason = reason
		self.filename = None

	def describe(self) -> str:
		""" The complaint without the location. """
		if self.reason: what = self.reason
		elif self.found is None: what = "unexpected end of input"
		else: what = "unexpected %r"%self.found
		if self.expected: what += "; expected one of: " + " ".join(self.expected)
		return what

	def __str__(self):
		where = "offset %d"%self.position if self.line is None else "line %d, column %d"%(self.line, self.column)
		if self.filename: where = self.filename + " " + where
		return "%s: %s"%(where, self.describe())


class ConfigError(ValueError):
	""" Base class of exceptions for text that parses but does not describe a runnable machine. """

class InvalidTapeCount(ConfigError):
	def __init__(self, value):
		super().__init__(value)
		self.value = value
	def __str__(self): return "A machine needs at least one tape, not %r."%self.value

class TapeCountMismatch(ConfigError):
	def __init__(self, rule_index, expected, actual):
		super().__init__(rule_index, expected, actual)
		self.rule_index, self.expected, self.actual = rule_index, expected, actual
	def __str__(self):
		return "Rule %d adjusts %d tapes, but the program declares %d."%(self.rule_index, self.actual, self.expected)

class NegativeState(ConfigError):
	def __init__(self, rule_index):
		super().__init__(rule_index)
		self.rule_index = rule_index
	def __str__(self): return "Rule %d mentions a negative machine state."%self.rule_index

class NegativeInitialTape(ConfigError):
	def __init__(self, index):
		super().__init__(index)
		self.index = index
	def __str__(self): return "Tape %d cannot start below zero."%self.index

class InitialTapeCountMismatch(ConfigError):
	def __init__(self, expected, actual):
		super().__init__(expected, actual)
		self.expected, self.actual = expected, actual
	def __str__(self): return "The program runs on %d tapes, but %d initial values were given."%(self.expected, self.actual)


class TapeIndexError(RuntimeError):
	"""
	A rule and the tape vector it was applied to disagree in length.
	A validated Program can't get here, so this indicates a defect rather than a bad input.
	"""
	def __init__(self, rule_index, rule_width, tape_width):
		super().__init__(rule_index, rule_width, tape_width)
		self.rule_index, self.rule_width, self.tape_width = rule_index, rule_width, tape_width
