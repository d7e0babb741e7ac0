"""
Running a Program.

The machine starts in state 0 with whatever tape values the caller supplies. Each step
scans the program's rules IN SOURCE ORDER and fires the first one that is eligible,
meaning its current state matches the machine's and applying its deltas would leave
every tape non-negative. Firing a rule adds its deltas to the tapes and moves the
machine to the rule's next state. When no rule is eligible, the machine halts.

About that ordering: it is a deliberate choice, not an accident of implementation.
Several rules may be eligible in the same configuration, and program authors lean on
the first-match policy all the time. The usual idiom is a "drain" rule followed by a
zero-delta rule for the same state:

	0 [-1, 1] 0     // while tape 0 has something, move it to tape 1,
	0 [0, 0] 1      // and only then move on to state 1.

Swap those two lines and you get a different (and rather less useful) machine.
So this is a linear scan with an early exit, and must stay that way.

Whether a machine halts is undecidable in general. The only way to bound a run is
the ``step_limit`` parameter: if the machine is still running after that many steps,
you get the configuration so far with ``halted=False``.
"""

import sys
from typing import NamedTuple, Optional, Iterator

from boozetools.support import pretty

from .interface import MachineResult, NegativeInitialTape, InitialTapeCountMismatch, TapeIndexError
from .machine import Program, Rule

VERBOSE = False

class Step(NamedTuple):
	""" One executed transition, with the configuration that resulted. """
	step_count: int
	rule_index: int
	rule: Rule
	state: int
	tapes: tuple


class MachineState:
	"""
	The mutable part of a running machine. Each run gets its own, so a single
	Program can serve any number of runs without interference.
	"""
	def __init__(self, tapes, current_state=0):
		self.current_state = current_state
		self.tapes = list(tapes)
		self.step_count = 0
		self.halted = False

	@classmethod
	def initial(cls, program:Program, initial_tapes) -> "MachineState":
		""" Check the caller's tape vector against the program before anything runs. """
		tapes = list(initial_tapes)
		if len(tapes) != program.num_tapes: raise InitialTapeCountMismatch(program.num_tapes, len(tapes))
		for index, value in enumerate(tapes):
			if value < 0: raise NegativeInitialTape(index)
		return cls(tapes)

	def find_rule(self, program:Program) -> Optional[int]:
		""" Return the index of the first eligible rule, or None if there isn't one. """
		for index, rule in enumerate(program.rules):
			if rule.current_state != self.current_state: continue
			if len(rule.deltas) != len(self.tapes): raise TapeIndexError(index, len(rule.deltas), len(self.tapes))
			if rule.is_eligible(self.current_state, self.tapes): return index
		return None

	def apply(self, rule:Rule):
		for i, delta in enumerate(rule.deltas):
			self.tapes[i] += delta
		self.current_state = rule.next_state
		self.step_count += 1

	def step(self, program:Program) -> Optional[int]:
		"""
		Perform one transition. Returns the index of the rule that fired,
		or None (and marks the machine halted) if none could.
		"""
		index = self.find_rule(program)
		if index is None: self.halted = True
		else: self.apply(program.rules[index])
		return index

	def cycle(self, program:Program, step_limit:Optional[int]=None) -> Iterator[int]:
		""" Yield the index of each rule as it fires, until the machine halts or reaches the step limit. """
		while not self.halted:
			index = self.find_rule(program)
			if index is None: self.halted = True
			elif step_limit is not None and self.step_count >= step_limit: return
			else:
				self.apply(program.rules[index])
				yield index

	def result(self) -> MachineResult:
		return MachineResult(tuple(self.tapes), self.step_count, self.halted, self.current_state)


def run(program:Program, initial_tapes, step_limit:Optional[int]=None) -> MachineResult:
	"""
	Run the program from state 0 on the given tapes until it halts,
	or until it has taken ``step_limit`` steps (if given).
	"""
	machine = MachineState.initial(program, initial_tapes)
	for _ in machine.cycle(program, step_limit): pass
	if VERBOSE:
		if machine.halted: print("Halted in state %d after %d steps."%(machine.current_state, machine.step_count), file=sys.stderr)
		else: print("Still running in state %d at the limit of %d steps."%(machine.current_state, step_limit), file=sys.stderr)
	return machine.result()

def trace(program:Program, initial_tapes, step_limit:Optional[int]=None) -> Iterator[Step]:
	"""
	Like ``run``, but yields a Step for every transition. Bad tape vectors are
	rejected right away, not when iteration begins.
	"""
	machine = MachineState.initial(program, initial_tapes)
	def each_step():
		for index in machine.cycle(program, step_limit):
			yield Step(machine.step_count, index, program.rules[index], machine.current_state, tuple(machine.tapes))
	return each_step()

def print_trace(program:Program, initial_tapes, steps:Iterator[Step]):
	""" Show a run as a grid: one row per step, after a row for the starting configuration. """
	head = ['step', 'rule', 'state'] + ['t%d'%i for i in range(program.num_tapes)]
	body = [[0, '', 0, *initial_tapes]]
	body.extend([s.step_count, s.rule_index, s.state, *s.tapes] for s in steps)
	pretty.print_grid([head] + body)
