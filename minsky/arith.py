""" A couple of small machines that do arithmetic. Handy as worked examples, and for testing. """

from .machine import Program, Rule
from .interpreter import run

def adder_program() -> Program:
	""" Two tapes. Drains tape 1 into tape 0, one unit per step. """
	return Program(2, [Rule(0, (1, -1), 0)])

def add(x:int, y:int) -> int:
	if x < 0 or y < 0: raise ValueError("add wants non-negative operands", x, y)
	result = run(adder_program(), [x, y], step_limit=y)
	assert result.halted
	return result.final_tapes[0]

def multiplier_program() -> Program:
	"""
	Four tapes, laid out as [product, x, scratch, y-1]. Reading down, by state:

		0: [0   x   0   n]  rule 0 copies x into both the product and the scratch tape...
		0: [x   0   x   n]  ...and when tape 1 runs dry, rule 1 moves to state 1.
		1: [x   0   x   n]  rule 2 moves the scratch back into tape 1...
		1: [x   x   0   n]  ...then rule 3 counts down tape 3 and returns to state 0.
		...
		1: [x*y x   0   0]  Nothing left to count, so the machine halts.
	"""
	return Program(4, [
		Rule(0, (1, -1, 1, 0), 0),
		Rule(0, (0, 0, 0, 0), 1),
		Rule(1, (0, 1, -1, 0), 1),
		Rule(1, (0, 0, 0, -1), 0),
	])

def multiply(x:int, y:int) -> int:
	if x < 0 or y < 0: raise ValueError("multiply wants non-negative operands", x, y)
	if y == 0: return 0
	result = run(multiplier_program(), [0, x, 0, y-1], step_limit=2*(x+1)*y)
	assert result.halted
	return result.final_tapes[0]
