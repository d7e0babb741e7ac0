"""
Run a Magnificent Minsky Machine program written in M3 notation.

Initial tape values follow the program's path on the command line;
tapes you leave off start at zero. The machine always starts in state 0.
"""

import sys, argparse

from . import interpreter
from .interface import M3SyntaxError, ConfigError
from .machine import load

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m minsky', description=__doc__,)
	parser.add_argument('source_path', help='path to an M3 program')
	parser.add_argument('tapes', nargs='*', type=int, help='initial tape values, in order')
	parser.add_argument('-l', '--limit', type=int, default=None, help='stop after this many steps, halted or not')
	parser.add_argument('-t', '--trace', action='store_true', help='print every step as a grid.')
	parser.add_argument('-s', '--show', action='store_true', help='print the program as a grid before running it.')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about how the run ended.")
	return parser.parse_args(argv)

def main(args) -> int:
	if args.verbose: interpreter.VERBOSE = True
	try:
		program = load(args.source_path)
		if args.show: program.display()
		initial = list(args.tapes) + [0] * (program.num_tapes - len(args.tapes))
		if args.trace:
			steps = list(interpreter.trace(program, initial, args.limit))
			interpreter.print_trace(program, initial, steps)
		result = interpreter.run(program, initial, args.limit)
	except M3SyntaxError:
		return 1 # load(...) has already complained.
	except ConfigError as e:
		print("%s: %s"%(args.source_path, e), file=sys.stderr)
		return 1
	print('tapes:', ' '.join(map(str, result.final_tapes)))
	print('steps:', result.step_count)
	if result.halted:
		print('halted in state', result.final_state)
		return 0
	else:
		print('stopped at the step limit in state', result.final_state)
		return 2

if __name__ == '__main__': sys.exit(main(parse_arguments()))
