"""
Tokenize a text file according to a lexer declared in a JSON document,
printing one token per line. Handy for trying out a specification.

The JSON document is an object mapping each state name to an object mapping
each pattern to an action. The first state is the initial state. An action is:
  null                  skip the matched text;
  "kind"                emit the token ["kind", matched-text];
  {...}                 an object with any of these keys:
      "token": "kind"   emit ["kind", matched-text], or with `true` emit just the matched text;
      "begin": state    switch to the named (or numbered) state;
      "less": n         keep only the first n characters of the match;
      "reject": true    defer to the next-best match;
      "error": message  fail, with {text}, {line} and {column} filled into the message.
"""

import sys, argparse, json

from reglex import specification
from reglex.engine import Lexer
from reglex.interface import ScanFailure, UnknownState
from reglex.support.failureprone import SourceText

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m reglex', description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument('spec_path', help='path to the JSON lexer specification')
	parser.add_argument('source_path', nargs='?', help='path to input file (default: standard input)')
	parser.add_argument('-s', '--start', help='state in which to begin scanning (default: the first declared)')
	parser.add_argument('--collect', action='store_true', help='print the collected token list in one go, as Lexer.collect(...) returns it')
	parser.add_argument('-v', '--verbose', action='store_true', help='squawk about the compiled specification')
	return parser.parse_args(argv)

def make_action(spec):
	""" Translate one JSON action declaration into a scan action. """
	if spec is None: return None
	if isinstance(spec, str): return lambda yy: (spec, yy.text)
	spec = dict(spec)
	unknown = set(spec) - {'token', 'begin', 'less', 'reject', 'error'}
	if unknown: raise ValueError("Unknown action keys: %s" % ', '.join(sorted(unknown)))
	kind, target, keep, rejecting, error = (spec.get(k) for k in ('token', 'begin', 'less', 'reject', 'error'))
	if error is not None and not isinstance(error, str): raise ValueError("The 'error' action must be a message string, not %r" % (error,))
	def action(yy):
		if error is not None: raise ValueError(error.format(text=yy.text, line=yy.line + 1, column=yy.column))
		if keep is not None: yy.less(keep)
		if rejecting: yy.reject()
		if target is not None: yy.begin(target)
		if kind is True: return yy.text
		if kind: return (kind, yy.text)
	return action

def load_table(document:str):
	""" Keep the JSON objects as lists of pairs so order survives and duplicate states get noticed. """
	pairs = json.loads(document, object_pairs_hook=list)
	return [(state, [(pattern, make_action(action)) for pattern, action in rules]) for state, rules in pairs]

def report_collected(tokens:list):
	failed = bool(tokens) and isinstance(tokens[-1], ScanFailure)
	if failed: tokens[-1] = {'failure': tokens[-1].kind, 'message': tokens[-1].message}
	print(json.dumps(tokens))
	if failed: exit(1)

def main(args):
	if args.verbose: specification.VERBOSE = True
	with open(args.spec_path) as fh: document = fh.read()
	try: lexer = Lexer(load_table(document))
	except ValueError as e:
		print(e.args[0], file=sys.stderr)
		exit(1)
	if args.source_path is None: text = sys.stdin.read()
	else:
		with open(args.source_path) as fh: text = fh.read()
	try:
		if args.collect: return report_collected(lexer.collect(text, start=args.start))
		scanner = lexer.scanner(text, start=args.start)
	except UnknownState as e:
		print(e.args[0], file=sys.stderr)
		exit(1)
	try:
		for token in scanner: print(json.dumps(token))
	except Exception as ex:
		yy = scanner.context
		SourceText(text, filename=args.source_path).complain(slice(yy.position, yy.position + yy.length), str(ex))
		exit(1)

if __name__ == '__main__': main(parse_arguments())
