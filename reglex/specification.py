"""
Turn a raw state/rule table into the immutable form the scan engine runs on.

The table is an ordered mapping from state name to an ordered mapping from
pattern to action. Order matters twice over: the first state declared is the
initial state, and within a state the earlier rule wins a tie between matches
of equal length. Python dictionaries keep insertion order, so a literal dict
works fine. Either level may also be given as a sequence of (key, value) pairs,
which is the only way to say the same state name twice (and get told off for it).
"""
import re, sys, warnings
from typing import NamedTuple, Callable, Optional

from .interface import MissingSpecification, DuplicateState, InvalidPattern, InvalidAction, UnknownState

VERBOSE = False

class Rule(NamedTuple):
	pattern: str
	regex: re.Pattern
	action: Optional[Callable]

def _pairs(thing):
	""" Accept a mapping or a sequence of pairs; either way, produce pairs in order. """
	if hasattr(thing, 'items'): return list(thing.items())
	return [tuple(pair) for pair in thing]

def compile_rule(state, pattern, action) -> Rule:
	if not isinstance(pattern, str): raise InvalidPattern(state, pattern, "pattern must be a string")
	try: regex = re.compile(pattern)
	except re.error as ex: raise InvalidPattern(state, pattern, ex) from None
	if action is not None and not callable(action): raise InvalidAction(state, pattern, action)
	if regex.match('') is not None:
		warnings.warn("Pattern %r in state %r can match the empty string; empty matches are never taken." % (pattern, state))
	return Rule(pattern, regex, action)

class Specification:
	""" Immutable after construction. Safe to share among any number of scanners. """
	
	def __init__(self, table:tuple[tuple[str, tuple[Rule, ...]], ...]):
		self.__table = table
		self.__index = {name: rules for name, rules in table}
	
	@property
	def states(self) -> tuple[str, ...]:
		return tuple(name for name, _ in self.__table)
	
	def initial(self) -> Optional[str]:
		""" The first declared state, or None if there are no states at all. """
		return self.__table[0][0] if self.__table else None
	
	def rules(self, state) -> tuple[Rule, ...]:
		""" A state nobody declared has no rules; the scanner simply falls back for every character. """
		return self.__index.get(state, ())
	
	def __contains__(self, state): return state in self.__index
	def __len__(self): return len(self.__table)
	def __iter__(self): return iter(self.__table)
	
	def resolve(self, state) -> str:
		"""
		Find a declared state either by exact name or by its ordinal position in
		declaration order (0 is first). Names win over ordinals, so a state named
		"1" is found by name. Ordinals may be given as int or as a string of digits.
		"""
		if isinstance(state, str) and state in self.__index: return state
		if isinstance(state, bool): raise UnknownState(state)
		if isinstance(state, int): ordinal = state
		elif isinstance(state, str) and state.strip().isdecimal(): ordinal = int(state)
		else: raise UnknownState(state)
		if 0 <= ordinal < len(self.__table): return self.__table[ordinal][0]
		raise UnknownState(state)

def compile_specification(table) -> Specification:
	"""
	Validate and compile. Problems are fatal here, at construction time,
	rather than surprising somebody in the middle of a scan.
	"""
	if table is None: raise MissingSpecification()
	compiled, seen = [], set()
	for state, rule_table in _pairs(table):
		if state in seen: raise DuplicateState(state)
		seen.add(state)
		rules = tuple(compile_rule(state, pattern, action) for pattern, action in _pairs(rule_table))
		compiled.append((state, rules))
	if VERBOSE:
		print("Compiled %d rules across %d states." % (sum(len(rules) for _, rules in compiled), len(compiled)), file=sys.stderr)
	return Specification(tuple(compiled))
