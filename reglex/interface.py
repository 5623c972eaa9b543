"""
Interface definitions: the exception types reglex deals in, plus a couple of
agreed sentinel values shared between the engine and its callers.
"""
from typing import NamedTuple

INITIAL = 'INITIAL' # Default state name used by the Definition builder.

class _EndOfInput:
	""" There is exactly one of these. It compares equal only to itself. """
	__slots__ = ()
	def __repr__(self): return '<EOF>'

EOF = _EndOfInput()

class LexerError(ValueError):
	""" Base class of all exceptions arising from the lexer machinery itself. """

class SpecificationError(LexerError):
	""" Something is wrong with the state/rule table handed to the Lexer. """

class MissingSpecification(SpecificationError):
	def __init__(self):
		super().__init__("no specification supplied")

class DuplicateState(SpecificationError):
	def __init__(self, state):
		super().__init__("Duplicate state declaration encountered for state %r" % (state,))
		self.state = state

class InvalidPattern(SpecificationError):
	"""
	Parameters are:
		the state in which the pattern was declared,
		the offending pattern,
		and the reason the regular-expression compiler gave.
	"""
	def __init__(self, state, pattern, reason):
		super().__init__("Invalid regexp %r in state %r (%s)" % (pattern, state, reason))
		self.state, self.pattern, self.reason = state, pattern, reason

class InvalidAction(SpecificationError):
	def __init__(self, state, pattern, action):
		super().__init__("Action for %r in state %r is neither callable nor None: %r" % (pattern, state, action))
		self.state, self.pattern, self.action = state, pattern, action

class MissingCallback(LexerError):
	def __init__(self):
		super().__init__("no callback provided")

class UnknownState(LexerError):
	def __init__(self, state):
		super().__init__("Unknown state %r requested" % (state,))
		self.state = state

class ScanFailure(NamedTuple):
	"""
	Lexer.collect(...) appends one of these in place of the remaining tokens
	if a scan action raises. `kind` is the exception's class name and `message`
	its text; the exception itself rides along for anyone who wants the traceback.
	"""
	kind: str
	message: str
	exception: BaseException = None
	
	@classmethod
	def from_exception(cls, ex:BaseException) -> "ScanFailure":
		return cls(type(ex).__name__, str(ex), ex)
