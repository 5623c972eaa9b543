r"""
Hook regular expression patterns up to scan actions without writing the nested
table out by hand. For instance:

	d = Definition()
	d.ignore(r'\s+')
	d.token('number', r'[0-9]+', int)
	@d.on(r'"')
	def quote(yy): yy.begin('string')
	with d.state('string') as s:
		s.token('text', r'[^"]+')
		@s.on(r'"')
		def unquote(yy): yy.begin(INITIAL)
	tokens = list(d.get_lexer().scanner('12 "ab"'))

States come into being the first time a rule mentions them; the first one so
mentioned is the initial state. Rules keep the order in which they were given.
"""
from typing import Callable

from .interface import INITIAL
from .engine import Lexer

class Definition:
	def __init__(self):
		self.__table = {}
		self.__lexer = None
		self.__awaiting_action = False
	
	def table(self) -> dict:
		""" The specification table as built so far, in the form Lexer(...) accepts. """
		if self.__awaiting_action: raise AssertionError('You forgot to provide the action for the final pattern!')
		return {state: list(rules) for state, rules in self.__table.items()}
	
	def get_lexer(self) -> Lexer:
		if self.__lexer is None: self.__lexer = Lexer(self.table())
		return self.__lexer
	
	def __install_rule(self, state, pattern:str, action):
		if self.__lexer is not None: raise AssertionError('This definition already has a lexer; it is too late to add rules.')
		self.__table.setdefault(state, []).append((pattern, action))
	
	def on(self, pattern:str, *, state=INITIAL):
		"""
		@definition.on(r'[A-Za-z_]+')
		def word(yy): return ('word', yy.text)
		
		Calling the decorator with None makes a rule that silently skips what it matches.
		"""
		if self.__awaiting_action: raise AssertionError('You forgot to provide the action for the previous pattern!')
		self.__awaiting_action = True
		def decorator(fn):
			assert self.__awaiting_action
			self.__awaiting_action = False
			assert fn is None or callable(fn), type(fn)
			self.__install_rule(state, pattern, fn)
			return fn
		return decorator
	
	def token(self, kind:str, pattern:str, fn:Callable=None, *, state=INITIAL):
		""" Every match of the pattern becomes the token (kind, fn(matched text)), or (kind, matched text) without fn. """
		if fn is None: self.on(pattern, state=state)(lambda yy: (kind, yy.text))
		else: self.on(pattern, state=state)(lambda yy: (kind, fn(yy.text)))
	
	def literal(self, pattern:str, *, state=INITIAL):
		""" Every match of the pattern is its own token: the matched text itself. """
		self.on(pattern, state=state)(lambda yy: yy.text)
	
	def ignore(self, pattern:str, *, state=INITIAL):
		""" Skip what matches the pattern. """
		self.on(pattern, state=state)(None)
	
	def state(self, name): return StateContext(self, name)

class StateContext:
	""" Python's context manager protocol makes for tidy definitions of rules all in the same state. """
	def __init__(self, definition:Definition, name):
		self.__definition = definition
		self.name = name
	def __enter__(self): return self
	def __exit__(self, exc_type, exc_val, exc_tb): pass
	def on(self, pattern:str): return self.__definition.on(pattern, state=self.name)
	def token(self, kind:str, pattern:str, fn:Callable=None): self.__definition.token(kind, pattern, fn, state=self.name)
	def literal(self, pattern:str): self.__definition.literal(pattern, state=self.name)
	def ignore(self, pattern:str): self.__definition.ignore(pattern, state=self.name)
