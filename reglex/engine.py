"""
The scan engine proper, along with the Lexer that owns a compiled specification
and hands out scanners.

A Scanner works on one text. Each call to `scan()` fetches at most one token:
it returns the token, or None if the text consumed produced no token (such as
whitespace), or EOF once the text is exhausted. Iterating over the scanner
gives just the tokens, which is usually what you want.
"""
from typing import Callable

from .interface import EOF, LexerError, MissingCallback, ScanFailure
from .specification import Specification, compile_specification
from .selection import rank_candidates
from .context import ActionContext

class Scanner:
	"""
	One scanning session over one input text. Not to be shared between threads;
	make another scanner instead, which is cheap.
	"""
	
	def __init__(self, specification:Specification, text:str, start=None):
		if not isinstance(text, str): raise TypeError(type(text))
		self.specification = specification
		self.__text = text
		self.__size = len(text)
		self.__cursor = 0
		self.__line = 0
		self.__column = 0
		self.__condition = specification.initial() if start is None else specification.resolve(start)
		self.__yy = ActionContext(self, text)
	
	@property
	def condition(self): return self.__condition
	@property
	def position(self) -> int: return self.__cursor
	@property
	def line(self) -> int: return self.__line
	@property
	def column(self) -> int: return self.__column
	@property
	def context(self) -> ActionContext:
		""" The action context as of the most recent candidate attempt. Good for post-mortems. """
		return self.__yy
	
	def has_more(self) -> bool:
		return self.__cursor < self.__size
	
	def scan(self):
		""" This is how the magic happens. """
		if not self.has_more(): return EOF
		text, cursor, yy = self.__text, self.__cursor, self.__yy
		yy.position, yy.line, yy.column = cursor, self.__line, self.__column
		
		candidates = rank_candidates(self.specification.rules(self.__condition), text, cursor)
		if not candidates:
			yy.present(text[cursor])
			self.__advance(1)
			return yy.text
		
		token = None
		for candidate in candidates:
			yy.present(candidate.text)
			action = candidate.rule.action
			if action is None:
				token = None
				break
			token = action(yy)
			if yy.new_state is not None and yy.new_state != self.__condition: break
			if not yy.rejected: break
		# Falling off the end means everybody rejected; the last candidate is consumed anyway.
		
		self.__advance(max(1, yy.length + yy.offset))
		if yy.new_state is not None: self.__condition = yy.new_state
		return token
	
	def __advance(self, nr_chars:int):
		""" Move the cursor forward, keeping track of line and column along the way. """
		left = self.__cursor
		right = self.__cursor = min(left + nr_chars, self.__size)
		breaks = self.__text.count('\n', left, right)
		if breaks:
			self.__line += breaks
			self.__column = right - self.__text.rindex('\n', left, right) - 1
		else:
			self.__column += right - left
	
	def __iter__(self):
		while True:
			token = self.scan()
			if token is EOF: return
			if token is not None: yield token

class Lexer:
	"""
	Build one of these from a specification table (see module `specification`),
	then scan as many texts as you like with it.
	"""
	
	def __init__(self, table):
		self.specification = compile_specification(table)
	
	@property
	def states(self): return self.specification.states
	
	def scanner(self, text:str, *, start=None) -> Scanner:
		""" Open a new scan session. Call its `scan()` method for tokens one at a time. """
		return Scanner(self.specification, text, start)
	
	def lex(self, text:str, callback:Callable=None, *, start=None):
		"""
		Similar to yylex(): consume all the input, calling `callback` with each token.
		Whatever a scan action raises goes straight through to the caller.
		"""
		if callback is None: raise MissingCallback()
		for token in self.scanner(text, start=start): callback(token)
	
	def collect(self, text:str, *, start=None) -> list:
		"""
		Consume all the input and return the list of tokens. If a scan action
		raises, the tokens so far come back with a ScanFailure tacked on the end.
		Trouble with the lexer itself (such as an unknown state) is not caught here.
		"""
		tokens = []
		try: self.lex(text, tokens.append, start=start)
		except LexerError: raise
		except Exception as ex: tokens.append(ScanFailure.from_exception(ex))
		return tokens
