"""
The action context, conventionally called `yy` after lex(1), is how a scan
action finds out what matched and how it talks back to the engine.

There is one context per scanner, rewritten in place for every candidate the
engine tries. Treat it as borrowed: it means something only while your action
is running, and holding onto it afterward gets you whatever the next match put there.
"""

class ActionContext:
	"""
	Read these as you please:
		text, length: the matched text (after any truncation by `less`) and its length.
		position: absolute offset of the match within the input.
		line, column: zero-based location of the match.
			After the match is committed, the next line and column account for every
			character the cursor moved over, including those taken by `input()`.
			Classic lex counts only the matched text, which drifts after a peek.
		scanner: the Scanner doing the work, should you need more context for an error message.
	
	The remaining methods are the control protocol. See each for details.
	"""
	
	def __init__(self, scanner, subject:str):
		self.scanner = scanner
		self.__subject = subject
		self.text, self.length = None, None
		self.position, self.line, self.column = None, None, None
		self.reset()
	
	def reset(self):
		""" Forget any control requests. The engine calls this before each candidate attempt. """
		self.offset = 0
		self.truncated = None
		self.rejected = False
		self.new_state = None
	
	def present(self, text:str):
		self.reset()
		self.text, self.length = text, len(text)
	
	def input(self) -> str:
		"""
		Analogous to input() in lex: peek at the next character past the current
		match and whatever has been peeked already. Characters peeked this way are
		consumed along with the match unless given back with `unput()`.
		Past the end of the text, the answer is the empty string; it still counts
		as a peek, so every `input()` pairs with one `unput()`.
		"""
		at = self.position + self.length + self.offset
		self.offset += 1
		return self.__subject[at:at + 1]
	
	def unput(self) -> int:
		""" Give back one character taken by `input()`. Returns the number still outstanding. """
		if self.offset > 0: self.offset -= 1
		return self.offset
	
	def less(self, nr_chars:int) -> int:
		"""
		Analogous to yyless(n): keep only the first `nr_chars` characters of this
		match and return the rest to the input stream, to be matched again next time.
		Any characters taken by `input()` are given back too. Returns the new length.
		"""
		if not 0 <= nr_chars <= self.length:
			raise ValueError("less(%r) is out of range for a match of length %d" % (nr_chars, self.length))
		self.offset = 0
		self.text = self.truncated = self.text[:nr_chars]
		self.length = nr_chars
		return nr_chars
	
	def pushback(self, nr_chars:int) -> int:
		""" Like `less`, but says how many characters to drop from the end. """
		return self.less(self.length - nr_chars)
	
	def reject(self):
		"""
		Like REJECT in lex, except that it does not interrupt your action: it just
		tells the engine to try the next-best match once you return. So make it
		the last thing you do. (A change of state with `begin` still overrides it.)
		"""
		self.rejected = True
	
	def begin(self, state) -> str:
		"""
		Analogous to BEGIN: switch to another state, named or given by ordinal
		(0 is first declared). Switching to a different state takes effect when
		this action returns, commits this match even over a `reject()`, and stops
		any further candidates being tried.
		"""
		self.new_state = self.scanner.specification.resolve(state)
		return self.new_state
	
	def state(self) -> str:
		""" The scanner's currently-active state. """
		return self.scanner.condition
