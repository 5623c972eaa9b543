"""
Easing over the process of showing where things went wrong.

The scanner already knows the line and column of every match, but an error
report is much friendlier if it shows the offending line with the trouble
underlined. The SourceText handles that: it can find the row and column of an
offset, slice out a line, and format a complaint with a caret illustration.

Line breaks are a funny thing, but the scanner counts only the line feed as a line break,
so that is the default here too. Pass `line_breaks='normal'` if you would rather
also honor the Apple and DOS conventions.
"""

import bisect, re, sys

LINEBREAK_MODE = {
	'unix': re.compile(r'\n'),
	'normal': re.compile(r'\r\n?|\n'),
}

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. Useful for polite error messages. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline = '^' * max(1, min(width, len(single_line) - start))
	return prefix + single_line.rstrip() + '\n' + blanks + underline + " " + caption

class SourceText:
	""" Wrapper for source text: participates in half-respectable error-display with context. """
	def __init__(self, content:str, line_breaks='unix', filename:str=None, first_line=1):
		self.content = content
		self.filename = filename
		self.line_breaks = line_breaks
		self.first_line = first_line
		self.__bounds = None
	
	def __make_bounds(self):
		""" Lazily only find line breaks if it turns out to be necessary for a particular text. """
		if self.__bounds is None:
			inside = [m.end() for m in LINEBREAK_MODE[self.line_breaks].finditer(self.content)]
			self.__bounds = [0] + inside + [len(self.content)]
		return self.__bounds

	def find_row_col(self, index:int):
		""" Based on a character index offset from the start of text. Respects self.first_line. """
		bounds = self.__make_bounds()
		row = bisect.bisect_right(bounds, index, hi=len(bounds) - 1) - 1
		return row + self.first_line, index - bounds[row]
	
	def line_of_text(self, row):
		""" Argument respects self.first_line. """
		bounds = self.__make_bounds()
		r = max(0, row - self.first_line)
		return self.content[bounds[r]:bounds[r + 1]]
	
	def complaint(self, a_slice:slice, message:str):
		left, right = a_slice.start, a_slice.stop
		row, col = self.find_row_col(left)
		prefix = "At" if self.filename is None else str(self.filename) + ":"
		reference = "%s line %d, column %d: %s" % (prefix, row, col + 1, message)
		return "%s\n%s" % (reference, illustration(self.line_of_text(row), col, right - left, prefix=' >>> '))

	def complain(self, a_slice:slice, message:str):
		print(self.complaint(a_slice, message), file=sys.stderr)
