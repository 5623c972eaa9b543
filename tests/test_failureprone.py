import io, unittest
from contextlib import redirect_stderr
from reglex.support.failureprone import SourceText, illustration

class TestSourceText(unittest.TestCase):
	def setUp(self):
		self.source = SourceText("first\nsecond line\r\nthird", filename='sample.txt')
	
	def test_01_row_col(self):
		self.assertEqual((1, 0), self.source.find_row_col(0))
		self.assertEqual((2, 3), self.source.find_row_col(9))
		self.assertEqual((3, 2), self.source.find_row_col(21))
	
	def test_02_line_of_text(self):
		self.assertEqual("second line\r\n", self.source.line_of_text(2))
		self.assertEqual("third", self.source.line_of_text(3))
	
	def test_03_normal_line_breaks(self):
		source = SourceText("a\rb\r\nc", line_breaks='normal')
		self.assertEqual((2, 0), source.find_row_col(2))
		self.assertEqual((3, 0), source.find_row_col(5))
	
	def test_04_complaint(self):
		expect = "sample.txt: line 2, column 8: oops\n >>> second line\n            ^^^^ near here"
		self.assertEqual(expect, self.source.complaint(slice(13, 17), "oops"))
		err = io.StringIO()
		with redirect_stderr(err): SourceText("xy").complain(slice(1, 2), "bad")
		self.assertEqual("At line 1, column 2: bad\n >>> xy\n      ^ near here\n", err.getvalue())

class TestIllustration(unittest.TestCase):
	def test_01_tabs_are_kept(self):
		self.assertEqual("\tab cd\n\t   ^^ here", illustration("\tab cd", 4, 2, caption="here"))
	
	def test_02_underline_is_at_least_one_wide(self):
		self.assertEqual("abc\n   ^ near here", illustration("abc", 3))


if __name__ == '__main__':
	unittest.main()
