import re, unittest
from reglex.specification import Rule
from reglex.selection import rank_candidates, find_candidates, Candidate

RULES = tuple(Rule(p, re.compile(p), None) for p in ['[a-z]', '[a-z]+', 'if', 'x*', '[0-9]+'])

class TestSelection(unittest.TestCase):
	def test_01_ranking(self):
		ranked = rank_candidates(RULES, 'if x', 0)
		self.assertEqual([('if', 1), ('if', 2), ('i', 0)], [(c.text, c.index) for c in ranked])
		self.assertTrue(all(isinstance(c, Candidate) for c in ranked))
		self.assertEqual([2, 2, 1], [c.length for c in ranked])
		self.assertIs(RULES[1], ranked[0].rule)
	
	def test_02_empty_matches_are_dropped(self):
		self.assertEqual(['[a-z]', '[a-z]+'], [c.rule.pattern for c in find_candidates(RULES, 'ab', 0)])
		self.assertEqual([('xx', 1), ('xx', 3), ('x', 0)], [(c.text, c.index) for c in rank_candidates(RULES, 'xx', 0)])
	
	def test_03_matching_is_anchored_at_the_position(self):
		self.assertEqual([], rank_candidates(RULES, 'ab 12', 2))
		self.assertEqual(['12'], [c.text for c in rank_candidates(RULES, 'ab 12', 3)])
	
	def test_04_no_rules(self):
		self.assertEqual([], rank_candidates((), 'abc', 0))


if __name__ == '__main__':
	unittest.main()
