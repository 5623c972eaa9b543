"""
Match selection: the "maximal munch" part of the scanning algorithm.

Every rule of the active state gets a try at the current position. Zero-width
matches are thrown out, because taking one would make no progress. Survivors are
ranked longest-first, and among equal lengths the earliest-declared rule goes first.
The engine walks that ranking, so a rejected candidate simply cedes to the next.
"""
from typing import NamedTuple, Sequence

from .specification import Rule

class Candidate(NamedTuple):
	text: str
	length: int
	rule: Rule
	index: int # Declaration order within the state. Used only to break ties.

def find_candidates(rules:Sequence[Rule], text:str, position:int) -> list[Candidate]:
	""" Every non-empty match anchored exactly at `position`, in declaration order. """
	found = []
	for index, rule in enumerate(rules):
		m = rule.regex.match(text, position)
		if m is not None and m.end() > position:
			found.append(Candidate(m.group(), m.end() - position, rule, index))
	return found

def rank_candidates(rules:Sequence[Rule], text:str, position:int) -> list[Candidate]:
	""" An empty result means nothing matched; the engine then falls back on a single raw character. """
	return sorted(find_candidates(rules, text, position), key=lambda c: (-c.length, c.index))
