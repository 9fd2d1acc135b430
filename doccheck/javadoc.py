"""Decide whether a declaration carries a Javadoc comment.

tree-sitter keeps comments in the tree as ordinary siblings of the
declarations around them. A Javadoc comment counts as attached when it is the
node's immediately preceding sibling. Comments that precede a node but are
separated from it by other comments (``/** doc */ // note``) are "orphans";
they are recovered by scanning backward over the comment siblings that
separate the node from the previous declaration or token.

Orphan recovery is a heuristic that relies on sibling order, so unusual
comment placement can defeat it.
"""

from __future__ import annotations

from typing import List, Optional

from tree_sitter import Node

from .java_parse import is_comment, is_javadoc_comment


def attached_javadoc(node: Node) -> Optional[Node]:
	previous = node.prev_sibling
	if previous is not None and is_javadoc_comment(previous):
		return previous
	return None


def orphan_comments(node: Node) -> List[Node]:
	"""Comments between ``node`` and its nearest preceding non-comment sibling.

	Returned in source order. Empty for the root node.
	"""
	parent = node.parent
	if parent is None:
		return []
	siblings = sorted(parent.children, key=lambda child: child.start_byte)
	index = None
	for i, sibling in enumerate(siblings):
		if sibling.start_byte == node.start_byte and sibling.end_byte == node.end_byte and sibling.type == node.type:
			index = i
			break
	if index is None:
		return []

	orphans: List[Node] = []
	i = index - 1
	while i >= 0 and is_comment(siblings[i]):
		orphans.append(siblings[i])
		i -= 1
	orphans.reverse()
	return orphans


def is_documented(node: Node) -> bool:
	if attached_javadoc(node) is not None:
		return True
	return any(is_javadoc_comment(comment) for comment in orphan_comments(node))
