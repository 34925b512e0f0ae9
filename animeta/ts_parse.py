"""Parse TypeScript / JavaScript sources with tree-sitter."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from .config import DEFAULT_CONFIG, ExtractorConfig
from .errors import ParseFailure
from .fs_scan import detect_grammar


logger = logging.getLogger(__name__)


def _load_language(grammar: str) -> Language:
	if grammar == "tsx":
		return Language(tree_sitter_typescript.language_tsx())
	if grammar == "typescript":
		return Language(tree_sitter_typescript.language_typescript())
	if grammar == "javascript":
		return Language(tree_sitter_javascript.language())
	raise ValueError(f"No grammar for {grammar!r}")


def iter_nodes(root: Node) -> Iterator[Node]:
	"""Pre-order walk over every node below root (root included)."""
	stack = [root]
	while stack:
		node = stack.pop()
		yield node
		stack.extend(reversed(node.children))


def node_text(node: Optional[Node]) -> str:
	if node is None or node.text is None:
		return ""
	return node.text.decode("utf-8")


def _first_error(root: Node) -> Optional[Node]:
	for node in iter_nodes(root):
		if node.type == "ERROR" or node.is_missing:
			return node
	return None


class SourceParser:
	"""Builds one tree-sitter parser per grammar and reuses it across files."""

	def __init__(self, config: ExtractorConfig = DEFAULT_CONFIG) -> None:
		self.config = config
		self._parsers: Dict[str, Parser] = {}

	def _parser_for(self, grammar: str) -> Parser:
		if grammar not in self._parsers:
			self._parsers[grammar] = Parser(_load_language(grammar))
		return self._parsers[grammar]

	def parse(self, path: str, source: bytes) -> Tree:
		grammar = detect_grammar(path, self.config)
		if grammar == "unknown":
			raise ParseFailure(path, "unsupported file extension")
		try:
			source.decode("utf-8")
		except UnicodeDecodeError as e:
			raise ParseFailure(path, f"not valid UTF-8 ({e.reason})") from e

		tree = self._parser_for(grammar).parse(source)
		if tree.root_node.has_error:
			bad = _first_error(tree.root_node)
			line = bad.start_point[0] + 1 if bad is not None else None
			raise ParseFailure(path, "syntax error", line)
		logger.debug("Parsed %s with %s grammar", path, grammar)
		return tree

	def parse_file(self, path: str) -> Tree:
		with open(path, "rb") as fh:
			source = fh.read()
		return self.parse(path, source)
