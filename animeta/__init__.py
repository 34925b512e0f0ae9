"""Deterministic metadata extraction for a corpus of animation projects.

Modules:
- ts_parse.py: tree-sitter parsing of TypeScript/JavaScript sources.
- imports.py / calls.py: import and call/JSX extraction from one syntax tree.
- structure.py / hashing.py: file layout classification and content hashing.
- analyze.py: per-project orchestration into one metadata document.
- attribution.py / patterns.py: package attribution and pattern rules.
- stats.py: corpus-wide aggregation of metadata documents.
- pipeline.py: on-disk entry points used by the CLI.
"""

__all__ = [
	"ts_parse",
	"imports",
	"calls",
	"structure",
	"hashing",
	"analyze",
	"attribution",
	"patterns",
	"stats",
	"pipeline",
]
