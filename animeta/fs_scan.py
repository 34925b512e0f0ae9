from __future__ import annotations

import os
from typing import Dict, Iterable, List

from .config import DEFAULT_CONFIG, ExtractorConfig


def detect_grammar(filename: str, config: ExtractorConfig = DEFAULT_CONFIG) -> str:
	return config.grammar_for(filename)


def to_rel_path(root: str, file_path: str) -> str:
	# Always "/" separated so paths and hashes are identical across platforms.
	return os.path.relpath(file_path, root).replace(os.sep, "/")


def _walk_files(root: str, extensions: Iterable[str], ignored_files: Iterable[str]) -> List[str]:
	exts = tuple(extensions)
	ignored = set(ignored_files)
	files: List[str] = []
	for dirpath, dirnames, filenames in os.walk(root):
		for filename in filenames:
			if filename in ignored:
				continue
			if filename.endswith(exts):
				files.append(os.path.join(dirpath, filename))
	return sorted(files, key=lambda p: to_rel_path(root, p))


def list_source_files(root: str, config: ExtractorConfig) -> List[str]:
	"""Parseable source files under root, sorted by relative path."""
	return _walk_files(root, config.source_extensions, config.ignored_files)


def list_hash_files(root: str, config: ExtractorConfig) -> List[str]:
	"""Source and data files contributing to the content hash."""
	return _walk_files(root, config.hash_extensions, config.ignored_files)


def list_project_dirs(animations_dir: str) -> Dict[str, str]:
	"""Map each project slug to its directory, skipping hidden entries."""
	projects: Dict[str, str] = {}
	for name in sorted(os.listdir(animations_dir)):
		if name.startswith("."):
			continue
		path = os.path.join(animations_dir, name)
		if os.path.isdir(path):
			projects[name] = path
	return projects
