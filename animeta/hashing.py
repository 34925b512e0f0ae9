from __future__ import annotations

import hashlib
from typing import Iterable

from .config import DEFAULT_CONFIG, ExtractorConfig
from .fs_scan import list_hash_files, to_rel_path


def hash_files(root: str, files: Iterable[str], algorithm: str = "sha256") -> str:
	"""Digest each file's relative path followed by its bytes, in sorted path order.

	The relative path is part of the digest so renames change the hash.
	"""
	digest = hashlib.new(algorithm)
	for rel_path, path in sorted((to_rel_path(root, p), p) for p in files):
		digest.update(rel_path.encode("utf-8"))
		with open(path, "rb") as fh:
			digest.update(fh.read())
	return digest.hexdigest()


def compute_content_hash(root: str, config: ExtractorConfig = DEFAULT_CONFIG) -> str:
	return hash_files(root, list_hash_files(root, config), config.hash_algorithm)
