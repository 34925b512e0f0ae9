from __future__ import annotations

import posixpath
from typing import Iterable, List

from .fs_scan import to_rel_path
from .model import FileStructure


ENTRY_FILES = ("index.tsx", "index.ts")


def classify_path(rel_path: str) -> str:
	"""Return the FileStructure bucket for a "/" separated relative path."""
	dir_name, file_name = posixpath.split(rel_path)
	if file_name in ENTRY_FILES:
		return "entry"
	if "components" in dir_name or dir_name == "":
		return "components"
	if "hooks" in dir_name:
		return "hooks"
	if "utils" in dir_name:
		return "utils"
	if "types" in dir_name or "types" in file_name:
		return "types"
	if "constants" in dir_name or "constants" in file_name:
		return "constants"
	return "other"


def classify_files(root: str, files: Iterable[str]) -> FileStructure:
	structure = FileStructure()
	for path in files:
		rel_path = to_rel_path(root, path)
		bucket = classify_path(rel_path)
		if bucket == "entry":
			# Later index files replace earlier ones.
			structure.entry = rel_path
			continue
		bucket_list: List[str] = getattr(structure, bucket)
		bucket_list.append(rel_path)
	return structure
