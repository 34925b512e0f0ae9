from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

from .attribution import attribute_packages, is_relative
from .calls import extract_calls
from .config import DEFAULT_CONFIG, ExtractorConfig
from .fs_scan import list_source_files
from .hashing import compute_content_hash
from .imports import extract_imports
from .model import AnimationMetadata, CallSet, ImportTable, MetadataStats, utc_timestamp
from .patterns import detect_patterns
from .structure import classify_files
from .ts_parse import SourceParser
from .versions import package_versions


logger = logging.getLogger(__name__)


class ProjectAccumulator(BaseModel):
	"""Per-file imports and calls merged into project-wide sets."""

	imports: ImportTable = Field(default_factory=ImportTable)
	calls: CallSet = Field(default_factory=CallSet)
	file_count: int = 0

	def add_file(self, imports: ImportTable, calls: CallSet) -> None:
		self.imports.merge(imports)
		self.calls.merge(calls)
		self.file_count += 1


def _without_relative(imports: Mapping[str, List[str]]) -> Dict[str, List[str]]:
	return {module: sorted(names) for module, names in imports.items() if not is_relative(module)}


def collect_project(
	files: List[str],
	config: ExtractorConfig = DEFAULT_CONFIG,
	parser: Optional[SourceParser] = None,
) -> ProjectAccumulator:
	"""Parse every file; any ParseFailure aborts the whole project."""
	parser = parser or SourceParser(config)
	logger.info("Analyzing %d files...", len(files))
	acc = ProjectAccumulator()
	for path in files:
		tree = parser.parse_file(path)
		acc.add_file(extract_imports(tree), extract_calls(tree, config))
	return acc


def analyze_project(
	root: str,
	slug: str,
	config: ExtractorConfig = DEFAULT_CONFIG,
	declared_versions: Optional[Dict[str, str]] = None,
	parser: Optional[SourceParser] = None,
	extracted_at: Optional[str] = None,
) -> AnimationMetadata:
	files = list_source_files(root, config)
	acc = collect_project(files, config, parser)

	packages = sorted(pkg for pkg in acc.imports.packages if not is_relative(pkg))
	named_imports = _without_relative(acc.imports.named_imports)
	namespace_imports = _without_relative(acc.imports.namespace_imports)
	namespace_calls = {ns: sorted(members) for ns, members in acc.calls.namespace_calls.items()}
	hooks = sorted(acc.calls.hooks)
	functions = sorted(acc.calls.functions)
	components = sorted(acc.calls.components)

	packages_detail = attribute_packages(
		packages,
		named_imports,
		namespace_imports,
		namespace_calls,
		hooks,
		functions,
		components,
		config,
	)
	patterns, techniques = detect_patterns(hooks, functions, components)

	return AnimationMetadata(
		animation_slug=slug,
		content_hash=compute_content_hash(root, config),
		hash_algorithm=config.hash_algorithm,
		extracted_at=extracted_at or utc_timestamp(),
		file_structure=classify_files(root, files),
		packages=packages,
		packages_with_versions=package_versions(packages, declared_versions or {}),
		packages_detail=packages_detail,
		hooks=hooks,
		functions=functions,
		components=components,
		patterns=patterns,
		techniques=techniques,
		stats=MetadataStats(
			total_files=acc.file_count,
			total_packages=len(packages),
			total_hooks=len(hooks),
			total_functions=len(functions),
			total_components=len(components),
			total_patterns=len(patterns),
			total_techniques=len(techniques),
		),
	)
