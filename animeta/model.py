from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Set

from pydantic import BaseModel


def utc_timestamp() -> str:
	"""ISO-8601 UTC with millisecond precision, e.g. 2025-01-31T12:00:00.000Z."""
	return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ImportKind(str, Enum):
	DEFAULT = "default"
	NAMED = "named"
	NAMESPACE = "namespace"
	TYPE_ONLY = "type-only"


class CallKind(str, Enum):
	HOOK = "hook"
	FUNCTION = "function"
	COMPONENT = "component"
	IGNORED = "ignored"


class ImportRecord(BaseModel):
	module: str
	kind: ImportKind
	names: List[str] = []


class CallRecord(BaseModel):
	name: str
	kind: CallKind


def _append_unique(bucket: Dict[str, List[str]], key: str, value: str) -> None:
	values = bucket.setdefault(key, [])
	if value not in values:
		values.append(value)


class ImportTable(BaseModel):
	"""Imports of one file (or one project), grouped by module specifier.

	Keys keep first-encounter order; package attribution depends on it.
	"""

	packages: List[str] = []
	named_imports: Dict[str, List[str]] = {}
	default_imports: Dict[str, List[str]] = {}
	namespace_imports: Dict[str, List[str]] = {}
	type_imports: Dict[str, List[str]] = {}

	def add_module(self, module: str) -> None:
		if module not in self.packages:
			self.packages.append(module)

	def add(self, record: ImportRecord) -> None:
		self.add_module(record.module)
		bucket = {
			ImportKind.DEFAULT: self.default_imports,
			ImportKind.NAMED: self.named_imports,
			ImportKind.NAMESPACE: self.namespace_imports,
			ImportKind.TYPE_ONLY: self.type_imports,
		}[record.kind]
		for name in record.names:
			_append_unique(bucket, record.module, name)

	def merge(self, other: ImportTable) -> None:
		for module in other.packages:
			self.add_module(module)
		for mine, theirs in (
			(self.named_imports, other.named_imports),
			(self.default_imports, other.default_imports),
			(self.namespace_imports, other.namespace_imports),
			(self.type_imports, other.type_imports),
		):
			for module, names in theirs.items():
				for name in names:
					_append_unique(mine, module, name)


class CallSet(BaseModel):
	hooks: Set[str] = set()
	functions: Set[str] = set()
	components: Set[str] = set()
	namespace_calls: Dict[str, Set[str]] = {}

	def add(self, record: CallRecord) -> None:
		if record.kind == CallKind.HOOK:
			self.hooks.add(record.name)
		elif record.kind == CallKind.FUNCTION:
			self.functions.add(record.name)
		elif record.kind == CallKind.COMPONENT:
			self.components.add(record.name)

	def add_namespace_call(self, namespace: str, member: str) -> None:
		self.namespace_calls.setdefault(namespace, set()).add(member)

	def merge(self, other: CallSet) -> None:
		self.hooks |= other.hooks
		self.functions |= other.functions
		self.components |= other.components
		for namespace, members in other.namespace_calls.items():
			self.namespace_calls.setdefault(namespace, set()).update(members)


class FileStructure(BaseModel):
	entry: Optional[str] = None
	components: List[str] = []
	hooks: List[str] = []
	utils: List[str] = []
	types: List[str] = []
	constants: List[str] = []
	assets: List[str] = []
	other: List[str] = []


class PackageDetail(BaseModel):
	imports: List[str] = []
	hooks: List[str] = []
	functions: List[str] = []
	components: List[str] = []


class MetadataStats(BaseModel):
	total_files: int = 0
	total_packages: int = 0
	total_hooks: int = 0
	total_functions: int = 0
	total_components: int = 0
	total_patterns: int = 0
	total_techniques: int = 0


class AnimationMetadata(BaseModel):
	animation_slug: str
	content_hash: str
	hash_algorithm: str
	extracted_at: str
	file_structure: FileStructure
	packages: List[str] = []
	packages_with_versions: Dict[str, str] = {}
	packages_detail: Dict[str, PackageDetail] = {}
	hooks: List[str] = []
	functions: List[str] = []
	components: List[str] = []
	patterns: List[str] = []
	techniques: List[str] = []
	stats: MetadataStats


class AnimationSummary(BaseModel):
	slug: str
	total_files: int
	total_packages: int
	total_hooks: int
	total_patterns: int
	extracted_at: str
	packages: List[str] = []
	hooks: List[str] = []
	patterns: List[str] = []
	techniques: List[str] = []
	components: List[str] = []
	functions: List[str] = []
	packages_detail: Dict[str, PackageDetail] = {}


class AggregateStats(BaseModel):
	total_animations: int
	generated_at: str
	packages: Dict[str, int] = {}
	hooks: Dict[str, int] = {}
	functions: Dict[str, int] = {}
	components: Dict[str, int] = {}
	patterns: Dict[str, int] = {}
	techniques: Dict[str, int] = {}
	packages_index: Dict[str, List[str]] = {}
	hooks_index: Dict[str, List[str]] = {}
	patterns_index: Dict[str, List[str]] = {}
	techniques_index: Dict[str, List[str]] = {}
	components_by_package: Dict[str, Dict[str, int]] = {}
	hooks_by_package: Dict[str, Dict[str, int]] = {}
	functions_by_package: Dict[str, Dict[str, int]] = {}
	animations: List[AnimationSummary] = []
