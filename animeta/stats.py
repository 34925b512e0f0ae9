"""Fold every per-animation metadata document into corpus-wide statistics.

Each document contributes at most once to any counter: a value appearing in
a project counts that project, no matter how often the project uses it.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Dict, Iterable, List, Optional

from .config import DEFAULT_CONFIG, ExtractorConfig
from .errors import MetadataNotFound
from .model import AggregateStats, AnimationMetadata, AnimationSummary, utc_timestamp


logger = logging.getLogger(__name__)


def normalize_component(name: str, config: ExtractorConfig = DEFAULT_CONFIG) -> str:
	"""Touchable.Canvas -> Canvas, Animated.View -> View, A.B.C -> C."""
	for prefix in config.wrapper_prefixes:
		if name.startswith(prefix):
			return name[len(prefix):]
	if "." in name:
		return name.rsplit(".", 1)[-1]
	return name


def sort_by_count(counts: Dict[str, int]) -> Dict[str, int]:
	# sorted() is stable, so equal counts keep first-seen order.
	return dict(sorted(counts.items(), key=lambda item: -item[1]))


def _bump(counts: Dict[str, int], values: Iterable[str]) -> None:
	for value in values:
		counts[value] = counts.get(value, 0) + 1


def _index(index: Dict[str, List[str]], values: Iterable[str], slug: str) -> None:
	for value in values:
		index.setdefault(value, []).append(slug)


def _wrapped_skia_components(metadata: AnimationMetadata, config: ExtractorConfig) -> List[str]:
	"""Skia components the project only renders behind a Touchable. or Animated. wrapper."""
	found: List[str] = []
	for comp in metadata.components:
		if comp.startswith(config.wrapper_prefixes):
			normalized = normalize_component(comp, config)
			if normalized in config.skia_components and normalized not in found:
				found.append(normalized)
	return found


def _implied_skia_components(metadata: AnimationMetadata, config: ExtractorConfig) -> List[str]:
	found: List[str] = []
	for package, implied in config.skia_backed_packages.items():
		if package in metadata.packages:
			found.extend(c for c in implied if c not in found)
	return found


def summarize_animation(metadata: AnimationMetadata) -> AnimationSummary:
	return AnimationSummary(
		slug=metadata.animation_slug,
		total_files=metadata.stats.total_files,
		total_packages=metadata.stats.total_packages,
		total_hooks=metadata.stats.total_hooks,
		total_patterns=metadata.stats.total_patterns,
		extracted_at=metadata.extracted_at,
		packages=metadata.packages,
		hooks=metadata.hooks,
		patterns=metadata.patterns,
		techniques=metadata.techniques,
		components=metadata.components,
		functions=metadata.functions,
		packages_detail=metadata.packages_detail,
	)


class StatsAggregator:
	"""Mutable fold over metadata documents; build() returns the sorted result."""

	def __init__(self, config: ExtractorConfig = DEFAULT_CONFIG) -> None:
		self.config = config
		self.total = 0
		self.packages: Dict[str, int] = {}
		self.hooks: Dict[str, int] = {}
		self.functions: Dict[str, int] = {}
		self.components: Dict[str, int] = {}
		self.patterns: Dict[str, int] = {}
		self.techniques: Dict[str, int] = {}
		self.packages_index: Dict[str, List[str]] = {}
		self.hooks_index: Dict[str, List[str]] = {}
		self.patterns_index: Dict[str, List[str]] = {}
		self.techniques_index: Dict[str, List[str]] = {}
		self.components_by_package: Dict[str, Dict[str, int]] = {}
		self.hooks_by_package: Dict[str, Dict[str, int]] = {}
		self.functions_by_package: Dict[str, Dict[str, int]] = {}
		self.animations: List[AnimationSummary] = []

	def add(self, metadata: AnimationMetadata) -> None:
		slug = metadata.animation_slug
		self.total += 1
		self.animations.append(summarize_animation(metadata))

		_bump(self.packages, metadata.packages)
		_bump(self.hooks, metadata.hooks)
		_bump(self.functions, metadata.functions)
		_bump(self.patterns, metadata.patterns)
		_bump(self.techniques, metadata.techniques)
		_bump(self.components, self._unique_components(metadata.components))

		_index(self.packages_index, metadata.packages, slug)
		_index(self.hooks_index, metadata.hooks, slug)
		_index(self.patterns_index, metadata.patterns, slug)
		_index(self.techniques_index, metadata.techniques, slug)

		self._add_package_breakdowns(metadata)

	def _unique_components(self, components: Iterable[str]) -> List[str]:
		seen: List[str] = []
		for comp in components:
			normalized = normalize_component(comp, self.config)
			if normalized not in seen:
				seen.append(normalized)
		return seen

	def _add_package_breakdowns(self, metadata: AnimationMetadata) -> None:
		for package, detail in metadata.packages_detail.items():
			components = self._unique_components(detail.components)
			if package == self.config.skia_package:
				backfill = _wrapped_skia_components(metadata, self.config) + _implied_skia_components(metadata, self.config)
				for comp in backfill:
					if comp not in components:
						components.append(comp)
			self._bump_package(self.components_by_package, package, components)
			self._bump_package(self.hooks_by_package, package, dict.fromkeys(detail.hooks))
			self._bump_package(self.functions_by_package, package, dict.fromkeys(detail.functions))

	@staticmethod
	def _bump_package(table: Dict[str, Dict[str, int]], package: str, values: Iterable[str]) -> None:
		values = list(values)
		if values:
			_bump(table.setdefault(package, {}), values)

	def build(self, generated_at: Optional[str] = None) -> AggregateStats:
		return AggregateStats(
			total_animations=self.total,
			generated_at=generated_at or utc_timestamp(),
			packages=sort_by_count(self.packages),
			hooks=sort_by_count(self.hooks),
			functions=sort_by_count(self.functions),
			components=sort_by_count(self.components),
			patterns=sort_by_count(self.patterns),
			techniques=sort_by_count(self.techniques),
			packages_index=self.packages_index,
			hooks_index=self.hooks_index,
			patterns_index=self.patterns_index,
			techniques_index=self.techniques_index,
			components_by_package={p: sort_by_count(c) for p, c in self.components_by_package.items()},
			hooks_by_package={p: sort_by_count(c) for p, c in self.hooks_by_package.items()},
			functions_by_package={p: sort_by_count(c) for p, c in self.functions_by_package.items()},
			animations=self.animations,
		)


def list_metadata_files(meta_dir: str) -> List[str]:
	if not os.path.isdir(meta_dir):
		raise MetadataNotFound(meta_dir)
	names = sorted(n for n in os.listdir(meta_dir) if n.endswith(".json") and not n.startswith("."))
	return [os.path.join(meta_dir, n) for n in names]


def load_metadata(path: str) -> AnimationMetadata:
	with open(path, "r", encoding="utf-8") as fh:
		return AnimationMetadata.model_validate(json.load(fh))


def aggregate_directory(
	meta_dir: str,
	generated_at: Optional[str] = None,
	config: ExtractorConfig = DEFAULT_CONFIG,
) -> AggregateStats:
	files = list_metadata_files(meta_dir)
	logger.info("Found %d animation metadata files", len(files))
	aggregator = StatsAggregator(config)
	for path in files:
		aggregator.add(load_metadata(path))
	return aggregator.build(generated_at)
