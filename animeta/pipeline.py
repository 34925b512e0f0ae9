"""Entry points tying analysis, writing and aggregation to on-disk locations.

Configuration is passed in explicitly; nothing here keeps state between runs.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional

from pydantic import BaseModel

from .analyze import analyze_project
from .config import DEFAULT_CONFIG, ExtractorConfig, Settings
from .errors import AnimetaError, CorpusNotFound, ProjectNotFound
from .fs_scan import list_project_dirs
from .model import AggregateStats, AnimationMetadata
from .stats import aggregate_directory
from .ts_parse import SourceParser
from .versions import load_declared_versions
from .writer import write_json_atomic, write_metadata


logger = logging.getLogger(__name__)


class ProjectFailure(BaseModel):
	slug: str
	error: str


class BatchResult(BaseModel):
	succeeded: List[str] = []
	failed: List[ProjectFailure] = []


def require_corpus(settings: Settings) -> str:
	if not os.path.isdir(settings.animations_dir):
		raise CorpusNotFound(settings.animations_dir)
	return settings.animations_dir


def extract_animation(
	slug: str,
	settings: Settings,
	config: ExtractorConfig = DEFAULT_CONFIG,
	declared_versions: Optional[Dict[str, str]] = None,
	parser: Optional[SourceParser] = None,
) -> AnimationMetadata:
	"""Analyze one project and replace its metadata document on disk."""
	animations_dir = require_corpus(settings)
	path = os.path.join(animations_dir, slug)
	if not os.path.isdir(path):
		raise ProjectNotFound(slug, path)
	if declared_versions is None:
		declared_versions = load_declared_versions(settings.version_manifest)

	logger.info("Extracting: %s", slug)
	metadata = analyze_project(path, slug, config, declared_versions, parser)
	write_metadata(settings.meta_dir, metadata)
	return metadata


def extract_all(settings: Settings, config: ExtractorConfig = DEFAULT_CONFIG) -> BatchResult:
	"""Extract every project; one project's failure never stops the batch."""
	projects = list_project_dirs(require_corpus(settings))
	logger.info("Extracting metadata for %d animations...", len(projects))
	declared_versions = load_declared_versions(settings.version_manifest)
	parser = SourceParser(config)

	result = BatchResult()
	for slug in projects:
		try:
			extract_animation(slug, settings, config, declared_versions, parser)
		except (AnimetaError, OSError) as e:
			logger.error("Error extracting %s: %s", slug, e)
			result.failed.append(ProjectFailure(slug=slug, error=str(e)))
		else:
			result.succeeded.append(slug)
	return result


def generate_stats(settings: Settings, config: ExtractorConfig = DEFAULT_CONFIG) -> AggregateStats:
	stats = aggregate_directory(settings.meta_dir, config=config)
	write_json_atomic(settings.stats_file, stats)
	logger.info("Stats generated: %s", settings.stats_file)
	return stats
