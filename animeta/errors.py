from __future__ import annotations

from typing import Optional


class AnimetaError(Exception):
	"""Base class for every failure raised by the extraction pipeline."""


class CorpusNotFound(AnimetaError):
	def __init__(self, path: str):
		super().__init__(f"Corpus directory not found: {path}")
		self.path = path


class ProjectNotFound(AnimetaError):
	def __init__(self, slug: str, path: str):
		super().__init__(f"Animation not found: {slug} ({path})")
		self.slug = slug
		self.path = path


class ParseFailure(AnimetaError):
	def __init__(self, path: str, reason: str, line: Optional[int] = None):
		where = f"{path}:{line}" if line is not None else path
		super().__init__(f"Could not parse {where}: {reason}")
		self.path = path
		self.reason = reason
		self.line = line


class WriteFailure(AnimetaError):
	def __init__(self, path: str, reason: str):
		super().__init__(f"Could not write {path}: {reason}")
		self.path = path
		self.reason = reason


class MetadataNotFound(AnimetaError):
	def __init__(self, path: str):
		super().__init__(f"Meta directory not found: {path}. Run 'extract' first.")
		self.path = path


class SyncFailure(AnimetaError):
	def __init__(self, repo_url: str, reason: str):
		super().__init__(f"Error syncing repository {repo_url}: {reason}")
		self.repo_url = repo_url
		self.reason = reason
