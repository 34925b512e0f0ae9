from __future__ import annotations

import json
import logging
from typing import Dict, Iterable

from .attribution import is_relative


logger = logging.getLogger(__name__)


def load_declared_versions(manifest_path: str) -> Dict[str, str]:
	"""dependencies merged with devDependencies from a package.json."""
	try:
		with open(manifest_path, "r", encoding="utf-8") as fh:
			manifest = json.load(fh)
	except (OSError, ValueError) as e:
		logger.warning("Could not read package.json at %s: %s", manifest_path, e)
		return {}

	declared: Dict[str, str] = {}
	declared.update(manifest.get("dependencies") or {})
	declared.update(manifest.get("devDependencies") or {})
	return declared


def package_versions(packages: Iterable[str], declared: Dict[str, str]) -> Dict[str, str]:
	return {pkg: declared[pkg] for pkg in packages if not is_relative(pkg) and pkg in declared}
