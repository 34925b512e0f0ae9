from __future__ import annotations

import logging
import os
import subprocess
from typing import List

from .config import Settings
from .errors import SyncFailure


logger = logging.getLogger(__name__)


def _git(args: List[str], repo_url: str) -> None:
	try:
		subprocess.run(["git"] + args, capture_output=True, text=True, check=True)
	except FileNotFoundError as e:
		raise SyncFailure(repo_url, "git executable not found") from e
	except subprocess.CalledProcessError as e:
		raise SyncFailure(repo_url, (e.stderr or str(e)).strip()) from e


def sync_corpus(settings: Settings, branch: str = "main") -> str:
	"""Clone the corpus repository, or pull it when a working copy exists."""
	target = settings.corpus_dir
	if os.path.isdir(os.path.join(target, ".git")):
		logger.info("Updating existing repository at %s", target)
		_git(["-C", target, "fetch"], settings.repo_url)
		_git(["-C", target, "pull", "origin", branch], settings.repo_url)
	else:
		logger.info("Cloning %s into %s", settings.repo_url, target)
		os.makedirs(os.path.dirname(os.path.abspath(target)), exist_ok=True)
		_git(["clone", settings.repo_url, target], settings.repo_url)
	return target
