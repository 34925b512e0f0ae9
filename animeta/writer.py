from __future__ import annotations

import json
import logging
import os
import tempfile

from pydantic import BaseModel

from .errors import WriteFailure
from .model import AnimationMetadata


logger = logging.getLogger(__name__)


def to_json(document: BaseModel) -> str:
	return json.dumps(document.model_dump(mode="json"), indent=2, ensure_ascii=False) + "\n"


def write_json_atomic(path: str, document: BaseModel) -> str:
	"""Write via a temp file in the target directory, then rename over path."""
	directory = os.path.dirname(os.path.abspath(path))
	tmp_path = None
	try:
		os.makedirs(directory, exist_ok=True)
		with tempfile.NamedTemporaryFile(
			"w", encoding="utf-8", dir=directory, prefix=".tmp-", suffix=".json", delete=False
		) as fh:
			tmp_path = fh.name
			fh.write(to_json(document))
		os.replace(tmp_path, path)
	except OSError as e:
		if tmp_path is not None and os.path.exists(tmp_path):
			os.unlink(tmp_path)
		raise WriteFailure(path, str(e)) from e
	logger.debug("Wrote %s", path)
	return path


def metadata_path(meta_dir: str, slug: str) -> str:
	return os.path.join(meta_dir, f"{slug}.json")


def write_metadata(meta_dir: str, metadata: AnimationMetadata) -> str:
	return write_json_atomic(metadata_path(meta_dir, metadata.animation_slug), metadata)
