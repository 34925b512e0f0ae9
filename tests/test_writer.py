import json
import os

import pytest

from animeta.errors import WriteFailure
from animeta.model import AnimationMetadata, FileStructure, MetadataStats
from animeta.writer import to_json, write_json_atomic, write_metadata


def _doc(slug="demo-a"):
	return AnimationMetadata(
		animation_slug=slug,
		content_hash="ab" * 32,
		hash_algorithm="sha256",
		extracted_at="2025-01-01T00:00:00.000Z",
		file_structure=FileStructure(entry="index.tsx"),
		packages=["react"],
		stats=MetadataStats(total_files=1, total_packages=1),
	)


def test_write_metadata_creates_directory(tmp_path):
	meta_dir = tmp_path / "data" / "meta"
	path = write_metadata(str(meta_dir), _doc())
	assert path == os.path.join(str(meta_dir), "demo-a.json")
	text = (meta_dir / "demo-a.json").read_text()
	assert text.endswith("}\n")
	assert text.startswith('{\n  "animation_slug": "demo-a",')
	loaded = json.loads(text)
	assert loaded["file_structure"]["entry"] == "index.tsx"
	assert loaded["file_structure"]["assets"] == []
	assert os.listdir(meta_dir) == ["demo-a.json"]


def test_rewrite_replaces_document(tmp_path):
	meta_dir = str(tmp_path)
	write_metadata(meta_dir, _doc())
	doc = _doc()
	doc.packages = ["react", "react-native"]
	write_metadata(meta_dir, doc)
	assert json.loads((tmp_path / "demo-a.json").read_text())["packages"] == ["react", "react-native"]


def test_write_failure_keeps_previous_output(tmp_path):
	target = tmp_path / "stats.json"
	target.write_text("previous")
	blocker = tmp_path / "not-a-dir"
	blocker.write_text("")
	with pytest.raises(WriteFailure):
		write_json_atomic(str(blocker / "stats.json"), _doc())
	assert target.read_text() == "previous"


def test_to_json_is_deterministic():
	assert to_json(_doc()) == to_json(_doc())
