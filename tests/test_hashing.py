import os

from animeta.config import DEFAULT_CONFIG
from animeta.fs_scan import list_hash_files
from animeta.hashing import compute_content_hash, hash_files


FILES = {
	"index.tsx": "export const A = 1;",
	"components/Dot.tsx": "export const Dot = () => null;",
	"assets/config.json": '{"a": 1}',
}


def test_hash_is_stable(make_project):
	root = str(make_project(FILES))
	first = compute_content_hash(root)
	assert first == compute_content_hash(root)
	assert len(first) == 64


def test_hash_ignores_enumeration_order(make_project):
	root = str(make_project(FILES))
	files = list_hash_files(root, DEFAULT_CONFIG)
	assert hash_files(root, files) == hash_files(root, list(reversed(files)))


def test_hash_changes_on_single_byte(make_project):
	root = make_project(FILES)
	before = compute_content_hash(str(root))
	(root / "components" / "Dot.tsx").write_text("export const Dot = () => nul;")
	assert compute_content_hash(str(root)) != before


def test_hash_changes_on_rename(make_project):
	root = make_project(FILES)
	before = compute_content_hash(str(root))
	os.rename(root / "index.tsx", root / "main.tsx")
	assert compute_content_hash(str(root)) != before


def test_hash_covers_json_but_not_metadata_artifacts(make_project):
	root = make_project(FILES)
	before = compute_content_hash(str(root))
	(root / ".DS_Store").write_bytes(b"\x00\x01")
	(root / "README.md").write_text("docs")
	assert compute_content_hash(str(root)) == before
	(root / "assets" / "config.json").write_text('{"a": 2}')
	assert compute_content_hash(str(root)) != before


def test_hash_identical_for_identical_trees(make_project):
	a = make_project(FILES, name="a")
	b = make_project(FILES, name="b")
	assert compute_content_hash(str(a)) == compute_content_hash(str(b))
