from textwrap import dedent

import pytest


def write_tree(root, files):
	"""Create files (relative path -> text) under root and return root."""
	for rel_path, text in files.items():
		path = root / rel_path
		path.parent.mkdir(parents=True, exist_ok=True)
		path.write_text(dedent(text))
	return root


@pytest.fixture
def make_project(tmp_path):
	def _make(files, name="demo-a"):
		return write_tree(tmp_path / name, files)

	return _make


@pytest.fixture
def write_files():
	return write_tree
