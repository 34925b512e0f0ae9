import subprocess

import pytest

from animeta import sync
from animeta.config import Settings
from animeta.errors import SyncFailure


def _recorder(monkeypatch, fail=False):
	calls = []

	def fake_run(cmd, **kwargs):
		calls.append(cmd)
		if fail:
			raise subprocess.CalledProcessError(128, cmd, stderr="fatal: repository not found\n")
		return subprocess.CompletedProcess(cmd, 0, "", "")

	monkeypatch.setattr(sync.subprocess, "run", fake_run)
	return calls


def test_clones_when_no_working_copy(tmp_path, monkeypatch):
	calls = _recorder(monkeypatch)
	settings = Settings(corpus_dir=str(tmp_path / ".tmp" / "demos"), repo_url="https://example.com/demos.git")
	assert sync.sync_corpus(settings) == settings.corpus_dir
	assert calls == [["git", "clone", "https://example.com/demos.git", settings.corpus_dir]]


def test_pulls_existing_working_copy(tmp_path, monkeypatch):
	calls = _recorder(monkeypatch)
	(tmp_path / "demos" / ".git").mkdir(parents=True)
	settings = Settings(corpus_dir=str(tmp_path / "demos"))
	sync.sync_corpus(settings)
	assert calls == [
		["git", "-C", settings.corpus_dir, "fetch"],
		["git", "-C", settings.corpus_dir, "pull", "origin", "main"],
	]


def test_git_errors_become_sync_failure(tmp_path, monkeypatch):
	_recorder(monkeypatch, fail=True)
	with pytest.raises(SyncFailure) as info:
		sync.sync_corpus(Settings(corpus_dir=str(tmp_path / "demos")))
	assert "repository not found" in str(info.value)
