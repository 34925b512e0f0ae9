from __future__ import annotations

import os
from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from animeta.config import Settings
from animeta.model import AggregateStats, AnimationMetadata
from animeta.stats import load_metadata
from animeta.writer import metadata_path


def create_app(settings: Settings = Settings()) -> FastAPI:
	"""Read-only access to the documents the extractor wrote."""
	app = FastAPI(title="Animation Metadata")

	@app.get("/data/stats.json", response_model=AggregateStats)
	def get_stats() -> AggregateStats:
		if not os.path.isfile(settings.stats_file):
			raise HTTPException(status_code=404, detail="Stats not generated yet")
		try:
			with open(settings.stats_file, "r", encoding="utf-8") as fh:
				return AggregateStats.model_validate_json(fh.read())
		except ValidationError as e:
			raise HTTPException(status_code=500, detail=f"Invalid stats file: {e}")

	@app.get("/data/meta/{slug}.json", response_model=AnimationMetadata)
	def get_metadata(slug: str) -> AnimationMetadata:
		path = metadata_path(settings.meta_dir, slug)
		if os.path.basename(slug) != slug or not os.path.isfile(path):
			raise HTTPException(status_code=404, detail=f"Animation not found: {slug}")
		try:
			return load_metadata(path)
		except ValueError as e:
			raise HTTPException(status_code=500, detail=f"Invalid metadata for {slug}: {e}")

	@app.get("/animations")
	def list_animations() -> List[str]:
		if not os.path.isdir(settings.meta_dir):
			return []
		return sorted(
			name[: -len(".json")]
			for name in os.listdir(settings.meta_dir)
			if name.endswith(".json") and not name.startswith(".")
		)

	return app


app = create_app()
