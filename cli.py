from __future__ import annotations

import argparse
import logging
import sys

import uvicorn

from api import create_app
from animeta.config import DEFAULT_CONFIG, Settings
from animeta.errors import AnimetaError, CorpusNotFound, SyncFailure
from animeta.pipeline import extract_all, extract_animation, generate_stats
from animeta.summarize import summarize_batch, summarize_metadata, summarize_stats
from animeta.sync import sync_corpus


logger = logging.getLogger("animeta")


def _settings(args: argparse.Namespace) -> Settings:
	return Settings(
		corpus_dir=args.corpus,
		meta_dir=args.meta_dir,
		stats_file=args.stats_file,
	)


def cmd_extract(args: argparse.Namespace) -> int:
	settings = _settings(args)
	if not args.all and not args.slug:
		print("extract: give an animation slug or --all", file=sys.stderr)
		return 2

	try:
		if not args.no_sync:
			sync_corpus(settings)
		if args.all:
			result = extract_all(settings, DEFAULT_CONFIG)
			for slug in result.succeeded:
				print(f"✓ {slug} - extracted successfully")
			for failure in result.failed:
				print(f"✗ {failure.slug}: {failure.error}")
			print(summarize_batch(len(result.succeeded), len(result.failed)))
			return 0
		metadata = extract_animation(args.slug, settings, DEFAULT_CONFIG)
	except (CorpusNotFound, SyncFailure) as e:
		logger.error("%s", e)
		return 1
	except (AnimetaError, OSError) as e:
		# A failed project is reported, not fatal; only a missing corpus is.
		logger.error("Error extracting %s: %s", args.slug, e)
		print(f"✗ {args.slug}: {e}")
		return 0

	print(f"✓ {metadata.animation_slug} - extracted successfully")
	print(f"  {summarize_metadata(metadata)}")
	return 0


def cmd_stats(args: argparse.Namespace) -> int:
	try:
		stats = generate_stats(_settings(args))
	except (AnimetaError, OSError, ValueError) as e:
		logger.error("%s", e)
		return 1
	print(summarize_stats(stats))
	print(f"\n✓ Stats generated: {args.stats_file}")
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run(create_app(_settings(args)), host=args.host, port=args.port)
	return 0


def build_parser() -> argparse.ArgumentParser:
	defaults = Settings()
	parser = argparse.ArgumentParser(prog="animeta", description="Deterministic animation metadata extractor")
	parser.add_argument("--corpus", default=defaults.corpus_dir, help="Local working copy of the demos repository")
	parser.add_argument("--meta-dir", default=defaults.meta_dir, help="Where per-animation JSON files are written")
	parser.add_argument("--stats-file", default=defaults.stats_file, help="Aggregate statistics output path")
	parser.add_argument("-v", "--verbose", action="store_true")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pe = sub.add_parser("extract", help="Extract metadata for one animation or all of them")
	pe.add_argument("slug", nargs="?", help="Animation directory name")
	pe.add_argument("-a", "--all", action="store_true", help="Extract every animation")
	pe.add_argument("--no-sync", action="store_true", help="Use the working copy as is")
	pe.set_defaults(func=cmd_extract)

	ps = sub.add_parser("stats", help="Regenerate aggregate statistics from metadata files")
	ps.set_defaults(func=cmd_stats)

	pv = sub.add_parser("serve", help="Serve metadata and stats over HTTP")
	pv.add_argument("--host", default="127.0.0.1")
	pv.add_argument("--port", type=int, default=8000)
	pv.set_defaults(func=cmd_serve)
	return parser


def main(argv=None) -> int:
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.INFO,
		format="%(levelname)s %(name)s: %(message)s",
	)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
