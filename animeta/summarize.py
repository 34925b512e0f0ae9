from __future__ import annotations

from typing import Dict, List

from .model import AggregateStats, AnimationMetadata


def summarize_metadata(m: AnimationMetadata) -> str:
	return (
		f"Files: {m.stats.total_files}, Packages: {m.stats.total_packages}, "
		f"Hooks: {m.stats.total_hooks}"
	)


def summarize_batch(succeeded: int, failed: int) -> str:
	parts: List[str] = ["Summary:", f"  {succeeded} extracted"]
	if failed:
		parts.append(f"  {failed} failed")
	return "\n".join(parts)


def _top(counts: Dict[str, int], n: int) -> List[str]:
	return [f"  {name}: {count}" for name, count in list(counts.items())[:n]]


def summarize_stats(stats: AggregateStats, n: int = 10) -> str:
	parts: List[str] = [f"Top {n} Most Used:"]
	for title, counts in (
		("Packages", stats.packages),
		("Hooks", stats.hooks),
		("Patterns", stats.patterns),
	):
		parts.append("")
		parts.append(f"{title}:")
		parts.extend(_top(counts, n))
	return "\n".join(parts)
