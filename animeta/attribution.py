"""Trace hooks, functions and components back to the package that exported them.

Attribution is a reverse lookup over the project's own imports: a name the
project never imported by name (or through a namespace alias) stays
unattributed, which is not an error.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping

from .config import DEFAULT_CONFIG, AttributionPolicy, ExtractorConfig
from .model import PackageDetail


def build_reverse_lookup(
	imports: Mapping[str, Iterable[str]],
	policy: AttributionPolicy = AttributionPolicy.FIRST_WINS,
) -> Dict[str, str]:
	"""Map each imported name to its package, walking packages in mapping order."""
	lookup: Dict[str, str] = {}
	for package, names in imports.items():
		for name in names:
			if policy == AttributionPolicy.FIRST_WINS and name in lookup:
				continue
			lookup[name] = package
	return lookup


def is_relative(module: str) -> bool:
	return module.startswith(".") or module.startswith("/")


def attribute_packages(
	packages: List[str],
	named_imports: Mapping[str, List[str]],
	namespace_imports: Mapping[str, List[str]],
	namespace_calls: Mapping[str, List[str]],
	hooks: List[str],
	functions: List[str],
	components: List[str],
	config: ExtractorConfig = DEFAULT_CONFIG,
) -> Dict[str, PackageDetail]:
	detail: Dict[str, PackageDetail] = {}
	for package in packages:
		if is_relative(package):
			continue
		detail[package] = PackageDetail(imports=list(named_imports.get(package, [])))

	item_to_package = build_reverse_lookup(named_imports, config.attribution_policy)
	namespace_to_package = build_reverse_lookup(namespace_imports, config.attribution_policy)

	for hook in hooks:
		package = item_to_package.get(hook)
		if package in detail:
			detail[package].hooks.append(hook)

	for fn in functions:
		package = item_to_package.get(fn)
		if package in detail:
			detail[package].functions.append(fn)

	for namespace, members in namespace_calls.items():
		package = namespace_to_package.get(namespace)
		if package not in detail:
			continue
		owned = detail[package].functions
		for member in members:
			if member not in owned:
				owned.append(member)

	# Animated.X is created at runtime by the animation library, not imported.
	animated_prefix = config.animation_namespace + "."
	for comp in components:
		if comp.startswith(animated_prefix):
			package = config.animation_package
		else:
			package = item_to_package.get(comp)
		if package in detail:
			detail[package].components.append(comp)

	return detail
