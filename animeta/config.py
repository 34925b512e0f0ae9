from __future__ import annotations

import os
from enum import Enum
from typing import Dict, FrozenSet, Tuple

from pydantic import BaseModel, ConfigDict


# Boring utility calls that never describe an animation technique.
EXCLUDED_FUNCTIONS: FrozenSet[str] = frozenset(
	{
		"create",
		"map", "filter", "reduce", "forEach", "find", "some", "every", "includes",
		"push", "pop", "shift", "unshift", "splice", "slice", "concat",
		"floor", "ceil", "round", "abs", "min", "max", "sqrt", "pow", "random",
		"get", "set", "has", "delete", "clear",
		"log", "warn", "error", "info", "debug",
		"setTimeout", "setInterval", "clearTimeout", "clearInterval",
		"require", "import", "export",
		"toString", "valueOf", "toJSON",
		"length", "size", "count",
		"memo", "forwardRef", "lazy", "render",
		"flatten", "entries", "keys", "values",
		"onPress", "onChange", "onLayout", "onSubmit", "renderItem",
	}
)

# Grammar used for each parseable extension; also the set of files analyzed.
EXTENSION_GRAMMAR: Dict[str, str] = {
	".ts": "typescript",
	".tsx": "tsx",
	".js": "javascript",
	".jsx": "javascript",
}

SKIA_PACKAGE = "@shopify/react-native-skia"
SKIA_COMPONENTS: Tuple[str, ...] = ("Canvas", "Circle", "Group", "Path", "Rect", "Image", "Text", "Blur")

# Packages drawing Skia components internally, without the project importing them.
SKIA_BACKED_PACKAGES: Dict[str, Tuple[str, ...]] = {
	"react-native-qrcode-skia": ("Canvas", "Path"),
}

DEFAULT_REPO_URL = "https://github.com/enzomanuelmangano/demos.git"


class AttributionPolicy(str, Enum):
	"""Which package owns a symbol imported from more than one package."""

	FIRST_WINS = "first-wins"
	LAST_WINS = "last-wins"


class ExtractorConfig(BaseModel):
	"""Fixed tables shared read-only by every extraction."""

	model_config = ConfigDict(frozen=True)

	excluded_functions: FrozenSet[str] = EXCLUDED_FUNCTIONS
	animation_namespace: str = "Animated"
	animation_package: str = "react-native-reanimated"
	hook_prefix: str = "use"
	function_prefix: str = "with"
	extension_grammar: Dict[str, str] = EXTENSION_GRAMMAR
	hash_extensions: Tuple[str, ...] = tuple(EXTENSION_GRAMMAR) + (".json",)
	ignored_files: FrozenSet[str] = frozenset({".DS_Store"})
	hash_algorithm: str = "sha256"
	attribution_policy: AttributionPolicy = AttributionPolicy.FIRST_WINS
	skia_package: str = SKIA_PACKAGE
	skia_components: Tuple[str, ...] = SKIA_COMPONENTS
	skia_backed_packages: Dict[str, Tuple[str, ...]] = SKIA_BACKED_PACKAGES
	wrapper_prefixes: Tuple[str, ...] = ("Touchable.", "Animated.")

	@property
	def source_extensions(self) -> Tuple[str, ...]:
		"""Only extensions with a grammar are ever analyzed."""
		return tuple(self.extension_grammar)

	def grammar_for(self, filename: str) -> str:
		_, ext = os.path.splitext(filename)
		return self.extension_grammar.get(ext.lower(), "unknown")


class Settings(BaseModel):
	"""Filesystem locations for one pipeline run."""

	model_config = ConfigDict(frozen=True)

	corpus_dir: str = os.path.join(".tmp", "demos")
	animations_subdir: str = os.path.join("src", "animations")
	meta_dir: str = os.path.join("data", "meta")
	stats_file: str = os.path.join("data", "stats.json")
	repo_url: str = DEFAULT_REPO_URL

	@property
	def animations_dir(self) -> str:
		return os.path.join(self.corpus_dir, self.animations_subdir)

	@property
	def version_manifest(self) -> str:
		return os.path.join(self.corpus_dir, "package.json")


DEFAULT_CONFIG = ExtractorConfig()
