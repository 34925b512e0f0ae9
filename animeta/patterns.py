from __future__ import annotations

from typing import Callable, Iterable, List, NamedTuple, Optional, Tuple


class CallFacts(NamedTuple):
	hooks: frozenset
	functions: frozenset
	components: Tuple[str, ...]


class PatternRule(NamedTuple):
	matches: Callable[[CallFacts], bool]
	pattern: Optional[str] = None
	technique: Optional[str] = None


def _hook(name: str) -> Callable[[CallFacts], bool]:
	return lambda facts: name in facts.hooks


def _function(name: str) -> Callable[[CallFacts], bool]:
	return lambda facts: name in facts.functions


def _component_containing(fragment: str) -> Callable[[CallFacts], bool]:
	return lambda facts: any(fragment in c for c in facts.components)


# Evaluated top to bottom; every rule runs and output keeps this order.
PATTERN_RULES: Tuple[PatternRule, ...] = (
	PatternRule(_hook("useSharedValue"), "shared-value-state"),
	PatternRule(_hook("useAnimatedStyle"), "animated-styling"),
	PatternRule(_hook("useDerivedValue"), "derived-computation"),
	PatternRule(_hook("useAnimatedScrollHandler"), "scroll-animation", "scroll-based-animation"),
	PatternRule(_hook("useAnimatedGestureHandler"), "gesture-animation", "gesture-based-animation"),
	PatternRule(_hook("useAnimatedReaction"), "animated-reaction", "reactive-side-effects"),
	PatternRule(_function("withTiming"), "timing-animation", "timing-based-transitions"),
	PatternRule(_function("withSpring"), "spring-animation", "spring-physics"),
	PatternRule(_function("withDelay"), "delayed-animation", "staggered-timing"),
	PatternRule(_function("withRepeat"), "repeating-animation", "loop-animations"),
	PatternRule(_function("withSequence"), "sequence-animation", "sequential-animations"),
	PatternRule(_function("interpolate"), "value-interpolation", "value-mapping"),
	PatternRule(_function("interpolateColor"), "color-interpolation", "color-transitions"),
	PatternRule(
		lambda facts: "useSharedValue" in facts.hooks and "useAnimatedStyle" in facts.hooks,
		"reactive-styling-pattern",
	),
	PatternRule(
		lambda facts: "useDerivedValue" in facts.hooks and "withDelay" in facts.functions,
		"staggered-derived-values",
		"character-level-staggering",
	),
	PatternRule(_hook("useImperativeHandle"), "imperative-animation-api", "ref-based-control"),
	PatternRule(_component_containing("Canvas"), "skia-graphics", "canvas-rendering"),
	PatternRule(_component_containing("Blur"), technique="blur-effects"),
	PatternRule(_component_containing("MaskedView"), technique="masking-effects"),
	PatternRule(_hook("useAnimatedStyle"), technique="transform-animations"),
)


def detect_patterns(
	hooks: Iterable[str],
	functions: Iterable[str],
	components: Iterable[str],
	rules: Iterable[PatternRule] = PATTERN_RULES,
) -> Tuple[List[str], List[str]]:
	"""Return (patterns, techniques) in rule-table order."""
	facts = CallFacts(frozenset(hooks), frozenset(functions), tuple(components))
	patterns: List[str] = []
	techniques: List[str] = []
	for rule in rules:
		if not rule.matches(facts):
			continue
		if rule.pattern is not None:
			patterns.append(rule.pattern)
		if rule.technique is not None:
			techniques.append(rule.technique)
	return patterns, techniques
