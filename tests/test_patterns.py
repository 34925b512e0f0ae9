from animeta.patterns import PATTERN_RULES, detect_patterns


def test_empty_input_emits_nothing():
	assert detect_patterns([], [], []) == ([], [])


def test_emission_follows_rule_order():
	patterns, techniques = detect_patterns(
		hooks=["useAnimatedStyle", "useDerivedValue", "useSharedValue"],
		functions=["withDelay", "withTiming"],
		components=["Animated.View"],
	)
	assert patterns == [
		"shared-value-state",
		"animated-styling",
		"derived-computation",
		"timing-animation",
		"delayed-animation",
		"reactive-styling-pattern",
		"staggered-derived-values",
	]
	assert techniques == [
		"timing-based-transitions",
		"staggered-timing",
		"character-level-staggering",
		"transform-animations",
	]


def test_component_rules_match_substrings():
	patterns, techniques = detect_patterns([], [], ["Touchable.Canvas", "BackdropBlur", "MaskedView"])
	assert patterns == ["skia-graphics"]
	assert techniques == ["canvas-rendering", "blur-effects", "masking-effects"]


def test_single_membership_rules():
	cases = {
		"useAnimatedScrollHandler": ("scroll-animation", "scroll-based-animation"),
		"useAnimatedGestureHandler": ("gesture-animation", "gesture-based-animation"),
		"useAnimatedReaction": ("animated-reaction", "reactive-side-effects"),
		"useImperativeHandle": ("imperative-animation-api", "ref-based-control"),
	}
	for hook, (pattern, technique) in cases.items():
		assert detect_patterns([hook], [], []) == ([pattern], [technique])

	fn_cases = {
		"withSpring": ("spring-animation", "spring-physics"),
		"withRepeat": ("repeating-animation", "loop-animations"),
		"withSequence": ("sequence-animation", "sequential-animations"),
		"interpolate": ("value-interpolation", "value-mapping"),
		"interpolateColor": ("color-interpolation", "color-transitions"),
	}
	for fn, (pattern, technique) in fn_cases.items():
		assert detect_patterns([], [fn], []) == ([pattern], [technique])


def test_hooks_only_count_as_hooks():
	# A function named like a hook rule does not trigger it.
	assert detect_patterns([], ["useSharedValue"], []) == ([], [])


def test_deterministic_regardless_of_input_order():
	forward = detect_patterns(["useSharedValue", "useAnimatedStyle"], ["withSpring"], ["Canvas"])
	backward = detect_patterns(["useAnimatedStyle", "useSharedValue"], ["withSpring"], ["Canvas"])
	assert forward == backward
	assert len(PATTERN_RULES) == 20
