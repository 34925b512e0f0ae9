from animeta.attribution import attribute_packages, build_reverse_lookup
from animeta.config import AttributionPolicy, ExtractorConfig


def _attribute(**overrides):
	args = dict(
		packages=["expo-haptics", "react", "react-native-reanimated"],
		named_imports={
			"react-native-reanimated": ["useSharedValue", "withTiming", "interpolate"],
			"react": ["useEffect"],
		},
		namespace_imports={"expo-haptics": ["Haptics"]},
		namespace_calls={"Haptics": ["impactAsync", "selectionAsync"], "Math": ["max"]},
		hooks=["useEffect", "useLocalThing", "useSharedValue"],
		functions=["interpolate", "runOnJS", "withTiming"],
		components=["Animated.View", "View"],
	)
	args.update(overrides)
	return attribute_packages(**args)


def test_hooks_and_functions_follow_named_imports():
	detail = _attribute()
	reanimated = detail["react-native-reanimated"]
	assert reanimated.imports == ["useSharedValue", "withTiming", "interpolate"]
	assert reanimated.hooks == ["useSharedValue"]
	assert reanimated.functions == ["interpolate", "withTiming"]
	assert detail["react"].hooks == ["useEffect"]


def test_unattributed_names_are_dropped_silently():
	detail = _attribute()
	attributed = [name for d in detail.values() for name in d.hooks + d.functions + d.components]
	assert "useLocalThing" not in attributed
	assert "runOnJS" not in attributed
	assert "View" not in attributed


def test_namespace_calls_go_to_namespace_package():
	detail = _attribute()
	assert detail["expo-haptics"].functions == ["impactAsync", "selectionAsync"]
	assert detail["expo-haptics"].imports == []


def test_namespace_member_not_duplicated():
	detail = _attribute(
		named_imports={"expo-haptics": ["impactAsync"]},
		functions=["impactAsync"],
	)
	assert detail["expo-haptics"].functions == ["impactAsync", "selectionAsync"]


def test_animated_components_belong_to_animation_package():
	detail = _attribute()
	assert detail["react-native-reanimated"].components == ["Animated.View"]


def test_animated_components_need_the_package_present():
	detail = _attribute(packages=["react"], components=["Animated.View"])
	assert all(d.components == [] for d in detail.values())


def test_relative_packages_get_no_detail():
	detail = _attribute(packages=["./local", "react"])
	assert list(detail) == ["react"]


def test_first_package_wins_by_default():
	lookup = build_reverse_lookup({"lib-a": ["Canvas"], "lib-b": ["Canvas", "Path"]})
	assert lookup == {"Canvas": "lib-a", "Path": "lib-b"}


def test_last_wins_policy():
	lookup = build_reverse_lookup(
		{"lib-a": ["Canvas"], "lib-b": ["Canvas"]}, AttributionPolicy.LAST_WINS
	)
	assert lookup == {"Canvas": "lib-b"}
	config = ExtractorConfig(attribution_policy=AttributionPolicy.LAST_WINS)
	detail = attribute_packages(
		["lib-a", "lib-b"],
		{"lib-a": ["Canvas"], "lib-b": ["Canvas"]},
		{},
		{},
		[],
		[],
		["Canvas"],
		config,
	)
	assert detail["lib-b"].components == ["Canvas"]
	assert detail["lib-a"].components == []
