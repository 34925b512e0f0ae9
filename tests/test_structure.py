from animeta.config import DEFAULT_CONFIG
from animeta.fs_scan import list_source_files
from animeta.structure import classify_files, classify_path


def test_classification_priority():
	assert classify_path("index.tsx") == "entry"
	assert classify_path("components/index.ts") == "entry"
	assert classify_path("Card.tsx") == "components"
	assert classify_path("src/components/Button.tsx") == "components"
	assert classify_path("hooks/use-drag.ts") == "hooks"
	assert classify_path("utils/math.ts") == "utils"
	assert classify_path("types/index.d.ts") == "types"
	assert classify_path("lib/types.ts") == "types"
	assert classify_path("config/constants.ts") == "constants"
	assert classify_path("constants/sizes.ts") == "constants"
	assert classify_path("lib/helpers.ts") == "other"
	# Directory rules win over file name rules.
	assert classify_path("hooks/types.ts") == "hooks"


def test_classify_files(make_project):
	root = make_project(
		{
			"index.tsx": "export {};",
			"Card.tsx": "export {};",
			"components/Dot.tsx": "export {};",
			"hooks/use-progress.ts": "export {};",
			"utils/clamp.ts": "export {};",
			"lib/types.ts": "export {};",
			"theme/constants.ts": "export {};",
			"theme/colors.ts": "export {};",
			"assets/data.json": "{}",
		}
	)
	structure = classify_files(str(root), list_source_files(str(root), DEFAULT_CONFIG))
	assert structure.entry == "index.tsx"
	assert structure.components == ["Card.tsx", "components/Dot.tsx"]
	assert structure.hooks == ["hooks/use-progress.ts"]
	assert structure.utils == ["utils/clamp.ts"]
	assert structure.types == ["lib/types.ts"]
	assert structure.constants == ["theme/constants.ts"]
	assert structure.other == ["theme/colors.ts"]
	assert structure.assets == []
