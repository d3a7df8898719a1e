# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import json
from pathlib import Path

import pytest

from swiftmock.options import GeneratorOptions, OptionsError, load_options, options_from_obj


def test_defaults() -> None:
	opts = GeneratorOptions()
	assert opts.indent == "    "
	assert opts.imports == ("XCTest",)
	assert opts.mock_suffix == "Mock"


def test_config_file_overrides(tmp_path: Path) -> None:
	cfg = tmp_path / "swiftmock.json"
	cfg.write_text(json.dumps({"indent": 2, "imports": ["XCTest", "Foundation"], "mockSuffix": "Spy"}))
	opts = load_options(cfg)
	assert opts.indent == "  "
	assert opts.imports == ("XCTest", "Foundation")
	assert opts.mock_suffix == "Spy"
	assert opts.header == GeneratorOptions().header


def test_overrides_skip_none() -> None:
	opts = GeneratorOptions().with_overrides(indent="\t", imports=None)
	assert opts.indent == "\t"
	assert opts.imports == ("XCTest",)


@pytest.mark.parametrize(
	"obj",
	[
		[],
		{"indent": True},
		{"indent": -1},
		{"imports": "XCTest"},
		{"mockSuffix": 3},
	],
)
def test_invalid_config_rejected(obj: object) -> None:
	with pytest.raises(OptionsError):
		options_from_obj(obj)


def test_unreadable_config(tmp_path: Path) -> None:
	cfg = tmp_path / "broken.json"
	cfg.write_text("{not json")
	with pytest.raises(OptionsError) as excinfo:
		load_options(cfg)
	assert excinfo.value.code == "E-CONFIG-INVALID"
