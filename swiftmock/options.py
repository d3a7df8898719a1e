# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Generator options.

Options come from defaults, an optional JSON config file and CLI flags, in
that order of increasing precedence.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Tuple


class OptionsError(ValueError):
	"""Raised when a config file cannot be used."""

	code = "E-CONFIG-INVALID"


@dataclass(frozen=True)
class GeneratorOptions:
	indent: str = "    "
	imports: Tuple[str, ...] = ("XCTest",)
	mock_suffix: str = "Mock"
	header: str = "// Generated by swiftmock. Do not edit."

	def with_overrides(self, **overrides: Any) -> "GeneratorOptions":
		"""Copy with every non-None override applied."""
		return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def options_from_obj(obj: Any, base: GeneratorOptions | None = None) -> GeneratorOptions:
	"""
	Build options from a decoded config object.

	Format (JSON object, every key optional):
	{
	  "indent": 4 | "\\t",
	  "imports": ["XCTest", "Foundation"],
	  "mockSuffix": "Mock",
	  "header": "// ..."
	}
	"""
	base = base or GeneratorOptions()
	if not isinstance(obj, dict):
		raise OptionsError("config must be a JSON object")
	indent = obj.get("indent")
	if isinstance(indent, bool):
		raise OptionsError("config indent must be a width or a string")
	if isinstance(indent, int):
		if indent < 0:
			raise OptionsError("config indent must not be negative")
		indent = " " * indent
	elif indent is not None and not isinstance(indent, str):
		raise OptionsError("config indent must be a width or a string")
	imports = obj.get("imports")
	if imports is not None:
		if not isinstance(imports, list) or not all(isinstance(i, str) for i in imports):
			raise OptionsError("config imports must be a list of module names")
		imports = tuple(imports)
	suffix = obj.get("mockSuffix")
	if suffix is not None and not isinstance(suffix, str):
		raise OptionsError("config mockSuffix must be a string")
	header = obj.get("header")
	if header is not None and not isinstance(header, str):
		raise OptionsError("config header must be a string")
	return base.with_overrides(indent=indent, imports=imports, mock_suffix=suffix, header=header)


def load_options(path: Path, base: GeneratorOptions | None = None) -> GeneratorOptions:
	try:
		obj = json.loads(path.read_text(encoding="utf-8"))
	except (OSError, json.JSONDecodeError) as err:
		raise OptionsError(f"cannot read config {path}: {err}") from err
	return options_from_obj(obj, base)


__all__ = ["GeneratorOptions", "OptionsError", "load_options", "options_from_obj"]
