# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Default values for force-unwrapped stubbed results.

Only types that can be built from a literal get a default; anything more
complex is left uninitialized and must be stubbed by the test before the
mocked method is called.
"""

from __future__ import annotations

from swiftmock.core.type_desc import TypeDesc, TypeKind

_NUMERIC = frozenset(
	{
		"Int",
		"Int8",
		"Int16",
		"Int32",
		"Int64",
		"UInt",
		"UInt8",
		"UInt16",
		"UInt32",
		"UInt64",
		"Double",
		"Float",
		"Float32",
		"Float64",
		"CGFloat",
		"Decimal",
		"TimeInterval",
	}
)

_LITERALS = {
	"Bool": "false",
	"String": '""',
	"Substring": '""',
}


def _simple_name(name: str) -> str:
	# `Swift.Int` and `Foundation.TimeInterval` resolve by their last component.
	return name.rsplit(".", 1)[-1]


def default_value(desc: TypeDesc) -> str | None:
	"""Return a Swift literal initializing `desc`, or None when there is none."""
	if desc.kind is TypeKind.ARRAY:
		return "[]"
	if desc.kind is not TypeKind.SCALAR:
		return None
	base = _simple_name(desc.generic_base) if desc.generic_base else None
	if base == "Dictionary":
		return "[:]"
	if base == "Set":
		return "[]"
	if desc.args:
		return None
	name = _simple_name(desc.name)
	if name in _NUMERIC:
		return "0"
	return _LITERALS.get(name)


__all__ = ["default_value"]
