# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Signature line of a mocked method or initializer.
"""

from __future__ import annotations

from typing import List

from swiftmock.core.model import Method
from swiftmock.core.type_desc import is_void
from swiftmock.emit.fields import mock_return_type_name
from swiftmock.emit.specs import DeclarationSpec


def strip_failable_marker(name: str) -> str:
	"""`init?(x: Int?)` -> `init(x: Int?)`; only the marker after `init` goes."""
	if name.startswith(("init?", "init!")):
		return "init" + name[5:]
	return name


def declaration(method: Method, type_name: str) -> DeclarationSpec:
	"""
	`required init(...) {` for initializers, else
	`func name(...) [async] [throws] [-> Type] {`.
	"""
	if method.is_initializer:
		return DeclarationSpec(("required", strip_failable_marker(method.name), "{"))
	parts: List[str] = ["func", method.name]
	if method.is_async:
		parts.append("async")
	if method.throws:
		parts.append("throws")
	if not is_void(method.return_type):
		parts.append(f"-> {mock_return_type_name(method.return_type, type_name)}")
	parts.append("{")
	return DeclarationSpec(tuple(parts))


__all__ = ["declaration", "strip_failable_marker"]
