# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Mock file composition: header, imports, one class per mocked type.
"""

from __future__ import annotations

from typing import List, Sequence

from swiftmock.generator import TypeMock
from swiftmock.options import GeneratorOptions


def compose_type(type_mock: TypeMock, options: GeneratorOptions) -> List[str]:
	"""`class <Name><suffix>: <Name> {` ... `}` with blank lines between methods."""
	lines = [f"class {type_mock.type_name}{options.mock_suffix}: {type_mock.type_name} {{"]
	for i, block in enumerate(type_mock.blocks(options)):
		if i:
			lines.append("")
		lines.extend(block)
	lines.append("}")
	return lines


def compose_file(type_mocks: Sequence[TypeMock], options: GeneratorOptions | None = None) -> str:
	options = options or GeneratorOptions()
	lines: List[str] = []
	if options.header:
		lines.append(options.header)
		lines.append("")
	if options.imports:
		lines.extend(f"import {module}" for module in options.imports)
		lines.append("")
	for i, type_mock in enumerate(type_mocks):
		if i:
			lines.append("")
		lines.extend(compose_type(type_mock, options))
	return "\n".join(lines) + "\n"


__all__ = ["compose_file", "compose_type"]
