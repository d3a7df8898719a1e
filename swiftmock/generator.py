# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Per-type orchestration: allocate a mock name for every method in declaration
order, then run the field, declaration and body emitters for it.

A fresh NameRegistry is created for each type and dropped when the type is
done, so generating the same model twice yields identical output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from swiftmock.core.model import Method, MockType
from swiftmock.emit import body_statements, declaration, stub_fields
from swiftmock.emit.render import render_declaration, render_field, render_statement
from swiftmock.emit.specs import DeclarationSpec, FieldSpec, Statement
from swiftmock.naming import NameRegistry, allocate_mock_name
from swiftmock.options import GeneratorOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MethodMock:
	"""Everything generated for one method, before rendering."""

	method: Method
	mock_name: str
	fields: Tuple[FieldSpec, ...]
	declaration: DeclarationSpec
	statements: Tuple[Statement, ...]

	def lines(self, options: GeneratorOptions | None = None) -> List[str]:
		"""
		Fields, attributes and declaration one level deep, body two levels
		deep, closing brace one level deep.
		"""
		indent = (options or GeneratorOptions()).indent
		out = [indent + render_field(f) for f in self.fields]
		out.extend(indent + attr for attr in self.method.attributes)
		out.append(indent + render_declaration(self.declaration))
		for stmt in self.statements:
			out.extend(indent * 2 + line for line in render_statement(stmt, indent))
		out.append(indent + "}")
		return out


@dataclass(frozen=True)
class TypeMock:
	type_name: str
	methods: Tuple[MethodMock, ...]

	@property
	def mock_names(self) -> Tuple[str, ...]:
		return tuple(m.mock_name for m in self.methods)

	def blocks(self, options: GeneratorOptions | None = None) -> List[List[str]]:
		return [m.lines(options) for m in self.methods]

	def lines(self, options: GeneratorOptions | None = None) -> List[str]:
		return [line for block in self.blocks(options) for line in block]


def generate_method_mock(method: Method, mock_name: str, type_name: str) -> MethodMock:
	return MethodMock(
		method=method,
		mock_name=mock_name,
		fields=stub_fields(method, mock_name, type_name),
		declaration=declaration(method, type_name),
		statements=body_statements(method, mock_name),
	)


def generate_type_mock(mock_type: MockType) -> TypeMock:
	"""
	Generate mocks for every method of `mock_type`.

	MockNamingError propagates unchanged; no partial TypeMock is returned.
	"""
	registry = NameRegistry()
	methods: List[MethodMock] = []
	for method in mock_type.methods:
		name = allocate_mock_name(method, mock_type.methods, registry, type_name=mock_type.name)
		methods.append(generate_method_mock(method, name, mock_type.name))
	logger.debug("generated %d method mock(s) for %s", len(methods), mock_type.name)
	return TypeMock(type_name=mock_type.name, methods=tuple(methods))


__all__ = ["MethodMock", "TypeMock", "generate_method_mock", "generate_type_mock"]
