# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from typing import Sequence

from swiftmock.core.model import Method, MockType, is_initializer_name
from swiftmock.core.type_desc import VOID
from swiftmock.generator import TypeMock
from swiftmock.parser import parse_signature, parse_type_name


def method(
	signature: str,
	*,
	returns: str | None = None,
	throws: bool = False,
	is_async: bool = False,
	attributes: Sequence[str] = (),
) -> Method:
	"""
	Shared helper for tests: build a Method from its declared Swift name.

	Goes through the same parser the model loader uses so tests and real
	models agree on labels, escaping and closure shapes.
	"""
	parsed = parse_signature(signature)
	return Method(
		name=signature,
		call_name=parsed.call_name,
		parameters=parsed.parameters,
		return_type=parse_type_name(returns) if returns else VOID,
		is_initializer=is_initializer_name(parsed.call_name),
		is_async=is_async,
		throws=throws,
		attributes=tuple(attributes),
	)


def mock_type(name: str, *methods: Method) -> MockType:
	return MockType(name=name, methods=tuple(methods))


def assert_mock_names_unique(type_mock: TypeMock) -> None:
	names = type_mock.mock_names
	if len(set(names)) != len(names):
		raise AssertionError(f"duplicate mock names in {type_mock.type_name}: {names}")
