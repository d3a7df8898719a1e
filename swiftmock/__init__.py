# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
swiftmock: deterministic Swift mock generation from a structural type model.

The generation core lives in `swiftmock.core`, `swiftmock.naming`,
`swiftmock.emit` and `swiftmock.generator`; it performs no I/O. Parsing,
model loading, file composition and the CLI (`swiftmock.cli:main`) sit
around it.
"""

from swiftmock.generator import MethodMock, TypeMock, generate_type_mock
from swiftmock.naming import MockNamingError, NameRegistry, allocate_mock_name

__all__ = [
	"MethodMock",
	"MockNamingError",
	"NameRegistry",
	"TypeMock",
	"allocate_mock_name",
	"generate_type_mock",
]
