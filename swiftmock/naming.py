# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Mock name allocation.

Every mocked method gets one identifier (`Foo`, `FooBar`, `FooInt`, ...)
that prefixes all of its stub fields (`invokedFoo`, `stubbedFooResult`, ...).
Within one type these identifiers must be pairwise distinct, even when
methods share a call name and arity.

Allocation rules:
- A method whose (call name, parameter count) pair is unique keeps its
  capitalized call name unless that name is already taken, in which case
  argument labels are appended one at a time until a free name is found,
  falling back to a numeric suffix (`FooBar2`) when the labels run out.
- A family of true overloads (same call name and arity) first reserves the
  bare base name, then tries label prefixes of increasing length, reserving
  each candidate, and takes the first prefix that no sibling in the family
  shares. If labels never separate the family, parameter types are mixed in
  (`foo(_ x: Int)` / `foo(_ x: String)` -> `FooInt` / `FooString`).
  Candidates already assigned to another method are skipped.
- If even types do not separate two methods the model is malformed and
  `MockNamingError` is raised.

The registry is threaded explicitly through every allocation of one type and
thrown away afterwards; there is no module-level state.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Sequence

from swiftmock.core.model import Method
from swiftmock.core.type_desc import masked_type_name

logger = logging.getLogger(__name__)


class MockNamingError(ValueError):
	"""
	Raised when no unique mock name exists for a method.

	Only overload families can hit this: either two methods of one type are
	indistinguishable by call name, arity, labels and parameter types, or
	every candidate of an overload is already assigned to another method.
	A method with a unique call name and arity never raises; it falls back to
	a numeric suffix instead. Callers abort generation for the type instead of
	emitting mocks that would share fields.
	"""

	code = "E-MOCK-NAME-AMBIGUOUS"

	def __init__(self, message: str, *, method: Method, type_name: str | None = None) -> None:
		super().__init__(message)
		self.method = method
		self.type_name = type_name


class NameRegistry:
	"""
	Mock names seen during one type's pass.

	Reservations block a name for methods allocated later; assigned names are
	the ones actually handed to a method and are never handed out twice.
	"""

	def __init__(self) -> None:
		self._names: set[str] = set()
		self._assigned: set[str] = set()

	def reserve(self, name: str) -> None:
		self._names.add(name)

	def assign(self, name: str) -> None:
		self._names.add(name)
		self._assigned.add(name)

	def is_assigned(self, name: str) -> bool:
		return name in self._assigned

	def __contains__(self, name: object) -> bool:
		return name in self._names

	def __len__(self) -> int:
		return len(self._names)

	def __iter__(self) -> Iterator[str]:
		return iter(sorted(self._names))


def capitalize_first(text: str) -> str:
	return text[:1].upper() + text[1:]


def _part(text: str) -> str:
	# `default` style escaped identifiers lose their backticks.
	return capitalize_first(text.strip("`"))


def base_name(method: Method) -> str:
	"""Capitalized call name with failable initializer markers removed."""
	return capitalize_first(method.call_name.replace("?", "").replace("!", ""))


def name_with_labels(method: Method, index: int) -> str:
	"""Base name plus the labels (or names) of parameters `0..index`."""
	params = method.parameters[: index + 1]
	return base_name(method) + "".join(_part(p.label or p.name) for p in params)


def name_with_labels_and_types(method: Method, index: int) -> str:
	"""
	Base name plus label+masked type of parameters `0..index`, followed by the
	bare labels of the remaining parameters.

	Type spellings can carry `.`, `?` and `!` (`Foundation.Data`, `[Int?]`,
	`Int??`); none of them survive into the identifier.
	"""
	head = method.parameters[: index + 1]
	tail = method.parameters[index + 1 :]
	name = (
		base_name(method)
		+ "".join(_part(p.label or "") + capitalize_first(masked_type_name(p.type)) for p in head)
		+ "".join(_part(p.label) for p in tail if p.label)
	)
	return name.replace(".", "").replace("?", "").replace("!", "")


def _overload_group(method: Method, siblings: Sequence[Method]) -> List[Method]:
	arity = len(method.parameters)
	group = [m for m in siblings if m.call_name == method.call_name and len(m.parameters) == arity]
	if method not in group:
		group.append(method)
	return group


def _ambiguous(method: Method, type_name: str | None) -> MockNamingError:
	where = f" in {type_name}" if type_name else ""
	return MockNamingError(
		f"cannot derive a unique mock name for `{method.name}`{where}: "
		"no label or type based candidate is free",
		method=method,
		type_name=type_name,
	)


def allocate_mock_name(
	method: Method,
	siblings: Sequence[Method],
	registry: NameRegistry,
	*,
	type_name: str | None = None,
) -> str:
	"""
	Allocate the mock name of `method` among `siblings` (all methods of the
	enclosing type, `method` included) and record it in `registry`.

	Raises MockNamingError when the method cannot be told apart from an
	overload.
	"""
	group = _overload_group(method, siblings)
	arity = len(method.parameters)

	if len(group) == 1:
		name = base_name(method)
		index = 0
		while name in registry and index < arity:
			name = name_with_labels(method, index)
			index += 1
		stem = name
		counter = 2
		while name in registry:
			# Labels ran out (e.g. `fooInt()` next to overloads named `FooInt`).
			name = f"{stem}{counter}"
			counter += 1
		registry.assign(name)
		logger.debug("mock name %s for %s", name, method.name)
		return name

	# Overloads share a base name; keep it out of reach of shorter methods.
	registry.reserve(base_name(method))
	for index in range(arity):
		name = name_with_labels(method, index)
		registry.reserve(name)
		if registry.is_assigned(name):
			continue
		if sum(1 for m in group if name_with_labels(m, index) == name) == 1:
			registry.assign(name)
			logger.debug("mock name %s for %s (labels, prefix %d)", name, method.name, index)
			return name

	for index in range(arity):
		name = name_with_labels_and_types(method, index)
		if registry.is_assigned(name):
			continue
		if sum(1 for m in group if name_with_labels_and_types(m, index) == name) == 1:
			registry.assign(name)
			logger.debug("mock name %s for %s (labels and types, prefix %d)", name, method.name, index)
			return name

	raise _ambiguous(method, type_name)


__all__ = [
	"MockNamingError",
	"NameRegistry",
	"allocate_mock_name",
	"base_name",
	"capitalize_first",
	"name_with_labels",
	"name_with_labels_and_types",
]
