# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Structural model of a mocked Swift type.

These records are produced by an upstream model provider (see
`swiftmock.loader`) and are read-only for the generator. Sequences are
tuples in declaration order; nothing downstream re-sorts them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from swiftmock.core.type_desc import VOID, ClosureType, TypeDesc, closure_of, is_closure

INITIALIZER_NAMES = frozenset({"init", "init?", "init!"})


def is_initializer_name(call_name: str) -> bool:
	"""`init`, `init?` and `init!` only; `initialize` or `initCache` are plain methods."""
	return call_name in INITIALIZER_NAMES


@dataclass(frozen=True)
class Parameter:
	"""
	One method parameter.

	`label` is the argument label; None means the parameter is unlabelled
	(`_ x: Int`). For `bar: Int` both label and name are "bar".
	"""

	name: str
	label: Optional[str]
	type: TypeDesc
	escaping: bool = False
	inout: bool = False
	variadic: bool = False

	@property
	def is_closure(self) -> bool:
		return is_closure(self.type)

	@property
	def closure(self) -> ClosureType | None:
		return closure_of(self.type)

	@property
	def is_mockable(self) -> bool:
		"""Captured as observable state: non-closures and escaping closures."""
		return not self.is_closure or self.escaping

	@property
	def settable_type(self) -> str:
		"""Spelling used when the parameter is stored in a capture tuple."""
		return self.type.name


@dataclass(frozen=True)
class Method:
	"""A method or initializer requirement of a mocked type."""

	name: str  # full signature, e.g. "fetch(id: Int, completion: @escaping (String) -> Void)"
	call_name: str  # name without argument labels, e.g. "fetch"
	parameters: Tuple[Parameter, ...] = ()
	return_type: TypeDesc = VOID
	is_initializer: bool = False
	is_async: bool = False
	throws: bool = False
	attributes: Tuple[str, ...] = ()

	@property
	def mockable_parameters(self) -> Tuple[Parameter, ...]:
		return tuple(p for p in self.parameters if p.is_mockable)

	@property
	def closure_parameters(self) -> Tuple[Parameter, ...]:
		return tuple(p for p in self.parameters if p.is_closure)


@dataclass(frozen=True)
class MockType:
	"""A protocol or class whose methods get mocked."""

	name: str
	methods: Tuple[Method, ...] = ()
	kind: str = "protocol"


__all__ = ["INITIALIZER_NAMES", "Method", "MockType", "Parameter", "is_initializer_name"]
