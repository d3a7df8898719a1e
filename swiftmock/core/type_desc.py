# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Closed type-descriptor variant for Swift parameter and return types.

The generator only needs to tell four shapes apart: plain (scalar) types,
optionals, arrays and closures. Everything else (dictionaries, tuples,
arbitrary generics) is a SCALAR whose `name` carries the Swift spelling;
`generic_base`/`args` keep just enough structure for default synthesis.

All helpers here are pure functions over the variant so callers never need
isinstance/type dispatch on Swift type spellings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


class TypeKind(Enum):
	"""Shapes of Swift types the generator distinguishes."""

	SCALAR = auto()
	OPTIONAL = auto()
	ARRAY = auto()
	CLOSURE = auto()


@dataclass(frozen=True)
class ClosureType:
	"""Signature of a closure type: `(params) async throws -> return_type`."""

	parameters: Tuple["TypeDesc", ...]
	return_type: "TypeDesc"
	is_async: bool = False
	throws: bool = False


@dataclass(frozen=True)
class TypeDesc:
	"""
	A Swift type as seen by the generator.

	`name` is the canonical spelling (attributes and `inout` removed).
	`wrapped` is the inner type of OPTIONAL and the element type of ARRAY.
	"""

	kind: TypeKind
	name: str
	wrapped: Optional["TypeDesc"] = None
	closure: Optional[ClosureType] = None
	generic_base: Optional[str] = None
	args: Tuple["TypeDesc", ...] = ()
	implicitly_unwrapped: bool = False  # only meaningful for TypeKind.OPTIONAL


_VOID_NAMES = frozenset({"Void", "()", "Swift.Void"})


def scalar(name: str, *, generic_base: str | None = None, args: Tuple[TypeDesc, ...] = ()) -> TypeDesc:
	return TypeDesc(kind=TypeKind.SCALAR, name=name, generic_base=generic_base, args=tuple(args))


def optional(inner: TypeDesc, *, implicitly_unwrapped: bool = False, spelling: str | None = None) -> TypeDesc:
	"""Wrap `inner` in an optional; closures are parenthesised in the default spelling."""
	if spelling is None:
		base = f"({inner.name})" if inner.kind is TypeKind.CLOSURE else inner.name
		spelling = base + ("!" if implicitly_unwrapped else "?")
	return TypeDesc(
		kind=TypeKind.OPTIONAL,
		name=spelling,
		wrapped=inner,
		implicitly_unwrapped=implicitly_unwrapped,
	)


def array(element: TypeDesc, *, spelling: str | None = None) -> TypeDesc:
	return TypeDesc(kind=TypeKind.ARRAY, name=spelling or f"[{element.name}]", wrapped=element)


def closure(
	parameters: Tuple[TypeDesc, ...] | list[TypeDesc],
	return_type: TypeDesc,
	*,
	is_async: bool = False,
	throws: bool = False,
) -> TypeDesc:
	"""Build a CLOSURE descriptor; the spelling is derived from the signature."""
	sig = ClosureType(parameters=tuple(parameters), return_type=return_type, is_async=is_async, throws=throws)
	parts = ["(" + ", ".join(p.name for p in sig.parameters) + ")"]
	if is_async:
		parts.append("async")
	if throws:
		parts.append("throws")
	parts.append("->")
	parts.append(return_type.name)
	return TypeDesc(kind=TypeKind.CLOSURE, name=" ".join(parts), closure=sig)


VOID = scalar("Void")


def is_void(desc: TypeDesc) -> bool:
	return desc.kind is TypeKind.SCALAR and desc.name in _VOID_NAMES


def is_optional(desc: TypeDesc) -> bool:
	return desc.kind is TypeKind.OPTIONAL


def unwrapped(desc: TypeDesc) -> TypeDesc:
	"""Strip one level of optionality (`T?`, `T!`, `Optional<T>` -> `T`)."""
	if desc.kind is TypeKind.OPTIONAL and desc.wrapped is not None:
		return desc.wrapped
	return desc


def unwrapped_name(desc: TypeDesc) -> str:
	return unwrapped(desc).name


def is_closure(desc: TypeDesc) -> bool:
	"""True for closure types, including optional closures."""
	return unwrapped(desc).kind is TypeKind.CLOSURE


def closure_of(desc: TypeDesc) -> ClosureType | None:
	inner = unwrapped(desc)
	if inner.kind is TypeKind.CLOSURE:
		return inner.closure
	return None


def masked_type_name(desc: TypeDesc) -> str:
	"""
	Spelling of a type used for type-based mock name disambiguation.

	Arrays render as their element name plus a trailing "s" (`[User]` ->
	`Users`); everything else renders as its unwrapped name. Optional arrays
	are looked through first.
	"""
	inner = unwrapped(desc)
	if inner.kind is TypeKind.ARRAY and inner.wrapped is not None:
		return inner.wrapped.name + "s"
	return inner.name


__all__ = [
	"ClosureType",
	"TypeDesc",
	"TypeKind",
	"VOID",
	"array",
	"closure",
	"closure_of",
	"is_closure",
	"is_optional",
	"is_void",
	"masked_type_name",
	"optional",
	"scalar",
	"unwrapped",
	"unwrapped_name",
]
