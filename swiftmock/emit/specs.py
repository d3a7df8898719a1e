# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Immutable intermediate specs produced by the emitters.

Emitters never build source text directly; they return these records and
`swiftmock.emit.render` turns them into lines. Tests can therefore assert on
roles and structure without depending on indentation or spacing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence, Tuple, Union


class FieldRole(Enum):
	"""What a stub field is for."""

	STUBBED_ERROR = auto()
	INVOKED = auto()
	INVOKED_COUNT = auto()
	LAST_PARAMETERS = auto()
	PARAMETERS_HISTORY = auto()
	SHOULD_INVOKE = auto()
	STUBBED_CLOSURE_RESULT = auto()
	STUBBED_RESULT = auto()
	EXPECTATION = auto()


@dataclass(frozen=True)
class FieldSpec:
	"""`var <name>[: <type_text>][ = <initial>]`"""

	role: FieldRole
	name: str
	type_text: Optional[str] = None
	initial: Optional[str] = None
	parameter: Optional[str] = None  # closure parameter name for per-closure roles


@dataclass(frozen=True)
class DeferFulfill:
	expectation: str


@dataclass(frozen=True)
class ThrowIfSet:
	error_field: str


@dataclass(frozen=True)
class SetFlag:
	target: str


@dataclass(frozen=True)
class Increment:
	target: str


@dataclass(frozen=True)
class Assign:
	target: str
	value: str


@dataclass(frozen=True)
class Append:
	target: str
	value: str


@dataclass(frozen=True)
class ClosureCall:
	"""Invocation of a closure parameter with stubbed arguments."""

	callee: str
	arguments: Tuple[str, ...] = ()
	is_async: bool = False
	throws: bool = False
	discard_result: bool = False
	optional_chain: bool = False


@dataclass(frozen=True)
class IfFlag:
	flag: str
	body: Tuple["Statement", ...]


@dataclass(frozen=True)
class IfLet:
	binding: str
	source: str
	body: Tuple["Statement", ...]


@dataclass(frozen=True)
class Return:
	value: str


Statement = Union[DeferFulfill, ThrowIfSet, SetFlag, Increment, Assign, Append, ClosureCall, IfFlag, IfLet, Return]


@dataclass(frozen=True)
class DeclarationSpec:
	"""Signature line parts, joined with single spaces when rendered."""

	parts: Tuple[str, ...]


def tuple_text(items: Sequence[str], *, pad: str) -> str:
	"""
	Render a Swift tuple; a single item is padded with `pad` so the result
	stays a two-slot tuple instead of collapsing to a parenthesised value.
	"""
	elems = list(items)
	if len(elems) == 1:
		elems.append(pad)
	return "(" + ", ".join(elems) + ")"


__all__ = [
	"Append",
	"Assign",
	"ClosureCall",
	"DeclarationSpec",
	"DeferFulfill",
	"FieldRole",
	"FieldSpec",
	"IfFlag",
	"IfLet",
	"Increment",
	"Return",
	"SetFlag",
	"Statement",
	"ThrowIfSet",
	"tuple_text",
]
