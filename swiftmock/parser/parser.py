# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lark-based parser for Swift type spellings and method signature names.

The grammar (`grammar.lark`) only recognises the subset of Swift needed to
describe method requirements: named and generic types, arrays,
dictionaries, tuples, function types, optionals, variadics, attributes and
`inout`. Trees are turned directly into `TypeDesc`/`Parameter` values.

Grammar failures surface as `lark.exceptions.UnexpectedInput`; well-formed
text that is still meaningless as a Swift type (e.g. `inout` outside a
parameter) raises SignatureParseError.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from lark import Lark, Token, Tree

from swiftmock.core.model import Parameter
from swiftmock.core.type_desc import TypeDesc, array, closure, optional, scalar

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start=["type_start", "signature"],
	maybe_placeholders=False,
)


class SignatureParseError(ValueError):
	"""Parsed text that does not describe a usable Swift type or signature."""

	code = "E-PARSE-SIGNATURE"

	def __init__(self, message: str, *, text: str) -> None:
		super().__init__(message)
		self.text = text


@dataclass(frozen=True)
class ParsedType:
	"""A type plus the parameter-only decorations found in front of it."""

	type: TypeDesc
	attributes: Tuple[str, ...] = ()
	inout: bool = False
	variadic: bool = False


@dataclass(frozen=True)
class ParsedSignature:
	call_name: str
	parameters: Tuple[Parameter, ...]
	generic_params: Tuple[str, ...] = ()


def _name(node: Tree) -> str:
	return str(node.data)


def _trees(node: Tree) -> List[Tree]:
	return [c for c in node.children if isinstance(c, Tree)]


def _tokens(node: Tree, *types: str) -> List[Token]:
	return [c for c in node.children if isinstance(c, Token) and c.type in types]


def _build_type_expr(node: Tree) -> ParsedType:
	attributes = tuple(str(t) for t in _tokens(node, "ATTRIBUTE"))
	inout = bool(_tokens(node, "INOUT"))
	core = _trees(node)[-1]
	variadic = _name(core) == "postfix_type" and bool(_tokens(core, "ELLIPSIS"))
	return ParsedType(type=_build_bare(core), attributes=attributes, inout=inout, variadic=variadic)


def _plain(node: Tree, what: str) -> TypeDesc:
	"""A nested type: parameter-only decorations are rejected here."""
	parsed = _build_type_expr(node)
	if parsed.inout:
		raise SignatureParseError(f"`inout` is only valid on a parameter type ({what})", text=what)
	if parsed.variadic:
		raise SignatureParseError(f"variadic `...` is only valid on a parameter type ({what})", text=what)
	return parsed.type


def _build_bare(node: Tree) -> TypeDesc:
	kind = _name(node)
	if kind == "fn_type":
		params_node, ret_node = _trees(node)
		params = [elem for _label, elem in _build_paren_elems(params_node)]
		return closure(
			params,
			_plain(ret_node, "closure result"),
			is_async=bool(_tokens(node, "ASYNC")),
			throws=bool(_tokens(node, "THROWS", "RETHROWS")),
		)
	if kind == "composition":
		parts = [_build_bare(c) for c in _trees(node)]
		return scalar(" & ".join(p.name for p in parts))
	if kind == "postfix_type":
		return _build_postfix(node)
	raise SignatureParseError(f"unexpected type node '{kind}'", text=kind)


def _build_postfix(node: Tree) -> TypeDesc:
	desc = _build_primary(_trees(node)[0])
	suffixes = _tokens(node, "QUESTION", "BANG", "ELLIPSIS")
	for i, tok in enumerate(suffixes):
		if tok.type == "QUESTION":
			desc = optional(desc)
		elif tok.type == "BANG":
			desc = optional(desc, implicitly_unwrapped=True)
		else:
			if i != len(suffixes) - 1:
				raise SignatureParseError("variadic `...` must be the last type suffix", text="...")
			desc = array(desc)
	return desc


def _build_primary(node: Tree) -> TypeDesc:
	kind = _name(node)
	if kind == "ident_type":
		return _build_ident(node)
	if kind == "array_type":
		return array(_plain(_trees(node)[0], "array element"))
	if kind == "dict_type":
		key_node, value_node = _trees(node)
		key = _plain(key_node, "dictionary key")
		value = _plain(value_node, "dictionary value")
		return scalar(f"[{key.name}: {value.name}]", generic_base="Dictionary", args=(key, value))
	if kind == "paren_list":
		elems = _build_paren_elems(node)
		if len(elems) == 1 and elems[0][0] is None:
			# `(T)` is just T.
			return elems[0][1]
		rendered = [f"{label}: {elem.name}" if label else elem.name for label, elem in elems]
		return scalar("(" + ", ".join(rendered) + ")")
	raise SignatureParseError(f"unexpected type node '{kind}'", text=kind)


def _build_paren_elems(node: Tree) -> List[Tuple[Optional[str], TypeDesc]]:
	elems: List[Tuple[Optional[str], TypeDesc]] = []
	for elem in _trees(node):
		names = [str(t) for t in _tokens(elem, "NAME")]
		label = next((n for n in names if n != "_"), None)
		elems.append((label, _plain(_trees(elem)[-1], "tuple element")))
	return elems


def _build_ident(node: Tree) -> TypeDesc:
	names: List[str] = []
	rendered: List[str] = []
	args: Tuple[TypeDesc, ...] = ()
	for comp in _trees(node):
		ident = str(_tokens(comp, "NAME")[0])
		generic = _trees(comp)
		args = tuple(_plain(a, "generic argument") for a in _trees(generic[0])) if generic else ()
		names.append(ident)
		rendered.append(ident + ("<" + ", ".join(a.name for a in args) + ">" if args else ""))
	spelling = ".".join(rendered)
	base = ".".join(names)
	simple = names[-1]
	if not args:
		return scalar(spelling)
	if simple == "Optional" and len(args) == 1:
		return optional(args[0], spelling=spelling)
	if simple == "Array" and len(args) == 1:
		return array(args[0], spelling=spelling)
	return scalar(spelling, generic_base=base, args=args)


def _build_param(node: Tree) -> Parameter:
	names = [str(t) for t in _tokens(node, "NAME")]
	parsed = _build_type_expr(_trees(node)[-1])
	if len(names) == 2:
		label: Optional[str] = None if names[0] == "_" else names[0]
		name = names[1]
	else:
		label = None if names[0] == "_" else names[0]
		name = names[0]
	return Parameter(
		name=name,
		label=label,
		type=parsed.type,
		escaping="@escaping" in parsed.attributes,
		inout=parsed.inout,
		variadic=parsed.variadic,
	)


def parse_type(text: str) -> ParsedType:
	"""Parse a parameter-position type, keeping attributes/`inout`/variadic."""
	tree = _PARSER.parse(text, start="type_start")
	return _build_type_expr(_trees(tree)[0])


def parse_type_name(text: str) -> TypeDesc:
	"""Parse a Swift type spelling (e.g. a return type) into a TypeDesc."""
	tree = _PARSER.parse(text, start="type_start")
	return _plain(_trees(tree)[0], text)


def parse_signature(text: str) -> ParsedSignature:
	"""
	Parse a method name as declared (`fetch(id: Int, completion: ...)`) into its
	call name and parameters, in declaration order.
	"""
	tree = _PARSER.parse(text, start="signature")
	call_name_node = _trees(tree)[0]
	call_name = "".join(str(t) for t in call_name_node.children)
	generic_params: Tuple[str, ...] = ()
	params: List[Parameter] = []
	for child in _trees(tree)[1:]:
		if _name(child) == "generic_params":
			generic_params = tuple(str(_tokens(g, "NAME")[0]) for g in _trees(child))
		elif _name(child) == "param":
			params.append(_build_param(child))
	return ParsedSignature(call_name=call_name, parameters=tuple(params), generic_params=generic_params)


__all__ = [
	"ParsedSignature",
	"ParsedType",
	"SignatureParseError",
	"parse_signature",
	"parse_type",
	"parse_type_name",
]
