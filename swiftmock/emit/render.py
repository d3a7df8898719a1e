# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Final rendering step: intermediate specs -> Swift source lines.

Indentation is the only formatting decision made here; spacing inside a
line is fixed.
"""

from __future__ import annotations

from typing import Iterable, List

from swiftmock.emit.specs import (
	Append,
	Assign,
	ClosureCall,
	DeclarationSpec,
	DeferFulfill,
	FieldSpec,
	IfFlag,
	IfLet,
	Increment,
	Return,
	SetFlag,
	Statement,
	ThrowIfSet,
)


def render_field(spec: FieldSpec) -> str:
	text = f"var {spec.name}"
	if spec.type_text is not None:
		text += f": {spec.type_text}"
	if spec.initial is not None:
		text += f" = {spec.initial}"
	return text


def render_declaration(spec: DeclarationSpec) -> str:
	return " ".join(spec.parts)


def render_closure_call(call: ClosureCall) -> str:
	text = ""
	if call.discard_result or call.throws:
		text += "_ = "
	if call.throws:
		text += "try? "
	if call.is_async:
		text += "await "
	text += call.callee
	if call.optional_chain:
		text += "?"
	return text + "(" + ", ".join(call.arguments) + ")"


def _block(header: str, body: Iterable[Statement], indent: str) -> List[str]:
	lines = [header]
	for stmt in body:
		lines.extend(indent + line for line in render_statement(stmt, indent))
	lines.append("}")
	return lines


def render_statement(stmt: Statement, indent: str = "    ") -> List[str]:
	"""Render one statement; nested bodies are indented one level."""
	if isinstance(stmt, DeferFulfill):
		return [f"defer {{ {stmt.expectation}.fulfill() }}"]
	if isinstance(stmt, ThrowIfSet):
		return [f"if let error = {stmt.error_field} {{", f"{indent}throw error", "}"]
	if isinstance(stmt, SetFlag):
		return [f"{stmt.target} = true"]
	if isinstance(stmt, Increment):
		return [f"{stmt.target} += 1"]
	if isinstance(stmt, Assign):
		return [f"{stmt.target} = {stmt.value}"]
	if isinstance(stmt, Append):
		return [f"{stmt.target}.append({stmt.value})"]
	if isinstance(stmt, ClosureCall):
		return [render_closure_call(stmt)]
	if isinstance(stmt, IfFlag):
		return _block(f"if {stmt.flag} {{", stmt.body, indent)
	if isinstance(stmt, IfLet):
		return _block(f"if let {stmt.binding} = {stmt.source} {{", stmt.body, indent)
	if isinstance(stmt, Return):
		return [f"return {stmt.value}"]
	raise TypeError(f"unsupported statement spec: {stmt!r}")


__all__ = ["render_closure_call", "render_declaration", "render_field", "render_statement"]
