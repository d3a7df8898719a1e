# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Body statements of a mocked method.

The expectation is fulfilled in a `defer` so it fires on every exit path, and
a stubbed error is thrown before any capture state is touched.
"""

from __future__ import annotations

from typing import List, Tuple

from swiftmock.core.model import Method, Parameter
from swiftmock.core.type_desc import ClosureType, is_optional, is_void
from swiftmock.emit.fields import (
	expectation_name,
	has_single_plain_argument,
	invoked_count_name,
	invoked_name,
	parameters_list_name,
	parameters_name,
	should_invoke_name,
	stubbed_closure_result_name,
	stubbed_error_name,
	stubbed_result_name,
)
from swiftmock.emit.specs import (
	Append,
	Assign,
	ClosureCall,
	DeferFulfill,
	IfFlag,
	IfLet,
	Increment,
	Return,
	SetFlag,
	Statement,
	ThrowIfSet,
	tuple_text,
)


def _closure_call(param: Parameter, sig: ClosureType, arguments: Tuple[str, ...]) -> ClosureCall:
	return ClosureCall(
		callee=param.name,
		arguments=arguments,
		is_async=sig.is_async,
		throws=sig.throws,
		discard_result=not is_void(sig.return_type),
		optional_chain=is_optional(param.type),
	)


def _closure_statements(method: Method, mock_name: str) -> List[Statement]:
	stmts: List[Statement] = []
	for param in method.closure_parameters:
		sig = param.closure
		if sig is None:
			continue
		if not sig.parameters:
			stmts.append(IfFlag(should_invoke_name(mock_name, param), (_closure_call(param, sig, ()),)))
			continue
		if has_single_plain_argument(sig.parameters):
			arguments: Tuple[str, ...] = ("result",)
		else:
			arguments = tuple(f"result.{i}" for i in range(len(sig.parameters)))
		stmts.append(
			IfLet(
				"result",
				stubbed_closure_result_name(mock_name, param),
				(_closure_call(param, sig, arguments),),
			)
		)
	return stmts


def body_statements(method: Method, mock_name: str) -> Tuple[Statement, ...]:
	stmts: List[Statement] = [DeferFulfill(expectation_name(mock_name))]
	if method.throws:
		stmts.append(ThrowIfSet(stubbed_error_name(mock_name)))
	if not method.is_initializer:
		stmts.append(SetFlag(invoked_name(mock_name)))
		stmts.append(Increment(invoked_count_name(mock_name)))

	mockable = method.mockable_parameters
	if mockable:
		captured = tuple_text([f"{p.name}: {p.name}" for p in mockable], pad="()")
		stmts.append(Assign(parameters_name(mock_name), captured))
		stmts.append(Append(parameters_list_name(mock_name), captured))

	stmts.extend(_closure_statements(method, mock_name))

	if not is_void(method.return_type) and not method.is_initializer:
		stmts.append(Return(stubbed_result_name(mock_name)))
	return tuple(stmts)


__all__ = ["body_statements"]
