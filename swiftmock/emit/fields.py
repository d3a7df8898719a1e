# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Stub fields of a mocked method.

Order is fixed: stubbed error, invocation flag and count, parameter
captures, per-closure stubs, stubbed result, expectation.
"""

from __future__ import annotations

from typing import List, Tuple

from swiftmock.core.defaults import default_value
from swiftmock.core.model import Method, Parameter
from swiftmock.core.type_desc import TypeDesc, TypeKind, is_optional, is_void
from swiftmock.emit.specs import FieldRole, FieldSpec, tuple_text
from swiftmock.naming import capitalize_first

EXPECTATION_INIT = 'XCTestExpectation(description: "\\(#function) expectation")'


def stubbed_error_name(mock_name: str) -> str:
	return f"stubbed{mock_name}ThrowableError"


def invoked_name(mock_name: str) -> str:
	return f"invoked{mock_name}"


def invoked_count_name(mock_name: str) -> str:
	return f"invoked{mock_name}Count"


def parameters_name(mock_name: str) -> str:
	return f"invoked{mock_name}Parameters"


def parameters_list_name(mock_name: str) -> str:
	return f"invoked{mock_name}ParametersList"


def should_invoke_name(mock_name: str, param: Parameter) -> str:
	return f"shouldInvoke{mock_name}{capitalize_first(param.name)}"


def stubbed_closure_result_name(mock_name: str, param: Parameter) -> str:
	return f"stubbed{mock_name}{capitalize_first(param.name)}Result"


def stubbed_result_name(mock_name: str) -> str:
	return f"stubbed{mock_name}Result"


def expectation_name(mock_name: str) -> str:
	return f"invoked{mock_name}Expectation"


def mock_return_type_name(return_type: TypeDesc, type_name: str) -> str:
	"""Return type spelling, with `Self` replaced by the default mock type."""
	if return_type.name == "Self":
		return f"Default{type_name}Mock"
	return return_type.name


def has_single_plain_argument(params: Tuple[TypeDesc, ...]) -> bool:
	"""A closure taking exactly one non-optional value gets it stubbed directly."""
	return len(params) == 1 and not is_optional(params[0])


def _optional_of(desc: TypeDesc) -> str:
	if desc.kind is TypeKind.CLOSURE:
		return f"({desc.name})?"
	return f"{desc.name}?"


def _closure_fields(method: Method, mock_name: str) -> List[FieldSpec]:
	fields: List[FieldSpec] = []
	for param in method.closure_parameters:
		sig = param.closure
		if sig is None:
			continue
		if not sig.parameters:
			fields.append(
				FieldSpec(
					FieldRole.SHOULD_INVOKE,
					should_invoke_name(mock_name, param),
					initial="false",
					parameter=param.name,
				)
			)
			continue
		if has_single_plain_argument(sig.parameters):
			type_text = _optional_of(sig.parameters[0])
		else:
			type_text = tuple_text([t.name for t in sig.parameters], pad="Void") + "?"
		fields.append(
			FieldSpec(
				FieldRole.STUBBED_CLOSURE_RESULT,
				stubbed_closure_result_name(mock_name, param),
				type_text=type_text,
				parameter=param.name,
			)
		)
	return fields


def stub_fields(method: Method, mock_name: str, type_name: str) -> Tuple[FieldSpec, ...]:
	"""Fields that capture calls to `method` and script its behaviour."""
	fields: List[FieldSpec] = []
	if method.throws:
		fields.append(FieldSpec(FieldRole.STUBBED_ERROR, stubbed_error_name(mock_name), type_text="Error?"))
	if not method.is_initializer:
		fields.append(FieldSpec(FieldRole.INVOKED, invoked_name(mock_name), initial="false"))
		fields.append(FieldSpec(FieldRole.INVOKED_COUNT, invoked_count_name(mock_name), initial="0"))

	mockable = method.mockable_parameters
	if mockable:
		captured = tuple_text([f"{p.name}: {p.settable_type}" for p in mockable], pad="Void")
		fields.append(FieldSpec(FieldRole.LAST_PARAMETERS, parameters_name(mock_name), type_text=f"{captured}?"))
		fields.append(
			FieldSpec(
				FieldRole.PARAMETERS_HISTORY,
				parameters_list_name(mock_name),
				type_text=f"[{captured}]",
				initial="[]",
			)
		)

	fields.extend(_closure_fields(method, mock_name))

	if not is_void(method.return_type) and not method.is_initializer:
		result_type = mock_return_type_name(method.return_type, type_name)
		if is_optional(method.return_type):
			fields.append(FieldSpec(FieldRole.STUBBED_RESULT, stubbed_result_name(mock_name), type_text=result_type))
		else:
			initial = None if result_type != method.return_type.name else default_value(method.return_type)
			if method.return_type.kind is TypeKind.CLOSURE:
				result_type = f"({result_type})"
			fields.append(
				FieldSpec(
					FieldRole.STUBBED_RESULT,
					stubbed_result_name(mock_name),
					type_text=f"{result_type}!",
					initial=initial,
				)
			)

	fields.append(FieldSpec(FieldRole.EXPECTATION, expectation_name(mock_name), initial=EXPECTATION_INIT))
	return tuple(fields)


__all__ = [
	"EXPECTATION_INIT",
	"expectation_name",
	"has_single_plain_argument",
	"invoked_count_name",
	"invoked_name",
	"mock_return_type_name",
	"parameters_list_name",
	"parameters_name",
	"should_invoke_name",
	"stub_fields",
	"stubbed_closure_result_name",
	"stubbed_error_name",
	"stubbed_result_name",
]
