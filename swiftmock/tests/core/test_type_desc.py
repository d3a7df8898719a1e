# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Shape helpers over the closed type-descriptor variant.
"""

from swiftmock.core.type_desc import (
	VOID,
	TypeKind,
	array,
	closure,
	closure_of,
	is_closure,
	is_optional,
	is_void,
	masked_type_name,
	optional,
	scalar,
	unwrapped_name,
)


def test_masked_type_name_pluralizes_arrays() -> None:
	assert masked_type_name(array(scalar("User"))) == "Users"
	assert masked_type_name(optional(array(scalar("Int")))) == "Ints"


def test_masked_type_name_unwraps_optionals() -> None:
	assert masked_type_name(optional(scalar("Int"))) == "Int"
	assert masked_type_name(optional(scalar("Int"), implicitly_unwrapped=True)) == "Int"
	assert masked_type_name(scalar("Foundation.Data")) == "Foundation.Data"


def test_void_spellings() -> None:
	assert is_void(VOID)
	assert is_void(scalar("()"))
	assert is_void(scalar("Swift.Void"))
	assert not is_void(optional(VOID))
	assert not is_void(scalar("Int"))


def test_closure_spelling_and_optional_closure() -> None:
	fn = closure([scalar("Int"), scalar("String")], scalar("Bool"), is_async=True, throws=True)
	assert fn.kind is TypeKind.CLOSURE
	assert fn.name == "(Int, String) async throws -> Bool"

	opt = optional(closure([scalar("Int")], VOID))
	assert opt.name == "((Int) -> Void)?"
	assert is_optional(opt)
	assert is_closure(opt)
	assert unwrapped_name(opt) == "(Int) -> Void"
	sig = closure_of(opt)
	assert sig is not None
	assert [p.name for p in sig.parameters] == ["Int"]
	assert closure_of(scalar("Int")) is None
