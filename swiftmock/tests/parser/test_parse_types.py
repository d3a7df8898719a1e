# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Swift type spellings -> TypeDesc."""

import pytest
from lark.exceptions import UnexpectedInput

from swiftmock.core.type_desc import TypeKind
from swiftmock.parser import SignatureParseError, parse_type, parse_type_name


@pytest.mark.parametrize(
	"text, kind, name",
	[
		("Int", TypeKind.SCALAR, "Int"),
		("Foundation.Data", TypeKind.SCALAR, "Foundation.Data"),
		("Int?", TypeKind.OPTIONAL, "Int?"),
		("Int!", TypeKind.OPTIONAL, "Int!"),
		("Optional<Int>", TypeKind.OPTIONAL, "Optional<Int>"),
		("[User]", TypeKind.ARRAY, "[User]"),
		("Array<User>", TypeKind.ARRAY, "Array<User>"),
		("[String: Int]", TypeKind.SCALAR, "[String: Int]"),
		("Result<User, Error>", TypeKind.SCALAR, "Result<User, Error>"),
		("(Int, String)", TypeKind.SCALAR, "(Int, String)"),
		("(code: Int, message: String)", TypeKind.SCALAR, "(code: Int, message: String)"),
		("(Int)", TypeKind.SCALAR, "Int"),
		("Codable & Sendable", TypeKind.SCALAR, "Codable & Sendable"),
		("() -> Void", TypeKind.CLOSURE, "() -> Void"),
		("(Int, String) async throws -> Bool", TypeKind.CLOSURE, "(Int, String) async throws -> Bool"),
		("((Bool) -> Void)?", TypeKind.OPTIONAL, "((Bool) -> Void)?"),
	],
)
def test_type_spellings(text, kind, name):
	desc = parse_type_name(text)
	assert desc.kind is kind
	assert desc.name == name


def test_optional_wraps_inner_type():
	desc = parse_type_name("[User]?")
	assert desc.wrapped is not None
	assert desc.wrapped.kind is TypeKind.ARRAY
	assert desc.wrapped.wrapped.name == "User"


def test_implicitly_unwrapped_flag():
	assert parse_type_name("String!").implicitly_unwrapped
	assert not parse_type_name("String?").implicitly_unwrapped


def test_generic_base_and_args():
	desc = parse_type_name("Swift.Dictionary<String, [Int]>")
	assert desc.generic_base == "Swift.Dictionary"
	assert [a.name for a in desc.args] == ["String", "[Int]"]
	assert parse_type_name("[String: Int]").generic_base == "Dictionary"


def test_closure_signature_shape():
	desc = parse_type_name("(Int, String?) throws -> [User]")
	sig = desc.closure
	assert sig is not None
	assert [p.name for p in sig.parameters] == ["Int", "String?"]
	assert sig.return_type.kind is TypeKind.ARRAY
	assert sig.throws and not sig.is_async


def test_rethrows_counts_as_throws():
	assert parse_type_name("(Int) rethrows -> Void").closure.throws


def test_parameter_decorations():
	parsed = parse_type("@escaping @Sendable (String) -> Void")
	assert parsed.attributes == ("@escaping", "@Sendable")
	assert parsed.type.kind is TypeKind.CLOSURE
	assert parse_type("inout Int").inout
	variadic = parse_type("Int...")
	assert variadic.variadic
	assert variadic.type.kind is TypeKind.ARRAY


@pytest.mark.parametrize("text", ["inout Int", "Int..."])
def test_parameter_only_decorations_rejected_elsewhere(text):
	with pytest.raises(SignatureParseError):
		parse_type_name(text)


def test_nested_inout_rejected():
	with pytest.raises(SignatureParseError):
		parse_type_name("[inout Int]")


@pytest.mark.parametrize("text", ["", "Int ->", "[Int", "(Int,", "-> Void"])
def test_malformed_types_raise_lark_errors(text):
	with pytest.raises(UnexpectedInput):
		parse_type_name(text)
