# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Per-type generation: allocation order, emitted blocks, failure handling."""

import pytest

from swiftmock.core.model import MockType
from swiftmock.generator import generate_type_mock
from swiftmock.naming import MockNamingError
from swiftmock.options import GeneratorOptions
from swiftmock.test_helpers import assert_mock_names_unique, method, mock_type

EXPECTED_FETCH_BLOCK = [
	"    var stubbedFetchThrowableError: Error?",
	"    var invokedFetch = false",
	"    var invokedFetchCount = 0",
	"    var invokedFetchParameters: (id: Int, completion: (String) -> Void)?",
	"    var invokedFetchParametersList: [(id: Int, completion: (String) -> Void)] = []",
	"    var stubbedFetchCompletionResult: String?",
	"    var stubbedFetchResult: Int! = 0",
	r'    var invokedFetchExpectation = XCTestExpectation(description: "\(#function) expectation")',
	"    @discardableResult",
	"    func fetch(id: Int, completion: @escaping (String) -> Void) throws -> Int {",
	"        defer { invokedFetchExpectation.fulfill() }",
	"        if let error = stubbedFetchThrowableError {",
	"            throw error",
	"        }",
	"        invokedFetch = true",
	"        invokedFetchCount += 1",
	"        invokedFetchParameters = (id: id, completion: completion)",
	"        invokedFetchParametersList.append((id: id, completion: completion))",
	"        if let result = stubbedFetchCompletionResult {",
	"            completion(result)",
	"        }",
	"        return stubbedFetchResult",
	"    }",
]


def _fetch():
	return method(
		"fetch(id: Int, completion: @escaping (String) -> Void)",
		returns="Int",
		throws=True,
		attributes=("@discardableResult",),
	)


def test_single_method_block():
	type_mock = generate_type_mock(mock_type("Service", _fetch()))
	assert type_mock.mock_names == ("Fetch",)
	assert type_mock.lines() == EXPECTED_FETCH_BLOCK


def test_tab_indent_option():
	type_mock = generate_type_mock(mock_type("Service", method("reset()")))
	lines = type_mock.lines(GeneratorOptions(indent="\t"))
	assert lines[-1] == "\t}"
	assert lines[-2] == "\t\tinvokedResetCount += 1"
	assert lines[3] == "\tfunc reset() {"


def test_overloads_get_distinct_field_prefixes():
	type_mock = generate_type_mock(
		mock_type(
			"Store",
			method("save(_ item: Int)"),
			method("save(_ item: String)"),
			method("save()"),
		)
	)
	assert type_mock.mock_names == ("SaveInt", "SaveString", "Save2")
	assert_mock_names_unique(type_mock)
	text = "\n".join(type_mock.lines())
	assert "var invokedSaveIntParameters: (item: Int, Void)?" in text
	assert "var invokedSaveStringParameters: (item: String, Void)?" in text
	assert "var invokedSave2 = false" in text


def test_generation_is_deterministic():
	t = mock_type("Service", _fetch(), method("fetch(id: String)"), method("fetch()"))
	assert generate_type_mock(t) == generate_type_mock(t)


def test_registry_is_per_type():
	a = generate_type_mock(mock_type("A", method("run()")))
	b = generate_type_mock(mock_type("B", method("run()")))
	assert a.mock_names == b.mock_names == ("Run",)


def test_ambiguous_type_raises_without_partial_result():
	t = mock_type("Broken", method("ok()"), method("dup(_ x: Int)"), method("dup(_ x: Int)"))
	with pytest.raises(MockNamingError) as excinfo:
		generate_type_mock(t)
	assert excinfo.value.type_name == "Broken"


def test_empty_type():
	type_mock = generate_type_mock(MockType(name="Empty"))
	assert type_mock.methods == ()
	assert type_mock.lines() == []


def test_unique_method_before_overload_family_keeps_fields_apart():
	type_mock = generate_type_mock(
		mock_type("S", method("fooBar()"), method("foo(bar: Int)"), method("foo(baz: Int)"))
	)
	assert type_mock.mock_names == ("FooBar", "FooBarInt", "FooBaz")
	assert_mock_names_unique(type_mock)
	text = "\n".join(type_mock.lines())
	assert text.count("    var invokedFooBar = false") == 1
	assert "    var invokedFooBarIntParameters: (bar: Int, Void)?" in text
