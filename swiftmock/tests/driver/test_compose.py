# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Whole-file composition."""

from swiftmock.compose import compose_file, compose_type
from swiftmock.generator import generate_type_mock
from swiftmock.options import GeneratorOptions
from swiftmock.test_helpers import method, mock_type


def test_compose_file_layout():
	mocks = [
		generate_type_mock(mock_type("Clock", method("now()", returns="Double"))),
		generate_type_mock(mock_type("Bell", method("ring()"))),
	]
	opts = GeneratorOptions(indent="  ", imports=("XCTest", "Foundation"), header="// header")
	text = compose_file(mocks, opts)
	lines = text.split("\n")
	assert lines[:5] == ["// header", "", "import XCTest", "import Foundation", ""]
	assert lines[5] == "class ClockMock: Clock {"
	assert "  var stubbedNowResult: Double! = 0" in lines
	assert "}\n\nclass BellMock: Bell {" in text
	assert text.endswith("}\n")


def test_blank_line_between_methods():
	type_mock = generate_type_mock(mock_type("Bell", method("ring()"), method("stop()")))
	lines = compose_type(type_mock, GeneratorOptions())
	assert lines[0] == "class BellMock: Bell {"
	closing = lines.index("    }")
	assert lines[closing + 1] == ""
	assert lines[closing + 2] == "    var invokedStop = false"
	assert lines[-1] == "}"


def test_no_header_and_no_imports():
	opts = GeneratorOptions(imports=(), header="", mock_suffix="Fake")
	text = compose_file([generate_type_mock(mock_type("Bell", method("ring()")))], opts)
	assert text.startswith("class BellFake: Bell {\n")


def test_empty_file_still_has_preamble():
	assert compose_file([]) == "// Generated by swiftmock. Do not edit.\n\nimport XCTest\n\n"
