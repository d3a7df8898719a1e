# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Signature lines of mocked methods and initializers."""

import pytest

from swiftmock.emit import declaration
from swiftmock.emit.declaration import strip_failable_marker
from swiftmock.emit.render import render_declaration
from swiftmock.test_helpers import method


def _line(m, type_name="Service"):
	return render_declaration(declaration(m, type_name))


def test_plain_method():
	assert _line(method("reset()")) == "func reset() {"


def test_effects_and_return_type():
	m = method("load(id: Int)", returns="[User]", is_async=True, throws=True)
	assert _line(m) == "func load(id: Int) async throws -> [User] {"


def test_escaping_attribute_is_kept_in_signature():
	m = method("fetch(completion: @escaping (String) -> Void)")
	assert _line(m) == "func fetch(completion: @escaping (String) -> Void) {"


def test_self_return_is_replaced():
	assert _line(method("copy()", returns="Self"), "Builder") == "func copy() -> DefaultBuilderMock {"


def test_initializer_is_required():
	assert _line(method("init(value: Int)")) == "required init(value: Int) {"


@pytest.mark.parametrize(
	"name, expected",
	[
		("init?(value: Int?)", "init(value: Int?)"),
		("init!(value: Int)", "init(value: Int)"),
		("init(value: Int?)", "init(value: Int?)"),
	],
)
def test_strip_failable_marker(name, expected):
	assert strip_failable_marker(name) == expected


def test_failable_initializer_keeps_optional_parameters():
	assert _line(method("init?(value: Int?)")) == "required init(value: Int?) {"


def test_init_prefixed_method_is_a_plain_method():
	m = method("initialize()", returns="Bool")
	assert not m.is_initializer
	assert _line(m) == "func initialize() -> Bool {"
