# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Emitters for one mocked method: stub fields, body statements, declaration.

Each emitter returns immutable specs (`swiftmock.emit.specs`); text is only
produced by `swiftmock.emit.render`.
"""

from swiftmock.emit.body import body_statements
from swiftmock.emit.declaration import declaration
from swiftmock.emit.fields import stub_fields

__all__ = ["body_statements", "declaration", "stub_fields"]
