# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Common diagnostic structure for the loader, generator and CLI.

Errors raised by the core carry a stable `code`; the CLI converts them into
Diagnostic records so a failing type can be reported without stopping the
whole run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Diagnostic:
	"""Represents a generator diagnostic (error/warning)."""

	message: str
	code: str | None = None
	# Phase that produced the diagnostic: "load", "config" or "generate".
	phase: str | None = None
	severity: str = "error"
	type_name: str | None = None  # mocked type the diagnostic belongs to, if any
	notes: list[str] = field(default_factory=list)

	@classmethod
	def from_error(cls, err: Exception, *, phase: str, type_name: str | None = None) -> "Diagnostic":
		"""Build a diagnostic from a coded error (`code` attribute) or any exception."""
		return cls(
			message=str(err),
			code=getattr(err, "code", None),
			phase=phase,
			type_name=type_name if type_name is not None else getattr(err, "type_name", None),
		)

	def to_dict(self) -> dict[str, Any]:
		return {
			"message": self.message,
			"code": self.code,
			"phase": self.phase,
			"severity": self.severity,
			"type": self.type_name,
			"notes": list(self.notes),
		}

	def format_human(self, source: str) -> str:
		code = f"[{self.code}]" if self.code else ""
		where = f" ({self.type_name})" if self.type_name else ""
		return f"{source}: {self.severity}{code}{where}: {self.message}"


__all__ = ["Diagnostic"]
