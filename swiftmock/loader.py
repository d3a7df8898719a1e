# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
JSON model loader: the boundary where an upstream source extractor hands
types to the generator.

Format (pinned for v0, JSON):
{
  "format": "swiftmock-model",
  "version": 0,
  "types": [
    {
      "name": "Service",
      "kind": "protocol",
      "methods": [
        {
          "name": "fetch(id: Int, completion: @escaping (String) -> Void)",
          "callName": "fetch",          // optional, parsed from name
          "returnType": "Int",          // optional, default Void
          "isAsync": false,             // optional
          "throws": false,              // optional
          "isInitializer": false,       // optional, default: callName is init, init? or init!
          "attributes": ["@objc"],      // optional
          "parameters": [               // optional, parsed from name
            {"name": "id", "label": "id", "type": "Int", "escaping": false}
          ]
        }
      ]
    }
  ]
}

Array order is declaration order and is preserved everywhere.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional, Tuple

from lark.exceptions import UnexpectedInput

from swiftmock.core.model import Method, MockType, Parameter, is_initializer_name
from swiftmock.core.type_desc import VOID, TypeDesc
from swiftmock.parser import SignatureParseError, parse_signature, parse_type, parse_type_name

MODEL_FORMAT = "swiftmock-model"
MODEL_VERSION = 0


class ModelLoadError(ValueError):
	"""Structural problem in a model file; `code` is stable for tooling."""

	def __init__(self, message: str, *, code: str = "E-MODEL-INVALID", type_name: str | None = None) -> None:
		super().__init__(message)
		self.code = code
		self.type_name = type_name


def _parse_type_text(text: str, *, where: str, type_name: str) -> TypeDesc:
	try:
		return parse_type_name(text)
	except (UnexpectedInput, SignatureParseError) as err:
		raise ModelLoadError(
			f"{where}: cannot parse type `{text}`: {err}",
			code="E-MODEL-TYPE-SYNTAX",
			type_name=type_name,
		) from err


def _expect_bool(obj: dict, key: str, *, where: str, type_name: str) -> bool:
	value = obj.get(key, False)
	if not isinstance(value, bool):
		raise ModelLoadError(f"{where}: `{key}` must be a boolean", type_name=type_name)
	return value


def _parameter_from_obj(obj: Any, *, where: str, type_name: str) -> Parameter:
	if not isinstance(obj, dict):
		raise ModelLoadError(f"{where}: parameter must be a JSON object", type_name=type_name)
	name = obj.get("name")
	type_text = obj.get("type")
	if not isinstance(name, str) or not name:
		raise ModelLoadError(f"{where}: parameter `name` must be a non-empty string", type_name=type_name)
	if not isinstance(type_text, str) or not type_text:
		raise ModelLoadError(f"{where}: parameter `{name}` needs a `type` string", type_name=type_name)
	label = obj.get("label", name)
	if label is not None and not isinstance(label, str):
		raise ModelLoadError(f"{where}: parameter `{name}` label must be a string or null", type_name=type_name)
	try:
		parsed = parse_type(type_text)
	except (UnexpectedInput, SignatureParseError) as err:
		raise ModelLoadError(
			f"{where}: cannot parse type `{type_text}` of parameter `{name}`: {err}",
			code="E-MODEL-TYPE-SYNTAX",
			type_name=type_name,
		) from err
	escaping = obj.get("escaping")
	if escaping is None:
		escaping = "@escaping" in parsed.attributes
	elif not isinstance(escaping, bool):
		raise ModelLoadError(f"{where}: parameter `{name}` escaping must be a boolean", type_name=type_name)
	return Parameter(
		name=name,
		label=None if label in (None, "_") else label,
		type=parsed.type,
		escaping=escaping,
		inout=parsed.inout,
		variadic=parsed.variadic,
	)


def _method_from_obj(obj: Any, *, index: int, type_name: str) -> Method:
	where = f"{type_name}.methods[{index}]"
	if not isinstance(obj, dict):
		raise ModelLoadError(f"{where}: method must be a JSON object", type_name=type_name)
	name = obj.get("name")
	if not isinstance(name, str) or not name:
		raise ModelLoadError(f"{where}: method `name` must be a non-empty string", type_name=type_name)
	where = f"{type_name}.{name}"

	call_name: Optional[str] = obj.get("callName")
	params_obj = obj.get("parameters")
	params: Tuple[Parameter, ...]
	if params_obj is None or call_name is None:
		try:
			parsed = parse_signature(name)
		except (UnexpectedInput, SignatureParseError) as err:
			raise ModelLoadError(
				f"{where}: cannot parse signature (give `callName` and `parameters` explicitly): {err}",
				code="E-MODEL-SIGNATURE-SYNTAX",
				type_name=type_name,
			) from err
		if call_name is None:
			call_name = parsed.call_name
		params = parsed.parameters
	if params_obj is not None:
		if not isinstance(params_obj, list):
			raise ModelLoadError(f"{where}: `parameters` must be a list", type_name=type_name)
		params = tuple(_parameter_from_obj(p, where=where, type_name=type_name) for p in params_obj)
	if not isinstance(call_name, str) or not call_name:
		raise ModelLoadError(f"{where}: `callName` must be a non-empty string", type_name=type_name)

	return_text = obj.get("returnType")
	if return_text is not None and not isinstance(return_text, str):
		raise ModelLoadError(f"{where}: `returnType` must be a string", type_name=type_name)
	return_type = _parse_type_text(return_text, where=where, type_name=type_name) if return_text else VOID

	attributes = obj.get("attributes") or []
	if not isinstance(attributes, list) or not all(isinstance(a, str) for a in attributes):
		raise ModelLoadError(f"{where}: `attributes` must be a list of strings", type_name=type_name)

	is_initializer = obj.get("isInitializer")
	if is_initializer is None:
		is_initializer = is_initializer_name(call_name)
	elif not isinstance(is_initializer, bool):
		raise ModelLoadError(f"{where}: `isInitializer` must be a boolean", type_name=type_name)

	return Method(
		name=name,
		call_name=call_name,
		parameters=params,
		return_type=return_type,
		is_initializer=is_initializer,
		is_async=_expect_bool(obj, "isAsync", where=where, type_name=type_name),
		throws=_expect_bool(obj, "throws", where=where, type_name=type_name),
		attributes=tuple(attributes),
	)


def type_from_obj(obj: Any) -> MockType:
	if not isinstance(obj, dict):
		raise ModelLoadError("type entry must be a JSON object")
	name = obj.get("name")
	if not isinstance(name, str) or not name:
		raise ModelLoadError("type `name` must be a non-empty string")
	kind = obj.get("kind", "protocol")
	if kind not in ("protocol", "class"):
		raise ModelLoadError(f"{name}: `kind` must be \"protocol\" or \"class\"", type_name=name)
	methods_obj = obj.get("methods") or []
	if not isinstance(methods_obj, list):
		raise ModelLoadError(f"{name}: `methods` must be a list", type_name=name)
	methods = tuple(_method_from_obj(m, index=i, type_name=name) for i, m in enumerate(methods_obj))
	return MockType(name=name, methods=methods, kind=kind)


def model_from_obj(obj: Any) -> Tuple[MockType, ...]:
	"""Decode a whole model object; see the module docstring for the format."""
	if not isinstance(obj, dict):
		raise ModelLoadError("model must be a JSON object", code="E-MODEL-FORMAT")
	if obj.get("format") != MODEL_FORMAT or obj.get("version") != MODEL_VERSION:
		raise ModelLoadError("unsupported model format/version", code="E-MODEL-FORMAT")
	types_obj = obj.get("types")
	if not isinstance(types_obj, list):
		raise ModelLoadError("model `types` must be a list", code="E-MODEL-FORMAT")
	types: List[MockType] = [type_from_obj(t) for t in types_obj]
	seen: set[str] = set()
	for t in types:
		if t.name in seen:
			raise ModelLoadError(f"duplicate type `{t.name}` in model", code="E-MODEL-DUPLICATE-TYPE", type_name=t.name)
		seen.add(t.name)
	return tuple(types)


def load_model(path: Path) -> Tuple[MockType, ...]:
	try:
		obj = json.loads(path.read_text(encoding="utf-8"))
	except OSError as err:
		raise ModelLoadError(f"cannot read model {path}: {err}", code="E-MODEL-IO") from err
	except json.JSONDecodeError as err:
		raise ModelLoadError(f"model {path} is not valid JSON: {err}", code="E-MODEL-FORMAT") from err
	return model_from_obj(obj)


__all__ = ["MODEL_FORMAT", "MODEL_VERSION", "ModelLoadError", "load_model", "model_from_obj", "type_from_obj"]
