# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
swiftmock command line.

Subcommands:
- `generate MODEL`: write one mock class per model type (stdout, or `-o`).
- `names MODEL`: print the mock name allocated to each method.

Exit codes: 0 on success, 1 when at least one type could not be generated
(the other types are still written and a diagnostic is reported), 2 when the
model or config file cannot be loaded.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Tuple

from swiftmock.compose import compose_file
from swiftmock.core.diagnostics import Diagnostic
from swiftmock.core.model import MockType
from swiftmock.generator import TypeMock, generate_type_mock
from swiftmock.loader import ModelLoadError, load_model
from swiftmock.naming import MockNamingError
from swiftmock.options import GeneratorOptions, OptionsError, load_options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerateOptions:
	model_path: Path
	out_path: Path | None = None
	config_path: Path | None = None
	indent: int | None = None
	imports: list[str] | None = None
	json: bool = False


@dataclass(frozen=True)
class NamesOptions:
	model_path: Path
	json: bool = False


def _build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="swiftmock", description="Generate Swift mocks from a JSON type model")
	p.add_argument("-v", "--verbose", action="store_true", help="Log allocation and generation details")
	sub = p.add_subparsers(dest="cmd", required=True)

	gen = sub.add_parser("generate", help="Write mock classes for every type in a model")
	gen.add_argument("model", type=Path, help="Path to a swiftmock-model JSON file")
	gen.add_argument("-o", "--output", type=Path, default=None, help="Output .swift path (default: stdout)")
	gen.add_argument("--config", type=Path, default=None, help="JSON config file (indent, imports, mockSuffix, header)")
	gen.add_argument("--indent", type=int, default=None, help="Indent width in spaces (overrides config)")
	gen.add_argument(
		"--import",
		dest="imports",
		action="append",
		default=None,
		help="Module to import in the generated file (repeatable; overrides config)",
	)
	gen.add_argument("--json", action="store_true", help="Emit a machine-readable JSON report")

	names = sub.add_parser("names", help="Print the mock name allocated to each method")
	names.add_argument("model", type=Path, help="Path to a swiftmock-model JSON file")
	names.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
	return p


def _emit_report(*, source: Path, diagnostics: List[Diagnostic], as_json: bool, extra: dict[str, Any] | None = None) -> None:
	exit_code = 1 if diagnostics else 0
	if as_json:
		payload: dict[str, Any] = {"exit_code": exit_code, "diagnostics": [d.to_dict() for d in diagnostics]}
		if extra:
			payload.update(extra)
		print(json.dumps(payload, sort_keys=True))
		return
	for d in diagnostics:
		print(d.format_human(str(source)), file=sys.stderr)


def _generate_all(types: Tuple[MockType, ...]) -> Tuple[List[TypeMock], List[Diagnostic]]:
	"""Generate every type; a type whose names collide is dropped and reported."""
	mocks: List[TypeMock] = []
	diagnostics: List[Diagnostic] = []
	for mock_type in types:
		try:
			mocks.append(generate_type_mock(mock_type))
		except MockNamingError as err:
			logger.warning("skipping %s: %s", mock_type.name, err)
			diagnostics.append(Diagnostic.from_error(err, phase="generate", type_name=mock_type.name))
	return mocks, diagnostics


def run_generate(opts: GenerateOptions) -> int:
	options = GeneratorOptions()
	try:
		if opts.config_path is not None:
			options = load_options(opts.config_path, options)
		types = load_model(opts.model_path)
	except OptionsError as err:
		_emit_report(source=opts.config_path or opts.model_path, diagnostics=[Diagnostic.from_error(err, phase="config")], as_json=opts.json)
		return 2
	except ModelLoadError as err:
		_emit_report(source=opts.model_path, diagnostics=[Diagnostic.from_error(err, phase="load")], as_json=opts.json)
		return 2
	options = options.with_overrides(
		indent=" " * opts.indent if opts.indent is not None else None,
		imports=tuple(opts.imports) if opts.imports is not None else None,
	)

	mocks, diagnostics = _generate_all(types)
	text = compose_file(mocks, options)
	extra: dict[str, Any] = {"types": [m.type_name for m in mocks]}
	if opts.out_path is not None:
		opts.out_path.parent.mkdir(parents=True, exist_ok=True)
		opts.out_path.write_text(text, encoding="utf-8")
		logger.info("wrote %d mock type(s) to %s", len(mocks), opts.out_path)
		extra["output"] = str(opts.out_path)
	elif opts.json:
		extra["source"] = text
	else:
		sys.stdout.write(text)
	_emit_report(source=opts.model_path, diagnostics=diagnostics, as_json=opts.json, extra=extra)
	return 1 if diagnostics else 0


def run_names(opts: NamesOptions) -> int:
	try:
		types = load_model(opts.model_path)
	except ModelLoadError as err:
		_emit_report(source=opts.model_path, diagnostics=[Diagnostic.from_error(err, phase="load")], as_json=opts.json)
		return 2
	mocks, diagnostics = _generate_all(types)
	if opts.json:
		names = {
			m.type_name: [{"method": mm.method.name, "mockName": mm.mock_name} for mm in m.methods] for m in mocks
		}
		_emit_report(source=opts.model_path, diagnostics=diagnostics, as_json=True, extra={"names": names})
	else:
		for m in mocks:
			print(f"{m.type_name}:")
			for mm in m.methods:
				print(f"  {mm.method.name} -> {mm.mock_name}")
		_emit_report(source=opts.model_path, diagnostics=diagnostics, as_json=False)
	return 1 if diagnostics else 0


def main(argv: list[str] | None = None) -> int:
	p = _build_parser()
	args = p.parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)

	if args.cmd == "generate":
		if args.indent is not None and args.indent < 0:
			p.error("--indent must not be negative")
		return run_generate(
			GenerateOptions(
				model_path=args.model,
				out_path=args.output,
				config_path=args.config,
				indent=args.indent,
				imports=args.imports,
				json=bool(args.json),
			)
		)

	if args.cmd == "names":
		return run_names(NamesOptions(model_path=args.model, json=bool(args.json)))

	p.error(f"unknown command: {args.cmd}")
	return 2


__all__ = ["GenerateOptions", "NamesOptions", "main", "run_generate", "run_names"]
