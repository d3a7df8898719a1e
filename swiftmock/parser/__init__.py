# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Swift type and signature parsing for the model loader.
"""

from swiftmock.parser.parser import (
	ParsedSignature,
	ParsedType,
	SignatureParseError,
	parse_signature,
	parse_type,
	parse_type_name,
)

__all__ = [
	"ParsedSignature",
	"ParsedType",
	"SignatureParseError",
	"parse_signature",
	"parse_type",
	"parse_type_name",
]
