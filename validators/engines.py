"""
Validation Engines
==================

Thin adapters over the XML libraries that do the actual parsing and schema
work. Each engine turns library exceptions and error logs into Diagnostics
so the validator never sees a library-specific type.

Engines:
- LxmlEngine: libxml2 via lxml; reports line and column, warnings and errors
- XmlSchemaEngine: python-xmlschema; lax compile keeps a partial schema usable
"""

import logging
import os
from typing import Any, Dict, Iterator, Optional, Type

import xmlschema
from lxml import etree

from core.settings import DEFAULT_ENGINE

from .diagnostics import Diagnostic, ErrorKind, Severity
from .errors import SchemaCompileFailed, XmlMalformedError

logger = logging.getLogger(__name__)

# lxml error log level names mapped to diagnostic severity
_LEVEL_SEVERITY = {
    "WARNING": Severity.WARNING,
    "ERROR": Severity.ERROR,
    "FATAL": Severity.ERROR,
}

# Fallback when nothing usable compiles: any document root is then undeclared
EMPTY_SCHEMA = '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema"/>'


def _syntax_diagnostic(exc: etree.XMLSyntaxError, kind: ErrorKind) -> Diagnostic:
    line, column = getattr(exc, "position", None) or (0, 0)
    return Diagnostic.error(exc.msg or str(exc), kind, line or 0, column or 0)


class LxmlEngine:
    """Schema compilation and validation with lxml.etree.XMLSchema."""

    name = "lxml"

    def _parser(self) -> etree.XMLParser:
        # Internal DTD subsets are parsed; nothing is fetched from outside.
        return etree.XMLParser(
            encoding="utf-8",
            no_network=True,
            load_dtd=False,
            huge_tree=False,
        )

    def _parse(self, text: str, kind: ErrorKind, base_url: Optional[str] = None):
        try:
            return etree.fromstring(text.encode("utf-8"), self._parser(), base_url=base_url)
        except etree.XMLSyntaxError as exc:
            raise XmlMalformedError(_syntax_diagnostic(exc, kind)) from exc
        except ValueError as exc:
            # lxml raises ValueError for input it refuses before parsing starts
            raise XmlMalformedError(Diagnostic.error(str(exc), kind)) from exc

    def parse_document(self, text: str, base_url: Optional[str] = None):
        """
        Parse XML text into an lxml element.

        Raises:
            XmlMalformedError: If the text is not well-formed
        """
        return self._parse(text, ErrorKind.XML_MALFORMED, base_url)

    def empty_schema(self) -> etree.XMLSchema:
        """Compile a schema that declares nothing."""
        return etree.XMLSchema(etree.fromstring(EMPTY_SCHEMA))

    def _parse_schema_document(self, text: str, base_url: Optional[str]):
        try:
            return self._parse(text, ErrorKind.SCHEMA_COMPILE_ERROR, base_url)
        except XmlMalformedError as exc:
            raise SchemaCompileFailed(exc.diagnostics, schema=self.empty_schema()) from exc

    def compile_schema(self, text: str, base_url: Optional[str] = None) -> etree.XMLSchema:
        """
        Compile XSD text.

        Args:
            text: Schema source
            base_url: Location used to resolve xs:include/xs:import

        Returns:
            Compiled schema

        Raises:
            SchemaCompileFailed: With one diagnostic per compiler error;
                lxml never yields a partial schema, so ``schema`` is the empty one
        """
        schema_root = self._parse_schema_document(text, base_url)
        try:
            return etree.XMLSchema(schema_root)
        except etree.XMLSchemaParseError as exc:
            diagnostics = [
                Diagnostic.error(entry.message, ErrorKind.SCHEMA_COMPILE_ERROR, entry.line, entry.column)
                for entry in exc.error_log
            ]
            if not diagnostics:
                diagnostics = [Diagnostic.error(str(exc), ErrorKind.SCHEMA_COMPILE_ERROR)]
            raise SchemaCompileFailed(diagnostics, schema=self.empty_schema()) from exc

    def iter_violations(self, schema: etree.XMLSchema, document) -> Iterator[Diagnostic]:
        """Validate the whole document and yield every warning and error in log order."""
        schema.validate(document)
        for entry in schema.error_log:
            yield Diagnostic(
                _LEVEL_SEVERITY.get(entry.level_name, Severity.ERROR),
                entry.message,
                entry.line or 0,
                entry.column or 0,
                ErrorKind.SCHEMA_VIOLATION,
            )


class XmlSchemaEngine(LxmlEngine):
    """
    Schema compilation and validation with python-xmlschema.

    Documents and schemas are still parsed by lxml so every element carries
    a ``sourceline``; xmlschema does not report columns.
    """

    name = "xmlschema"

    def __init__(self, schema_class: Type[xmlschema.XMLSchemaBase] = xmlschema.XMLSchema):
        self.schema_class = schema_class

    @staticmethod
    def _line(error) -> int:
        return getattr(error, "sourceline", None) or 0

    def empty_schema(self):
        return self.schema_class(EMPTY_SCHEMA)

    def compile_schema(self, text: str, base_url: Optional[str] = None):
        schema_root = self._parse_schema_document(text, base_url)
        # xmlschema resolves relative locations against a directory
        base_dir = os.path.dirname(os.path.abspath(base_url)) if base_url else None
        try:
            schema = self.schema_class(schema_root, base_url=base_dir, validation="lax")
        except xmlschema.XMLSchemaException as exc:
            message = getattr(exc, "message", None) or str(exc)
            raise SchemaCompileFailed(
                [Diagnostic.error(message, ErrorKind.SCHEMA_COMPILE_ERROR, self._line(exc))],
                schema=self.empty_schema(),
            ) from exc

        if schema.all_errors:
            diagnostics = [
                Diagnostic.error(error.message, ErrorKind.SCHEMA_COMPILE_ERROR, self._line(error))
                for error in schema.all_errors
            ]
            logger.debug("Schema compiled in lax mode with %d error(s)", len(diagnostics))
            raise SchemaCompileFailed(diagnostics, schema=schema)
        return schema

    def iter_violations(self, schema, document) -> Iterator[Diagnostic]:
        for error in schema.iter_errors(document):
            yield Diagnostic.error(
                error.reason or error.message,
                ErrorKind.SCHEMA_VIOLATION,
                self._line(error),
            )


ENGINES: Dict[str, Type[LxmlEngine]] = {
    LxmlEngine.name: LxmlEngine,
    XmlSchemaEngine.name: XmlSchemaEngine,
}


def get_engine(engine: Any = None) -> LxmlEngine:
    """
    Resolve an engine instance.

    Args:
        engine: Engine instance, registered name, or None for the default

    Returns:
        Engine instance

    Raises:
        ValueError: If the name is not registered
    """
    if engine is None:
        engine = DEFAULT_ENGINE
    if not isinstance(engine, str):
        return engine
    try:
        return ENGINES[engine.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown validation engine {engine!r}; expected one of {sorted(ENGINES)}"
        ) from None
