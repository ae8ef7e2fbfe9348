from types import SimpleNamespace

import pytest
from lxml import etree

from validators.diagnostics import ErrorKind, Severity
from validators.engines import ENGINES, LxmlEngine, XmlSchemaEngine, get_engine
from validators.errors import SchemaCompileFailed, XmlMalformedError

from xml_samples import INVOICE_MISSING_AMOUNT, INVOICE_XSD, MALFORMED_INVOICE


def test_get_engine_by_name():
    assert isinstance(get_engine("lxml"), LxmlEngine)
    assert isinstance(get_engine("XMLSchema"), XmlSchemaEngine)


def test_get_engine_passes_instances_through():
    engine = XmlSchemaEngine()
    assert get_engine(engine) is engine


def test_get_engine_default_is_registered():
    assert get_engine(None).name in ENGINES


def test_get_engine_rejects_unknown_name():
    with pytest.raises(ValueError, match="Unknown validation engine"):
        get_engine("saxon")


def test_lxml_maps_warning_level_from_error_log():
    log = [
        SimpleNamespace(level_name="WARNING", message="odd but allowed", line=2, column=3),
        SimpleNamespace(level_name="ERROR", message="not allowed", line=4, column=0),
    ]
    schema = SimpleNamespace(validate=lambda document: False, error_log=log)

    diagnostics = list(LxmlEngine().iter_violations(schema, document=None))

    assert [d.severity for d in diagnostics] == [Severity.WARNING, Severity.ERROR]
    assert [(d.row, d.column) for d in diagnostics] == [(2, 3), (4, 0)]
    assert all(d.kind is ErrorKind.SCHEMA_VIOLATION for d in diagnostics)


def test_lxml_violations_are_lazy():
    calls = []
    schema = SimpleNamespace(validate=lambda document: calls.append(document), error_log=[])

    violations = LxmlEngine().iter_violations(schema, "doc")
    assert calls == []
    assert list(violations) == []
    assert calls == ["doc"]


def test_parse_document_raises_malformed_with_position(engine_name):
    engine = get_engine(engine_name)
    with pytest.raises(XmlMalformedError) as excinfo:
        engine.parse_document(MALFORMED_INVOICE)

    diagnostic = excinfo.value.diagnostic
    assert diagnostic.kind is ErrorKind.XML_MALFORMED
    assert diagnostic.row >= 1


def test_parse_empty_document_is_malformed(engine_name):
    with pytest.raises(XmlMalformedError):
        get_engine(engine_name).parse_document("")


def test_lxml_compile_failure_falls_back_to_empty_schema():
    schema = '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema"><xs:element/></xs:schema>'
    with pytest.raises(SchemaCompileFailed) as excinfo:
        LxmlEngine().compile_schema(schema)

    empty = excinfo.value.schema
    assert isinstance(empty, etree.XMLSchema)
    assert empty.validate(etree.fromstring("<invoice/>")) is False
    assert excinfo.value.diagnostics
    assert all(d.kind is ErrorKind.SCHEMA_COMPILE_ERROR for d in excinfo.value.diagnostics)


def test_compile_rejects_non_schema_document(engine_name):
    with pytest.raises(SchemaCompileFailed) as excinfo:
        get_engine(engine_name).compile_schema("<invoice/>")
    assert excinfo.value.schema is not None


def test_xmlschema_reports_source_lines():
    engine = XmlSchemaEngine()
    schema = engine.compile_schema(INVOICE_XSD)
    document = engine.parse_document(INVOICE_MISSING_AMOUNT)

    diagnostics = list(engine.iter_violations(schema, document))

    assert diagnostics
    assert diagnostics[0].row == 1
    assert diagnostics[0].column == 0
