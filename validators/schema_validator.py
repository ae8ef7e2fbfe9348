"""
schema_validator.py

Validates an XML document against an XSD schema and reports every problem as
a located Diagnostic instead of raising on the first one.

Stages of a file-based run:
1. Path gate - both paths must pass is_path_safe (and the containment check
   when a base directory is configured)
2. Existence - both files must exist
3. Schema compile - compiler errors are recorded, the run carries on against
   whatever compiled (an empty schema when nothing did)
4. Document parse - a malformed document ends the run with one diagnostic
5. Schema pass - every warning and error is recorded, validation continues

Stage 1 runs for both arguments, then stage 2 for both, whatever stage 1
found. Nothing is read once either stage recorded a problem.
Only MemoryError and RecursionError escape; everything else ends up in the
returned list.

Usage:
    validator = SchemaValidator()
    for diagnostic in validator.validate_file_against_schema("doc.xml", "doc.xsd"):
        print(diagnostic)
"""

import logging
import os
from typing import List, Optional

from core.settings import CONTAINMENT_BASE_DIR, DEFAULT_ENCODING
from managers.file_manager import FileManager

from .diagnostics import Diagnostic, ErrorKind, ValidationRun
from .engines import get_engine
from .errors import CRITICAL_ERRORS, SchemaCompileFailed, XmlMalformedError
from .path_safety import is_path_safe, is_path_within

logger = logging.getLogger(__name__)

UNSAFE_XML_PATH = "Unsafe XML file path."
UNSAFE_SCHEMA_PATH = "Unsafe schema file path."
MISSING_XML_FILE = "Xml file doesn't exist"
MISSING_SCHEMA_FILE = "Xml schema file doesn't exist"


class SchemaValidator:
    """
    Validates XML against XSD and collects diagnostics.

    The instance keeps no per-run state: every public call builds its own
    ValidationRun, so one validator can serve any number of calls.
    """

    def __init__(
        self,
        engine=None,
        file_manager: Optional[FileManager] = None,
        base_dir: Optional[str] = None,
        encoding: Optional[str] = None,
    ):
        """
        Initialize schema validator.

        Args:
            engine: Engine instance or name ("lxml", "xmlschema"); settings default if None
            file_manager: File system collaborator (dependency injection)
            base_dir: Optional containment root for file paths
            encoding: Text encoding used to read files
        """
        self.engine = get_engine(engine)
        self.file_manager = file_manager or FileManager()
        self.base_dir = base_dir if base_dir is not None else CONTAINMENT_BASE_DIR
        self.encoding = encoding or DEFAULT_ENCODING

    def is_path_allowed(self, path) -> bool:
        if not is_path_safe(path):
            return False
        if self.base_dir is not None and not is_path_within(path, self.base_dir):
            logger.debug("Path %r is outside base directory %r", path, self.base_dir)
            return False
        return True

    def _check_safe(self, run: ValidationRun, path, message: str) -> None:
        if not self.is_path_allowed(path):
            logger.warning("Rejected unsafe path %r", path)
            run.error(message, ErrorKind.PATH_UNSAFE)

    def _exists(self, path) -> bool:
        try:
            return self.file_manager.file_exists(path)
        except (TypeError, ValueError):
            # None, bytes-like oddities and embedded NULs name no file
            return False

    def _check_exists(self, run: ValidationRun, path, message: str) -> None:
        if not self._exists(path):
            logger.info("File not found: %s", path)
            run.error(message, ErrorKind.FILE_MISSING)

    def _gate(self, run: ValidationRun, *checks) -> None:
        """
        Run the safety check on every path, then the existence check on every path.

        Args:
            run: Accumulator for the diagnostics
            checks: (path, unsafe_message, missing_message) triples
        """
        for path, unsafe_message, _ in checks:
            self._check_safe(run, path, unsafe_message)
        # Existence is probed even for unsafe paths; nothing is read once a check failed
        for path, _, missing_message in checks:
            self._check_exists(run, path, missing_message)

    def _read(self, path) -> str:
        return self.file_manager.read_text(path, self.encoding)

    def _read_failed(self, run: ValidationRun, exc: Exception) -> None:
        logger.error("Could not read input files: %s", exc)
        run.error(f"Could not read file: {exc}", ErrorKind.UNEXPECTED_FAILURE)

    def validate_file_against_schema(self, xml_path, schema_path) -> List[Diagnostic]:
        """
        Validate an XML file against an XSD file.

        Args:
            xml_path: Path to the XML document
            schema_path: Path to the XSD schema

        Returns:
            Diagnostics in discovery order; empty when the document is valid
        """
        run = ValidationRun()
        self._gate(
            run,
            (xml_path, UNSAFE_XML_PATH, MISSING_XML_FILE),
            (schema_path, UNSAFE_SCHEMA_PATH, MISSING_SCHEMA_FILE),
        )
        if len(run):
            return run.diagnostics

        try:
            xml_text = self._read(xml_path)
            schema_text = self._read(schema_path)
        except CRITICAL_ERRORS:
            raise
        except Exception as exc:
            # OSError, UnicodeDecodeError, or LookupError for an unknown encoding
            self._read_failed(run, exc)
            return run.diagnostics

        logger.debug("Validating %s against %s", xml_path, schema_path)
        self._validate_text(run, xml_text, schema_text, schema_location=os.fspath(schema_path))
        return run.diagnostics

    def validate_text_against_schema(self, xml: str, schema: str) -> List[Diagnostic]:
        """
        Validate XML text against XSD text.

        Args:
            xml: XML document text
            schema: XSD schema text

        Returns:
            Diagnostics in discovery order; empty when the document is valid
        """
        run = ValidationRun()
        self._validate_text(run, xml, schema)
        return run.diagnostics

    def _compile(self, run: ValidationRun, schema: str, schema_location: Optional[str]):
        try:
            return self.engine.compile_schema(schema, base_url=schema_location)
        except SchemaCompileFailed as exc:
            logger.info("Schema compilation reported %d error(s)", len(exc.diagnostics))
            run.extend(exc.diagnostics)
            return exc.schema

    def _validate_text(
        self,
        run: ValidationRun,
        xml: str,
        schema: str,
        schema_location: Optional[str] = None,
    ) -> None:
        try:
            compiled = self._compile(run, schema, schema_location)
            try:
                document = self.engine.parse_document(xml)
            except XmlMalformedError as exc:
                run.add(exc.diagnostic)
                return

            if compiled is None:
                logger.warning("No usable schema was compiled; skipping schema validation")
                return
            run.extend(self.engine.iter_violations(compiled, document))
        except CRITICAL_ERRORS:
            raise
        except Exception as exc:
            logger.exception("Unexpected failure during validation")
            run.error(str(exc) or type(exc).__name__, ErrorKind.UNEXPECTED_FAILURE)

    def well_formed_diagnostics(self, xml_path) -> List[Diagnostic]:
        """
        Check that an XML file is well-formed, without any schema.

        Args:
            xml_path: Path to the XML document

        Returns:
            Empty list if well-formed, otherwise a single error diagnostic
        """
        run = ValidationRun()
        self._gate(run, (xml_path, UNSAFE_XML_PATH, MISSING_XML_FILE))
        if len(run):
            return run.diagnostics

        try:
            xml_text = self._read(xml_path)
        except CRITICAL_ERRORS:
            raise
        except Exception as exc:
            self._read_failed(run, exc)
            return run.diagnostics

        try:
            self.engine.parse_document(xml_text)
        except XmlMalformedError as exc:
            run.add(exc.diagnostic)
        except CRITICAL_ERRORS:
            raise
        except Exception as exc:
            logger.exception("Unexpected failure while checking %s", xml_path)
            run.error(str(exc) or type(exc).__name__, ErrorKind.UNEXPECTED_FAILURE)
        return run.diagnostics

    def check_well_formed(self, xml_path) -> Optional[str]:
        """Return None if the file is well-formed XML, otherwise the problem description."""
        diagnostics = self.well_formed_diagnostics(xml_path)
        return diagnostics[0].message if diagnostics else None


def validate_file_against_schema(xml_path, schema_path, engine=None) -> List[Diagnostic]:
    return SchemaValidator(engine=engine).validate_file_against_schema(xml_path, schema_path)


def validate_text_against_schema(xml: str, schema: str, engine=None) -> List[Diagnostic]:
    return SchemaValidator(engine=engine).validate_text_against_schema(xml, schema)


def check_well_formed(xml_path, engine=None) -> Optional[str]:
    return SchemaValidator(engine=engine).check_well_formed(xml_path)
