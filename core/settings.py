import os

# ==============================================================================
# PATH GATE
# ==============================================================================
# Opt-in containment root. When set, every file path must resolve inside it
# in addition to passing the traversal gate.
CONTAINMENT_BASE_DIR = os.environ.get("XSD_VALIDATOR_BASE_DIR") or None

# ==============================================================================
# VALIDATION ENGINE
# ==============================================================================
# "lxml" (libxml2 schema validator) or "xmlschema" (pure Python, lax compile)
DEFAULT_ENGINE = os.environ.get("XSD_VALIDATOR_ENGINE", "lxml")

# utf-8-sig strips a leading BOM so it never reaches the parser as text
DEFAULT_ENCODING = os.environ.get("XSD_VALIDATOR_ENCODING", "utf-8-sig")

# ==============================================================================
# LOGGING
# ==============================================================================
LOG_LEVEL = os.environ.get("XSD_VALIDATOR_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# ==============================================================================
# CLI EXIT CODES
# ==============================================================================
EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130
