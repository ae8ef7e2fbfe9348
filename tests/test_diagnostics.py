from validators.diagnostics import Diagnostic, ErrorKind, Severity, ValidationRun


def test_error_factory_defaults_missing_position_to_zero():
    diagnostic = Diagnostic.error("bad path", ErrorKind.PATH_UNSAFE, None, None)
    assert (diagnostic.row, diagnostic.column) == (0, 0)
    assert diagnostic.severity is Severity.ERROR
    assert diagnostic.is_error


def test_str_renders_severity_message_and_position():
    diagnostic = Diagnostic(Severity.WARNING, "odd value", 3, 7)
    assert str(diagnostic) == "Warning: odd value (3:7)"


def test_run_keeps_discovery_order_and_duplicates():
    run = ValidationRun()
    run.error("first", ErrorKind.FILE_MISSING)
    run.add(Diagnostic(Severity.WARNING, "second", 2, 1))
    run.error("first", ErrorKind.FILE_MISSING)

    assert [d.message for d in run] == ["first", "second", "first"]
    assert len(run) == 3


def test_run_diagnostics_is_a_snapshot():
    run = ValidationRun()
    run.error("one", ErrorKind.FILE_MISSING)

    snapshot = run.diagnostics
    snapshot.clear()

    assert len(run) == 1


def test_run_extend_keeps_items_seen_before_failure():
    def events():
        yield Diagnostic(Severity.ERROR, "seen")
        raise RuntimeError("stopped")

    run = ValidationRun()
    try:
        run.extend(events())
    except RuntimeError:
        pass

    assert [d.message for d in run] == ["seen"]


def test_has_errors_ignores_warnings():
    run = ValidationRun()
    run.add(Diagnostic(Severity.WARNING, "minor"))
    assert not run.has_errors()

    run.error("major", ErrorKind.SCHEMA_VIOLATION)
    assert run.has_errors()
