"""Parse Report Tests."""

from envflag_core.errors import EnvParseError
from envflag_core.report import ParseReport


def test_empty_report_is_not_error():
    report = ParseReport()
    assert not report.is_error
    assert str(report) == "no environment problems"


def test_any_category_makes_an_error():
    assert ParseReport(missing_keys=["APP_A"]).is_error
    assert ParseReport(extra_keys=["APP_B"]).is_error
    assert ParseReport(malformed_entries=["APP_C=x"]).is_error
    assert ParseReport(unclassified_errors=["APP_D=y: boom"]).is_error


def test_message_names_every_populated_category():
    report = ParseReport(
        missing_keys=["APP_A", "APP_B"],
        extra_keys=["APP_C"],
        malformed_entries=["APP_D=x"],
        unclassified_errors=["APP_E=y: boom"],
    )

    assert str(report) == (
        "missing environment variables: APP_A, APP_B; "
        "unexpected environment variables: APP_C; "
        "malformed values: APP_D=x; "
        "setting errors: APP_E=y: boom"
    )


def test_message_skips_empty_categories():
    message = str(ParseReport(extra_keys=["APP_C"]))
    assert message == "unexpected environment variables: APP_C"


def test_parse_error_carries_report():
    report = ParseReport(extra_keys=["APP_C"])
    error = EnvParseError(report)

    assert error.report is report
    assert str(error) == str(report)
