"""Unit tests for Problem rendering."""

import logging

import pytest
from pydantic import ValidationError

from problemtrail.models import Problem
from problemtrail.outcome import into_failure, with_context
from problemtrail.rendering import (
    DEFAULT_STYLE,
    RenderStyle,
    log_problem,
    pretty_print,
    print_line,
)
from problemtrail.result import Err


class TestPrettyPrint:
    """Test suite for the multi-line rendering."""

    def test_invalid_email_scenario(self):
        outcome = with_context(into_failure(Err(error="Invalid email")), "in validate_email")
        assert (
            pretty_print(outcome.error, lambda e: e)
            == "Failure: Invalid email\n\nstack:\n  in validate_email"
        )

    def test_context_order_is_most_recent_first(self):
        problem = Problem.defect("defect").with_context("c1").with_context("c2")
        text = pretty_print(problem)
        assert text.startswith("Defect: defect")
        assert text.index("stack:") < text.index("  c2") < text.index("  c1")
        assert text.splitlines()[3:] == ["  c2", "  c1"]

    def test_bare_problem_has_no_stack_block(self):
        assert pretty_print(Problem.failure("f")) == "Failure: f"

    def test_origin_is_listed_once_it_differs_from_header(self):
        problem = Problem.failure("f").with_context("in parse").with_defect("d")
        assert pretty_print(problem) == (
            "Defect: d\n\nstack:\n  Defect: d\n  in parse\n  Failure: f"
        )

    def test_forced_coercion_shows_origin(self):
        assert pretty_print(Problem.failure("f").to_defect()) == (
            "Defect: f\n\nstack:\n  Failure: f"
        )

    def test_sticky_defect_lists_later_failure(self):
        problem = Problem.defect("d").with_failure("f")
        assert pretty_print(problem) == "Defect: d\n\nstack:\n  Failure: f"

    def test_to_string_applies_to_every_payload(self):
        problem = Problem.failure({"code": 1}).with_failure({"code": 2})
        text = pretty_print(problem, lambda e: f"E{e['code']}")
        assert text == "Failure: E2\n\nstack:\n  Failure: E2\n  Failure: E1"

    def test_custom_style(self):
        style = RenderStyle(indent="- ", heading="trail:")
        problem = Problem.failure("f").with_context("c")
        assert pretty_print(problem, style=style) == "Failure: f\n\ntrail:\n- c"


class AmbiguousError:
    """Error payload whose comparison cannot be reduced to a bool."""

    def __init__(self, label: str) -> None:
        self.label = label

    def __eq__(self, other):
        raise TypeError("ambiguous truth value")

    __hash__ = None

    def __str__(self) -> str:
        return self.label


class TestOpaquePayloads:
    """Rendering never compares the application's error values."""

    def test_print_line_with_uncomparable_payload(self):
        problem = Problem.failure(AmbiguousError("bad rows")).with_context("c")
        assert print_line(problem) == "Failure: bad rows | c"

    def test_pretty_print_with_uncomparable_payload(self):
        problem = Problem.defect(AmbiguousError("nan in frame")).with_context("c")
        assert pretty_print(problem) == "Defect: nan in frame\n\nstack:\n  c"

    def test_replaced_payload_shows_origin(self):
        problem = Problem.failure(AmbiguousError("a")).with_failure(AmbiguousError("b"))
        assert print_line(problem) == "Failure: b | Failure: b | Failure: a"

    def test_str_and_log_problem(self, caplog):
        problem = Problem.defect(AmbiguousError("x"))
        assert str(problem) == "Defect: x"
        with caplog.at_level(logging.WARNING, logger="problemtrail"):
            log_problem(problem)
        assert caplog.records[0].getMessage() == "Defect: x"


class TestPrintLine:
    """Test suite for the single-line rendering."""

    def test_entries_joined_with_separator(self):
        problem = Problem.defect("defect").with_context("c1").with_context("c2")
        assert print_line(problem) == "Defect: defect | c2 | c1"

    def test_header_only(self):
        assert print_line(Problem.defect("d")) == "Defect: d"

    def test_custom_separator(self):
        problem = Problem.failure("f").with_context("c")
        assert print_line(problem, style=RenderStyle(separator=" <- ")) == "Failure: f <- c"

    def test_renderers_are_pure(self):
        problem = Problem.failure("f").with_context("c")
        assert print_line(problem) == print_line(problem)
        assert len(problem.stack) == 2


class TestRenderStyle:
    def test_defaults(self):
        assert DEFAULT_STYLE.indent == "  "
        assert DEFAULT_STYLE.separator == " | "
        assert DEFAULT_STYLE.heading == "stack:"

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            RenderStyle(width=80)


class TestLogProblem:
    def test_defect_logged_at_error(self, caplog):
        with caplog.at_level(logging.WARNING, logger="problemtrail"):
            log_problem(Problem.defect("d").with_context("c"))
        (record,) = caplog.records
        assert record.levelno == logging.ERROR
        assert record.getMessage() == "Defect: d | c"

    def test_failure_logged_at_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="problemtrail"):
            log_problem(Problem.failure("f"))
        (record,) = caplog.records
        assert record.levelno == logging.WARNING
        assert record.name == "problemtrail.rendering"

    def test_explicit_logger(self, caplog):
        target = logging.getLogger("app.signup")
        with caplog.at_level(logging.WARNING, logger="app.signup"):
            log_problem(Problem.failure("f"), target)
        assert [r.name for r in caplog.records] == ["app.signup"]
