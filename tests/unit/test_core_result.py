"""Unit tests for Result types and traverse.

Tests cover:
- Success/Failure construction and pattern matching
- traverse: all succeed, first failure returned, later items not evaluated
- traverse over an empty input
"""

import pytest

from src.core.result import Failure, Success, traverse


def parse_quantity(raw: str):
    if not raw.isdigit():
        return Failure(error=f"Not a number: {raw}")
    return Success(value=int(raw))


@pytest.mark.unit
class TestResultTypes:
    """Test Success and Failure."""

    def test_success_holds_value(self):
        result = Success(value=42)
        assert result.value == 42

    def test_failure_holds_error(self):
        result = Failure(error="boom")
        assert result.error == "boom"

    def test_results_are_immutable(self):
        result = Success(value=1)
        with pytest.raises(AttributeError):
            result.value = 2  # type: ignore[misc]

    def test_match_dispatches_on_variant(self):
        match parse_quantity("7"):
            case Success(value=quantity):
                assert quantity == 7
            case Failure():
                pytest.fail("Expected Success")


@pytest.mark.unit
class TestTraverse:
    """Test traverse fail-fast semantics."""

    def test_all_success_returns_values_in_order(self):
        result = traverse(["1", "2", "3"], parse_quantity)

        assert result == Success(value=[1, 2, 3])

    def test_first_failure_is_returned(self):
        result = traverse(["1", "x", "y"], parse_quantity)

        assert result == Failure(error="Not a number: x")

    def test_items_after_failure_are_not_evaluated(self):
        seen: list[str] = []

        def recording(raw: str):
            seen.append(raw)
            return parse_quantity(raw)

        traverse(["1", "x", "3"], recording)

        assert seen == ["1", "x"]

    def test_empty_input_succeeds_with_empty_list(self):
        assert traverse([], parse_quantity) == Success(value=[])
