"""Tests for the scope table."""

from __future__ import annotations

from scopepaint.scopes import SCOPE_COUNT, SCOPE_NAMES, match_capture, scope_index, scope_name


class TestScopeTable:
    """The vocabulary is closed, ordered and duplicate-free."""

    def test_no_duplicates(self) -> None:
        assert len(set(SCOPE_NAMES)) == len(SCOPE_NAMES)

    def test_count(self) -> None:
        assert SCOPE_COUNT == len(SCOPE_NAMES) == 27

    def test_indices_are_positions(self) -> None:
        for index, name in enumerate(SCOPE_NAMES):
            assert scope_index(name) == index
            assert scope_name(index) == name

    def test_known_positions(self) -> None:
        """Annotation streams depend on these exact positions."""
        assert SCOPE_NAMES[0] == "attribute"
        assert SCOPE_NAMES[11] == "keyword"
        assert SCOPE_NAMES[21] == "string"
        assert SCOPE_NAMES[-1] == "variable.parameter"

    def test_unknown_name_is_none(self) -> None:
        assert scope_index("markup.heading") is None
        assert scope_index("") is None

    def test_negative_index_rejected(self) -> None:
        import pytest

        with pytest.raises(IndexError):
            scope_name(-1)


class TestMatchCapture:
    """Dotted capture names resolve to the most specific known scope."""

    def test_exact(self) -> None:
        assert match_capture("function.method") == scope_index("function.method")

    def test_more_specific_capture(self) -> None:
        assert match_capture("function.method.call") == scope_index("function.method")
        assert match_capture("string.special.regex") == scope_index("string")

    def test_prefers_longest(self) -> None:
        assert match_capture("variable.builtin") == scope_index("variable.builtin")
        assert match_capture("variable") == scope_index("variable")

    def test_tie_goes_to_earlier_name(self) -> None:
        assert match_capture("keyword.operator") == scope_index("keyword")

    def test_no_match(self) -> None:
        assert match_capture("markup.heading") is None

    def test_custom_names(self) -> None:
        names = ("string", "keyword")
        assert match_capture("keyword.control", names) == 1
        assert match_capture("comment", names) is None
