import pytest

from inilayer.ini.lines import ClassifiedLine, LineKind, classify_line


class TestClassifyLine:
    def test_blank(self):
        assert classify_line("") == ClassifiedLine(LineKind.BLANK, "")

    def test_comment(self):
        assert classify_line("; anything = here").kind is LineKind.COMMENT

    def test_hash_is_not_a_comment(self):
        assert classify_line("# Bad comment").kind is LineKind.INVALID

    def test_group_header_is_trimmed_inside(self):
        line = classify_line("[  Group A ]")
        assert line.kind is LineKind.GROUP_HEADER
        assert line.name == "Group A"

    def test_empty_group_header(self):
        line = classify_line("[]")
        assert line.kind is LineKind.GROUP_HEADER
        assert line.name == ""

    def test_missing_closing_bracket(self):
        line = classify_line("[Bad Group")
        assert line.kind is LineKind.MISSING_CLOSING_BRACKET
        assert line.data == "[Bad Group"

    def test_header_checked_before_assignment(self):
        assert classify_line("[a = b").kind is LineKind.MISSING_CLOSING_BRACKET

    def test_assignment_splits_at_first_equal_sign(self):
        line = classify_line("var 3 =   value = three")
        assert line.kind is LineKind.ASSIGNMENT
        assert line.name == "var 3"
        assert line.value == "value = three"

    def test_assignment_with_empty_value(self):
        line = classify_line("var =")
        assert line.kind is LineKind.ASSIGNMENT
        assert line.name == "var"
        assert line.value == ""

    def test_missing_variable_name(self):
        line = classify_line("= some value")
        assert line.kind is LineKind.MISSING_VARIABLE_NAME
        assert line.name is None

    def test_invalid_line(self):
        assert classify_line("some variable").kind is LineKind.INVALID

    @pytest.mark.parametrize(
        "kind, is_error",
        [
            (LineKind.BLANK, False),
            (LineKind.COMMENT, False),
            (LineKind.GROUP_HEADER, False),
            (LineKind.ASSIGNMENT, False),
            (LineKind.MISSING_CLOSING_BRACKET, True),
            (LineKind.MISSING_VARIABLE_NAME, True),
            (LineKind.INVALID, True),
        ],
    )
    def test_is_error(self, kind, is_error):
        assert kind.is_error is is_error
