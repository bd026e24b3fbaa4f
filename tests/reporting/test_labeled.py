from __future__ import annotations

from assertg.reporting.labeled import LabeledContent, labeled_output


def test_labels_are_right_aligned_to_the_longest_label() -> None:
    output = labeled_output(
        LabeledContent("Error", "expected value to be zero, but got <42>"),
        LabeledContent("Test", "test_zero"),
        LabeledContent("Description", "hobbit"),
    )

    assert output == (
        "      Error: expected value to be zero, but got <42>\n"
        "       Test: test_zero\n"
        "Description: hobbit\n"
    )


def test_single_label_has_no_padding() -> None:
    assert labeled_output(LabeledContent("Error", "boom")) == "Error: boom\n"


def test_multiline_content_is_indented_to_the_content_column() -> None:
    output = labeled_output(LabeledContent("Error", "first\nsecond"), LabeledContent("Test", "t"))

    assert output == "Error: first\n       second\n Test: t\n"


def test_no_contents_renders_nothing() -> None:
    assert labeled_output() == ""
