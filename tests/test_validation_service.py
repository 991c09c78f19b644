from __future__ import annotations

import pytest

from file_converter.services.validation_service import (
    FILE_EMPTY_MESSAGE,
    FILE_REQUIRED_MESSAGE,
    INSTRUCTIONS_REQUIRED_MESSAGE,
    SAME_FORMAT_MESSAGE,
    UNSUPPORTED_FORMAT_MESSAGE,
    validation_service,
)


def test_valid_form_has_no_errors() -> None:
    state = validation_service.validate_fields(".java", ".swift", "Foo.java", "Translate to Swift")

    assert state.is_valid
    assert state.file_format_error == ""
    assert state.file_required_error == ""
    assert state.same_format_error == ""
    assert state.instructions_required_error == ""


@pytest.mark.parametrize(
    "file_name, instructions",
    [("Foo.java", "Translate"), (None, ""), ("Foo.swift", "   ")],
)
def test_same_format_is_always_invalid(file_name, instructions) -> None:
    state = validation_service.validate_fields(".java", ".java", file_name, instructions)

    assert not state.is_valid
    assert state.same_format_error == SAME_FORMAT_MESSAGE


def test_missing_file_sets_both_file_errors() -> None:
    state = validation_service.validate_fields(".java", ".swift", None, "Translate")

    assert state.file_required_error == FILE_REQUIRED_MESSAGE
    assert state.file_format_error == "Selected file format must be .java"
    assert not state.is_valid


@pytest.mark.parametrize("instructions", ["", "   ", "\n\t", None])
def test_blank_instructions_are_rejected(instructions) -> None:
    state = validation_service.validate_fields(".swift", ".java", "View.swift", instructions)

    assert state.instructions_required_error == INSTRUCTIONS_REQUIRED_MESSAGE
    assert not state.is_valid


def test_extension_mismatch_only_sets_format_error() -> None:
    state = validation_service.validate_fields(".java", ".swift", "View.swift", "Translate")

    assert state.file_format_error == "Selected file format must be .java"
    assert state.file_required_error == ""
    assert not state.is_valid


def test_leading_dot_and_case_are_normalized() -> None:
    dotted = validation_service.validate_fields(".java", ".swift", "Foo.JAVA", "go")
    bare = validation_service.validate_fields("java", "swift", "Foo.java", "go")

    assert dotted.is_valid
    assert bare.is_valid


def test_unselected_formats_count_as_same_format() -> None:
    state = validation_service.validate_fields("", "", "Foo.java", "go")

    assert state.same_format_error == SAME_FORMAT_MESSAGE
    assert state.file_format_error != ""


def test_file_without_extension_never_matches() -> None:
    state = validation_service.validate_fields(".java", ".swift", "Makefile", "go")

    assert state.file_format_error != ""


def test_validation_is_idempotent() -> None:
    args = (".java", ".java", None, " ")

    first = validation_service.validate_fields(*args)
    second = validation_service.validate_fields(*args)

    assert first == second


def test_convert_button_disabled_mirrors_validity() -> None:
    assert not validation_service.is_convert_disabled(".java", ".swift", "Foo.java", "go")
    assert validation_service.is_convert_disabled(".java", ".swift", "Foo.java", "")


def test_unknown_source_format_is_invalid() -> None:
    state = validation_service.validate_fields(".kt", ".java", "A.kt", "Translate")

    assert not state.is_valid
    assert state.file_format_error == UNSUPPORTED_FORMAT_MESSAGE


def test_unknown_target_format_is_invalid() -> None:
    state = validation_service.validate_fields(".java", ".kt", "Foo.java", "Translate")

    assert not state.is_valid
    assert state.same_format_error == SAME_FORMAT_MESSAGE


def test_empty_content_marks_file_required_slot() -> None:
    valid = validation_service.validate_fields(".java", ".swift", "Foo.java", "go")

    assert validation_service.validate_content(valid, "class Foo {}") == valid
    emptied = validation_service.validate_content(valid, "")
    assert emptied.file_required_error == FILE_EMPTY_MESSAGE
    assert not emptied.is_valid
    assert valid.is_valid
