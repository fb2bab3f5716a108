"""Tests for exit code helpers and the error-to-exit-code mapping."""

import pytest

from tasktrack_cli.commands.decorators import AppError, exit_code_for
from tasktrack_cli.models import (
    FormatError,
    InvalidInputError,
    NotFoundError,
    StorageError,
    TaskTrackError,
)
from tasktrack_cli.utils import exit_codes


@pytest.mark.parametrize(
    "error, code",
    [
        (InvalidInputError("bad"), exit_codes.ERROR_INVALID_ARGS),
        (NotFoundError(3), exit_codes.ERROR_NOT_FOUND),
        (FormatError("bad line"), exit_codes.ERROR_DATA_FORMAT),
        (StorageError("disk"), exit_codes.ERROR_STORAGE),
        (TaskTrackError("other"), exit_codes.ERROR_GENERAL),
        (AppError("custom", exit_codes.ERROR_INVALID_ARGS), exit_codes.ERROR_INVALID_ARGS),
        (RuntimeError("boom"), exit_codes.ERROR_GENERAL),
    ],
)
def test_exit_code_for(error, code):
    assert exit_code_for(error) == code


def test_names_and_descriptions():
    assert exit_codes.get_exit_code_name(exit_codes.ERROR_DATA_FORMAT) == "ERROR_DATA_FORMAT"
    assert exit_codes.get_exit_code_name(99) == "UNKNOWN(99)"
    assert "corrupt" in exit_codes.get_exit_code_description(exit_codes.ERROR_DATA_FORMAT)
    assert exit_codes.get_exit_code_description(99) == "Unknown error"
