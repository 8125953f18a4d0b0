"""
Tests for the MakeDirectoryUseCase.
"""

import os

from file_explorer.adapters.local_fs_adapter import LocalFileSystemAdapter
from file_explorer.entities.result import ErrorKind
from file_explorer.use_cases.files.make_directory import MakeDirectoryUseCase

FAILURE = "Failed to create directory. It may already exist."


class TestMakeDirectoryUseCase:
    def _use_case(self, mock_logger):
        return MakeDirectoryUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

    def test_empty_argument(self, session, mock_logger):
        result = self._use_case(mock_logger).execute(session, "")

        assert result.lines == ["Please provide a name for the directory."]
        assert result.error is ErrorKind.USAGE

    def test_create(self, session, temp_directory, mock_logger):
        result = self._use_case(mock_logger).execute(session, "new")

        assert result.lines == ["Directory created: new"]
        assert os.path.isdir(os.path.join(temp_directory, "new"))
        assert result.session == session

    def test_create_nested_name_reports_base_name(self, session, temp_directory, mock_logger):
        result = self._use_case(mock_logger).execute(session, "subdir/inner")

        assert result.lines == ["Directory created: inner"]
        assert os.path.isdir(os.path.join(temp_directory, "subdir", "inner"))

    def test_existing_directory(self, session, mock_logger):
        result = self._use_case(mock_logger).execute(session, "subdir")

        assert result.lines == [FAILURE]
        assert result.error is ErrorKind.OPERATION_FAILED

    def test_existing_file(self, session, mock_logger):
        result = self._use_case(mock_logger).execute(session, "test1.txt")

        assert result.lines == [FAILURE]

    def test_missing_parent(self, session, temp_directory, mock_logger):
        result = self._use_case(mock_logger).execute(session, "a/b")

        assert result.lines == [FAILURE]
        assert not os.path.exists(os.path.join(temp_directory, "a"))

    def test_invalid_character(self, session, mock_logger):
        result = self._use_case(mock_logger).execute(session, "a\x00b")

        assert result.lines == [FAILURE]
        assert result.error is ErrorKind.OPERATION_FAILED
