"""Tests for custom exceptions."""

from fstree.exceptions import InvalidFileTypeError


class TestInvalidFileTypeError:
    """Test InvalidFileTypeError exception."""

    def test_invalid_file_type_error_creation(self):
        """Test creating InvalidFileTypeError with file path."""
        file_path = "/dev/null"
        error = InvalidFileTypeError(file_path)

        assert error.file_path == file_path
        assert str(error) == f"Unsupported file type: {file_path}"

    def test_invalid_file_type_error_is_exception(self):
        """InvalidFileTypeError is a plain Exception, not an OSError."""
        error = InvalidFileTypeError("/tmp/socket")
        assert isinstance(error, Exception)
        assert not isinstance(error, OSError)
