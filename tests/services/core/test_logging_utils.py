"""Tests for contextual error logging."""

from unittest.mock import patch

from services.core.utils.logging_utils import log_error_with_context


class TestLogErrorWithContext:
    def test_logs_operation_exception_and_context(self):
        with patch("services.core.utils.logging_utils.logger") as mock_logger:
            log_error_with_context(
                "chirp broadcast", RuntimeError("redis down"), {"chirp_id": 5}
            )

        args, kwargs = mock_logger.error.call_args
        assert args[0] == "Error in chirp broadcast: redis down (chirp_id=5)"
        assert kwargs["extra"]["chirp_id"] == 5
        assert kwargs["extra"]["exception_type"] == "RuntimeError"
        assert kwargs["exc_info"] is False

    def test_without_context(self):
        with patch("services.core.utils.logging_utils.logger") as mock_logger:
            log_error_with_context("startup", ValueError("bad"), exc_info=True)

        args, kwargs = mock_logger.error.call_args
        assert args[0] == "Error in startup: bad"
        assert kwargs["exc_info"] is True
