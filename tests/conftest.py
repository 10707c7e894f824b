from types import SimpleNamespace

import pytest

from tests.fakes import RecordingLogger


@pytest.fixture
def lambda_context() -> SimpleNamespace:
    return SimpleNamespace(
        aws_request_id="req-123",
        function_name="bucket-lister",
    )


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
