"""Tests for the logging helpers."""

import logging
from pathlib import Path
from typing import Iterator

import pytest

from htmlform.core.logging import ErrorIds, enable_file_logging, logError, logEvent, logForDebugging


@pytest.fixture
def log_file(tmp_path: Path) -> Iterator[Path]:
    path = tmp_path / "htmlform.log"
    enable_file_logging(str(path))
    yield path

    logger = logging.getLogger("htmlform")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == str(path):
            logger.removeHandler(handler)
            handler.close()


class TestFileLogging:
    def test_records_all_levels(self, log_file: Path) -> None:
        logForDebugging("Added fieldset", extra={"label": "Address"})
        logEvent("form_validated", {"errors": 0})
        logError(ErrorIds.UNKNOWN_OPERATION, "`addWidget()` does not exist")

        text = log_file.read_text(encoding="utf-8")

        assert "DEBUG - Added fieldset | label=Address" in text
        assert "INFO - [EVENT] form_validated | errors=0" in text
        assert "ERROR - [ERR_UNKNOWN_OPERATION] `addWidget()` does not exist" in text
