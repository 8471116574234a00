import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest


@pytest.fixture
def config_file(tmp_path):
    """Writes a valid configuration and returns a factory for variants of it."""
    def write(
        algorithm="kmp",
        strict="false",
        max_text_length="1000",
        max_pattern_length="100",
        debug="false",
        level="INFO",
        log_file="",
        name="search.conf",
    ):
        path = tmp_path / name
        path.write_text(
            f"""
[SEARCH]
ALGORITHM = {algorithm}
STRICT_ALGORITHM = {strict}
MAX_TEXT_LENGTH = {max_text_length}
MAX_PATTERN_LENGTH = {max_pattern_length}
DEBUG = {debug}

[LOGGING]
LEVEL = {level}
FILE = {log_file}
""",
            encoding="utf-8",
        )
        return str(path)

    return write
