# tests/conftest.py

import logging

import pytest


@pytest.fixture
def detach_file_logs():
    """Drop file handlers a test attached to the shared gpgkey logger."""
    yield
    root = logging.getLogger("gpgkey")
    for h in list(root.handlers):
        if isinstance(h, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(logging.INFO)
