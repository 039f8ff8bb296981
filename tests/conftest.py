"""Shared pytest configuration and fixtures for all tests."""

import importlib
import logging

import pytest


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no external services")


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def notes_dir(tmp_path, monkeypatch):
    """Empty working directory for note pages; link targets resolve against it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch):
    """Let each test configure the notelinks logger from scratch."""
    module = importlib.import_module("notelinks.utils.configure_logging")
    monkeypatch.setattr(module, "_CONFIGURED", False)
    yield
    logger = logging.getLogger("notelinks")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def pagination_page(*anchors: str, container: str = '<div class="pagination">{}</div>') -> str:
    """Build a minimal note page whose pagination block holds ``anchors``."""
    body = container.format("".join(anchors))
    return f"<!DOCTYPE html>\n<html>\n<body>\n<article>Notes</article>\n{body}\n</body>\n</html>\n"
