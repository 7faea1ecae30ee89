"""
Pytest configuration and fixtures.
"""

import pytest
import logging
import sys
import yaml


PY_COMPILE_COMMAND = [sys.executable, '-m', 'py_compile']


@pytest.fixture
def valid_source_file(tmp_path):
    """A file that parses cleanly under py_compile."""
    path = tmp_path / 'valid_module.py'
    path.write_text("def greet(name):\n    return 'hello ' + name\n", encoding='utf-8')
    return path


@pytest.fixture
def broken_source_file(tmp_path):
    """A file with an unclosed parenthesis on line 1."""
    path = tmp_path / 'broken_module.py'
    path.write_text("def broken(:\n    return 1\n", encoding='utf-8')
    return path


@pytest.fixture
def py_compile_config():
    """Linter configuration that uses the running interpreter's py_compile."""
    return {'method': 'command', 'command': list(PY_COMPILE_COMMAND)}


@pytest.fixture
def settings_file(tmp_path, py_compile_config):
    """Settings YAML selecting the py_compile linter."""
    path = tmp_path / 'settings.yaml'
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump({
            'linter': py_compile_config,
            'logging': {'level': 'DEBUG'},
        }, f)
    return str(path)


@pytest.fixture
def restore_logging():
    """Undo setup_logging() changes to the root logger."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
