"""
Tests for the console entry point.
"""

import pytest
import logging
import sys
import os

import yaml

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import main


@pytest.fixture
def view_tree(tmp_path, monkeypatch):
    """Working directory holding the two checked view files."""
    views = tmp_path / 'Views' / 'HTML'
    views.mkdir(parents=True)
    (views / 'HtmlEmail.php').write_text("email = 'a@b.c'\n", encoding='utf-8')
    (views / 'HtmlA.php').write_text("link = (\n", encoding='utf-8')
    monkeypatch.chdir(tmp_path)
    return views


class TestMain:
    """Tests for main()."""

    def test_prints_checks_then_contents(self, view_tree, settings_file, restore_logging, capsys):
        exit_code = main(['--settings', settings_file])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert 'SyntaxError' in out
        assert 'Views/HTML/HtmlA.php' in out
        assert out.endswith("email = 'a@b.c'\nlink = (\n")
        # Lint text comes before either dump
        assert out.index('SyntaxError') < out.index("email = 'a@b.c'")

    def test_logs_stay_off_stdout(self, view_tree, settings_file, restore_logging, capsys):
        main(['--settings', settings_file, '--verbose'])

        captured = capsys.readouterr()
        assert 'DEBUG' not in captured.out
        assert 'SyntaxChecker' in captured.err

    def test_missing_interpreter_still_exits_zero(self, view_tree, tmp_path, restore_logging, capsys):
        settings = tmp_path / 'nophp.yaml'
        settings.write_text("linter:\n  method: php\n  binary: no-such-php-binary-xyz\n", encoding='utf-8')

        exit_code = main(['--settings', str(settings)])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert out.count('no-such-php-binary-xyz') == 2
        assert out.endswith("email = 'a@b.c'\nlink = (\n")

    def test_stdout_is_byte_identical(self, view_tree, settings_file, restore_logging, capsysbinary):
        """Test dumps reach stdout exactly as stored, whatever their encoding."""
        email = "email = 'caf\u00e9'\n".encode('utf-8')
        link = b"# caf\xe9\r\nlink = 1\r\n"
        (view_tree / 'HtmlEmail.php').write_bytes(email)
        (view_tree / 'HtmlA.php').write_bytes(link)

        exit_code = main(['--settings', settings_file])

        out = capsysbinary.readouterr().out
        assert exit_code == 0
        assert out.endswith(email + link)

    def test_log_file_setting(self, view_tree, tmp_path, py_compile_config, restore_logging, capsys):
        log_file = tmp_path / 'logs' / 'syntax-check.log'
        settings = tmp_path / 'with-log.yaml'
        with open(settings, 'w', encoding='utf-8') as f:
            yaml.safe_dump({
                'linter': py_compile_config,
                'logging': {'level': 'INFO', 'file': str(log_file)},
            }, f)

        main(['--settings', str(settings)])

        for handler in logging.getLogger().handlers:
            handler.flush()
        assert 'Result for HtmlEmail' in log_file.read_text(encoding='utf-8')
        assert 'Result for HtmlEmail' not in capsys.readouterr().out


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
