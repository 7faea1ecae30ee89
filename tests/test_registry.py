"""
Tests for the TargetRegistry.
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.registry import TargetRegistry, DEFAULT_TARGETS
from handlers.cli_handler import CLIHandler
from handlers.php_lint_handler import PhpLintHandler
from utils.exceptions import ConfigurationError


class TestTargetRegistry:
    """Tests for TargetRegistry."""

    def test_default_targets(self, tmp_path):
        registry = TargetRegistry(settings_path=str(tmp_path / 'missing.yaml'))

        paths = [target.path for target in registry.list_targets()]
        assert paths == ['Views/HTML/HtmlEmail.php', 'Views/HTML/HtmlA.php']
        assert registry.list_targets() == list(DEFAULT_TARGETS)

    def test_missing_settings_uses_defaults(self, tmp_path):
        registry = TargetRegistry(settings_path=str(tmp_path / 'missing.yaml'))

        assert registry.get_linter_settings()['method'] == 'php'
        assert registry.get_settings()['logging']['level'] == 'WARNING'
        assert isinstance(registry.get_handler(), PhpLintHandler)

    def test_load_settings(self, settings_file):
        registry = TargetRegistry(settings_path=settings_file)

        assert registry.get_settings()['logging']['level'] == 'DEBUG'
        # Untouched keys keep their defaults
        assert 'format' in registry.get_settings()['logging']
        assert isinstance(registry.get_handler(), CLIHandler)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text("linter: [unclosed\n", encoding='utf-8')

        registry = TargetRegistry(settings_path=str(path))

        assert registry.get_linter_settings()['method'] == 'php'

    def test_non_mapping_yaml(self, tmp_path):
        path = tmp_path / 'list.yaml'
        path.write_text("- php\n- -l\n", encoding='utf-8')

        registry = TargetRegistry(settings_path=str(path))

        assert registry.get_linter_settings()['method'] == 'php'

    def test_unknown_method(self, tmp_path):
        path = tmp_path / 'settings.yaml'
        path.write_text("linter:\n  method: eslint\n", encoding='utf-8')

        registry = TargetRegistry(settings_path=str(path))

        with pytest.raises(ConfigurationError):
            registry.get_handler()

    def test_bundled_settings_file(self):
        """Test config/settings.yaml loads and selects php -l."""
        registry = TargetRegistry()

        handler = registry.get_handler()
        assert handler.build_command('x.php') == ['php', '-l', 'x.php']


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
