"""
Target Registry - Fixed check targets, settings and lint handler selection.
"""

import os
import logging
import yaml
from typing import Dict, Any, Optional, Type, List

from handlers.base_handler import BaseHandler
from handlers.php_lint_handler import PhpLintHandler
from handlers.cli_handler import CLIHandler
from handlers.process_runner import ProcessRunner
from models.target import CheckTarget
from utils.exceptions import ConfigurationError

# Files checked and dumped on every run, in report order
DEFAULT_TARGETS = (
    CheckTarget(path='Views/HTML/HtmlEmail.php', label='HtmlEmail'),
    CheckTarget(path='Views/HTML/HtmlA.php', label='HtmlA'),
)

DEFAULT_SETTINGS: Dict[str, Any] = {
    'linter': {
        'method': 'php',
        'binary': 'php',
    },
    'logging': {
        'level': 'WARNING',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        'file': None,
    },
}


class TargetRegistry:
    """Registry that holds the check targets and builds the lint handler."""

    # Map method names to handler classes
    HANDLER_MAP: Dict[str, Type[BaseHandler]] = {
        'php': PhpLintHandler,
        'command': CLIHandler,
    }

    def __init__(self, settings_path: str = None, targets: Optional[List[CheckTarget]] = None):
        """
        Initialize the registry.

        Args:
            settings_path: Path to settings.yaml
            targets: Files to check; defaults to DEFAULT_TARGETS
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

        if settings_path is None:
            settings_path = os.path.join(self.base_dir, 'config', 'settings.yaml')

        self.settings_path = settings_path
        self.settings = self._merge_defaults(self._load_config(settings_path))
        self.targets = list(targets) if targets is not None else list(DEFAULT_TARGETS)

    def _load_config(self, path: str) -> Dict[str, Any]:
        """Load YAML configuration file."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            self.logger.warning(f"Config file not found: {path}")
            return {}
        except yaml.YAMLError as e:
            self.logger.warning(f"Error parsing YAML file {path}: {e}")
            return {}

        if not isinstance(data, dict):
            self.logger.warning(f"Ignoring config file {path}: expected a mapping")
            return {}
        return data

    @staticmethod
    def _merge_defaults(loaded: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay loaded sections onto DEFAULT_SETTINGS, one level deep."""
        merged = {key: dict(value) for key, value in DEFAULT_SETTINGS.items()}
        for key, value in loaded.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key].update(value)
            else:
                merged[key] = value
        return merged

    def list_targets(self) -> List[CheckTarget]:
        """List the files to check, in report order."""
        return list(self.targets)

    def get_settings(self) -> Dict[str, Any]:
        """Get application settings."""
        return self.settings

    def get_linter_settings(self) -> Dict[str, Any]:
        return self.settings.get('linter', {})

    def get_handler(self, runner: Optional[ProcessRunner] = None) -> BaseHandler:
        """
        Build the configured lint handler.

        Args:
            runner: Process runner to inject into the handler

        Returns:
            Handler instance

        Raises:
            ConfigurationError: if the configured method is unknown
        """
        config = self.get_linter_settings()
        method = config.get('method', 'php')

        handler_class = self.HANDLER_MAP.get(method)
        if not handler_class:
            raise ConfigurationError(
                f"Unknown lint method '{method}' "
                f"(expected one of: {', '.join(sorted(self.HANDLER_MAP))})"
            )

        return handler_class(config, runner)
