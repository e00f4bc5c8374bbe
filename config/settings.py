import os
import yaml
from typing import Dict, Any, Optional

from src.metrics_client.exceptions import ConfigurationError

DEFAULT_ENDPOINT = 'http://127.0.0.1:5000/data'
DEFAULT_POLL_INTERVAL = 5.0


class Settings:
    """Configuration management for the traffic dashboard."""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file or os.getenv('DASHBOARD_CONFIG_FILE', 'config/config.yaml')
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file and environment variables."""
        config = {}

        # Load from YAML file if exists
        if os.path.exists(self.config_file):
            with open(self.config_file, 'r') as f:
                config = yaml.safe_load(f) or {}

        dashboard = config.get('dashboard', {}) or {}
        logging_config = config.get('logging', {}) or {}

        # Override with environment variables
        config.update({
            'dashboard': {
                'endpoint': os.getenv('DASHBOARD_ENDPOINT', dashboard.get('endpoint', DEFAULT_ENDPOINT)),
                'poll_interval': float(os.getenv('DASHBOARD_POLL_INTERVAL',
                                                 dashboard.get('poll_interval', DEFAULT_POLL_INTERVAL))),
                'timeout': self._parse_timeout(os.getenv('DASHBOARD_TIMEOUT', dashboard.get('timeout'))),
                'verify_ssl': self._parse_bool(os.getenv('DASHBOARD_VERIFY_SSL', dashboard.get('verify_ssl', True))),
            },
            'logging': {
                'level': os.getenv('LOG_LEVEL', logging_config.get('level', 'INFO')),
                'file': os.getenv('LOG_FILE', logging_config.get('file', 'logs/traffic_dashboard.log')),
                'max_bytes': int(os.getenv('LOG_MAX_BYTES', logging_config.get('max_bytes', 10485760))),
                'backup_count': int(os.getenv('LOG_BACKUP_COUNT', logging_config.get('backup_count', 5))),
            },
        })

        return config

    @property
    def endpoint(self) -> str:
        return self.get('dashboard.endpoint', DEFAULT_ENDPOINT)

    @property
    def poll_interval(self) -> float:
        return self.get('dashboard.poll_interval', DEFAULT_POLL_INTERVAL)

    @property
    def timeout(self) -> Optional[float]:
        return self.get('dashboard.timeout')

    @property
    def verify_ssl(self) -> bool:
        return self.get('dashboard.verify_ssl', True)

    def validate(self) -> None:
        """Check the dashboard section, raising ConfigurationError on bad values."""
        if not self.endpoint:
            raise ConfigurationError("Metrics endpoint must be specified")
        if self.poll_interval <= 0:
            raise ConfigurationError(f"Poll interval must be positive, got {self.poll_interval}")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"Request timeout must be positive, got {self.timeout}")

    def _parse_timeout(self, value: Any) -> Optional[float]:
        """Parse an optional timeout; empty, 'none' or null means transport default."""
        if value is None:
            return None
        if isinstance(value, str) and value.strip().lower() in ('', 'none', 'null'):
            return None
        return float(value)

    def _parse_bool(self, value: Any) -> bool:
        """Parse boolean value from various formats."""
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')
        if isinstance(value, (int, float)):
            return bool(value)
        return False

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation."""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

# Global settings instance
settings = Settings()
