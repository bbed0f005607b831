"""
Version check configuration for the Linkerd CLI
"""

import json
import logging
import uuid
from pathlib import Path
from typing import Optional

from linkerd.version.latest import VERSION_CHECK_TIMEOUT, VERSION_CHECK_URL

logger = logging.getLogger(__name__)

DEFAULT_API_ADDR = 'http://localhost:8085'


class VersionCheckConfig:
    """
    Manages version check settings for the Linkerd CLI.

    Stores configuration in ~/.linkerd/config.json and holds the
    anonymised installation id reported to the versioncheck feed.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize version check configuration.

        Args:
            config_dir: Optional custom config directory.
                       Defaults to ~/.linkerd/
        """
        if config_dir is None:
            self.config_dir = Path.home() / '.linkerd'
        else:
            self.config_dir = Path(config_dir)

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file = self.config_dir / 'config.json'

        self._load_config()

    def _load_config(self):
        """Load configuration from file or set defaults"""
        if self.config_file.exists():
            with open(self.config_file, 'r') as f:
                config = json.load(f)
        else:
            config = {}

        self.versioncheck_url = config.get('versioncheck_url', VERSION_CHECK_URL)
        self.api_addr = config.get('api_addr', DEFAULT_API_ADDR)
        self.timeout_seconds = float(config.get('timeout_seconds', VERSION_CHECK_TIMEOUT))
        self.verify_tls = config.get('verify_tls', True)
        self.installation_id = config.get('installation_id')

        # Generated once and persisted so repeated checks attribute to one install
        if not self.installation_id:
            self.installation_id = str(uuid.uuid4())
            logger.debug(f"Generated installation id {self.installation_id}")
            self.save_config()

    def save_config(self):
        """Save configuration to file"""
        config = {
            'versioncheck_url': self.versioncheck_url,
            'api_addr': self.api_addr,
            'timeout_seconds': self.timeout_seconds,
            'verify_tls': self.verify_tls,
            'installation_id': self.installation_id
        }

        with open(self.config_file, 'w') as f:
            json.dump(config, f, indent=2)

    def __repr__(self) -> str:
        return f"VersionCheckConfig(api_addr={self.api_addr}, url={self.versioncheck_url})"
