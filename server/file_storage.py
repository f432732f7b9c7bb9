"""File-based storage implementation."""

import json
import logging
import os
import re
import tempfile

from core.config import DEFAULT_CONFIG_FILE, DEFAULT_STATE_DIR
from core.interfaces import Storage

logger = logging.getLogger(__name__)

STATE_PREFIX = 'ipormac_scores_'
STATE_SUFFIX = '.json'

_SAFE_KEY = re.compile(r'[A-Za-z0-9_.-]+')


class FileStorage(Storage):
    """One JSON state file per site key, written atomically."""

    def __init__(self, config_file: str = None, state_dir: str = None):
        self.config_file = os.path.expanduser(config_file or DEFAULT_CONFIG_FILE)
        self.state_dir = os.path.expanduser(state_dir or DEFAULT_STATE_DIR)

    def _get_state_file(self, site_key: str) -> str:
        """Get state file path for a site."""
        if not _SAFE_KEY.fullmatch(site_key) or site_key.startswith('.'):
            raise ValueError(f"Invalid site key: {site_key!r}")
        return os.path.join(self.state_dir, f'{STATE_PREFIX}{site_key}{STATE_SUFFIX}')

    def load_config(self) -> dict:
        if not os.path.exists(self.config_file):
            return {}
        with open(self.config_file, 'r') as f:
            config = json.load(f)
        if not isinstance(config, dict):
            raise ValueError(f"Config file {self.config_file} must contain a JSON object")
        return config

    def load_state(self, site_key: str) -> dict | None:
        state_file = self._get_state_file(site_key)
        if os.path.exists(state_file):
            try:
                with open(state_file, 'r') as f:
                    return json.load(f)
            except (OSError, ValueError) as e:
                logger.warning(f"Could not read state file {state_file}: {e}")
                return None
        return None

    def save_state(self, state: dict, site_key: str) -> None:
        state_file = self._get_state_file(site_key)
        os.makedirs(self.state_dir, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.state_dir, prefix='.tmp_', suffix=STATE_SUFFIX)
        try:
            with os.fdopen(fd, 'w') as f:
                json.dump(state, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, state_file)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def list_sites(self) -> list[str]:
        """List all site keys with a state file."""
        sites = []
        if os.path.exists(self.state_dir):
            for filename in sorted(os.listdir(self.state_dir)):
                if filename.startswith(STATE_PREFIX) and filename.endswith(STATE_SUFFIX):
                    sites.append(filename[len(STATE_PREFIX):-len(STATE_SUFFIX)])
        return sites
