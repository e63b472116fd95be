# Unit tests for utils/config.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'grit-project'))

from utils import config as config_utils
from utils.errors import GritError


class TestConfig:

    def test_missing_config_is_empty(self, temp_repo):
        assert config_utils.read_config(temp_repo).sections() == []
        assert config_utils.get_config_value(temp_repo, 'core.loglevel') is None

    def test_write_then_read(self, temp_repo):
        config_utils.write_config(temp_repo, 'core.loglevel', 'debug')

        assert config_utils.get_config_value(temp_repo, 'core.loglevel') == 'debug'
        assert config_utils.get_log_level(temp_repo) == 'DEBUG'
        assert os.path.isfile(os.path.join(temp_repo, '.grit', 'config'))

    def test_write_keeps_other_keys(self, temp_repo):
        config_utils.write_config(temp_repo, 'core.loglevel', 'info')
        config_utils.write_config(temp_repo, 'user.name', 'Test User')

        assert config_utils.get_config_value(temp_repo, 'core.loglevel') == 'info'
        assert config_utils.get_config_value(temp_repo, 'user.name') == 'Test User'

    @pytest.mark.parametrize('key', ['nodot', '.option', 'section.'])
    def test_invalid_key(self, temp_repo, key):
        with pytest.raises(ValueError):
            config_utils.write_config(temp_repo, key, 'value')

    def test_broken_config_file(self, temp_repo):
        with open(config_utils.get_config_path(temp_repo), 'w') as f:
            f.write('no section header\n')
        with pytest.raises(GritError):
            config_utils.read_config(temp_repo)
