#  Copyright (c) 2023 https://reportportal.io .
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  https://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License

"""This module includes unit tests for the client configuration."""

import pytest
from delayed_assert import assert_expectations, expect

from reportportal_rest_client.config import ConnectionConfig, RPClientConfig
from tests.helpers import utils

ENV_VARIABLES = ('RP_ENDPOINT', 'RP_API_KEY', 'RP_PROJECT', 'RP_CONNECT_TIMEOUT', 'RP_SOCKET_TIMEOUT',
                 'RP_MAX_POOL_SIZE', 'RP_VERIFY_SSL')


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove client variables from the environment."""
    for name in ENV_VARIABLES:
        monkeypatch.delenv(name, raising=False)


def test_connection_config_defaults():
    """Test default connection timeouts."""
    config = ConnectionConfig()

    expect(config.connect_timeout == 15000)
    expect(config.socket_timeout == 30000)
    expect(config.max_pool_size == 50)
    expect(config.http_timeout == (15.0, 30.0))
    assert_expectations()


def test_config_defaults():
    """Test that connection settings and SSL verification have defaults."""
    config = RPClientConfig(**utils.DEFAULT_VARIABLES)

    expect(config.connection_config == ConnectionConfig())
    expect(config.verify_ssl is True)
    assert_expectations()


def test_config_is_immutable():
    """Test that configuration cannot be changed after creation."""
    config = RPClientConfig(**utils.DEFAULT_VARIABLES)

    with pytest.raises(AttributeError):
        config.api_key = 'another_key'


def test_config_repr_masks_api_key():
    """Test that the API key is not shown in configuration representation."""
    config = RPClientConfig(**utils.DEFAULT_VARIABLES)

    expect('test_api_key' not in repr(config))
    expect('default_personal' in repr(config))
    assert_expectations()


def test_from_env(monkeypatch):
    """Test configuration from environment variables."""
    monkeypatch.setenv('RP_ENDPOINT', 'http://docker.local:8080/')
    monkeypatch.setenv('RP_API_KEY', 'env_api_key')
    monkeypatch.setenv('RP_PROJECT', 'env_project')
    monkeypatch.setenv('RP_CONNECT_TIMEOUT', '1000')
    monkeypatch.setenv('RP_SOCKET_TIMEOUT', '2500')
    monkeypatch.setenv('RP_MAX_POOL_SIZE', '5')

    config = RPClientConfig.from_env()

    expect(config.endpoint == 'http://docker.local:8080/')
    expect(config.api_key == 'env_api_key')
    expect(config.project == 'env_project')
    expect(config.connection_config == ConnectionConfig(1000, 2500, 5))
    expect(config.connection_config.http_timeout == (1.0, 2.5))
    assert_expectations()


def test_from_env_arguments_override(monkeypatch):
    """Test that explicit arguments take priority over the environment."""
    monkeypatch.setenv('RP_PROJECT', 'env_project')
    monkeypatch.setenv('RP_VERIFY_SSL', 'False')

    config = RPClientConfig.from_env(project='arg_project', verify_ssl=True)

    expect(config.project == 'arg_project')
    expect(config.verify_ssl is True)
    expect(config.connection_config == ConnectionConfig())
    assert_expectations()


@pytest.mark.parametrize(
    ['verify_ssl', 'expected_result'],
    [
        ('True', True),
        ('False', False),
        ('true', True),
        ('false', False),
        ('path/to/certificate', 'path/to/certificate'),
        (None, True)
    ]
)
def test_from_env_verify_ssl(monkeypatch, verify_ssl, expected_result):
    """Test SSL verification setting values."""
    if verify_ssl is not None:
        monkeypatch.setenv('RP_VERIFY_SSL', verify_ssl)

    config = RPClientConfig.from_env()

    assert config.verify_ssl == expected_result
