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

"""This module contains classes that store ReportPortal client configuration data."""

from dataclasses import dataclass, field
from os import getenv
from typing import Any, Optional, Tuple, Union

from .helpers import to_bool

DEFAULT_CONNECT_TIMEOUT: int = 15000
DEFAULT_SOCKET_TIMEOUT: int = 30000
DEFAULT_MAX_POOL_SIZE: int = 50
MASKED_VALUE: str = '********'


def _int_from_env(name: str, default: int) -> int:
    value = getenv(name)
    return int(value) if value else default


@dataclass(frozen=True)
class ConnectionConfig:
    """HTTP connection settings, timeouts are in milliseconds."""

    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT
    socket_timeout: int = DEFAULT_SOCKET_TIMEOUT
    max_pool_size: int = DEFAULT_MAX_POOL_SIZE

    @property
    def http_timeout(self) -> Tuple[float, float]:
        """Connect and read timeouts in seconds, as ``requests`` expects them."""
        return self.connect_timeout / 1000.0, self.socket_timeout / 1000.0


@dataclass(frozen=True)
class RPClientConfig:
    """Storage for the ReportPortal client initialization attributes."""

    endpoint: str
    api_key: Optional[str]
    project: str
    connection_config: ConnectionConfig = field(default_factory=ConnectionConfig)
    verify_ssl: Union[bool, str] = True

    @classmethod
    def from_env(cls, **kwargs: Any) -> 'RPClientConfig':
        """Create configuration from environment variables.

        The following variables are used: RP_ENDPOINT, RP_API_KEY, RP_PROJECT,
        RP_CONNECT_TIMEOUT, RP_SOCKET_TIMEOUT, RP_MAX_POOL_SIZE, RP_VERIFY_SSL.
        Keyword arguments take priority over the environment.

        :param kwargs: explicit configuration values
        :return: configuration object
        """
        if 'connection_config' not in kwargs:
            kwargs['connection_config'] = ConnectionConfig(
                connect_timeout=_int_from_env('RP_CONNECT_TIMEOUT', DEFAULT_CONNECT_TIMEOUT),
                socket_timeout=_int_from_env('RP_SOCKET_TIMEOUT', DEFAULT_SOCKET_TIMEOUT),
                max_pool_size=_int_from_env('RP_MAX_POOL_SIZE', DEFAULT_MAX_POOL_SIZE),
            )
        if 'verify_ssl' not in kwargs:
            rp_verify_ssl = getenv('RP_VERIFY_SSL') or True
            try:
                kwargs['verify_ssl'] = to_bool(rp_verify_ssl)
            except (ValueError, AttributeError):
                kwargs['verify_ssl'] = rp_verify_ssl
        kwargs.setdefault('endpoint', getenv('RP_ENDPOINT'))
        kwargs.setdefault('api_key', getenv('RP_API_KEY'))
        kwargs.setdefault('project', getenv('RP_PROJECT'))
        return cls(**kwargs)

    def __repr__(self) -> str:
        """Represent the configuration without exposing the API key."""
        return '{}(endpoint={!r}, api_key={}, project={!r}, connection_config={!r}, verify_ssl={!r})'.format(
            self.__class__.__name__, self.endpoint, MASKED_VALUE if self.api_key else repr(self.api_key),
            self.project, self.connection_config, self.verify_ssl)
