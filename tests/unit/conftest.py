"""This module contains common Pytest fixtures and hooks for unit tests."""

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

# noinspection PyUnresolvedReferences
from unittest import mock

from pytest import fixture

from reportportal_rest_client import ReportPortalClient, RPClientConfig, RPLogger
from tests.helpers import utils


@fixture
def logger():
    """Prepare instance of the RPLogger for testing."""
    return RPLogger('reportportal_rest_client.test')


@fixture()
def rp_config():
    """Prepare client configuration for testing."""
    return RPClientConfig(**utils.DEFAULT_VARIABLES)


@fixture()
def rp_client(rp_config):
    """Prepare instance of the ReportPortalClient for testing."""
    client = ReportPortalClient(rp_config)
    yield client
    client.close()


@fixture()
def mocked_request(rp_client):
    """Mock HTTP requests of the client session, by default they succeed."""
    with mock.patch.object(rp_client.session, 'request') as request:
        request.return_value = utils.build_response(201, {'id': 'entry_uuid', 'number': 1})
        yield request
