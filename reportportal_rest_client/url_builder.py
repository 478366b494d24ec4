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

"""This module contains URL templates for ReportPortal API endpoints."""

import re
from typing import Any, List, Tuple
from urllib.parse import quote, urlsplit

API_PATH: str = 'api/v1'
PROJECT_NAME_PATH: str = '{project_name}'
LAUNCH_PATH: str = 'launch'
ITEM_PATH: str = 'item'
LOG_PATH: str = 'log'
FINISH_PATH: str = 'finish'
UPDATE_PATH: str = 'update'
LAUNCH_UUID_PATH: str = '{launch_uuid}'
LAUNCH_ID_PATH: str = '{launch_id}'
PARENT_UUID_PATH: str = '{parent_uuid}'
ITEM_UUID_PATH: str = '{item_uuid}'

PLACEHOLDER_REGEX = re.compile(r'^{(\w+)}$')


def uri_join(*uri_parts: Any) -> str:
    """Join uri parts.

    Avoiding usage of urlparse.urljoin and os.path.join
    as it does not clearly join parts.

    :param uri_parts: tuple of values for join, can contain back and forward
                      slashes (will be stripped up).
    :return: an uri string.
    """
    return '/'.join(str(s).strip('/').strip('\\') for s in uri_parts)


def verify_endpoint(endpoint: str) -> str:
    """Check that the endpoint is an absolute HTTP URL.

    :param endpoint: ReportPortal base URL
    :return: the endpoint without trailing slashes
    :raises ValueError: if the endpoint is not an http or https URL
    """
    parsed = urlsplit(endpoint or '')
    if parsed.scheme.lower() not in ('http', 'https') or not parsed.netloc:
        raise ValueError('Endpoint should be an absolute HTTP URL, got: {!r}'.format(endpoint))
    return endpoint.rstrip('/')


class UrlTemplate:
    """URL made of a base endpoint and path segments with named placeholders.

    Placeholders are segments like ``{launch_uuid}``, they are substituted in
    the order they appear, each value is percent-encoded as a single segment.
    """

    endpoint: str
    segments: Tuple[str, ...]
    variables: List[str]

    def __init__(self, endpoint: str, *segments: str) -> None:
        """Initialize instance attributes.

        :param endpoint: ReportPortal base URL
        :param segments: path segments, fixed names or placeholders
        """
        self.endpoint = verify_endpoint(endpoint)
        self.segments = segments
        self.variables = []
        for segment in segments:
            match = PLACEHOLDER_REGEX.match(segment)
            if match:
                self.variables.append(match.group(1))

    def expand(self, *values: Any) -> str:
        """Build a concrete URL substituting placeholders with given values.

        :param values: placeholder values in order of appearance
        :return: absolute URL
        :raises ValueError: if a value is missing or empty
        """
        if len(values) != len(self.variables):
            raise ValueError('URL template {} expects {} variable(s) ({}), got {}'.format(
                self, len(self.variables), ', '.join(self.variables), len(values)))
        values_iter = iter(values)
        path = []
        for segment in self.segments:
            if not PLACEHOLDER_REGEX.match(segment):
                path.append(segment)
                continue
            value = next(values_iter)
            if value is None or str(value) == '':
                raise ValueError('Value for "{}" is not set in URL template {}'.format(segment, self))
            path.append(quote(str(value), safe=''))
        return uri_join(self.endpoint, *path)

    def __str__(self) -> str:
        """Return the template as a string with placeholders."""
        return uri_join(self.endpoint, *self.segments)
