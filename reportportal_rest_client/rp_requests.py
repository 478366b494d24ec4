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

"""This module includes classes representing ReportPortal API requests.

Every request model holds its fields as plain attributes, ``None`` means the
field is not set. The ``payload`` property renders the JSON body and leaves
unset fields out of it entirely.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Set, Tuple, Union

import requests
from aenum import Enum


Timestamp = Union[datetime, int, str]


def format_time(value: Optional[Timestamp]) -> Optional[Union[int, str]]:
    """Convert a datetime to epoch milliseconds, pass other values as is."""
    if isinstance(value, datetime):
        return int(round(value.timestamp() * 1000))
    return value


def _json_field(name: str, default: Any = None) -> Any:
    return field(default=default, metadata={'json': name})


def _to_payload(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, datetime):
        return format_time(value)
    if isinstance(value, (set, frozenset)):
        return [_to_payload(v) for v in sorted(value, key=lambda a: (a.key or '', a.value))]
    if isinstance(value, (list, tuple)):
        return [_to_payload(v) for v in value]
    if hasattr(value, 'payload'):
        return value.payload
    return value


@dataclass(frozen=True)
class ItemAttribute:
    """Launch or Test Item attribute, a bare value or a key-value pair."""

    key: Optional[str]
    value: str

    @property
    def payload(self) -> Dict[str, str]:
        """Get HTTP payload for the attribute."""
        if self.key is None:
            return {'value': self.value}
        return {'key': self.key, 'value': self.value}


@dataclass
class RPRequestBase:
    """Base class for ReportPortal request models."""

    @property
    def payload(self) -> Dict[str, Any]:
        """Get HTTP payload for the request, unset fields are omitted."""
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            result[f.metadata.get('json', f.name)] = _to_payload(value)
        return result


@dataclass
class StartLaunchRequest(RPRequestBase):
    """Start Launch request body."""

    name: Optional[str] = None
    start_time: Optional[Timestamp] = _json_field('startTime')
    description: Optional[str] = None
    attributes: Optional[Set[ItemAttribute]] = None
    mode: Optional[Enum] = None
    rerun: Optional[bool] = None
    rerun_of: Optional[str] = _json_field('rerunOf')


@dataclass
class FinishLaunchRequest(RPRequestBase):
    """Finish Launch request body."""

    end_time: Optional[Timestamp] = _json_field('endTime')
    status: Optional[Enum] = None
    description: Optional[str] = None
    attributes: Optional[Set[ItemAttribute]] = None


@dataclass
class UpdateLaunchRequest(RPRequestBase):
    """Update Launch request body."""

    mode: Optional[Enum] = None
    description: Optional[str] = None
    attributes: Optional[Set[ItemAttribute]] = None


@dataclass
class StartTestItemRequest(RPRequestBase):
    """Start Test Item request body.

    ``has_stats`` is always sent, ReportPortal treats items without statistics
    as nested steps.
    """

    name: Optional[str] = None
    start_time: Optional[Timestamp] = _json_field('startTime')
    type: Optional[Union[Enum, str]] = None
    launch_uuid: Optional[str] = _json_field('launchUuid')
    description: Optional[str] = None
    attributes: Optional[Set[ItemAttribute]] = None
    code_ref: Optional[str] = _json_field('codeRef')
    has_stats: bool = _json_field('hasStats', True)


@dataclass
class FinishTestItemRequest(RPRequestBase):
    """Finish Test Item request body."""

    end_time: Optional[Timestamp] = _json_field('endTime')
    launch_uuid: Optional[str] = _json_field('launchUuid')
    status: Optional[Union[Enum, str]] = None
    attributes: Optional[Set[ItemAttribute]] = None


@dataclass
class LogFile(RPRequestBase):
    """Reference from a log entry to the multipart file it carries."""

    name: Optional[str] = None


@dataclass
class SaveLogRequest(RPRequestBase):
    """Save Log request body, used both as JSON and as a multipart part."""

    launch_uuid: Optional[str] = _json_field('launchUuid')
    item_uuid: Optional[str] = _json_field('itemUuid')
    time: Optional[Timestamp] = None
    message: Optional[str] = None
    level: Optional[Union[Enum, str]] = None
    file: Optional[LogFile] = None


class HttpRequest:
    """This model stores attributes related to ReportPortal HTTP requests."""

    session_method: Callable
    url: str
    data: Any
    json: Optional[Any]
    files: Optional[List[Tuple[str, Tuple[Optional[str], Any, str]]]]
    headers: Optional[Dict[str, str]]
    verify_ssl: Union[bool, str]
    http_timeout: Union[float, Tuple[float, float]]

    def __init__(self,
                 session_method: Callable,
                 url: str,
                 data: Any = None,
                 json: Optional[Any] = None,
                 files: Optional[List[Tuple[str, Tuple[Optional[str], Any, str]]]] = None,
                 headers: Optional[Dict[str, str]] = None,
                 verify_ssl: Union[bool, str] = True,
                 http_timeout: Union[float, Tuple[float, float]] = (15.0, 30.0)) -> None:
        """Initialize instance attributes.

        :param session_method: Method of the requests.Session object to call
        :param url:            Request URL
        :param data:           Form data for the request
        :param json:           JSON payload for the request
        :param files:          Multipart parts for the request
        :param headers:        Request headers, sent as is
        :param verify_ssl:     Whether to verify server certificate, or a path to a CA bundle
        :param http_timeout:   A float in seconds for connect and read timeout. Use a Tuple to
                               specific connect and read separately.
        """
        self.session_method = session_method
        self.url = url
        self.data = data
        self.json = json
        self.files = files
        self.headers = headers
        self.verify_ssl = verify_ssl
        self.http_timeout = http_timeout

    def make(self) -> requests.Response:
        """Make HTTP request to the ReportPortal API.

        Redirects are never followed. Transport errors are raised to the caller.

        :return: raw response object
        """
        return self.session_method(self.url, data=self.data, json=self.json, files=self.files,
                                   headers=self.headers, verify=self.verify_ssl,
                                   timeout=self.http_timeout, allow_redirects=False)
