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

"""This module includes classes representing ReportPortal API responses."""

import json
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional


def _json_field(name: Optional[str]) -> Any:
    return field(default=None, metadata={'json': name})


def _to_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        raise TypeError('Expected a JSON scalar, got: {}'.format(type(value).__name__))
    # JSON scalars keep their JSON form: true, 1.5
    return json.dumps(value)


@dataclass
class RPResponseBase:
    """Base class for ReportPortal response models.

    Fields missing from the response body stay None, unknown keys are ignored.
    """

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'RPResponseBase':
        """Build the response object from a decoded JSON body.

        :param data: decoded JSON object or None for an empty body
        :return: response object
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TypeError('Expected a JSON object, got: {}'.format(type(data).__name__))
        kwargs = {}
        for f in fields(cls):
            json_name = f.metadata.get('json', f.name)
            if json_name and json_name in data:
                kwargs[f.name] = data[json_name]
        return cls(**kwargs)


@dataclass
class StartLaunchResponse(RPResponseBase):
    """Start Launch response: Launch UUID and its sequence number."""

    id: Optional[str] = None
    number: Optional[int] = None


@dataclass
class FinishLaunchResponse(RPResponseBase):
    """Finish Launch response."""

    id: Optional[str] = None
    number: Optional[int] = None
    link: Optional[str] = None
    message: Optional[str] = None


@dataclass
class OperationCompletionResponse(RPResponseBase):
    """Generic response for operations which do not create anything."""

    message: Optional[str] = None


@dataclass
class EntryCreatedResponse(RPResponseBase):
    """Response returned when a new Test Item or Log entry is created."""

    id: Optional[str] = None

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> 'EntryCreatedResponse':
        """Build the response object, unwrapping multipart Log responses.

        Multipart Log requests are answered with ``{"responses": [{"id": ...}]}``,
        the ID of the first entry is taken in that case.

        :param data: decoded JSON object or None for an empty body
        :return: response object
        """
        if isinstance(data, dict) and 'id' not in data:
            responses = data.get('responses')
            if isinstance(responses, list) and responses and isinstance(responses[0], dict):
                return super().from_json(responses[0])
        return super().from_json(data)


@dataclass
class ReportPortalErrorMessage:
    """Error message returned by ReportPortal, or built by the client on a failed request.

    ``throwable`` holds the exception which prevented decoding of the original
    error body, it is never part of the message text.
    """

    error_code: Optional[int] = _json_field('errorCode')
    message: Optional[str] = None
    error: Optional[str] = None
    error_description: Optional[str] = None
    throwable: Optional[BaseException] = _json_field(None)

    @classmethod
    def from_json(cls, data: Any) -> 'ReportPortalErrorMessage':
        """Build the error message from a decoded JSON body.

        Scalar text fields are converted to strings.

        :param data: decoded JSON body
        :return: error message object
        :raises TypeError: if the body is not a JSON object or a text field is not a scalar
        :raises ValueError: if ``errorCode`` is not an integer
        """
        if not isinstance(data, dict):
            raise TypeError('Expected a JSON object, got: {}'.format(type(data).__name__))
        error_code = data.get('errorCode')
        if error_code is not None:
            if isinstance(error_code, bool):
                raise ValueError('Invalid errorCode value: {}'.format(error_code))
            error_code = int(error_code)
        return cls(error_code=error_code, message=_to_text(data.get('message')), error=_to_text(data.get('error')),
                   error_description=_to_text(data.get('error_description')))

    def __str__(self) -> str:
        """Render set fields in the form ``[errorCode=4041,message=...]``."""
        parts = []
        for f in fields(self):
            json_name = f.metadata.get('json', f.name)
            value = getattr(self, f.name)
            if json_name and value is not None:
                parts.append('{}={}'.format(json_name, value))
        return '[{}]'.format(','.join(parts))
