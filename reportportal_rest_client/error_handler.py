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

"""This module classifies ReportPortal HTTP responses into results or errors."""

import json
import logging
from typing import Callable, Optional, Tuple, Type, TypeVar

import requests
from aenum import Enum, auto, unique

from .errors import RedirectionError, ReportPortalClientError
from .rp_responses import ReportPortalErrorMessage, RPResponseBase

logger = logging.getLogger(__name__)

REDIRECTION_MESSAGE: str = \
    'Redirection responses are not expected. Please check if server is running properly'
PARSE_AS_STRING_FAILED_MESSAGE: str = 'Failed to parse response as String'
PARSE_BODY_FAILED_MESSAGE: str = 'Failed to parse response body'

_T = TypeVar('_T', bound=RPResponseBase)


@unique
class StatusClass(Enum):
    """Outcome of an HTTP request by its status code."""

    SUCCESS = auto()
    REDIRECT = auto()
    CLIENT_ERROR = auto()
    SERVER_ERROR = auto()


def get_status_class(status_code: int) -> StatusClass:
    """Get outcome class of the given HTTP status code.

    Informational and out-of-range codes are treated as server errors.

    :param status_code: HTTP status code
    :return: status class
    """
    if 200 <= status_code < 300:
        return StatusClass.SUCCESS
    if 300 <= status_code < 400:
        return StatusClass.REDIRECT
    if 400 <= status_code < 500:
        return StatusClass.CLIENT_ERROR
    return StatusClass.SERVER_ERROR


def decode_error_json(response: requests.Response) -> ReportPortalErrorMessage:
    """Decode response body as a ReportPortal error object."""
    return ReportPortalErrorMessage.from_json(response.json())


def decode_error_text(response: requests.Response) -> ReportPortalErrorMessage:
    """Decode response body as a plain UTF-8 string.

    A body which is a JSON string literal is unquoted.
    """
    text = response.content.decode('utf-8')
    try:
        value = json.loads(text)
    except ValueError:
        value = None
    if isinstance(value, str):
        text = value
    if not text:
        raise ValueError('Response body is empty')
    return ReportPortalErrorMessage(message=text)


# Tried in order, the first one which does not fail wins
ERROR_DECODERS: Tuple[Callable[[requests.Response], ReportPortalErrorMessage], ...] = (
    decode_error_json,
    decode_error_text,
)


def decode_error_message(response: requests.Response) -> ReportPortalErrorMessage:
    """Decode error message from the response body.

    If a decoder succeeds after a failed one, the previous failure is kept as
    ``throwable``. If every decoder fails a placeholder message is returned
    with the last failure attached.

    :param response: error response
    :return: error message, never None
    """
    cause: Optional[Exception] = None
    for decoder in ERROR_DECODERS:
        try:
            error_message = decoder(response)
        except (ValueError, TypeError) as exc:
            cause = exc
            continue
        error_message.throwable = cause
        return error_message
    return ReportPortalErrorMessage(message=PARSE_AS_STRING_FAILED_MESSAGE, throwable=cause)


def _decode_success(response: requests.Response, response_type: Type[_T]) -> _T:
    if not response.content or not response.content.strip():
        return response_type.from_json(None)
    try:
        return response_type.from_json(response.json())
    except (ValueError, TypeError) as exc:
        error_message = ReportPortalErrorMessage(
            message='{}: {}'.format(PARSE_BODY_FAILED_MESSAGE, exc), throwable=exc)
        raise ReportPortalClientError(response.status_code, error_message) from exc


def handle_response(response: requests.Response, response_type: Type[_T]) -> _T:
    """Convert HTTP response into a response object or raise an error.

    :param response:      raw HTTP response
    :param response_type: class of the expected response object
    :return: response object, with all fields None if the body is empty
    :raises RedirectionError: on 3xx responses
    :raises ReportPortalClientError: on 4xx and 5xx responses or undecodable bodies
    """
    status_code = response.status_code
    status_class = get_status_class(status_code)
    if status_class == StatusClass.SUCCESS:
        return _decode_success(response, response_type)
    if status_class == StatusClass.REDIRECT:
        logger.debug('ReportPortal - Unexpected redirect: status=%s, location=%s',
                     status_code, response.headers.get('Location'))
        raise RedirectionError(status_code, REDIRECTION_MESSAGE)

    error_message = decode_error_message(response)
    logger.debug('ReportPortal - Request failed: status=%s, error=%s', status_code, error_message)
    raise ReportPortalClientError(status_code, error_message) from error_message.throwable
