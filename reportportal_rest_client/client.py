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

"""This module contains the synchronous ReportPortal client."""

import json
import logging
import mimetypes
import os
import warnings
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar, Union

import requests
from requests.adapters import DEFAULT_RETRIES, HTTPAdapter

from .config import RPClientConfig
from .error_handler import handle_response
from .helpers import is_blank, parse_as_set
from .properties import (AddFileAttachmentProperties, AddLogProperties, FinishLaunchProperties,
                         FinishTestItemProperties, StartLaunchProperties, StartTestItemProperties,
                         UpdateLaunchProperties)
from .rp_requests import (FinishLaunchRequest, FinishTestItemRequest, HttpRequest, LogFile, SaveLogRequest,
                          StartLaunchRequest, StartTestItemRequest, UpdateLaunchRequest)
from .rp_responses import (EntryCreatedResponse, FinishLaunchResponse, OperationCompletionResponse,
                           RPResponseBase, StartLaunchResponse)
from .url_builder import (API_PATH, FINISH_PATH, ITEM_PATH, ITEM_UUID_PATH, LAUNCH_ID_PATH, LAUNCH_PATH,
                          LAUNCH_UUID_PATH, LOG_PATH, PARENT_UUID_PATH, PROJECT_NAME_PATH, UPDATE_PATH,
                          UrlTemplate)

logger = logging.getLogger(__name__)

HEADER_AUTHORIZATION: str = 'Authorization'
HEADER_ACCEPT: str = 'Accept'
BEARER_TOKEN: str = 'Bearer {0}'
APPLICATION_JSON: str = 'application/json'
MEDIA_TYPE_ALL: str = '*/*'
OCTET_STREAM: str = 'application/octet-stream'
JSON_REQUEST_PART: str = 'json_request_part'
FILE_PART: str = 'file'

_T = TypeVar('_T', bound=RPResponseBase)


class ReportPortalClient:
    """ReportPortal client which sends one blocking HTTP request per operation.

    The client keeps no state between calls besides its configuration and
    the pooled HTTP session, so it can be shared between threads. Callers are
    responsible for the order of calls, e.g. a Launch has to be started before
    any Item referring to its UUID.
    """

    session: requests.Session
    http_timeout: Tuple[float, float]
    verify_ssl: Union[bool, str]
    start_launch_url: UrlTemplate
    finish_launch_url: UrlTemplate
    update_launch_url: UrlTemplate
    start_item_url: UrlTemplate
    start_nested_item_url: UrlTemplate
    finish_item_url: UrlTemplate
    add_log_url: UrlTemplate

    def __init__(self, config: RPClientConfig) -> None:
        """Initialize the class instance with the given configuration.

        :param config: endpoint, project, API key and connection settings
        :raises ValueError: if the endpoint is not an absolute HTTP URL
        """
        self.__config = config
        self.__api_key = config.api_key
        if not self.__api_key:
            warnings.warn(
                message='Argument `api_key` is `None` or empty string, that is not supposed to happen '
                        'because ReportPortal is usually requires an authorization key. Please check '
                        'your code.',
                category=RuntimeWarning,
                stacklevel=2
            )
        self.http_timeout = config.connection_config.http_timeout
        self.verify_ssl = config.verify_ssl

        endpoint = config.endpoint
        self.start_launch_url = UrlTemplate(endpoint, API_PATH, PROJECT_NAME_PATH, LAUNCH_PATH)
        self.finish_launch_url = UrlTemplate(endpoint, API_PATH, PROJECT_NAME_PATH, LAUNCH_PATH,
                                             LAUNCH_UUID_PATH, FINISH_PATH)
        self.update_launch_url = UrlTemplate(endpoint, API_PATH, PROJECT_NAME_PATH, LAUNCH_PATH,
                                             LAUNCH_ID_PATH, UPDATE_PATH)
        self.start_item_url = UrlTemplate(endpoint, API_PATH, PROJECT_NAME_PATH, ITEM_PATH)
        self.start_nested_item_url = UrlTemplate(endpoint, API_PATH, PROJECT_NAME_PATH, ITEM_PATH,
                                                 PARENT_UUID_PATH)
        self.finish_item_url = UrlTemplate(endpoint, API_PATH, PROJECT_NAME_PATH, ITEM_PATH, ITEM_UUID_PATH)
        self.add_log_url = UrlTemplate(endpoint, API_PATH, PROJECT_NAME_PATH, LOG_PATH)

        self.__init_session(config.connection_config.max_pool_size)

    def __init_session(self, max_pool_size: int) -> None:
        session = requests.Session()
        session.mount('https://', HTTPAdapter(max_retries=DEFAULT_RETRIES, pool_maxsize=max_pool_size))
        # noinspection HttpUrlsUsage
        session.mount('http://', HTTPAdapter(max_retries=DEFAULT_RETRIES, pool_maxsize=max_pool_size))
        self.session = session

    @property
    def endpoint(self) -> str:
        """Return current base URL."""
        return self.__config.endpoint

    @property
    def project(self) -> str:
        """Return current Project name."""
        return self.__config.project

    @property
    def config(self) -> RPClientConfig:
        """Return the client configuration."""
        return self.__config

    def _headers(self, accept: str) -> Dict[str, str]:
        return {
            HEADER_AUTHORIZATION: BEARER_TOKEN.format(self.__api_key),
            HEADER_ACCEPT: accept,
        }

    def _send(self, session_method: Callable, url: str, response_type: Type[_T], accept: str = APPLICATION_JSON,
              payload: Optional[Any] = None,
              files: Optional[List[Tuple[str, Tuple[Optional[str], Any, str]]]] = None) -> _T:
        response = HttpRequest(session_method, url, json=payload, files=files, headers=self._headers(accept),
                               verify_ssl=self.verify_ssl, http_timeout=self.http_timeout).make()
        return handle_response(response, response_type)

    def start_launch(self, props: StartLaunchProperties) -> StartLaunchResponse:
        """Start a new Launch.

        :param props: properties of the Launch to start
        :return: response with the Launch UUID and number
        """
        rq = StartLaunchRequest(name=props.name, start_time=props.start_time)
        if not is_blank(props.rerun_of):
            rq.rerun = True
            rq.rerun_of = props.rerun_of
        if props.mode is not None:
            rq.mode = props.mode
        if props.description is not None:
            rq.description = props.description
        if props.attributes is not None:
            rq.attributes = parse_as_set(props.attributes)

        url = self.start_launch_url.expand(self.project)
        logger.debug('ReportPortal - Start launch: request_body=%s', rq.payload)
        rs = self._send(self.session.post, url, StartLaunchResponse, payload=rq.payload)
        logger.debug('ReportPortal - Launch started: id=%s', rs.id)
        return rs

    def finish_launch(self, props: FinishLaunchProperties) -> FinishLaunchResponse:
        """Finish a Launch.

        :param props: properties of the Launch to finish
        :return: response with the Launch UUID, number and link
        """
        rq = FinishLaunchRequest(end_time=props.end_time)
        if props.status is not None:
            rq.status = props.status
        if props.description is not None:
            rq.description = props.description
        if props.attributes is not None:
            rq.attributes = parse_as_set(props.attributes)

        url = self.finish_launch_url.expand(self.project, props.launch_uuid)
        logger.debug('ReportPortal - Finish launch: id=%s, request_body=%s', props.launch_uuid, rq.payload)
        return self._send(self.session.put, url, FinishLaunchResponse, payload=rq.payload)

    def update_launch(self, props: UpdateLaunchProperties) -> OperationCompletionResponse:
        """Update description, attributes or mode of an existing Launch.

        :param props: properties of the Launch to update
        :return: response with the operation result message
        """
        rq = UpdateLaunchRequest()
        if props.mode is not None:
            rq.mode = props.mode
        if props.description is not None:
            rq.description = props.description
        if props.attributes is not None:
            rq.attributes = parse_as_set(props.attributes)

        url = self.update_launch_url.expand(self.project, props.launch_id)
        logger.debug('ReportPortal - Update launch: id=%s, request_body=%s', props.launch_id, rq.payload)
        return self._send(self.session.put, url, OperationCompletionResponse, payload=rq.payload)

    def start_item(self, props: StartTestItemProperties) -> EntryCreatedResponse:
        """Start a Test Item, a child one if the parent UUID is given.

        :param props: properties of the Test Item to start
        :return: response with the Test Item UUID
        """
        rq = StartTestItemRequest(name=props.name, start_time=props.start_time, type=props.type,
                                  launch_uuid=props.launch_uuid)
        if props.description is not None:
            rq.description = props.description
        if props.code_ref is not None:
            rq.code_ref = props.code_ref
        if props.has_stats is not None:
            rq.has_stats = props.has_stats
        if props.attributes is not None:
            rq.attributes = parse_as_set(props.attributes)

        if is_blank(props.parent_uuid):
            url = self.start_item_url.expand(self.project)
        else:
            url = self.start_nested_item_url.expand(self.project, props.parent_uuid)
        logger.debug('ReportPortal - Start item: parent_id=%s, request_body=%s', props.parent_uuid, rq.payload)
        rs = self._send(self.session.post, url, EntryCreatedResponse, accept=MEDIA_TYPE_ALL, payload=rq.payload)
        logger.debug('ReportPortal - Item started: id=%s', rs.id)
        return rs

    def finish_item(self, props: FinishTestItemProperties) -> EntryCreatedResponse:
        """Finish a Test Item.

        :param props: properties of the Test Item to finish
        :return: response from ReportPortal
        """
        rq = FinishTestItemRequest(end_time=props.end_time, launch_uuid=props.launch_uuid, status=props.status)
        if props.attributes is not None:
            rq.attributes = parse_as_set(props.attributes)

        url = self.finish_item_url.expand(self.project, props.item_uuid)
        logger.debug('ReportPortal - Finish item: id=%s, request_body=%s', props.item_uuid, rq.payload)
        return self._send(self.session.put, url, EntryCreatedResponse, payload=rq.payload)

    def add_log(self, props: AddLogProperties) -> EntryCreatedResponse:
        """Add a log message to a Test Item.

        :param props: properties of the log message
        :return: response with the log entry UUID
        """
        rq = SaveLogRequest(launch_uuid=props.launch_id, item_uuid=props.item_id, level=props.level,
                            time=props.time, message=props.message)

        url = self.add_log_url.expand(self.project)
        logger.debug('ReportPortal - Add log: request_body=%s', rq.payload)
        return self._send(self.session.post, url, EntryCreatedResponse, payload=rq.payload)

    def add_file_attachment(self, props: AddFileAttachmentProperties) -> EntryCreatedResponse:
        """Attach a file to a Test Item, or to the Launch if no Item UUID is given.

        The log entry and the file are sent in one multipart request, the entry
        refers to the file by its base name.

        :param props: properties of the attachment
        :return: response with the log entry UUID
        """
        file_name = os.path.basename(props.full_path)
        rq = SaveLogRequest(launch_uuid=props.launch_uuid, level=props.level, time=props.time,
                            message=props.message, file=LogFile(name=file_name))
        if props.item_uuid is not None:
            rq.item_uuid = props.item_uuid

        url = self.add_log_url.expand(self.project)
        mime_type = mimetypes.guess_type(file_name)[0] or OCTET_STREAM
        logger.debug('ReportPortal - Add file attachment: file=%s, request_body=%s', props.full_path, rq.payload)
        with open(props.full_path, 'rb') as file_obj:
            files = [
                (JSON_REQUEST_PART, (None, json.dumps([rq.payload]), APPLICATION_JSON)),
                (FILE_PART, (file_name, file_obj, mime_type)),
            ]
            return self._send(self.session.post, url, EntryCreatedResponse, files=files)

    def close(self) -> None:
        """Close current client connections."""
        self.session.close()

    def __enter__(self) -> 'ReportPortalClient':
        """Return the client itself, connections are closed on exit."""
        return self

    def __exit__(self, *_: Any) -> None:
        """Close current client connections."""
        self.close()
