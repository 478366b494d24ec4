"""This module contains utility code for unit tests.

Copyright (c) 2023 https://reportportal.io .
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

https://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License
"""
import json

import requests

DEFAULT_VARIABLES = {
    'endpoint': 'http://localhost:8080',
    'project': 'default_personal',
    'api_key': 'test_api_key'
}

BASE_URL = 'http://localhost:8080/api/v1/default_personal'

DEFAULT_ERROR_BODY = {
    'errorCode': 4041,
    'message': "Launch 'L1' not found. Did you use correct Launch ID?",
    'error': 'Not Found',
    'error_description': 'Launch is absent'
}


def build_response(status_code=200, body=None, headers=None):
    """Build a real requests.Response object with the given body.

    :param status_code: HTTP status code
    :param body:        dict or list to be sent as JSON, str for plain text,
                        bytes as is, None for an empty body
    :param headers:     additional response headers
    :return: response object
    """
    response = requests.Response()
    response.status_code = status_code
    if isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode('utf-8')
        response.headers['Content-Type'] = 'application/json'
    elif isinstance(body, str):
        response._content = body.encode('utf-8')
        response.headers['Content-Type'] = 'text/plain'
    elif body is None:
        response._content = b''
    else:
        response._content = body
    response.headers.update(headers or {})
    return response
