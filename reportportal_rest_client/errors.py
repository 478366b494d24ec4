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

"""This module includes exceptions used in the package."""

from typing import Union

from .rp_responses import ReportPortalErrorMessage


class Error(Exception):
    """General exception for package."""


class ReportPortalClientError(Error):
    """Error in response returned by ReportPortal.

    Always carries the HTTP status code of the response and an error message,
    decoded from the response body or built by the client.
    """

    http_status_code: int
    error_message: ReportPortalErrorMessage

    def __init__(self, http_status_code: int, error_message: Union[ReportPortalErrorMessage, str]) -> None:
        """Initialize instance attributes.

        :param http_status_code: HTTP status code of the response
        :param error_message:    error message object, or a text which will be wrapped into one
        """
        if not isinstance(error_message, ReportPortalErrorMessage):
            error_message = ReportPortalErrorMessage(message=error_message)
            text = error_message.message
        else:
            text = str(error_message)
        super().__init__(text)
        self.http_status_code = http_status_code
        self.error_message = error_message


class RedirectionError(ReportPortalClientError):
    """ReportPortal answered with a redirect, which the client never follows."""
