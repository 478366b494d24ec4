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

"""ReportPortal REST client: typed operations over the ReportPortal HTTP API."""

import logging

from .client import ReportPortalClient
from .config import ConnectionConfig, RPClientConfig
from .defines import ItemStatus, ItemType, LaunchStatus, LogLevel, Mode
from .errors import Error, RedirectionError, ReportPortalClientError
from .helpers import parse_as_set, split_key_value
from .properties import (AddFileAttachmentProperties, AddLogProperties, FinishLaunchProperties,
                         FinishTestItemProperties, StartLaunchProperties, StartTestItemProperties,
                         UpdateLaunchProperties)
from .rp_logging import RPLogger, RPLogHandler
from .rp_requests import ItemAttribute
from .rp_responses import (EntryCreatedResponse, FinishLaunchResponse, OperationCompletionResponse,
                           ReportPortalErrorMessage, StartLaunchResponse)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'AddFileAttachmentProperties',
    'AddLogProperties',
    'ConnectionConfig',
    'EntryCreatedResponse',
    'Error',
    'FinishLaunchProperties',
    'FinishLaunchResponse',
    'FinishTestItemProperties',
    'ItemAttribute',
    'ItemStatus',
    'ItemType',
    'LaunchStatus',
    'LogLevel',
    'Mode',
    'OperationCompletionResponse',
    'RedirectionError',
    'ReportPortalClient',
    'ReportPortalClientError',
    'ReportPortalErrorMessage',
    'RPClientConfig',
    'RPLogger',
    'RPLogHandler',
    'StartLaunchProperties',
    'StartLaunchResponse',
    'StartTestItemProperties',
    'UpdateLaunchProperties',
    'parse_as_set',
    'split_key_value',
]
