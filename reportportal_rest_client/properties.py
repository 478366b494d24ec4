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

"""This module contains parameter bundles passed to the client, one per operation.

Attributes are given as a raw string in the form ``key:value;tag;key2:value2``
and parsed by the client.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .defines import ItemStatus, ItemType, LaunchStatus, LogLevel, Mode
from .rp_requests import Timestamp


@dataclass(frozen=True)
class StartLaunchProperties:
    """Properties of a Launch to start.

    Optional: description, attributes, mode, rerun_of. A non-blank ``rerun_of``
    starts the Launch in rerun mode of the Launch with that UUID.
    """

    name: str
    start_time: Timestamp
    description: Optional[str] = None
    attributes: Optional[str] = None
    mode: Optional[Mode] = None
    rerun_of: Optional[str] = None


@dataclass(frozen=True)
class FinishLaunchProperties:
    """Properties of a Launch to finish.

    Optional: status, description, attributes.
    """

    launch_uuid: str
    end_time: Timestamp
    status: Optional[LaunchStatus] = None
    description: Optional[str] = None
    attributes: Optional[str] = None


@dataclass(frozen=True)
class UpdateLaunchProperties:
    """Properties of a Launch to update, the Launch is addressed by its numeric ID.

    Optional: description, attributes, mode.
    """

    launch_id: int
    description: Optional[str] = None
    attributes: Optional[str] = None
    mode: Optional[Mode] = None


@dataclass(frozen=True)
class StartTestItemProperties:
    """Properties of a Test Item to start.

    Optional: parent_uuid, description, attributes, code_ref, has_stats.
    A non-blank ``parent_uuid`` starts a child Item of that parent.
    """

    launch_uuid: str
    name: str
    start_time: Timestamp
    type: Union[ItemType, str]
    parent_uuid: Optional[str] = None
    description: Optional[str] = None
    attributes: Optional[str] = None
    code_ref: Optional[str] = None
    has_stats: Optional[bool] = None


@dataclass(frozen=True)
class FinishTestItemProperties:
    """Properties of a Test Item to finish.

    Optional: attributes.
    """

    item_uuid: str
    launch_uuid: str
    end_time: Timestamp
    status: Union[ItemStatus, str]
    attributes: Optional[str] = None


@dataclass(frozen=True)
class AddLogProperties:
    """Properties of a log message to add to a Test Item."""

    launch_id: str
    item_id: str
    level: Union[LogLevel, str]
    time: Timestamp
    message: str


@dataclass(frozen=True)
class AddFileAttachmentProperties:
    """Properties of a file to attach to a Launch or a Test Item.

    Optional: item_uuid, the file is attached to the Launch without it.
    """

    launch_uuid: str
    level: Union[LogLevel, str]
    time: Timestamp
    message: str
    full_path: str
    item_uuid: Optional[str] = None
