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

"""This module contains enumerations of values accepted by ReportPortal.

Members are sent over the wire by their names.
"""

from aenum import Enum, auto, unique


@unique
class Mode(Enum):
    """Launch modes."""

    DEFAULT = auto()
    DEBUG = auto()


@unique
class LaunchStatus(Enum):
    """Statuses a Launch can be finished with."""

    PASSED = auto()
    FAILED = auto()
    STOPPED = auto()
    SKIPPED = auto()
    INTERRUPTED = auto()
    CANCELLED = auto()


@unique
class ItemStatus(Enum):
    """Statuses a Test Item can be finished with."""

    PASSED = auto()
    FAILED = auto()
    STOPPED = auto()
    SKIPPED = auto()
    INTERRUPTED = auto()
    CANCELLED = auto()
    INFO = auto()
    WARN = auto()


@unique
class ItemType(Enum):
    """Test Item types."""

    SUITE = auto()
    STORY = auto()
    TEST = auto()
    SCENARIO = auto()
    STEP = auto()
    BEFORE_CLASS = auto()
    BEFORE_GROUPS = auto()
    BEFORE_METHOD = auto()
    BEFORE_SUITE = auto()
    BEFORE_TEST = auto()
    AFTER_CLASS = auto()
    AFTER_GROUPS = auto()
    AFTER_METHOD = auto()
    AFTER_SUITE = auto()
    AFTER_TEST = auto()


@unique
class LogLevel(Enum):
    """Log levels known to ReportPortal."""

    TRACE = auto()
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()
    FATAL = auto()
