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

"""This module contains Python logging integration which sends records to ReportPortal."""

import logging
from typing import Optional, Tuple

from .client import ReportPortalClient
from .properties import AddFileAttachmentProperties, AddLogProperties

CLIENT_LOGGERS: Tuple[str, ...] = (__name__.split('.')[0], 'requests', 'urllib3')


class RPLogger(logging.getLoggerClass()):
    """Logger which accepts a file path to attach as ``attachment`` argument."""

    def __init__(self, name, level=0):
        super(RPLogger, self).__init__(name, level=level)

    def _log(self, level, msg, args, exc_info=None, extra=None, stack_info=False, stacklevel=1,
             attachment=None):
        """
        Low-level logging routine which creates a LogRecord and then calls
        all the handlers of this logger to handle the record.

        The record always gets an ``attachment`` attribute, None if nothing
        is attached.
        """
        extra = dict(extra or {}, attachment=attachment)
        super(RPLogger, self)._log(level, msg, args, exc_info=exc_info, extra=extra, stack_info=stack_info,
                                   stacklevel=stacklevel + 1)


class RPLogHandler(logging.Handler):
    """Handler which posts log records to a ReportPortal Test Item or Launch.

    Records with an ``attachment`` file path are sent as file attachments,
    others as plain log messages. Plain messages need an Item, so they are
    skipped while ``item_uuid`` is not set.
    """

    # Map loglevel codes from `logging` module to ReportPortal text names:
    _loglevel_map = {
        logging.NOTSET: "TRACE",
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "ERROR",
    }
    _sorted_levelnos = sorted(_loglevel_map.keys(), reverse=True)

    client: ReportPortalClient
    launch_uuid: str
    item_uuid: Optional[str]
    filter_client_logs: bool

    def __init__(self, client: ReportPortalClient, launch_uuid: str, item_uuid: Optional[str] = None,
                 level: int = logging.NOTSET, filter_client_logs: bool = True) -> None:
        """Initialize the handler.

        :param client:             ReportPortal client to post records with
        :param launch_uuid:        UUID of the Launch to report to
        :param item_uuid:          UUID of the Test Item to report to, can be changed later
        :param level:              minimal level of records to post
        :param filter_client_logs: skip records of the client itself and its HTTP stack
        """
        super(RPLogHandler, self).__init__(level)
        self.client = client
        self.launch_uuid = launch_uuid
        self.item_uuid = item_uuid
        self.filter_client_logs = filter_client_logs

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter out the client's own records, then apply attached filters.

        :param record: log record
        :return: whether the record should be posted
        """
        if self.filter_client_logs:
            if record.name.split('.')[0] in CLIENT_LOGGERS:
                return False
        return super(RPLogHandler, self).filter(record)

    def get_rp_level(self, levelno: int) -> str:
        """Map Python log level number to the nearest ReportPortal level name."""
        for level in self._sorted_levelnos:
            if level <= levelno:
                return self._loglevel_map[level]
        return self._loglevel_map[logging.NOTSET]

    def emit(self, record: logging.LogRecord) -> None:
        """Post the record to ReportPortal.

        :param record: log record
        """
        attachment = record.__dict__.get("attachment", None)
        if not attachment and not self.item_uuid:
            return
        try:
            msg = self.format(record)
            loglevel = self.get_rp_level(record.levelno)
            log_time = int(record.created * 1000)
            if attachment:
                self.client.add_file_attachment(AddFileAttachmentProperties(
                    launch_uuid=self.launch_uuid, level=loglevel, time=log_time, message=msg,
                    full_path=attachment, item_uuid=self.item_uuid))
            else:
                self.client.add_log(AddLogProperties(
                    launch_id=self.launch_uuid, item_id=self.item_uuid, level=loglevel, time=log_time,
                    message=msg))
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)
