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

"""This module includes unit tests for the logging integration."""

import logging
from unittest import mock

import pytest
from delayed_assert import assert_expectations, expect

from reportportal_rest_client import RPLogger, RPLogHandler
from reportportal_rest_client.properties import AddFileAttachmentProperties, AddLogProperties

LAUNCH_UUID = 'launch_uuid'
ITEM_UUID = 'item_uuid'


def make_record(level=logging.INFO, name='my_tests', msg='Some message', attachment=None):
    record = logging.LogRecord(name, level, __file__, 1, msg, None, None)
    record.created = 1704067200.123
    if attachment:
        record.attachment = attachment
    return record


@pytest.fixture()
def mocked_client():
    """Prepare a mocked ReportPortal client."""
    return mock.Mock()


@pytest.fixture()
def handler(mocked_client):
    """Prepare a handler bound to a Test Item."""
    return RPLogHandler(mocked_client, LAUNCH_UUID, ITEM_UUID)


@mock.patch('reportportal_rest_client.rp_logging.RPLogger.handle')
@pytest.mark.parametrize('log_level', ('info', 'debug', 'warning', 'error'))
def test_logger_handle_attachment(mock_handler, logger, log_level):
    """Test logger call for different log levels with some text attachment."""
    log_call = getattr(logger, log_level)
    attachment = 'Some {} attachment'.format(log_level)
    log_call('Some {} message'.format(log_level), attachment=attachment)
    expect(mock_handler.call_count == 1, 'logger.handle called more than 1 time')
    expect(getattr(mock_handler.call_args[0][0], 'attachment') == attachment,
           "record.attachment in args doesn't match real value")
    assert_expectations()


@mock.patch('reportportal_rest_client.rp_logging.RPLogger.handle')
@pytest.mark.parametrize('log_level', ('info', 'debug', 'warning', 'error'))
def test_logger_handle_no_attachment(mock_handler, logger, log_level):
    """Test logger call for different log levels without any attachment."""
    log_call = getattr(logger, log_level)
    log_call('Some {} message'.format(log_level))
    expect(mock_handler.call_count == 1, 'logger.handle called more than 1 time')
    expect(getattr(mock_handler.call_args[0][0], 'attachment') is None, 'record.attachment in args is not None')
    assert_expectations()


@pytest.mark.parametrize(
    ['levelno', 'expected'],
    [
        (logging.DEBUG, 'DEBUG'),
        (logging.INFO, 'INFO'),
        (25, 'INFO'),
        (logging.WARNING, 'WARN'),
        (logging.ERROR, 'ERROR'),
        (logging.CRITICAL, 'ERROR'),
        (5, 'TRACE'),
    ]
)
def test_log_level_mapping(handler, mocked_client, levelno, expected):
    """Test that Python log levels are sent as the nearest ReportPortal level."""
    handler.handle(make_record(level=levelno))

    mocked_client.add_log.assert_called_once()
    assert mocked_client.add_log.call_args[0][0].level == expected


def test_log_is_sent_to_item(handler, mocked_client):
    """Test that a plain record is posted to the current Test Item."""
    handler.handle(make_record())

    mocked_client.add_log.assert_called_once_with(AddLogProperties(
        launch_id=LAUNCH_UUID, item_id=ITEM_UUID, level='INFO', time=1704067200123, message='Some message'))
    mocked_client.add_file_attachment.assert_not_called()


def test_attachment_is_sent_as_file(mocked_client):
    """Test that a record with an attachment is posted as a file, even without an Item."""
    handler = RPLogHandler(mocked_client, LAUNCH_UUID)

    handler.handle(make_record(level=logging.ERROR, msg='Screenshot', attachment='/tmp/screen.png'))

    mocked_client.add_file_attachment.assert_called_once_with(AddFileAttachmentProperties(
        launch_uuid=LAUNCH_UUID, level='ERROR', time=1704067200123, message='Screenshot',
        full_path='/tmp/screen.png', item_uuid=None))
    mocked_client.add_log.assert_not_called()


def test_no_item_no_attachment(mocked_client):
    """Test that a plain record is skipped while there is no Test Item."""
    handler = RPLogHandler(mocked_client, LAUNCH_UUID)

    handler.handle(make_record())

    expect(mocked_client.add_log.call_count == 0)
    expect(mocked_client.add_file_attachment.call_count == 0)
    assert_expectations()


@pytest.mark.parametrize('name', ['reportportal_rest_client.client', 'urllib3.connectionpool', 'requests'])
def test_client_logs_are_filtered(handler, mocked_client, name):
    """Test that records of the client and its HTTP stack are not posted back."""
    handler.handle(make_record(name=name))

    mocked_client.add_log.assert_not_called()


def test_client_logs_filter_disabled(mocked_client):
    """Test that client records can be posted if filtering is off."""
    handler = RPLogHandler(mocked_client, LAUNCH_UUID, ITEM_UUID, filter_client_logs=False)

    handler.handle(make_record(name='urllib3.connectionpool'))

    mocked_client.add_log.assert_called_once()


def test_handler_level(mocked_client):
    """Test that records below the handler level are not posted."""
    handler = RPLogHandler(mocked_client, LAUNCH_UUID, ITEM_UUID, level=logging.WARNING)
    test_logger = RPLogger('my_tests', level=logging.DEBUG)
    test_logger.addHandler(handler)

    test_logger.info('Some info message')
    test_logger.warning('Some warning message')

    mocked_client.add_log.assert_called_once()
    expect(mocked_client.add_log.call_args[0][0].message == 'Some warning message')
    expect(mocked_client.add_log.call_args[0][0].level == 'WARN')
    assert_expectations()


def test_client_error_is_handled(handler, mocked_client):
    """Test that a failed post goes to the handler error routine and is not raised."""
    mocked_client.add_log.side_effect = ConnectionError('Connection refused')
    record = make_record()

    with mock.patch.object(handler, 'handleError') as handle_error:
        handler.handle(record)

    handle_error.assert_called_once_with(record)
