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

"""This module includes help functions for the client and request models."""

import logging
from typing import Optional, Set, Union

from .rp_requests import ItemAttribute

logger = logging.getLogger(__name__)

ATTRIBUTES_SPLITTER: str = ';'
KEY_VALUE_SPLITTER: str = ':'


def is_blank(value: Optional[str]) -> bool:
    """Check that the given string is None, empty or whitespace only."""
    return value is None or not value.strip()


def to_bool(value: Union[str, bool, None]) -> Optional[bool]:
    """Convert a string representation of truth to True or False.

    :param value: value to convert
    :return: boolean value or None if the value is None
    """
    if value is None or isinstance(value, bool):
        return value
    if value in {'TRUE', 'True', 'true', '1', 'Y', 'y', 1}:
        return True
    if value in {'FALSE', 'False', 'false', '0', 'N', 'n', 0}:
        return False
    raise ValueError('Invalid boolean value {}.'.format(value))


def split_key_value(attribute: Optional[str]) -> Optional[ItemAttribute]:
    """Parse a string representation of an attribute into an ItemAttribute.

    E.G.: 'key:value', ' :value', 'tag'. The string is split on every colon,
    so anything with more than one colon is not an attribute.

    :param attribute: string representation of an attribute
    :return: ItemAttribute instance or None if the string is not an attribute
    """
    if attribute is None or not attribute.strip():
        return None
    key_value = attribute.split(KEY_VALUE_SPLITTER)
    if len(key_value) == 1:
        key, value = None, key_value[0].strip()
    elif len(key_value) == 2:
        key, value = key_value[0].strip() or None, key_value[1].strip()
    else:
        logger.debug('Failed to process "%s" attribute, too many "%s" separators.',
                     attribute, KEY_VALUE_SPLITTER)
        return None
    if not value:
        logger.debug('Failed to process "%s" attribute, attribute value should not be empty.', attribute)
        return None
    return ItemAttribute(key, value)


def parse_as_set(raw_attributes: Optional[str]) -> Set[ItemAttribute]:
    """Parse attribute string.

    Input attribute string should have format:
    build:4r3wf234;attributeKey:attributeValue;attributeValue2;attributeValue3

    Output set will contain:
    (build, 4r3wf234), (attributeKey, attributeValue), (None, attributeValue2),
    (None, attributeValue3)

    :param raw_attributes: attributes string
    :return: set of ItemAttribute
    """
    if raw_attributes is None:
        return set()
    attributes = set()
    for segment in raw_attributes.strip().split(ATTRIBUTES_SPLITTER):
        attribute = split_key_value(segment)
        if attribute is not None:
            attributes.add(attribute)
    return attributes
