# Copyright 2026 Red Hat
#
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.
from __future__ import absolute_import

import typing
import uuid


class Identifier(object):
    """Opaque resource key

    It can be created from a string or an UUID and compares equal to other
    identifiers (and plain strings) carrying the same value.
    """

    __slots__ = ('_value',)

    def __init__(self, value: typing.Union['Identifier', str, uuid.UUID]):
        if isinstance(value, Identifier):
            value = value._value
        elif isinstance(value, uuid.UUID):
            value = str(value)
        elif not isinstance(value, str):
            raise TypeError(f"Invalid identifier value: {value!r}")
        if not value:
            raise ValueError("Identifier value cannot be empty")
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError("Identifier objects are immutable")

    @property
    def value(self) -> str:
        return self._value

    def __str__(self):
        return self._value

    def __repr__(self):
        return f"Identifier({self._value!r})"

    def __eq__(self, other):
        if isinstance(other, Identifier):
            return self._value == other._value
        if isinstance(other, uuid.UUID):
            return self._value == str(other)
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._value)


IdentifierType = typing.Union[Identifier, str, uuid.UUID]


def identifier(value: typing.Optional[IdentifierType]) -> \
        typing.Optional[Identifier]:
    if value is None or isinstance(value, Identifier):
        return value
    return Identifier(value)
