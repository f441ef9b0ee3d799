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

import asyncio
import time as _time
import typing

from oscompute.common import _exception


Seconds = typing.Optional[float]


class SecondsValueError(_exception.OSComputeException):
    message = "Invalid seconds value: {seconds}"


ToSecondsValue = typing.Union[float, int, str, bytearray, None]


def to_seconds(value: ToSecondsValue) -> Seconds:
    if value is None:
        return None
    else:
        return to_seconds_float(value)


def to_seconds_float(value: ToSecondsValue) -> float:
    try:
        return value and max(0., float(value)) or 0.
    except (TypeError, ValueError) as ex:
        raise SecondsValueError(seconds=value) from ex


def time() -> float:
    return _time.time()


async def sleep(seconds: Seconds):
    await asyncio.sleep(to_seconds_float(seconds))
