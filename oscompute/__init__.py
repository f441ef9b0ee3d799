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

from oscompute.common import _asyncio
from oscompute.common import _exception
from oscompute.common import _retry
from oscompute.common import _time


run_blocking = _asyncio.run_blocking
run_sync = _asyncio.run_sync

OSComputeException = _exception.OSComputeException
InvalidResponse = _exception.InvalidResponse
OwnerNotFound = _exception.OwnerNotFound
check_valid_type = _exception.check_valid_type

retry = _retry.retry
retry_attempt = _retry.retry_attempt
Retry = _retry.Retry
RetryAttempt = _retry.RetryAttempt
RetryException = _retry.RetryException
RetryCountLimitError = _retry.RetryCountLimitError
RetryLimitError = _retry.RetryLimitError
RetryTimeLimitError = _retry.RetryTimeLimitError

Seconds = _time.Seconds
SecondsValueError = _time.SecondsValueError
to_seconds = _time.to_seconds
