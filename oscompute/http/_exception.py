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

import httpx

from oscompute.common import _exception


class HttpError(_exception.OSComputeException):
    message = ("{method} {url} failed with status {status_code}: "
               "{body}")


class HttpNotFound(HttpError):
    pass


def raise_for_status(response: httpx.Response) -> httpx.Response:
    if response.is_success:
        return response

    request = response.request
    if response.status_code == 404:
        error_class = HttpNotFound
    else:
        error_class = HttpError
    raise error_class(method=request.method,
                      url=str(request.url),
                      status_code=response.status_code,
                      body=response.text)
