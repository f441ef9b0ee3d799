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

import httpx
from oslo_log import log

from oscompute.common import _exception as _common
from oscompute.http import _exception


LOG = log.getLogger(__name__)

JSON_HEADERS = {'Accept': 'application/json'}

Headers = typing.Dict[str, str]
QueryParams = typing.Dict[str, typing.Any]


class HttpSession(object):
    """Sends HTTP requests with an asynchronous httpx client

    A new client is opened for every request so the session can be used from
    any event loop (including the short lived ones created for blocking
    calls). Proxy settings are taken from environment variables.
    """

    def __init__(self,
                 transport: typing.Optional[httpx.AsyncBaseTransport] = None,
                 timeout: typing.Optional[float] = None,
                 verify: typing.Union[bool, str] = True):
        self.transport = transport
        self.timeout = timeout
        self.verify = verify

    def _get_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport,
                                 timeout=self.timeout,
                                 verify=self.verify,
                                 trust_env=True)

    async def send(self,
                   method: str,
                   url: str,
                   headers: typing.Optional[Headers] = None,
                   params: typing.Optional[QueryParams] = None,
                   json: typing.Any = None,
                   check_status=True) -> httpx.Response:
        headers = dict(JSON_HEADERS, **(headers or {}))
        LOG.debug(f"Sending HTTP request: {method} {url} (params={params})")
        async with self._get_client() as client:
            response = await client.request(method, url,
                                            headers=headers,
                                            params=params,
                                            json=json)
        LOG.debug(f"Got HTTP response: {method} {response.url} -> "
                  f"{response.status_code}")
        if check_status:
            _exception.raise_for_status(response)
        return response


def http_session(session: typing.Optional[HttpSession] = None,
                 **params) -> HttpSession:
    if session is None:
        return HttpSession(**params)
    return _common.check_valid_type(session, HttpSession)
