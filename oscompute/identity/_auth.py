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

import abc
import typing

from oslo_log import log

import oscompute
from oscompute.identity import _credentials
from oscompute.identity import _session


LOG = log.getLogger(__name__)


class NoSuchEndpoint(oscompute.OSComputeException):
    message = ("no '{interface}' endpoint found for service "
               "'{service_type}' in region '{region}'")


class ServiceType(typing.NamedTuple):
    """Identifies a service in the service catalog"""
    type: str
    name: typing.Optional[str] = None


class AuthenticationProvider(abc.ABC):
    """Supplies credentials and service endpoints on demand"""

    @abc.abstractmethod
    async def get_token(self) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_endpoint(self,
                           service_type: ServiceType,
                           region: str,
                           interface: str = 'public') -> str:
        raise NotImplementedError


class StaticAuthenticationProvider(AuthenticationProvider):
    """Always answers with the same token and endpoint"""

    def __init__(self, token: str, endpoint: str):
        self.token = token
        self.endpoint = endpoint

    async def get_token(self) -> str:
        return self.token

    async def get_endpoint(self,
                           service_type: ServiceType,
                           region: str,
                           interface: str = 'public') -> str:
        return self.endpoint

    def __repr__(self):
        return f"StaticAuthenticationProvider(endpoint={self.endpoint!r})"


class KeystoneAuthenticationProvider(AuthenticationProvider):
    """Gets tokens and endpoints from a keystoneauth1 session

    The session takes care of token renewal and caches the service catalog.
    Its blocking calls are run in the default executor.
    """

    def __init__(self,
                 session: typing.Optional[_session.KeystoneSession] = None,
                 credentials: typing.Optional[
                     _credentials.KeystoneCredentials] = None):
        if session is None:
            session = _session.create_keystone_session(credentials)
        self.session = oscompute.check_valid_type(
            session, *_session.KEYSTONE_SESSION_CLASSES)

    async def get_token(self) -> str:
        return await oscompute.run_blocking(self.session.get_token)

    async def get_endpoint(self,
                           service_type: ServiceType,
                           region: str,
                           interface: str = 'public') -> str:
        def _get_endpoint():
            return self.session.get_endpoint(
                service_type=service_type.type,
                service_name=service_type.name,
                region_name=region,
                interface=interface)

        endpoint = await oscompute.run_blocking(_get_endpoint)
        if not endpoint:
            raise NoSuchEndpoint(service_type=service_type.type,
                                 region=region,
                                 interface=interface)
        return endpoint


class ServiceUrlBuilder(object):

    def __init__(self,
                 service_type: ServiceType,
                 authentication_provider: AuthenticationProvider,
                 region: str,
                 interface: str = 'public'):
        if service_type is None:
            raise TypeError("service_type cannot be None")
        if authentication_provider is None:
            raise TypeError("authentication_provider cannot be None")
        if not region:
            raise ValueError("region cannot be None or empty")
        self.service_type = oscompute.check_valid_type(service_type,
                                                       ServiceType)
        self.authentication_provider = oscompute.check_valid_type(
            authentication_provider, AuthenticationProvider)
        self.region = region
        self.interface = interface

    async def get_endpoint(self) -> str:
        endpoint = await self.authentication_provider.get_endpoint(
            service_type=self.service_type,
            region=self.region,
            interface=self.interface)
        LOG.debug(f"Got '{self.service_type.type}' endpoint for region "
                  f"'{self.region}': {endpoint}")
        return endpoint
