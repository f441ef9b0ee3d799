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

from oslo_log import log

import oscompute
from oscompute.compute import _client
from oscompute.compute import _image
from oscompute.compute import _keypair
from oscompute.compute import _metadata
from oscompute.compute import _page
from oscompute.compute import _reference
from oscompute.compute import _server
from oscompute.compute import config
from oscompute import config as _global_config
from oscompute import http
from oscompute import identity


LOG = log.getLogger(__name__)

IdentifierType = _client.IdentifierType


class ComputeService(object):
    """Blocking access to the Compute API

    Every method runs the matching coroutine of the asynchronous
    ComputeApiBuilder (available as 'api') until it completes. Objects
    returned are owned by 'api', so their own blocking and asynchronous
    methods keep working.
    """

    def __init__(self,
                 authentication_provider: typing.Optional[
                     identity.AuthenticationProvider] = None,
                 region: typing.Optional[str] = None,
                 microversion: typing.Optional[str] = None,
                 service_type: typing.Union[identity.ServiceType, str] =
                 config.DEFAULT_SERVICE_TYPE,
                 session: typing.Optional[http.HttpSession] = None,
                 api: typing.Optional[_client.ComputeApiBuilder] = None,
                 **params):
        if api is not None:
            self.api = oscompute.check_valid_type(api,
                                                  _client.ComputeApiBuilder)
            return
        self.api = _client.ComputeApiBuilder(
            service_type=service_type,
            authentication_provider=authentication_provider,
            region=region,
            microversion=microversion,
            session=session,
            **params)

    def __repr__(self):
        return f"ComputeService(api={self.api!r})"

    # servers

    def list_server_summaries(self, options=None, **filters) -> \
            _page.Page[_reference.ServerReference]:
        return oscompute.run_sync(
            self.api.list_server_summaries(options, **filters))

    def list_servers(self, options=None, **filters) -> \
            _page.Page[_server.Server]:
        return oscompute.run_sync(self.api.list_servers(options, **filters))

    def get_server(self, server_id: IdentifierType) -> _server.Server:
        return oscompute.run_sync(self.api.get_server(server_id))

    def delete_server(self, server_id: IdentifierType):
        return oscompute.run_sync(self.api.delete_server(server_id))

    def wait_for_server_status(self, server_id: IdentifierType, status,
                               timeout: oscompute.Seconds = None,
                               interval: oscompute.Seconds = None) -> \
            _server.Server:
        return oscompute.run_sync(self.api.wait_for_server_status(
            server_id, status, timeout=timeout, interval=interval))

    def get_vnc_console(self, server_id: IdentifierType,
                        console_type=_server.RemoteConsoleType.NOVNC) -> \
            _server.RemoteConsole:
        return oscompute.run_sync(self.api.get_vnc_console(server_id,
                                                           console_type))

    def get_server_metadata(self, server_id: IdentifierType) -> \
            _metadata.ServerMetadata:
        return oscompute.run_sync(self.api.get_server_metadata(server_id))

    def update_server_metadata(self, server_id: IdentifierType, metadata,
                               overwrite=False) -> _metadata.ServerMetadata:
        return oscompute.run_sync(self.api.update_server_metadata(
            server_id, metadata, overwrite=overwrite))

    def get_server_metadata_item(self, server_id: IdentifierType,
                                 key: str) -> str:
        return oscompute.run_sync(self.api.get_server_metadata_item(
            server_id, key))

    def delete_server_metadata_item(self, server_id: IdentifierType,
                                    key: str):
        return oscompute.run_sync(self.api.delete_server_metadata_item(
            server_id, key))

    # images

    def list_image_summaries(self, options=None, **filters) -> \
            _page.Page[_reference.ImageReference]:
        return oscompute.run_sync(
            self.api.list_image_summaries(options, **filters))

    def list_images(self, options=None, **filters) -> \
            _page.Page[_image.Image]:
        return oscompute.run_sync(self.api.list_images(options, **filters))

    def get_image(self, image_id: IdentifierType) -> _image.Image:
        return oscompute.run_sync(self.api.get_image(image_id))

    def delete_image(self, image_id: IdentifierType):
        return oscompute.run_sync(self.api.delete_image(image_id))

    def wait_for_image_status(self, image_id: IdentifierType, status,
                              timeout: oscompute.Seconds = None,
                              interval: oscompute.Seconds = None) -> \
            _image.Image:
        return oscompute.run_sync(self.api.wait_for_image_status(
            image_id, status, timeout=timeout, interval=interval))

    def get_image_metadata(self, image_id: IdentifierType) -> \
            _metadata.ImageMetadata:
        return oscompute.run_sync(self.api.get_image_metadata(image_id))

    def update_image_metadata(self, image_id: IdentifierType, metadata,
                              overwrite=False) -> _metadata.ImageMetadata:
        return oscompute.run_sync(self.api.update_image_metadata(
            image_id, metadata, overwrite=overwrite))

    def get_image_metadata_item(self, image_id: IdentifierType,
                                key: str) -> str:
        return oscompute.run_sync(self.api.get_image_metadata_item(
            image_id, key))

    def delete_image_metadata_item(self, image_id: IdentifierType, key: str):
        return oscompute.run_sync(self.api.delete_image_metadata_item(
            image_id, key))

    # key pairs

    def create_key_pair(self, definition: _keypair.KeyPairDefinition) -> \
            _keypair.KeyPair:
        return oscompute.run_sync(self.api.create_key_pair(definition))

    def list_key_pairs(self) -> _page.Page[_keypair.KeyPair]:
        return oscompute.run_sync(self.api.list_key_pairs())

    def get_key_pair(self, name: IdentifierType) -> _keypair.KeyPair:
        return oscompute.run_sync(self.api.get_key_pair(name))

    def delete_key_pair(self, name: IdentifierType):
        return oscompute.run_sync(self.api.delete_key_pair(name))


def get_compute_api(
        authentication_provider: typing.Optional[
            identity.AuthenticationProvider] = None,
        conf=None,
        session: typing.Optional[http.HttpSession] = None) -> \
        _client.ComputeApiBuilder:
    """Creates a ComputeApiBuilder from the 'compute' config options

    Without an authentication provider, a Keystone one is created from
    default credentials (OS_* environment variables or 'keystone' options).
    """
    if conf is None:
        conf = _global_config.oscompute_config()
    compute_conf = conf.compute
    if authentication_provider is None:
        authentication_provider = identity.KeystoneAuthenticationProvider()
    if session is None:
        session = http.HttpSession(timeout=compute_conf.request_timeout,
                                   verify=compute_conf.verify)
    service_type = identity.ServiceType(type=compute_conf.service_type,
                                        name=compute_conf.service_name)
    LOG.debug(f"Create Compute API client (region="
              f"{compute_conf.region_name!r}, service_type={service_type})")
    return _client.ComputeApiBuilder(
        service_type=service_type,
        authentication_provider=authentication_provider,
        region=compute_conf.region_name,
        microversion=compute_conf.microversion,
        session=session,
        interface=compute_conf.interface,
        wait_timeout=compute_conf.wait_timeout,
        wait_interval=compute_conf.wait_interval)


def get_compute_service(
        authentication_provider: typing.Optional[
            identity.AuthenticationProvider] = None,
        conf=None,
        session: typing.Optional[http.HttpSession] = None) -> ComputeService:
    return ComputeService(api=get_compute_api(
        authentication_provider=authentication_provider,
        conf=conf,
        session=session))
