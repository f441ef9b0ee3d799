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

import functools
import typing
from urllib import parse

import httpx
from oslo_log import log

import oscompute
from oscompute.compute import _identifier
from oscompute.compute import _image
from oscompute.compute import _keypair
from oscompute.compute import _metadata
from oscompute.compute import _page
from oscompute.compute import _reference
from oscompute.compute import _serialization
from oscompute.compute import _server
from oscompute.compute import config
from oscompute import http
from oscompute import identity


LOG = log.getLogger(__name__)

MICROVERSION_HEADER = 'X-OpenStack-Nova-API-Version'
AUTH_TOKEN_HEADER = 'X-Auth-Token'

DEFAULT_WAIT_INTERVAL = 5.

IdentifierType = _identifier.IdentifierType
MetadataType = typing.Mapping[str, str]


class PreparedRequest(typing.NamedTuple):
    method: str
    url: str
    headers: typing.Dict[str, str]
    json: typing.Any = None


def compose_url(endpoint: str,
                *segments: typing.Any,
                params: typing.Optional[typing.Dict[str, typing.Any]] = None) \
        -> str:
    url = endpoint.rstrip('/')
    for segment in segments:
        url += '/' + parse.quote(str(segment), safe='')
    params = {name: str(value)
              for name, value in (params or {}).items()
              if value is not None and value != ''}
    if params:
        url = str(httpx.URL(url, params=params))
    return url


def parse_json(response: httpx.Response) -> typing.Any:
    try:
        return response.json()
    except ValueError as ex:
        raise oscompute.InvalidResponse(
            reason=f"body of {response.request.method} {response.url} is "
                   f"not valid JSON: {response.text!r}") from ex


class ComputeApiBuilder(object):
    """Builds requests to the Compute API v2.1 and sends them

    Every operation comes with a 'build_*' method returning the prepared
    request (or URL) so that callers can customize it before sending.
    Objects decoded from responses get this builder as their owner.
    """

    microversion_header = MICROVERSION_HEADER

    def __init__(self,
                 service_type: typing.Union[identity.ServiceType, str, None],
                 authentication_provider: identity.AuthenticationProvider,
                 region: str,
                 microversion: typing.Optional[str] = None,
                 session: typing.Optional[http.HttpSession] = None,
                 interface: str = 'public',
                 wait_timeout: oscompute.Seconds = None,
                 wait_interval: oscompute.Seconds = DEFAULT_WAIT_INTERVAL):
        if isinstance(service_type, str):
            service_type = identity.ServiceType(type=service_type)
        self.url_builder = identity.ServiceUrlBuilder(
            service_type=service_type,
            authentication_provider=authentication_provider,
            region=region,
            interface=interface)
        self.authentication_provider = authentication_provider
        self.microversion = microversion or config.DEFAULT_MICROVERSION
        self.session = http.http_session(session)
        self.wait_timeout = wait_timeout
        self.wait_interval = wait_interval

    def __repr__(self):
        return (f"ComputeApiBuilder(region={self.url_builder.region!r}, "
                f"microversion={self.microversion!r})")

    # --- requests -----------------------------------------------------------

    async def build_url(self, *segments, params=None) -> str:
        endpoint = await self.url_builder.get_endpoint()
        return compose_url(endpoint, *segments, params=params)

    async def prepare_request(self, method: str, url: str,
                              json: typing.Any = None) -> PreparedRequest:
        token = await self.authentication_provider.get_token()
        headers = {AUTH_TOKEN_HEADER: token,
                   self.microversion_header: self.microversion}
        return PreparedRequest(method=method, url=url, headers=headers,
                               json=json)

    async def _build_request(self, method: str, *segments, params=None,
                             json=None) -> PreparedRequest:
        url = await self.build_url(*segments, params=params)
        return await self.prepare_request(method, url, json=json)

    async def send_request(self, request: PreparedRequest,
                           ignore_not_found=False) -> \
            typing.Optional[httpx.Response]:
        try:
            return await self.session.send(method=request.method,
                                           url=request.url,
                                           headers=request.headers,
                                           json=request.json)
        except http.HttpNotFound:
            if not ignore_not_found:
                raise
            LOG.debug(f"Resource not found: {request.method} {request.url}")
            return None

    async def send_json_request(self, request: PreparedRequest) -> \
            typing.Any:
        response = await self.send_request(request)
        return parse_json(response)

    async def _list_page(self, url: str,
                         decode_item: typing.Callable,
                         root: str) -> _page.Page:
        request = await self.prepare_request('GET', url)
        data = await self.send_json_request(request)
        items, links = _serialization.unwrap_collection(data, root)
        next_page_handler = functools.partial(self._list_page,
                                              decode_item=decode_item,
                                              root=root)
        return _page.Page(items=[decode_item(item, owner=self)
                                 for item in items],
                          links=links,
                          owner=self,
                          next_page_handler=next_page_handler)

    # --- servers ------------------------------------------------------------

    async def build_list_servers_url(
            self,
            options: typing.Optional[_server.ServerListOptions] = None,
            detailed=True) -> str:
        options = options or _server.ServerListOptions()
        segments = ['servers', 'detail'] if detailed else ['servers']
        return await self.build_url(*segments,
                                    params=options.to_query_params())

    async def list_server_summaries(
            self,
            options: typing.Optional[_server.ServerListOptions] = None,
            **filters) -> _page.Page[_reference.ServerReference]:
        options = list_options(_server.ServerListOptions, options, filters)
        url = await self.build_list_servers_url(options, detailed=False)
        return await self.list_server_summaries_from_url(url)

    async def list_server_summaries_from_url(self, url: str) -> \
            _page.Page[_reference.ServerReference]:
        return await self._list_page(
            url, decode_item=_reference.ServerReference.from_json,
            root=_server.SERVERS_ROOT)

    async def list_servers(
            self,
            options: typing.Optional[_server.ServerListOptions] = None,
            **filters) -> _page.Page[_server.Server]:
        options = list_options(_server.ServerListOptions, options, filters)
        url = await self.build_list_servers_url(options, detailed=True)
        return await self.list_servers_from_url(url)

    async def list_servers_from_url(self, url: str) -> \
            _page.Page[_server.Server]:
        return await self._list_page(url,
                                     decode_item=_server.Server.from_json,
                                     root=_server.SERVERS_ROOT)

    async def build_get_server_request(self, server_id: IdentifierType) -> \
            PreparedRequest:
        return await self._build_request('GET', 'servers', server_id)

    async def get_server(self, server_id: IdentifierType) -> _server.Server:
        request = await self.build_get_server_request(server_id)
        data = await self.send_json_request(request)
        return _server.server_from_json(data, owner=self)

    async def build_delete_server_request(self, server_id: IdentifierType) \
            -> PreparedRequest:
        return await self._build_request('DELETE', 'servers', server_id)

    async def delete_server(self, server_id: IdentifierType):
        request = await self.build_delete_server_request(server_id)
        LOG.info(f"Deleting server {server_id}")
        await self.send_request(request, ignore_not_found=True)

    async def wait_for_server_status(self,
                                     server_id: IdentifierType,
                                     status,
                                     timeout: oscompute.Seconds = None,
                                     interval: oscompute.Seconds = None) -> \
            _server.Server:
        server = _server.Server(id=server_id, owner=self)
        return await server.wait_for_status_async(status, timeout=timeout,
                                                  interval=interval)

    async def build_get_vnc_console_request(
            self, server_id: IdentifierType,
            console_type=_server.RemoteConsoleType.NOVNC) -> PreparedRequest:
        console_type = _server.RemoteConsoleType(console_type)
        body = {'os-getVNCConsole': {'type': console_type.value}}
        return await self._build_request('POST', 'servers', server_id,
                                         'action', json=body)

    async def get_vnc_console(self, server_id: IdentifierType,
                              console_type=_server.RemoteConsoleType.NOVNC) \
            -> _server.RemoteConsole:
        request = await self.build_get_vnc_console_request(server_id,
                                                           console_type)
        data = await self.send_json_request(request)
        return _server.RemoteConsole.from_json(data)

    async def build_get_server_metadata_request(
            self, server_id: IdentifierType) -> PreparedRequest:
        return await self._build_request('GET', 'servers', server_id,
                                         'metadata')

    async def get_server_metadata(self, server_id: IdentifierType) -> \
            _metadata.ServerMetadata:
        request = await self.build_get_server_metadata_request(server_id)
        data = await self.send_json_request(request)
        return _metadata.ServerMetadata.from_json(data, resource_id=server_id,
                                                  owner=self)

    async def build_update_server_metadata_request(
            self, server_id: IdentifierType, metadata: MetadataType,
            overwrite=False) -> PreparedRequest:
        return await self._build_request(
            update_metadata_method(overwrite), 'servers', server_id,
            'metadata', json=metadata_to_json(metadata))

    async def update_server_metadata(self, server_id: IdentifierType,
                                     metadata: MetadataType,
                                     overwrite=False) -> \
            _metadata.ServerMetadata:
        request = await self.build_update_server_metadata_request(
            server_id, metadata, overwrite=overwrite)
        data = await self.send_json_request(request)
        return _metadata.ServerMetadata.from_json(data, resource_id=server_id,
                                                  owner=self)

    async def get_server_metadata_item(self, server_id: IdentifierType,
                                       key: str) -> str:
        request = await self._build_request('GET', 'servers', server_id,
                                            'metadata', key)
        data = await self.send_json_request(request)
        return metadata_item_from_json(data, key)

    async def delete_server_metadata_item(self, server_id: IdentifierType,
                                          key: str):
        request = await self._build_request('DELETE', 'servers', server_id,
                                            'metadata', key)
        await self.send_request(request)

    # --- images -------------------------------------------------------------

    async def build_list_images_url(
            self,
            options: typing.Optional[_image.ImageListOptions] = None,
            detailed=True) -> str:
        options = options or _image.ImageListOptions()
        segments = ['images', 'detail'] if detailed else ['images']
        return await self.build_url(*segments,
                                    params=options.to_query_params())

    async def list_image_summaries(
            self,
            options: typing.Optional[_image.ImageListOptions] = None,
            **filters) -> _page.Page[_reference.ImageReference]:
        options = list_options(_image.ImageListOptions, options, filters)
        url = await self.build_list_images_url(options, detailed=False)
        return await self.list_image_summaries_from_url(url)

    async def list_image_summaries_from_url(self, url: str) -> \
            _page.Page[_reference.ImageReference]:
        return await self._list_page(
            url, decode_item=_reference.ImageReference.from_json,
            root=_image.IMAGES_ROOT)

    async def list_images(
            self,
            options: typing.Optional[_image.ImageListOptions] = None,
            **filters) -> _page.Page[_image.Image]:
        options = list_options(_image.ImageListOptions, options, filters)
        url = await self.build_list_images_url(options, detailed=True)
        return await self.list_images_from_url(url)

    async def list_images_from_url(self, url: str) -> \
            _page.Page[_image.Image]:
        return await self._list_page(url,
                                     decode_item=_image.Image.from_json,
                                     root=_image.IMAGES_ROOT)

    async def build_get_image_request(self, image_id: IdentifierType) -> \
            PreparedRequest:
        return await self._build_request('GET', 'images', image_id)

    async def get_image(self, image_id: IdentifierType) -> _image.Image:
        request = await self.build_get_image_request(image_id)
        data = await self.send_json_request(request)
        return _image.image_from_json(data, owner=self)

    async def build_delete_image_request(self, image_id: IdentifierType) -> \
            PreparedRequest:
        return await self._build_request('DELETE', 'images', image_id)

    async def delete_image(self, image_id: IdentifierType):
        request = await self.build_delete_image_request(image_id)
        LOG.info(f"Deleting image {image_id}")
        await self.send_request(request, ignore_not_found=True)

    async def wait_for_image_status(self,
                                    image_id: IdentifierType,
                                    status,
                                    timeout: oscompute.Seconds = None,
                                    interval: oscompute.Seconds = None) -> \
            _image.Image:
        image = _image.Image(id=image_id, owner=self)
        return await image.wait_for_status_async(status, timeout=timeout,
                                                 interval=interval)

    async def build_get_image_metadata_request(
            self, image_id: IdentifierType) -> PreparedRequest:
        return await self._build_request('GET', 'images', image_id,
                                         'metadata')

    async def get_image_metadata(self, image_id: IdentifierType) -> \
            _metadata.ImageMetadata:
        request = await self.build_get_image_metadata_request(image_id)
        data = await self.send_json_request(request)
        return _metadata.ImageMetadata.from_json(data, resource_id=image_id,
                                                 owner=self)

    async def build_update_image_metadata_request(
            self, image_id: IdentifierType, metadata: MetadataType,
            overwrite=False) -> PreparedRequest:
        return await self._build_request(
            update_metadata_method(overwrite), 'images', image_id,
            'metadata', json=metadata_to_json(metadata))

    async def update_image_metadata(self, image_id: IdentifierType,
                                    metadata: MetadataType,
                                    overwrite=False) -> \
            _metadata.ImageMetadata:
        request = await self.build_update_image_metadata_request(
            image_id, metadata, overwrite=overwrite)
        data = await self.send_json_request(request)
        return _metadata.ImageMetadata.from_json(data, resource_id=image_id,
                                                 owner=self)

    async def get_image_metadata_item(self, image_id: IdentifierType,
                                      key: str) -> str:
        request = await self._build_request('GET', 'images', image_id,
                                            'metadata', key)
        data = await self.send_json_request(request)
        return metadata_item_from_json(data, key)

    async def delete_image_metadata_item(self, image_id: IdentifierType,
                                         key: str):
        request = await self._build_request('DELETE', 'images', image_id,
                                            'metadata', key)
        await self.send_request(request)

    # --- key pairs ----------------------------------------------------------

    async def build_create_key_pair_request(
            self, definition: _keypair.KeyPairDefinition) -> PreparedRequest:
        oscompute.check_valid_type(definition, _keypair.KeyPairDefinition)
        return await self._build_request('POST', 'os-keypairs',
                                         json=definition.to_json())

    async def create_key_pair(self, definition: _keypair.KeyPairDefinition) \
            -> _keypair.KeyPair:
        request = await self.build_create_key_pair_request(definition)
        LOG.info(f"Creating key pair {definition.name}")
        data = await self.send_json_request(request)
        return _keypair.keypair_from_json(data, owner=self)

    async def list_key_pairs(self) -> _page.Page[_keypair.KeyPair]:
        url = await self.build_url('os-keypairs')
        return await self.list_key_pairs_from_url(url)

    async def list_key_pairs_from_url(self, url: str) -> \
            _page.Page[_keypair.KeyPair]:
        # Listed key pairs are wrapped one by one under a 'keypair' key
        return await self._list_page(url,
                                     decode_item=_keypair.keypair_from_json,
                                     root=_keypair.KEYPAIRS_ROOT)

    async def get_key_pair(self, name: IdentifierType) -> _keypair.KeyPair:
        request = await self._build_request('GET', 'os-keypairs', name)
        data = await self.send_json_request(request)
        return _keypair.keypair_from_json(data, owner=self)

    async def delete_key_pair(self, name: IdentifierType):
        request = await self._build_request('DELETE', 'os-keypairs', name)
        LOG.info(f"Deleting key pair {name}")
        await self.send_request(request, ignore_not_found=True)


def list_options(options_class, options, filters):
    if options is None:
        return options_class(**filters)
    if filters:
        raise TypeError(f"Filters {sorted(filters)} can't be given together "
                        f"with {options!r}")
    return oscompute.check_valid_type(options, options_class)


def update_metadata_method(overwrite: bool) -> str:
    # PUT replaces the whole metadata, POST merges given items into it
    return 'PUT' if overwrite else 'POST'


def metadata_to_json(metadata: MetadataType) -> _serialization.JsonObject:
    if isinstance(metadata, _metadata.ResourceMetadata):
        return metadata.to_json()
    return _serialization.wrap(dict(metadata),
                               _metadata.METADATA_ROOT)


def metadata_item_from_json(data, key: str) -> str:
    item = _serialization.unwrap(data, _metadata.METADATA_ITEM_ROOT)
    try:
        return item[key]
    except (KeyError, TypeError) as ex:
        raise oscompute.InvalidResponse(
            reason=f"metadata item '{key}' not found in {data!r}") from ex
