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

import datetime
import enum
import typing

import oscompute
from oscompute.compute import _identifier
from oscompute.compute import _metadata
from oscompute.compute import _reference
from oscompute.compute import _resource
from oscompute.compute import _serialization


SERVER_ROOT = 'server'
SERVERS_ROOT = 'servers'
CONSOLE_ROOT = 'console'


class ServerStatus(enum.Enum):
    UNKNOWN = 'UNKNOWN'
    ACTIVE = 'ACTIVE'
    BUILD = 'BUILD'
    DELETED = 'DELETED'
    ERROR = 'ERROR'
    HARD_REBOOT = 'HARD_REBOOT'
    MIGRATING = 'MIGRATING'
    PASSWORD = 'PASSWORD'
    PAUSED = 'PAUSED'
    REBOOT = 'REBOOT'
    REBUILD = 'REBUILD'
    RESCUE = 'RESCUE'
    RESIZE = 'RESIZE'
    REVERT_RESIZE = 'REVERT_RESIZE'
    SHELVED = 'SHELVED'
    SHELVED_OFFLOADED = 'SHELVED_OFFLOADED'
    SHUTOFF = 'SHUTOFF'
    SOFT_DELETED = 'SOFT_DELETED'
    SUSPENDED = 'SUSPENDED'
    VERIFY_RESIZE = 'VERIFY_RESIZE'

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class RemoteConsoleType(enum.Enum):
    NOVNC = 'novnc'
    XVPVNC = 'xvpvnc'


class RemoteConsole(typing.NamedTuple):
    type: str
    url: str

    @classmethod
    def from_json(cls, data) -> 'RemoteConsole':
        console = _serialization.unwrap(data, CONSOLE_ROOT)
        return cls(type=console.get('type'), url=console.get('url'))


class ServerListOptions(typing.NamedTuple):
    name: typing.Optional[str] = None
    status: typing.Optional[ServerStatus] = None
    last_modified: typing.Optional[datetime.datetime] = None
    starting_at: typing.Optional[_identifier.IdentifierType] = None
    page_size: typing.Optional[int] = None

    def to_query_params(self) -> typing.Dict[str, typing.Any]:
        status = self.status
        if status is not None:
            status = ServerStatus(status).value
        return {
            'name': self.name,
            'status': status,
            'changes-since': _serialization.format_datetime(
                self.last_modified),
            'marker': self.starting_at,
            'limit': self.page_size}


class Server(_resource.StatusResource, _reference.ServerReference):

    status_class = ServerStatus
    json_fields = ('id', 'name', 'links', 'status', 'progress', 'image',
                   'flavor', 'addresses', 'metadata', 'created', 'updated',
                   'hostId', 'tenant_id', 'user_id', 'key_name')
    state_fields = ('name', 'links', 'status', 'progress', 'image', 'flavor',
                    'addresses', 'metadata', 'created', 'updated', 'host_id',
                    'tenant_id', 'user_id', 'key_name')

    def __init__(self, id=None, name=None, links=(),
                 status: ServerStatus = ServerStatus.UNKNOWN,
                 progress: typing.Optional[int] = None,
                 image: typing.Optional[_reference.ImageReference] = None,
                 flavor: typing.Optional[_reference.FlavorReference] = None,
                 addresses: typing.Optional[typing.Dict] = None,
                 metadata: typing.Optional[typing.Mapping[str, str]] = None,
                 created: typing.Optional[datetime.datetime] = None,
                 updated: typing.Optional[datetime.datetime] = None,
                 host_id: typing.Optional[str] = None,
                 tenant_id: typing.Optional[str] = None,
                 user_id: typing.Optional[str] = None,
                 key_name: typing.Optional[str] = None,
                 extra_data=None, owner=None):
        # pylint: disable=redefined-builtin
        super(Server, self).__init__(id=id, name=name, links=links,
                                     extra_data=extra_data, owner=owner)
        self.status = ServerStatus(status)
        self.progress = progress
        self.image = image
        self.flavor = flavor
        self.addresses = dict(addresses or {})
        if not isinstance(metadata, _metadata.ServerMetadata):
            metadata = _metadata.ServerMetadata(items=metadata,
                                                resource_id=self.id,
                                                owner=owner)
        self.metadata = metadata
        self.created = created
        self.updated = updated
        self.host_id = host_id
        self.tenant_id = tenant_id
        self.user_id = user_id
        self.key_name = key_name

    @classmethod
    def from_json(cls, data: _serialization.JsonObject, owner=None):
        fields, extra = _serialization.split_fields(data, cls.json_fields)
        resource = cls(
            id=fields.get('id'),
            name=fields.get('name'),
            links=_serialization.parse_links(fields.get('links')),
            status=ServerStatus(fields.get('status')),
            progress=fields.get('progress'),
            image=_reference.optional_reference(
                _reference.ImageReference, fields.get('image'), owner),
            flavor=_reference.optional_reference(
                _reference.FlavorReference, fields.get('flavor'), owner),
            addresses=fields.get('addresses'),
            metadata=fields.get('metadata'),
            created=_serialization.parse_datetime(fields.get('created')),
            updated=_serialization.parse_datetime(fields.get('updated')),
            host_id=fields.get('hostId'),
            tenant_id=fields.get('tenant_id'),
            user_id=fields.get('user_id'),
            key_name=fields.get('key_name'),
            extra_data=extra,
            owner=owner)
        resource.null_fields = _serialization.null_fields(fields)
        return resource

    def to_json(self) -> _serialization.JsonObject:
        return _serialization.merge_fields(self.extra_data, {
            'id': self.id and str(self.id),
            'name': self.name,
            'links': _serialization.format_links(self.links),
            'status': self.status.value,
            'progress': self.progress,
            'image': self.image and self.image.to_json(),
            'flavor': self.flavor and self.flavor.to_json(),
            'addresses': self.addresses,
            'metadata': dict(self.metadata),
            'created': _serialization.format_datetime(self.created),
            'updated': _serialization.format_datetime(self.updated),
            'hostId': self.host_id,
            'tenant_id': self.tenant_id,
            'user_id': self.user_id,
            'key_name': self.key_name},
            keep_null=self.null_fields)

    async def _fetch_async(self) -> 'Server':
        owner = self.require_owner('refresh')
        return await owner.get_server(self.id)

    async def _delete_async(self):
        owner = self.require_owner('delete')
        await owner.delete_server(self.id)

    async def get_vnc_console_async(
            self, console_type=RemoteConsoleType.NOVNC) -> RemoteConsole:
        owner = self.require_owner('get_vnc_console')
        return await owner.get_vnc_console(self.id, console_type)

    def get_vnc_console(self,
                        console_type=RemoteConsoleType.NOVNC) -> RemoteConsole:
        return oscompute.run_sync(self.get_vnc_console_async(console_type))


def server_from_json(data, owner=None) -> Server:
    return Server.from_json(_serialization.unwrap(data, SERVER_ROOT),
                            owner=owner)
