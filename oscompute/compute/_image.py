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

from oscompute.compute import _identifier
from oscompute.compute import _metadata
from oscompute.compute import _reference
from oscompute.compute import _resource
from oscompute.compute import _serialization


IMAGE_ROOT = 'image'
IMAGES_ROOT = 'images'


class ImageStatus(enum.Enum):
    UNKNOWN = 'UNKNOWN'
    ACTIVE = 'ACTIVE'
    SAVING = 'SAVING'
    DELETED = 'DELETED'
    ERROR = 'ERROR'

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


class ImageType(enum.Enum):
    SNAPSHOT = 'snapshot'
    BASE = 'base'


class ImageListOptions(typing.NamedTuple):
    """Filters of image listings

    Only the filters with a value are sent to the server.
    """
    name: typing.Optional[str] = None
    server_id: typing.Optional[_identifier.IdentifierType] = None
    min_memory: typing.Optional[int] = None
    min_disk: typing.Optional[int] = None
    last_modified: typing.Optional[datetime.datetime] = None
    type: typing.Optional[ImageType] = None
    starting_at: typing.Optional[_identifier.IdentifierType] = None
    page_size: typing.Optional[int] = None

    def to_query_params(self) -> typing.Dict[str, typing.Any]:
        image_type = self.type
        if image_type is not None:
            image_type = ImageType(image_type).value
        return {
            'name': self.name,
            'server': self.server_id,
            'minRam': self.min_memory,
            'minDisk': self.min_disk,
            'changes-since': _serialization.format_datetime(
                self.last_modified),
            'type': image_type,
            'marker': self.starting_at,
            'limit': self.page_size}


class Image(_resource.StatusResource, _reference.ImageReference):

    status_class = ImageStatus
    json_fields = ('id', 'name', 'links', 'status', 'progress', 'minRam',
                   'minDisk', 'created', 'updated', 'metadata', 'server')
    state_fields = ('name', 'links', 'status', 'progress', 'min_memory',
                    'min_disk', 'created', 'updated', 'metadata', 'server')

    def __init__(self, id=None, name=None, links=(),
                 status: ImageStatus = ImageStatus.UNKNOWN,
                 progress: typing.Optional[int] = None,
                 min_memory: typing.Optional[int] = None,
                 min_disk: typing.Optional[int] = None,
                 created: typing.Optional[datetime.datetime] = None,
                 updated: typing.Optional[datetime.datetime] = None,
                 metadata: typing.Optional[typing.Mapping[str, str]] = None,
                 server: typing.Optional[_reference.ServerReference] = None,
                 extra_data=None, owner=None):
        # pylint: disable=redefined-builtin
        super(Image, self).__init__(id=id, name=name, links=links,
                                    extra_data=extra_data, owner=owner)
        self.status = ImageStatus(status)
        self.progress = progress
        self.min_memory = min_memory
        self.min_disk = min_disk
        self.created = created
        self.updated = updated
        if not isinstance(metadata, _metadata.ImageMetadata):
            metadata = _metadata.ImageMetadata(items=metadata,
                                               resource_id=self.id,
                                               owner=owner)
        self.metadata = metadata
        self.server = server

    @classmethod
    def from_json(cls, data: _serialization.JsonObject, owner=None):
        fields, extra = _serialization.split_fields(data, cls.json_fields)
        resource = cls(
            id=fields.get('id'),
            name=fields.get('name'),
            links=_serialization.parse_links(fields.get('links')),
            status=ImageStatus(fields.get('status')),
            progress=fields.get('progress'),
            min_memory=fields.get('minRam'),
            min_disk=fields.get('minDisk'),
            created=_serialization.parse_datetime(fields.get('created')),
            updated=_serialization.parse_datetime(fields.get('updated')),
            metadata=fields.get('metadata'),
            server=_reference.optional_reference(
                _reference.ServerReference, fields.get('server'), owner),
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
            'minRam': self.min_memory,
            'minDisk': self.min_disk,
            'created': _serialization.format_datetime(self.created),
            'updated': _serialization.format_datetime(self.updated),
            'metadata': dict(self.metadata),
            'server': self.server and self.server.to_json()},
            keep_null=self.null_fields)

    async def _fetch_async(self) -> 'Image':
        owner = self.require_owner('refresh')
        return await owner.get_image(self.id)

    async def _delete_async(self):
        owner = self.require_owner('delete')
        await owner.delete_image(self.id)


def image_from_json(data, owner=None) -> Image:
    return Image.from_json(_serialization.unwrap(data, IMAGE_ROOT),
                           owner=owner)
