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

import oscompute
from oscompute.compute import _resource
from oscompute.compute import _serialization


class ResourceReference(_resource.IdentifiedResource):
    """Lightweight object carrying only the identifier of a resource"""

    json_fields = ('id', 'name', 'links')

    def __init__(self, id=None, name: typing.Optional[str] = None,
                 links: typing.Iterable[_serialization.Link] = (),
                 extra_data=None, owner=None):
        # pylint: disable=redefined-builtin
        super(ResourceReference, self).__init__(id=id, extra_data=extra_data,
                                                owner=owner)
        self.name = name
        self.links = list(links)

    @classmethod
    def from_json(cls, data: _serialization.JsonObject, owner=None):
        fields, extra = _serialization.split_fields(data, cls.json_fields)
        resource = cls(id=fields.get('id'),
                       name=fields.get('name'),
                       links=_serialization.parse_links(fields.get('links')),
                       extra_data=extra,
                       owner=owner)
        resource.null_fields = _serialization.null_fields(fields)
        return resource

    def to_json(self) -> _serialization.JsonObject:
        return _serialization.merge_fields(self.extra_data, {
            'id': self.id and str(self.id),
            'name': self.name,
            'links': _serialization.format_links(self.links)},
            keep_null=self.null_fields)


class ImageReference(ResourceReference):

    async def get_image_async(self):
        owner = self.require_owner('get_image')
        return await owner.get_image(self.id)

    def get_image(self):
        return oscompute.run_sync(self.get_image_async())


class ServerReference(ResourceReference):

    async def get_server_async(self):
        owner = self.require_owner('get_server')
        return await owner.get_server(self.id)

    def get_server(self):
        return oscompute.run_sync(self.get_server_async())


class FlavorReference(ResourceReference):
    pass


def optional_reference(reference_class, data, owner=None):
    # Servers booted from volume report image as an empty string
    if not data:
        return None
    return reference_class.from_json(data, owner=owner)
