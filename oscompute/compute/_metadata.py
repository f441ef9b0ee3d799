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
from oscompute.compute import _identifier
from oscompute.compute import _resource
from oscompute.compute import _serialization


LOG = log.getLogger(__name__)

METADATA_ROOT = 'metadata'
METADATA_ITEM_ROOT = 'meta'


class ResourceMetadata(dict, _resource.ServiceResource):
    """Key/value metadata of a resource

    Local changes are sent to the server by calling 'push' (or 'push_async'):
    after the call the local content is replaced with the server response.
    """

    def __init__(self,
                 items: typing.Optional[typing.Mapping[str, str]] = None,
                 resource_id: typing.Optional[
                     _identifier.IdentifierType] = None,
                 extra_data=None, owner=None):
        dict.__init__(self, items or {})
        _resource.ServiceResource.__init__(self, extra_data=extra_data,
                                           owner=owner)
        self.resource_id = _identifier.identifier(resource_id)

    def __repr__(self):
        return (f"{type(self).__name__}({dict(self)!r}, "
                f"resource_id={str(self.resource_id)!r})")

    def __eq__(self, other):
        return dict.__eq__(self, other)

    __hash__ = None  # type: ignore

    @classmethod
    def from_json(cls, data, resource_id=None, owner=None):
        items = _serialization.unwrap(data, METADATA_ROOT)
        extra = {k: v for k, v in data.items() if k != METADATA_ROOT}
        return cls(items=items or {}, resource_id=resource_id,
                   extra_data=extra, owner=owner)

    def to_json(self) -> _serialization.JsonObject:
        result = dict(self.extra_data)
        result[METADATA_ROOT] = dict(self)
        return result

    async def _push_async(self, overwrite: bool) -> 'ResourceMetadata':
        raise NotImplementedError

    async def push_async(self, overwrite: bool = False):
        self.require_owner('push')
        if self.resource_id is None:
            raise ValueError(f"{self!r} is not bound to any resource")
        LOG.info(f"Pushing {type(self).__name__} of {self.resource_id} "
                 f"(overwrite={overwrite})")
        result = await self._push_async(overwrite=overwrite)
        self.clear()
        dict.update(self, result)
        self.extra_data = dict(result.extra_data)
        return self

    def push(self, overwrite: bool = False):
        return oscompute.run_sync(self.push_async(overwrite=overwrite))


class ImageMetadata(ResourceMetadata):

    async def _push_async(self, overwrite: bool) -> ResourceMetadata:
        owner = self.require_owner('push')
        return await owner.update_image_metadata(
            self.resource_id, self, overwrite=overwrite)


class ServerMetadata(ResourceMetadata):

    async def _push_async(self, overwrite: bool) -> ResourceMetadata:
        owner = self.require_owner('push')
        return await owner.update_server_metadata(
            self.resource_id, self, overwrite=overwrite)
