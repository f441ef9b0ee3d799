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


KEYPAIR_ROOT = 'keypair'
KEYPAIRS_ROOT = 'keypairs'


class KeyPairDefinition(typing.NamedTuple):
    """Request to create (or import, when public_key is given) a key pair"""
    name: str
    public_key: typing.Optional[str] = None
    type: typing.Optional[str] = None

    def to_json(self) -> _serialization.JsonObject:
        return _serialization.wrap(
            {k: v for k, v in self._asdict().items() if v is not None},
            KEYPAIR_ROOT)


class KeyPair(_resource.IdentifiedResource):
    """Key pair, identified by its name"""

    json_fields = ('name', 'public_key', 'private_key', 'fingerprint',
                   'user_id', 'type')

    def __init__(self, name=None,
                 public_key: typing.Optional[str] = None,
                 private_key: typing.Optional[str] = None,
                 fingerprint: typing.Optional[str] = None,
                 user_id: typing.Optional[str] = None,
                 type: typing.Optional[str] = None,
                 extra_data=None, owner=None):
        # pylint: disable=redefined-builtin
        super(KeyPair, self).__init__(id=name, extra_data=extra_data,
                                      owner=owner)
        self.public_key = public_key
        self.private_key = private_key
        self.fingerprint = fingerprint
        self.user_id = user_id
        self.type = type

    @property
    def name(self) -> typing.Optional[str]:
        return self.id and str(self.id)

    @classmethod
    def from_json(cls, data: _serialization.JsonObject, owner=None):
        fields, extra = _serialization.split_fields(data, cls.json_fields)
        key_pair = cls(extra_data=extra, owner=owner, **fields)
        key_pair.null_fields = _serialization.null_fields(fields)
        return key_pair

    def to_json(self) -> _serialization.JsonObject:
        return _serialization.merge_fields(self.extra_data, {
            'name': self.name,
            'public_key': self.public_key,
            'private_key': self.private_key,
            'fingerprint': self.fingerprint,
            'user_id': self.user_id,
            'type': self.type},
            keep_null=self.null_fields)

    async def delete_async(self):
        owner = self.require_owner('delete')
        await owner.delete_key_pair(self.id)

    def delete(self):
        return oscompute.run_sync(self.delete_async())


def keypair_from_json(data, owner=None) -> KeyPair:
    return KeyPair.from_json(_serialization.unwrap(data, KEYPAIR_ROOT),
                             owner=owner)
