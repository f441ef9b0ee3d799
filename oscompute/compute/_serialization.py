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
"""JSON envelope shapes of the Compute API

Single resources are wrapped under a root key named after the resource type:

    {"image": {"id": "...", ...}}
    {"metadata": {"key": "value"}}

Collections carry their items under the plural root key and the navigation
links under the same key with a '_links' suffix:

    {"images": [{...}, ...],
     "images_links": [{"rel": "next", "href": "https://..."}]}

Fields not modeled by resource classes are kept in their 'extra_data' bag and
written back by their 'to_json' method.
"""
from __future__ import absolute_import

import datetime
import typing

from oscompute.common import _exception


JsonObject = typing.Dict[str, typing.Any]


class Link(typing.NamedTuple):
    rel: str
    url: str

    @classmethod
    def from_json(cls, data: JsonObject) -> 'Link':
        return cls(rel=data.get('rel'), url=data.get('href'))

    def to_json(self) -> JsonObject:
        return {'rel': self.rel, 'href': self.url}


def unwrap(data: typing.Any, root: str) -> typing.Any:
    if not isinstance(data, dict) or root not in data:
        raise _exception.InvalidResponse(
            reason=f"missing '{root}' root key in {data!r}")
    return data[root]


def wrap(payload: typing.Any, root: str) -> JsonObject:
    return {root: payload}


def unwrap_collection(data: typing.Any, root: str) -> \
        typing.Tuple[typing.List[JsonObject], typing.List[Link]]:
    items = unwrap(data, root)
    if not isinstance(items, list):
        raise _exception.InvalidResponse(
            reason=f"'{root}' is not a list: {items!r}")
    links = parse_links(data.get(f"{root}_links"))
    return items, links


def split_fields(data: JsonObject, known: typing.Iterable[str]) -> \
        typing.Tuple[JsonObject, JsonObject]:
    if not isinstance(data, dict):
        raise _exception.InvalidResponse(
            reason=f"expected a JSON object, got {data!r}")
    known = set(known)
    fields = {k: v for k, v in data.items() if k in known}
    extra = {k: v for k, v in data.items() if k not in known}
    return fields, extra


def null_fields(fields: JsonObject) -> typing.FrozenSet[str]:
    return frozenset(k for k, v in fields.items() if v is None)


def merge_fields(extra_data: JsonObject, fields: JsonObject,
                 keep_null: typing.AbstractSet[str] = frozenset()) -> \
        JsonObject:
    """Writes modeled fields over extra ones

    None values are left out, unless their key is listed in keep_null.
    """
    result = dict(extra_data)
    result.update((k, v) for k, v in fields.items()
                  if v is not None or k in keep_null)
    return result


def parse_links(data: typing.Optional[typing.List[JsonObject]]) -> \
        typing.List[Link]:
    return [Link.from_json(link) for link in data or []]


def format_links(links: typing.Iterable[Link]) -> \
        typing.Optional[typing.List[JsonObject]]:
    links = [link.to_json() for link in links]
    return links or None


def parse_datetime(value: typing.Optional[str]) -> \
        typing.Optional[datetime.datetime]:
    if not value:
        return None
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    return datetime.datetime.fromisoformat(value)


def format_datetime(value: typing.Optional[datetime.datetime]) -> \
        typing.Optional[str]:
    if value is None:
        return None
    if value.utcoffset() == datetime.timedelta(0):
        value = value.replace(tzinfo=None)
        return value.isoformat() + 'Z'
    return value.isoformat()
