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
from oscompute.compute import _serialization


LOG = log.getLogger(__name__)

T = typing.TypeVar('T')

PageLink = _serialization.Link

NextPageHandler = typing.Callable[[str], typing.Awaitable['Page']]


class Page(typing.Sequence[T]):
    """One page of a server side listing

    The page behaves as a sequence of its own items. Following pages are
    requested using the verbatim URL of the 'next' link sent by the server;
    'all_items' and 'all_items_async' traverse all pages lazily, each call
    with its own cursor starting from this page.
    """

    def __init__(self,
                 items: typing.Iterable[T] = (),
                 links: typing.Iterable[PageLink] = (),
                 owner=None,
                 next_page_handler: typing.Optional[NextPageHandler] = None):
        self._items = list(items)
        self.links = list(links)
        self.owner = owner
        self.next_page_handler = next_page_handler

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return (f"Page(items={self._items!r}, "
                f"next_link={self.next_link!r})")

    @property
    def next_link(self) -> typing.Optional[str]:
        for link in self.links:
            if link.rel == 'next':
                return link.url
        return None

    @property
    def has_next_page(self) -> bool:
        return self.next_link is not None

    async def get_next_page_async(self) -> 'Page[T]':
        url = self.next_link
        if url is None:
            return Page(owner=self.owner)
        if self.next_page_handler is None:
            raise oscompute.OwnerNotFound(obj=self, method='get_next_page')
        LOG.debug(f"Getting next page: {url}")
        return await self.next_page_handler(url)

    def get_next_page(self) -> 'Page[T]':
        return oscompute.run_sync(self.get_next_page_async())

    async def all_items_async(self) -> typing.AsyncIterator[T]:
        page: Page[T] = self
        while True:
            for item in page:
                yield item
            if not page.has_next_page:
                break
            page = await page.get_next_page_async()

    def all_items(self) -> typing.Iterator[T]:
        page: Page[T] = self
        while True:
            yield from page
            if not page.has_next_page:
                break
            page = page.get_next_page()
