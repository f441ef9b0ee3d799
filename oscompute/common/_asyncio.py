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

import asyncio
import typing


T = typing.TypeVar('T')


def run_sync(coroutine: typing.Awaitable[T]) -> T:
    """Blocks the calling thread until given coroutine is complete

    It must not be called from a thread that is already running an event
    loop: coroutine code has to be awaited there instead.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        if asyncio.iscoroutine(coroutine):
            coroutine.close()
        raise RuntimeError("Blocking call made from inside a running event "
                           "loop: await the asynchronous variant instead")
    return asyncio.run(_await(coroutine))


async def _await(awaitable: typing.Awaitable[T]) -> T:
    return await awaitable


async def run_blocking(func: typing.Callable[..., T], *args) -> T:
    """Runs a blocking function in the default executor"""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func, *args)
