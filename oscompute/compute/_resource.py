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

import enum
import typing

from oslo_log import log

import oscompute
from oscompute.compute import _identifier
from oscompute import http


LOG = log.getLogger(__name__)


class WaitForStatusError(oscompute.OSComputeException):
    message = ("{resource_type} {resource_id} not changing status from "
               "{resource_status} to {status}")


class WaitForStatusTimeout(WaitForStatusError):
    message = ("{resource_type} {resource_id} didn't change its status from "
               "{resource_status} to {status} status after {timeout} seconds")


class ServiceResource(object):
    """Object decoded from a Compute API response

    The owner is the client that produced the object. It is assigned once
    and it is only used to make further calls on behalf of the object.
    """

    _owner = None
    null_fields: typing.FrozenSet[str] = frozenset()

    def __init__(self,
                 extra_data: typing.Optional[typing.Dict] = None,
                 owner=None):
        self.extra_data = dict(extra_data or {})
        if owner is not None:
            self._set_owner(owner)

    @property
    def owner(self):
        return self._owner

    def _set_owner(self, owner):
        if self._owner is not None and self._owner is not owner:
            raise RuntimeError(f"Owner of {self!r} already set")
        self._owner = owner

    def require_owner(self, method: str):
        owner = self._owner
        if owner is None:
            raise oscompute.OwnerNotFound(obj=self, method=method)
        return owner


class IdentifiedResource(ServiceResource):

    _id: typing.Optional[_identifier.Identifier] = None

    def __init__(self,
                 id: typing.Optional[_identifier.IdentifierType] = None,
                 extra_data: typing.Optional[typing.Dict] = None,
                 owner=None):
        # pylint: disable=redefined-builtin
        super(IdentifiedResource, self).__init__(extra_data=extra_data,
                                                 owner=owner)
        if id is not None:
            self.id = id

    @property
    def id(self) -> typing.Optional[_identifier.Identifier]:
        return self._id

    @id.setter
    def id(self, value: _identifier.IdentifierType):
        value = _identifier.identifier(value)
        if self._id is not None and self._id != value:
            raise AttributeError(f"Identifier of {self!r} can't be changed")
        self._id = value

    def __repr__(self):
        return f"{type(self).__name__}(id={str(self.id)!r})"


class StatusResource(IdentifiedResource):
    """Resource with a server reported lifecycle status

    Subclasses declare the status enum, the names of the attributes making up
    their state, and how to fetch and delete themselves through the owner.
    """

    status_class: typing.Type[enum.Enum]
    state_fields: typing.Tuple[str, ...] = ()

    status: enum.Enum

    @property
    def unknown_status(self) -> enum.Enum:
        return self.status_class('UNKNOWN')

    @property
    def deleted_status(self) -> enum.Enum:
        return self.status_class('DELETED')

    @property
    def terminal_statuses(self) -> typing.Set[enum.Enum]:
        return {self.status_class('ERROR'), self.deleted_status}

    async def _fetch_async(self) -> 'StatusResource':
        raise NotImplementedError

    async def _delete_async(self):
        raise NotImplementedError

    def _replace_state(self, other: 'StatusResource'):
        oscompute.check_valid_type(other, type(self))
        if other.id != self.id:
            raise ValueError(f"Can't replace state of {self!r} with state "
                             f"of {other!r}")
        for name in self.state_fields:
            setattr(self, name, getattr(other, name))
        self.extra_data = dict(other.extra_data)
        self.null_fields = other.null_fields

    async def refresh_async(self):
        fresh = await self._fetch_async()
        self._replace_state(fresh)
        return self

    def refresh(self):
        return oscompute.run_sync(self.refresh_async())

    async def delete_async(self):
        await self._delete_async()
        self.status = self.unknown_status
        return self

    def delete(self):
        return oscompute.run_sync(self.delete_async())

    async def wait_for_status_async(self,
                                    status,
                                    timeout: oscompute.Seconds = None,
                                    interval: oscompute.Seconds = None):
        status = self.status_class(status)
        owner = self.require_owner('wait_for_status')
        retry = oscompute.retry(timeout=timeout,
                                interval=interval,
                                default_timeout=owner.wait_timeout,
                                default_interval=owner.wait_interval)
        terminal_statuses = self.terminal_statuses - {status}
        resource_type = type(self).__name__

        async for attempt in retry:
            try:
                await self.refresh_async()
            except http.HttpNotFound:
                if status != self.deleted_status:
                    raise
                LOG.debug(f"{resource_type} {self.id} not found: it has "
                          "been deleted")
                self.status = status
                break

            if self.status == status:
                break

            if self.status in terminal_statuses:
                raise WaitForStatusError(resource_type=resource_type,
                                         resource_id=self.id,
                                         resource_status=self.status.value,
                                         status=status.value)
            try:
                attempt.check_time_left()
            except oscompute.RetryTimeLimitError as ex:
                raise WaitForStatusTimeout(resource_type=resource_type,
                                           resource_id=self.id,
                                           resource_status=self.status.value,
                                           status=status.value,
                                           timeout=retry.timeout) from ex

            LOG.debug(f"Waiting for {resource_type} {self.id} status to get "
                      f"from {self.status.value} to {status.value} "
                      f"(progress={getattr(self, 'progress', None)}%)")
        return self

    def wait_for_status(self, status, timeout: oscompute.Seconds = None,
                        interval: oscompute.Seconds = None):
        return oscompute.run_sync(self.wait_for_status_async(
            status, timeout=timeout, interval=interval))

    async def wait_until_active_async(self, timeout: oscompute.Seconds = None,
                                      interval: oscompute.Seconds = None):
        return await self.wait_for_status_async('ACTIVE', timeout=timeout,
                                                interval=interval)

    def wait_until_active(self, timeout: oscompute.Seconds = None,
                          interval: oscompute.Seconds = None):
        return oscompute.run_sync(self.wait_until_active_async(
            timeout=timeout, interval=interval))

    async def wait_until_deleted_async(self,
                                       timeout: oscompute.Seconds = None,
                                       interval: oscompute.Seconds = None):
        return await self.wait_for_status_async('DELETED', timeout=timeout,
                                                interval=interval)

    def wait_until_deleted(self, timeout: oscompute.Seconds = None,
                           interval: oscompute.Seconds = None):
        return oscompute.run_sync(self.wait_until_deleted_async(
            timeout=timeout, interval=interval))
