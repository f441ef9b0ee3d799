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

from oscompute import compute
from oscompute import http
from oscompute import identity
from oscompute.tests import unit
from oscompute.tests.unit.compute import _fake


class ComputeTest(unit.OSComputeUnitTest):

    region = 'RegionOne'
    microversion = None

    def setUp(self):
        super(ComputeTest, self).setUp()
        self.fake_api = _fake.FakeComputeApi()
        self.authentication_provider = identity.StaticAuthenticationProvider(
            token=_fake.TOKEN, endpoint=self.fake_api.endpoint)
        self.session = http.HttpSession(transport=self.fake_api.transport)
        self.api = compute.ComputeApiBuilder(
            service_type='compute',
            authentication_provider=self.authentication_provider,
            region=self.region,
            microversion=self.microversion,
            session=self.session,
            wait_interval=1.)

    def create_service(self) -> compute.ComputeService:
        return compute.ComputeService(api=self.api)
