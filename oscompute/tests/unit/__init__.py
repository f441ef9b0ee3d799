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

from oscompute.tests.unit import _case
from oscompute.tests.unit import _patch


OSComputeUnitTest = _case.OSComputeUnitTest
PatchEnvironFixture = _case.PatchEnvironFixture

PatchFixture = _patch.PatchFixture
PatchMixin = _patch.PatchMixin
PatchTimeFixture = _patch.PatchTimeFixture
