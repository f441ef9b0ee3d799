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
import functools
import inspect
import os
import shutil
import tempfile

import fixtures
from oslo_log import log
import testtools

from oscompute.tests.unit import _patch


class PatchEnvironFixture(fixtures.Fixture):

    original_environ = None
    new_environ = None

    def __init__(self, **patch_environ):
        super(PatchEnvironFixture, self).__init__()
        self.patch_environ = patch_environ

    def _setUp(self):
        self.original_environ = os.environ
        self.new_environ = dict(os.environ, **self.patch_environ)
        os.environ = self.new_environ
        self.addCleanup(self._restore_environ)

    def _restore_environ(self):
        os.environ = self.original_environ


class OSComputeUnitTest(_patch.PatchMixin, testtools.TestCase):

    patch_environ = {
        'http_proxy': 'http://127.0.0.1:8888',
        'https_proxy': 'http://127.0.0.1:8888',
        'no_proxy': '127.0.0.1'
    }

    def _get_test_method(self):
        method = super(OSComputeUnitTest, self)._get_test_method()
        if inspect.iscoroutinefunction(method):

            @functools.wraps(method)
            def wrapped_test(*args, **kwargs):
                asyncio.run(method(*args, **kwargs))

            return wrapped_test
        else:
            return method

    def setUp(self):
        super(OSComputeUnitTest, self).setUp()
        # Protect from mis-configuring logging
        self.patch(log, 'setup')
        self.useFixture(PatchEnvironFixture(**self.patch_environ))

    async def assert_raises_async(self, exception_class, awaitable):
        try:
            await awaitable
        except exception_class as ex:
            return ex
        self.fail(f"{exception_class.__name__} not raised")

    def create_tempdir(self, *args, **kwargs):
        dir_path = tempfile.mkdtemp(*args, **kwargs)
        self.addCleanup(shutil.rmtree, dir_path, ignore_errors=True)
        return dir_path
