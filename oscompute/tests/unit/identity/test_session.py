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

from keystoneauth1 import session as _session

from oscompute import identity
from oscompute.tests import unit


CREDENTIALS = identity.keystone_credentials(
    auth_url='http://127.0.0.1:5000/v3',
    username='demo',
    password='super-secret',
    project_name='demo',
    user_domain_name='Default',
    project_domain_name='Default')


class CreateKeystoneSessionTest(unit.OSComputeUnitTest):

    def test_create_keystone_session(self):
        session = identity.create_keystone_session(CREDENTIALS)
        self.assertIsInstance(session, _session.Session)
        self.assertIsNotNone(session.auth)
        self.assertTrue(session.verify)

    def test_create_keystone_session_with_cacert(self):
        credentials = CREDENTIALS._replace(cacert='/etc/ssl/ca.pem')
        session = identity.create_keystone_session(credentials)
        self.assertEqual('/etc/ssl/ca.pem', session.verify)

    def test_create_keystone_session_with_verify(self):
        session = identity.create_keystone_session(CREDENTIALS, verify=False)
        self.assertFalse(session.verify)

    def test_create_keystone_session_with_invalid_credentials(self):
        credentials = CREDENTIALS._replace(password=None)
        self.assertRaises(identity.InvalidKeystoneCredentials,
                          identity.create_keystone_session, credentials)
