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

from oscompute.identity import _auth
from oscompute.identity import _credentials
from oscompute.identity import _session


AuthenticationProvider = _auth.AuthenticationProvider
KeystoneAuthenticationProvider = _auth.KeystoneAuthenticationProvider
NoSuchEndpoint = _auth.NoSuchEndpoint
ServiceType = _auth.ServiceType
ServiceUrlBuilder = _auth.ServiceUrlBuilder
StaticAuthenticationProvider = _auth.StaticAuthenticationProvider

config_keystone_credentials = _credentials.config_keystone_credentials
default_keystone_credentials = _credentials.default_keystone_credentials
environ_keystone_credentials = _credentials.environ_keystone_credentials
InvalidKeystoneCredentials = _credentials.InvalidKeystoneCredentials
keystone_credentials = _credentials.keystone_credentials
KeystoneCredentials = _credentials.KeystoneCredentials
NoSuchKeystoneCredentials = _credentials.NoSuchKeystoneCredentials

create_keystone_session = _session.create_keystone_session
KeystoneSession = _session.KeystoneSession
