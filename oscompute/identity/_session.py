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

from keystoneauth1 import loading
from keystoneauth1 import session as _session
from oslo_log import log

from oscompute.identity import _credentials


LOG = log.getLogger(__name__)

KEYSTONE_SESSION_CLASSES = _session.Session,
KeystoneSession = typing.Union[_session.Session]


def create_keystone_session(
        credentials: typing.Optional[_credentials.KeystoneCredentials] = None,
        verify: typing.Union[bool, str, None] = None) -> KeystoneSession:
    credentials = _credentials.keystone_credentials(credentials)
    LOG.debug("Create Keystone session from credentials "
              f"{credentials}")
    credentials.validate()
    loader = loading.get_plugin_loader('password')
    params = credentials.to_dict()
    cacert = params.pop('cacert', None)
    auth = loader.load_from_options(**params)
    if verify is None:
        verify = cacert or True
    return _session.Session(auth=auth, verify=verify)
