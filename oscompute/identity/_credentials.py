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

import os
import typing

from oslo_log import log

import oscompute
from oscompute import config


LOG = log.getLogger(__name__)


_REQUIRED_CREDENTIALS_PARAMS = (
    'auth_url', 'username', 'password', 'project_name')


class KeystoneCredentials(typing.NamedTuple):
    auth_url: str
    username: str
    password: str
    project_name: str

    user_domain_name: typing.Optional[str] = None
    project_domain_name: typing.Optional[str] = None
    cacert: typing.Optional[str] = None

    def to_dict(self) -> typing.Dict[str, typing.Any]:
        # pylint: disable=no-member
        return {k: v
                for k, v in self._asdict().items()
                if v is not None}

    def __repr__(self):
        params = self.to_dict()
        if 'password' in params:
            params['password'] = '***'
        params_dump = ', '.join(f"{name}={value!r}"
                                for name, value in sorted(params.items()))
        return f'keystone_credentials({params_dump})'

    def validate(self, required_params: typing.Iterable[str] = None):
        if required_params is None:
            required_params = _REQUIRED_CREDENTIALS_PARAMS
        missing_params = [p
                          for p in required_params
                          if not getattr(self, p)]
        if missing_params:
            reason = "undefined parameters: {!s}".format(
                ', '.join(missing_params))
            raise InvalidKeystoneCredentials(credentials=self, reason=reason)


class NoSuchKeystoneCredentials(oscompute.OSComputeException):
    message = "no such credentials. {reason}"


class InvalidKeystoneCredentials(oscompute.OSComputeException):
    message = "invalid Keystone credentials; {reason!s}; {credentials!r}"


def keystone_credentials(credentials: KeystoneCredentials = None,
                         **params) -> KeystoneCredentials:
    if credentials is None:
        if params:
            return KeystoneCredentials(**params)
        return default_keystone_credentials()
    oscompute.check_valid_type(credentials, KeystoneCredentials)
    if params:
        return credentials._replace(**params)
    return credentials


def environ_keystone_credentials(
        environ: typing.Optional[typing.Mapping[str, str]] = None) \
        -> KeystoneCredentials:
    if environ is None:
        environ = os.environ
    auth_url = environ.get('OS_AUTH_URL')
    if not auth_url:
        raise NoSuchKeystoneCredentials(
            reason=f"OS_AUTH_URL environment variable is {auth_url!r}")

    return KeystoneCredentials(
        auth_url=auth_url,
        username=(environ.get('OS_USERNAME') or
                  environ.get('OS_USER_ID')),
        password=environ.get('OS_PASSWORD'),
        project_name=(environ.get('OS_PROJECT_NAME') or
                      environ.get('OS_TENANT_NAME') or
                      environ.get('OS_PROJECT_ID') or
                      environ.get('OS_TENANT_ID')),
        user_domain_name=(environ.get('OS_USER_DOMAIN_NAME') or
                          environ.get('OS_USER_DOMAIN_ID')),
        project_domain_name=environ.get('OS_PROJECT_DOMAIN_NAME'),
        cacert=environ.get('OS_CACERT'))


def config_keystone_credentials(conf=None) -> KeystoneCredentials:
    if conf is None:
        conf = config.oscompute_config()
    keystone_conf = conf.keystone
    auth_url = keystone_conf.auth_url
    if not auth_url:
        raise NoSuchKeystoneCredentials(
            reason="'auth_url' option not defined in 'keystone' section "
                   "of 'oscompute.conf' file")

    return KeystoneCredentials(
        auth_url=auth_url,
        username=keystone_conf.username,
        password=keystone_conf.password,
        project_name=keystone_conf.project_name,
        user_domain_name=keystone_conf.user_domain_name,
        project_domain_name=keystone_conf.project_domain_name,
        cacert=keystone_conf.cacert)


def default_keystone_credentials() -> KeystoneCredentials:
    """Looks for credentials in environment variables, then in config file
    """
    for get_credentials in (environ_keystone_credentials,
                            config_keystone_credentials):
        try:
            credentials = get_credentials()
        except NoSuchKeystoneCredentials as ex:
            LOG.debug(f'Got no credentials from {get_credentials.__name__}:'
                      f'\n    {ex}\n')
        else:
            credentials.validate()
            return credentials
    raise NoSuchKeystoneCredentials(
        reason="neither OS_* environment variables nor 'keystone' section "
               "of 'oscompute.conf' file define them")
