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

import importlib
from importlib import metadata
import itertools
import logging
import os
import typing  # noqa

from oslo_config import cfg
from oslo_log import log


LOG = log.getLogger(__name__)

PROJECT_NAME = 'oscompute'

CONFIG_MODULES = ['oscompute.compute.config',
                  'oscompute.identity.config']


HTTP_CONF_GROUP_NAME = "http"

HTTP_OPTIONS = [
    cfg.StrOpt('http_proxy',
               help="HTTP proxy URL for Rest APIs"),
    cfg.StrOpt('https_proxy',
               help="HTTPS proxy URL for Rest APIs"),
    cfg.StrOpt('no_proxy',
               help="Don't use proxy server to connect to listed hosts")]


def workspace_config_files(project=None, prog=None):
    project = project or PROJECT_NAME
    filenames = []
    if prog is not None:
        filenames.append(prog + '.conf')
    filenames.append(project + '.conf')
    root_dir = os.path.realpath("/")
    current_dir = os.path.realpath(os.getcwd())
    config_files = []
    while current_dir != root_dir:
        for filename in filenames:
            filename = os.path.join(current_dir, filename)
            if os.path.isfile(filename):
                config_files.append(filename)
        current_dir = os.path.dirname(current_dir)
    return config_files


class NoSuchConfigSource(AttributeError):
    pass


class GlobalConfig(object):

    # this is a singletone
    _instance = None
    _sources = {}  # type: typing.Dict[str, typing.Any]

    def __new__(cls):
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def set_source(self, name, source_conf):
        if source_conf is None:
            raise TypeError("Config source cannot be None")
        actual = self._sources.setdefault(name, source_conf)
        if actual is not source_conf:
            msg = "Config source already registered: {!r}".format(name)
            raise RuntimeError(msg)

    def has_source(self, name) -> bool:
        return name in self._sources

    def __getattr__(self, name):
        sources = self._sources.get(name)
        if sources is None:
            msg = "Config source not registered: {!r}".format(name)
            raise NoSuchConfigSource(msg)
        return sources


CONF = GlobalConfig()


def init_config():
    if not CONF.has_source(PROJECT_NAME):
        init_oscompute_config()


def oscompute_config():
    init_config()
    return getattr(CONF, PROJECT_NAME)


def get_version():
    try:
        return metadata.version(PROJECT_NAME)
    except metadata.PackageNotFoundError:
        return 'unknown'


def init_oscompute_config(default_config_dirs=None, default_config_files=None,
                          args=None, prog=None, version=None):
    if version is None:
        version = get_version()

    if default_config_dirs is None:
        default_config_dirs = cfg.find_config_dirs(project=PROJECT_NAME,
                                                   prog=prog)
    if default_config_files is None:
        default_config_files = (cfg.find_config_files(project=PROJECT_NAME,
                                                      prog=prog) +
                                workspace_config_files(prog=prog))

    # Register configuration options
    conf = cfg.ConfigOpts()
    log.register_options(conf)
    register_oscompute_options(conf=conf)

    conf(args=args or [],
         project=PROJECT_NAME,
         validate_default_values=True,
         default_config_dirs=default_config_dirs,
         default_config_files=default_config_files)
    CONF.set_source(PROJECT_NAME, conf)

    log.setup(conf=conf, product_name=PROJECT_NAME, version=version)
    setup_oscompute_config(conf=conf)
    LOG.debug("Configuration setup using parameters:\n"
              " - version: %r\n"
              " - default_config_dirs: %r\n"
              " - default_config_files: %r\n",
              version,
              default_config_dirs,
              default_config_files)
    return conf


def register_oscompute_options(conf):
    conf.register_opts(
        group=cfg.OptGroup(HTTP_CONF_GROUP_NAME), opts=HTTP_OPTIONS)

    for module_name in CONFIG_MODULES:
        module = importlib.import_module(module_name)
        if hasattr(module, 'register_oscompute_options'):
            module.register_oscompute_options(conf=conf)


def list_http_options():
    return [
        (HTTP_CONF_GROUP_NAME, itertools.chain(HTTP_OPTIONS))
    ]


def list_oscompute_options():
    all_options = list_http_options()
    for module_name in CONFIG_MODULES:
        module = importlib.import_module(module_name)
        if hasattr(module, 'list_options'):
            all_options += module.list_options()
    return all_options


def setup_oscompute_config(conf):
    # Redirect all warnings to logging library
    logging.captureWarnings(True)
    warnings_logger = log.getLogger('py.warnings')
    if conf.debug:
        if not warnings_logger.isEnabledFor(log.WARNING):
            # Print Python warnings
            warnings_logger.logger.setLevel(log.WARNING)
    elif warnings_logger.isEnabledFor(log.WARNING):
        # Silence Python warnings
        warnings_logger.logger.setLevel(log.ERROR)

    setup_http_proxy(conf=conf)


def setup_http_proxy(conf):
    """Make sure we have http proxy environment variables defined when required
    """
    source = None
    http_proxy = os.environ.get('http_proxy')
    https_proxy = os.environ.get('https_proxy')
    no_proxy = os.environ.get('no_proxy')
    if http_proxy or https_proxy:
        source = 'environment'
    else:
        http_conf = conf.http
        http_proxy = http_conf.http_proxy
        https_proxy = http_conf.https_proxy
        no_proxy = http_conf.no_proxy
        if http_proxy:
            os.environ['http_proxy'] = http_proxy
        if https_proxy:
            os.environ['https_proxy'] = https_proxy
        if no_proxy:
            os.environ['no_proxy'] = no_proxy
        if http_proxy or https_proxy or no_proxy:
            source = 'oscompute.conf'

    if source:
        LOG.info("Using HTTP proxy configuration defined in %s:\n"
                 "  http_proxy: %r\n"
                 "  https_proxy: %r\n"
                 "  no_proxy: %r",
                 source, os.environ.get('http_proxy'),
                 os.environ.get('https_proxy'), os.environ.get('no_proxy'))
    else:
        LOG.debug("Connecting to REST API services without a proxy "
                  "server")
    return source
