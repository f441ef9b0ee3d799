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

import itertools

from oslo_config import cfg

DEFAULT_MICROVERSION = '2.1'
DEFAULT_SERVICE_TYPE = 'compute'

GROUP_NAME = "compute"
OPTIONS = [
    cfg.StrOpt('service_type',
               default=DEFAULT_SERVICE_TYPE,
               help="Service type of the Compute API in the service "
                    "catalog"),
    cfg.StrOpt('service_name',
               default=None,
               help="Service name of the Compute API in the service "
                    "catalog"),
    cfg.StrOpt('region_name',
               default=None,
               help="Region where the Compute API endpoint is looked for"),
    cfg.StrOpt('interface',
               default='public',
               choices=['public', 'internal', 'admin'],
               help="Endpoint interface used to reach the Compute API"),
    cfg.StrOpt('microversion',
               default=DEFAULT_MICROVERSION,
               help="Compute API microversion requested to the server"),
    cfg.FloatOpt('wait_timeout',
                 default=None,
                 help="Timeout (in seconds) for waiting a resource to reach "
                      "a status. Wait forever when not set"),
    cfg.FloatOpt('wait_interval',
                 default=5.,
                 help="Interval (in seconds) between status refreshes while "
                      "waiting a resource to reach a status"),
    cfg.FloatOpt('request_timeout',
                 default=60.,
                 help="Timeout (in seconds) of a single HTTP request"),
    cfg.BoolOpt('verify',
                default=True,
                help="Verify TLS certificates of the Compute API endpoint"),
]


def register_oscompute_options(conf):
    conf.register_opts(group=cfg.OptGroup(GROUP_NAME), opts=OPTIONS)


def list_options():
    return [(GROUP_NAME, itertools.chain(OPTIONS))]
