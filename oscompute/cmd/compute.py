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

import sys

from oslo_log import log

from oscompute.cmd import base
from oscompute import compute


LOG = log.getLogger(__name__)


class ComputeCMD(base.OSComputeCMD):
    """Inspects and manages Compute API resources from the command line"""

    _service = None

    def get_parser(self):
        parser = super(ComputeCMD, self).get_parser()
        subparsers = parser.add_subparsers(dest='command', required=True)

        list_images = subparsers.add_parser('list-images',
                                            help="List images")
        list_images.set_defaults(action='list_images')
        list_images.add_argument('--name', help="Filter by image name")
        list_images.add_argument('--server',
                                 help="Filter by ID of the server the "
                                      "image was created from")
        list_images.add_argument('--type',
                                 choices=[t.value for t in compute.ImageType],
                                 help="Filter by image type")
        list_images.add_argument('--min-ram', type=int,
                                 help="Filter by minimum memory (MB)")
        list_images.add_argument('--min-disk', type=int,
                                 help="Filter by minimum disk size (GB)")
        add_paging_arguments(list_images)

        show_image = subparsers.add_parser('show-image',
                                           help="Show image details")
        show_image.set_defaults(action='show_image')
        show_image.add_argument('image_id', help="Image ID")

        delete_image = subparsers.add_parser('delete-image',
                                             help="Delete an image")
        delete_image.set_defaults(action='delete_image')
        delete_image.add_argument('image_id', help="Image ID")
        add_wait_arguments(delete_image)

        image_metadata = subparsers.add_parser('show-image-metadata',
                                               help="Show image metadata")
        image_metadata.set_defaults(action='show_image_metadata')
        image_metadata.add_argument('image_id', help="Image ID")

        set_metadata = subparsers.add_parser(
            'set-image-metadata', help="Add or replace image metadata items")
        set_metadata.set_defaults(action='set_image_metadata')
        set_metadata.add_argument('image_id', help="Image ID")
        set_metadata.add_argument('items', nargs='+', metavar='KEY=VALUE',
                                  help="Metadata items")
        set_metadata.add_argument('--overwrite', action='store_true',
                                  help="Replace all existing metadata items")

        list_servers = subparsers.add_parser('list-servers',
                                             help="List servers")
        list_servers.set_defaults(action='list_servers')
        list_servers.add_argument('--name', help="Filter by server name")
        list_servers.add_argument(
            '--status', choices=[s.value for s in compute.ServerStatus],
            help="Filter by server status")
        add_paging_arguments(list_servers)

        show_server = subparsers.add_parser('show-server',
                                            help="Show server details")
        show_server.set_defaults(action='show_server')
        show_server.add_argument('server_id', help="Server ID")

        delete_server = subparsers.add_parser('delete-server',
                                              help="Delete a server")
        delete_server.set_defaults(action='delete_server')
        delete_server.add_argument('server_id', help="Server ID")
        add_wait_arguments(delete_server)

        console = subparsers.add_parser('vnc-console',
                                        help="Get a server VNC console URL")
        console.set_defaults(action='vnc_console')
        console.add_argument('server_id', help="Server ID")
        console.add_argument(
            '--type', dest='console_type',
            default=compute.RemoteConsoleType.NOVNC.value,
            choices=[t.value for t in compute.RemoteConsoleType],
            help="Remote console type")

        list_key_pairs = subparsers.add_parser('list-key-pairs',
                                               help="List key pairs")
        list_key_pairs.set_defaults(action='list_key_pairs')

        create_key_pair = subparsers.add_parser(
            'create-key-pair',
            help="Create a key pair (or import an existing public key)")
        create_key_pair.set_defaults(action='create_key_pair')
        create_key_pair.add_argument('name', help="Key pair name")
        create_key_pair.add_argument('--public-key-file',
                                     help="Public key file to import")

        delete_key_pair = subparsers.add_parser('delete-key-pair',
                                                help="Delete a key pair")
        delete_key_pair.set_defaults(action='delete_key_pair')
        delete_key_pair.add_argument('name', help="Key pair name")
        return parser

    @property
    def service(self) -> compute.ComputeService:
        if self._service is None:
            self._service = compute.get_compute_service(conf=self.conf)
        return self._service

    def run(self):
        action_func = getattr(self, self.args.action)
        return action_func()

    def list_images(self):
        options = compute.ImageListOptions(
            name=self.args.name,
            server_id=self.args.server,
            type=self.args.type,
            min_memory=self.args.min_ram,
            min_disk=self.args.min_disk,
            page_size=self.args.limit)
        self.write_items(self.service.list_images(options))

    def show_image(self):
        image = self.service.get_image(self.args.image_id)
        self.write_json(image.to_json())

    def delete_image(self):
        image = compute.Image(id=self.args.image_id, owner=self.service.api)
        image.delete()
        if self.args.wait:
            image.wait_until_deleted(timeout=self.args.timeout)
        LOG.info(f"Image {self.args.image_id} deleted")

    def show_image_metadata(self):
        metadata = self.service.get_image_metadata(self.args.image_id)
        self.write_json(dict(metadata))

    def set_image_metadata(self):
        metadata = self.service.get_image_metadata(self.args.image_id)
        if self.args.overwrite:
            metadata.clear()
        metadata.update(parse_metadata_items(self.args.items))
        metadata.push(overwrite=self.args.overwrite)
        self.write_json(dict(metadata))

    def list_servers(self):
        options = compute.ServerListOptions(name=self.args.name,
                                            status=self.args.status,
                                            page_size=self.args.limit)
        self.write_items(self.service.list_servers(options))

    def show_server(self):
        server = self.service.get_server(self.args.server_id)
        self.write_json(server.to_json())

    def delete_server(self):
        server = compute.Server(id=self.args.server_id,
                                owner=self.service.api)
        server.delete()
        if self.args.wait:
            server.wait_until_deleted(timeout=self.args.timeout)
        LOG.info(f"Server {self.args.server_id} deleted")

    def vnc_console(self):
        console = self.service.get_vnc_console(self.args.server_id,
                                               self.args.console_type)
        self.write_json(console._asdict())

    def list_key_pairs(self):
        self.write_items(self.service.list_key_pairs())

    def create_key_pair(self):
        public_key = None
        if self.args.public_key_file:
            with open(self.args.public_key_file) as fd:
                public_key = fd.read().strip()
        key_pair = self.service.create_key_pair(
            compute.KeyPairDefinition(name=self.args.name,
                                      public_key=public_key))
        self.write_json(key_pair.to_json())

    def delete_key_pair(self):
        self.service.delete_key_pair(self.args.name)
        LOG.info(f"Key pair {self.args.name} deleted")

    def write_items(self, page: compute.Page):
        if getattr(self.args, 'all', False):
            items = page.all_items()
        else:
            items = page
        self.write_json([item.to_json() for item in items])


def add_paging_arguments(parser):
    parser.add_argument('--limit', type=int,
                        help="Maximum number of items per page")
    parser.add_argument('--all', action='store_true',
                        help="Follow 'next' links to get all pages")


def add_wait_arguments(parser):
    parser.add_argument('--wait', action='store_true',
                        help="Wait until the resource is gone")
    parser.add_argument('--timeout', type=float,
                        help="Maximum number of seconds to wait for")


def parse_metadata_items(items):
    metadata = {}
    for item in items:
        key, sep, value = item.partition('=')
        if not sep or not key:
            raise ValueError(f"Invalid metadata item: {item!r} (expected "
                             "KEY=VALUE)")
        metadata[key] = value
    return metadata


def main(argv=None):
    """Compute CLI main entry."""
    compute_cmd = ComputeCMD(argv)
    compute_cmd.set_stream_handler_logging_level()
    compute_cmd.run()


if __name__ == '__main__':
    sys.exit(main())
