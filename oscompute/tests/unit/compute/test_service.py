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

from oslo_config import cfg

from oscompute import compute
from oscompute import config
from oscompute import http
from oscompute import identity
from oscompute.tests.unit.compute import _fake
from oscompute.tests.unit import compute as compute_unit


IMAGE_ID = '70a599e0-31e7-49b7-b260-868f441e862b'
IMAGE_PATH = f'/images/{IMAGE_ID}'


class ComputeServiceTest(compute_unit.ComputeTest):

    def setUp(self):
        super(ComputeServiceTest, self).setUp()
        self.service = self.create_service()

    def test_init(self):
        service = compute.ComputeService(
            authentication_provider=self.authentication_provider,
            region='RegionOne',
            microversion='2.10',
            session=self.session)
        self.assertIsInstance(service.api, compute.ComputeApiBuilder)
        self.assertEqual('2.10', service.api.microversion)

    def test_init_with_invalid_api(self):
        self.assertRaises(TypeError, compute.ComputeService, api=object())

    def test_init_without_region(self):
        self.assertRaises(ValueError, compute.ComputeService,
                          authentication_provider=self.authentication_provider,
                          region=None)

    def test_get_image(self):
        self.fake_api.add_response('GET', IMAGE_PATH,
                                   {'image': _fake.image_json(IMAGE_ID)})
        image = self.service.get_image(IMAGE_ID)
        self.assertEqual(IMAGE_ID, image.id)
        self.assertIs(self.service.api, image.owner)
        # blocking methods of returned objects work as well
        image.refresh()
        self.assertEqual(compute.ImageStatus.ACTIVE, image.status)
        self.assertEqual(2, len(self.fake_api.requests))

    def test_list_images_all_items(self):
        next_url = f'{_fake.ENDPOINT}/images/detail?marker=image-1'
        self.fake_api.add_response('GET', '/images/detail', {
            'images': [_fake.image_json('image-1')],
            'images_links': [_fake.link_json(next_url, rel='next')]})
        self.fake_api.add_response('GET', '/images/detail', {
            'images': [_fake.image_json('image-2')]})
        page = self.service.list_images()
        self.assertEqual(['image-1', 'image-2'],
                         [str(image.id) for image in page.all_items()])

    def test_delete_image_not_found(self):
        self.service.delete_image(IMAGE_ID)
        self.assertEqual('DELETE', self.fake_api.last_request.method)

    def test_delete_and_wait(self):
        self.patch_time()
        self.fake_api.add_response('GET', IMAGE_PATH,
                                   {'image': _fake.image_json(IMAGE_ID)})
        self.fake_api.add_response('GET', IMAGE_PATH,
                                   {'itemNotFound': {'code': 404}},
                                   status_code=404)
        self.fake_api.add_response('DELETE', IMAGE_PATH, status_code=204)
        image = self.service.get_image(IMAGE_ID)
        image.delete()
        self.assertEqual(compute.ImageStatus.UNKNOWN, image.status)
        image.wait_until_deleted()
        self.assertEqual(compute.ImageStatus.DELETED, image.status)

    def test_wait_for_image_status(self):
        self.patch_time()
        self.fake_api.add_response(
            'GET', IMAGE_PATH,
            {'image': _fake.image_json(IMAGE_ID, status='SAVING')})
        self.fake_api.add_response('GET', IMAGE_PATH,
                                   {'image': _fake.image_json(IMAGE_ID)})
        image = self.service.wait_for_image_status(IMAGE_ID, 'ACTIVE')
        self.assertEqual(compute.ImageStatus.ACTIVE, image.status)

    def test_update_server_metadata(self):
        self.fake_api.add_response('POST', '/servers/some-server/metadata',
                                   {'metadata': {'a': '1', 'b': '2'}})
        metadata = self.service.update_server_metadata('some-server',
                                                       {'b': '2'})
        self.assertEqual({'a': '1', 'b': '2'}, metadata)
        self.assertEqual({'metadata': {'b': '2'}},
                         self.fake_api.request_body())

    def test_create_key_pair(self):
        self.fake_api.add_response('POST', '/os-keypairs',
                                   {'keypair': _fake.keypair_json('key')})
        key_pair = self.service.create_key_pair(
            compute.KeyPairDefinition(name='key'))
        self.assertEqual('key', key_pair.name)

    async def test_blocking_call_from_event_loop(self):
        self.assertRaises(RuntimeError, self.service.get_image, IMAGE_ID)
        self.assertEqual([], self.fake_api.requests)


class GetComputeApiTest(compute_unit.ComputeTest):

    def create_conf(self, **compute_options):
        conf = cfg.ConfigOpts()
        config.register_oscompute_options(conf)
        conf(args=[], default_config_files=[], default_config_dirs=[])
        for name, value in compute_options.items():
            conf.set_override(name, value, group='compute')
        return conf

    def test_get_compute_api(self):
        conf = self.create_conf(region_name='RegionTwo',
                                microversion='2.60',
                                interface='internal',
                                wait_timeout=300.,
                                wait_interval=2.)
        api = compute.get_compute_api(
            authentication_provider=self.authentication_provider, conf=conf)
        self.assertIsInstance(api, compute.ComputeApiBuilder)
        self.assertEqual('RegionTwo', api.url_builder.region)
        self.assertEqual('internal', api.url_builder.interface)
        self.assertEqual(identity.ServiceType('compute'),
                         api.url_builder.service_type)
        self.assertEqual('2.60', api.microversion)
        self.assertEqual(300., api.wait_timeout)
        self.assertEqual(2., api.wait_interval)
        self.assertIsInstance(api.session, http.HttpSession)
        self.assertEqual(60., api.session.timeout)

    def test_get_compute_api_without_region(self):
        conf = self.create_conf()
        self.assertRaises(ValueError, compute.get_compute_api,
                          authentication_provider=self.authentication_provider,
                          conf=conf)

    def test_get_compute_service(self):
        conf = self.create_conf(region_name='RegionOne')
        service = compute.get_compute_service(
            authentication_provider=self.authentication_provider,
            conf=conf,
            session=self.session)
        self.assertIsInstance(service, compute.ComputeService)
        self.assertIs(self.session, service.api.session)
