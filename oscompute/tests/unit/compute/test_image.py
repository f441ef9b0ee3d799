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
import datetime

import oscompute
from oscompute import compute
from oscompute import http
from oscompute.tests.unit.compute import _fake
from oscompute.tests.unit import compute as compute_unit


IMAGE_ID = '70a599e0-31e7-49b7-b260-868f441e862b'
IMAGE_PATH = f'/images/{IMAGE_ID}'
SERVER_ID = '9168b536-cd40-4630-b43f-b259807c6e87'


class ImageTest(compute_unit.ComputeTest):

    def add_image_response(self, status='ACTIVE', **params):
        self.fake_api.add_response(
            'GET', IMAGE_PATH,
            {'image': _fake.image_json(IMAGE_ID, status=status, **params)})

    def add_not_found_response(self):
        self.fake_api.add_response('GET', IMAGE_PATH,
                                   {'itemNotFound': {'code': 404}},
                                   status_code=404)

    async def test_get_image(self):
        self.add_image_response(
            server=_fake.reference_json('servers', SERVER_ID, 'some-server'))
        image = await self.api.get_image(IMAGE_ID)
        self.assertIsInstance(image, compute.Image)
        self.assertEqual(IMAGE_ID, image.id)
        self.assertEqual('fakeimage7', image.name)
        self.assertEqual(compute.ImageStatus.ACTIVE, image.status)
        self.assertEqual(100, image.progress)
        self.assertEqual(128, image.min_memory)
        self.assertEqual(1, image.min_disk)
        self.assertEqual(datetime.datetime(2011, 1, 1, 1, 2, 3,
                                           tzinfo=datetime.timezone.utc),
                         image.created)
        self.assertEqual({'architecture': 'x86_64'}, image.metadata)
        self.assertIsInstance(image.metadata, compute.ImageMetadata)
        self.assertEqual(IMAGE_ID, image.metadata.resource_id)
        self.assertEqual({'OS-EXT-IMG-SIZE:size': 25165824},
                         image.extra_data)
        self.assertIs(self.api, image.owner)
        self.assertIs(self.api, image.metadata.owner)
        self.assertIsInstance(image.server, compute.ServerReference)
        self.assertEqual(SERVER_ID, image.server.id)
        self.assertIs(self.api, image.server.owner)

    async def test_image_to_json_keeps_extra_data(self):
        self.add_image_response()
        image = await self.api.get_image(IMAGE_ID)
        data = image.to_json()
        self.assertEqual(25165824, data['OS-EXT-IMG-SIZE:size'])
        self.assertEqual(IMAGE_ID, data['id'])
        self.assertEqual('ACTIVE', data['status'])
        self.assertEqual(128, data['minRam'])
        self.assertNotIn('server', data)

    async def test_get_image_with_unknown_status(self):
        self.add_image_response(status='QUEUED')
        image = await self.api.get_image(IMAGE_ID)
        self.assertEqual(compute.ImageStatus.UNKNOWN, image.status)

    async def test_delete_image(self):
        self.add_image_response()
        self.fake_api.add_response('DELETE', IMAGE_PATH, status_code=204)
        image = await self.api.get_image(IMAGE_ID)
        result = await image.delete_async()
        self.assertIs(image, result)
        self.assertEqual(compute.ImageStatus.UNKNOWN, image.status)
        request = self.fake_api.last_request
        self.assertEqual('DELETE', request.method)
        self.assertEqual(f'{_fake.ENDPOINT}{IMAGE_PATH}', str(request.url))

    async def test_delete_image_not_found(self):
        image = compute.Image(id=IMAGE_ID, status='ACTIVE', owner=self.api)
        await image.delete_async()
        self.assertEqual(compute.ImageStatus.UNKNOWN, image.status)
        self.assertEqual('DELETE', self.fake_api.last_request.method)

    async def test_delete_image_from_api(self):
        await self.api.delete_image(IMAGE_ID)
        self.assertEqual('DELETE', self.fake_api.last_request.method)

    async def test_refresh(self):
        self.add_image_response(status='SAVING', progress=50)
        image = compute.Image(id=IMAGE_ID, owner=self.api)
        await image.refresh_async()
        self.assertEqual(compute.ImageStatus.SAVING, image.status)
        self.assertEqual(50, image.progress)
        self.assertEqual('fakeimage7', image.name)

    async def test_wait_until_active(self):
        mock_time = self.patch_time()
        for status in ['SAVING', 'SAVING', 'ACTIVE']:
            self.add_image_response(status=status)
        image = compute.Image(id=IMAGE_ID, owner=self.api)
        self.assertEqual(compute.ImageStatus.UNKNOWN, image.status)

        result = await image.wait_until_active_async()
        self.assertIs(image, result)
        self.assertEqual(compute.ImageStatus.ACTIVE, image.status)
        self.assertEqual(3, len(self.fake_api.requests))
        self.assertEqual(2, mock_time.sleep.call_count)

    async def test_wait_until_deleted(self):
        self.patch_time()
        self.add_image_response(status='ACTIVE')
        self.add_not_found_response()
        image = compute.Image(id=IMAGE_ID, owner=self.api)
        await image.wait_until_deleted_async()
        self.assertEqual(compute.ImageStatus.DELETED, image.status)
        self.assertEqual(2, len(self.fake_api.requests))

    async def test_wait_until_active_when_not_found(self):
        self.patch_time()
        image = compute.Image(id=IMAGE_ID, owner=self.api)
        await self.assert_raises_async(http.HttpNotFound,
                                       image.wait_until_active_async())

    async def test_wait_until_active_with_error_status(self):
        self.patch_time()
        self.add_image_response(status='SAVING')
        self.add_image_response(status='ERROR')
        image = compute.Image(id=IMAGE_ID, owner=self.api)
        ex = await self.assert_raises_async(compute.WaitForStatusError,
                                            image.wait_until_active_async())
        self.assertNotIsInstance(ex, compute.WaitForStatusTimeout)
        self.assertEqual('ERROR', ex.resource_status)
        self.assertEqual('ACTIVE', ex.status)

    async def test_wait_for_status_with_timeout(self):
        self.patch_time()
        self.add_image_response(status='SAVING')
        image = compute.Image(id=IMAGE_ID, owner=self.api)
        ex = await self.assert_raises_async(
            compute.WaitForStatusTimeout,
            image.wait_for_status_async(compute.ImageStatus.ACTIVE,
                                        timeout=3., interval=1.))
        self.assertEqual(3., ex.timeout)
        self.assertEqual('SAVING', ex.resource_status)
        self.assertEqual(2, len(self.fake_api.requests))

    async def test_wait_for_status_with_zero_timeout(self):
        self.patch_time()
        self.add_image_response(status='SAVING')
        image = compute.Image(id=IMAGE_ID, owner=self.api)
        ex = await self.assert_raises_async(
            compute.WaitForStatusTimeout,
            image.wait_for_status_async(compute.ImageStatus.ACTIVE,
                                        timeout=0., interval=1.))
        self.assertEqual(0., ex.timeout)
        self.assertEqual(1, len(self.fake_api.requests))

    async def test_wait_for_status_with_zero_wait_timeout_option(self):
        self.patch_time()
        self.api.wait_timeout = 0.
        self.add_image_response(status='SAVING')
        image = compute.Image(id=IMAGE_ID, owner=self.api)
        await self.assert_raises_async(compute.WaitForStatusTimeout,
                                       image.wait_until_active_async())
        self.assertEqual(1, len(self.fake_api.requests))

    async def test_refresh_cancelled(self):
        self.add_image_response(status='SAVING', progress=50)
        image = compute.Image(id=IMAGE_ID, owner=self.api)
        await image.refresh_async()
        self.fake_api.delay = 60.

        task = asyncio.ensure_future(image.refresh_async())
        await self.fake_api.wait_for_requests(2)
        task.cancel()
        await self.assert_raises_async(asyncio.CancelledError, task)
        self.assertEqual(compute.ImageStatus.SAVING, image.status)
        self.assertEqual(50, image.progress)

    async def test_wait_for_image_status(self):
        self.patch_time()
        self.add_image_response(status='SAVING')
        self.add_image_response(status='ACTIVE')
        image = await self.api.wait_for_image_status(IMAGE_ID, 'ACTIVE')
        self.assertEqual(compute.ImageStatus.ACTIVE, image.status)
        self.assertIs(self.api, image.owner)

    async def test_image_without_owner(self):
        image = compute.Image(id=IMAGE_ID)
        self.assertIsNone(image.owner)
        await self.assert_raises_async(oscompute.OwnerNotFound,
                                       image.refresh_async())
        await self.assert_raises_async(oscompute.OwnerNotFound,
                                       image.delete_async())
        await self.assert_raises_async(oscompute.OwnerNotFound,
                                       image.wait_until_active_async())

    def test_id_cannot_change(self):
        image = compute.Image(id=IMAGE_ID)
        image.id = IMAGE_ID
        self.assertRaises(AttributeError, setattr, image, 'id', 'other-id')

    def test_refresh_blocking(self):
        self.add_image_response(status='SAVING')
        image = compute.Image(id=IMAGE_ID, owner=self.api)
        self.assertIs(image, image.refresh())
        self.assertEqual(compute.ImageStatus.SAVING, image.status)


class ImageReferenceTest(compute_unit.ComputeTest):

    async def test_list_image_summaries(self):
        self.fake_api.add_response('GET', '/images', {'images': [
            _fake.reference_json('images', 'image-1', 'first'),
            _fake.reference_json('images', 'image-2', 'second')]})
        page = await self.api.list_image_summaries()
        self.assertEqual(['image-1', 'image-2'],
                         [str(image.id) for image in page])
        self.assertEqual(['first', 'second'], [image.name for image in page])
        for reference in page:
            self.assertIsInstance(reference, compute.ImageReference)
            self.assertNotIsInstance(reference, compute.Image)
            self.assertIs(self.api, reference.owner)

    async def test_get_image(self):
        self.fake_api.add_response('GET', '/images', {'images': [
            _fake.reference_json('images', IMAGE_ID, 'fakeimage7')]})
        self.fake_api.add_response('GET', IMAGE_PATH,
                                   {'image': _fake.image_json(IMAGE_ID)})
        reference = (await self.api.list_image_summaries())[0]
        image = await reference.get_image_async()
        self.assertIsInstance(image, compute.Image)
        self.assertEqual(reference.id, image.id)
        self.assertIs(self.api, image.owner)

    async def test_get_image_without_owner(self):
        reference = compute.ImageReference(id=IMAGE_ID)
        await self.assert_raises_async(oscompute.OwnerNotFound,
                                       reference.get_image_async())

    def test_from_json(self):
        reference = compute.ImageReference.from_json(
            _fake.reference_json('images', IMAGE_ID, 'fakeimage7'))
        self.assertEqual(IMAGE_ID, reference.id)
        self.assertEqual(
            [compute.PageLink(rel='self',
                              url=f'{_fake.ENDPOINT}/images/{IMAGE_ID}')],
            reference.links)
        self.assertIsNone(reference.owner)


class ImageListOptionsTest(compute_unit.ComputeTest):

    def test_to_query_params_without_filters(self):
        params = compute.ImageListOptions().to_query_params()
        self.assertEqual({}, {k: v for k, v in params.items()
                              if v is not None})

    def test_to_query_params_with_type_string(self):
        params = compute.ImageListOptions(type='base').to_query_params()
        self.assertEqual('base', params['type'])
