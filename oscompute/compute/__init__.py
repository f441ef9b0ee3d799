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

from oscompute.compute import _client
from oscompute.compute import _identifier
from oscompute.compute import _image
from oscompute.compute import _keypair
from oscompute.compute import _metadata
from oscompute.compute import _page
from oscompute.compute import _reference
from oscompute.compute import _resource
from oscompute.compute import _server
from oscompute.compute import _service


AUTH_TOKEN_HEADER = _client.AUTH_TOKEN_HEADER
ComputeApiBuilder = _client.ComputeApiBuilder
compose_url = _client.compose_url
MICROVERSION_HEADER = _client.MICROVERSION_HEADER
PreparedRequest = _client.PreparedRequest

Identifier = _identifier.Identifier
IdentifierType = _identifier.IdentifierType
identifier = _identifier.identifier

Image = _image.Image
ImageListOptions = _image.ImageListOptions
ImageStatus = _image.ImageStatus
ImageType = _image.ImageType

KeyPair = _keypair.KeyPair
KeyPairDefinition = _keypair.KeyPairDefinition

ImageMetadata = _metadata.ImageMetadata
ResourceMetadata = _metadata.ResourceMetadata
ServerMetadata = _metadata.ServerMetadata

Page = _page.Page
PageLink = _page.PageLink

FlavorReference = _reference.FlavorReference
ImageReference = _reference.ImageReference
ResourceReference = _reference.ResourceReference
ServerReference = _reference.ServerReference

StatusResource = _resource.StatusResource
WaitForStatusError = _resource.WaitForStatusError
WaitForStatusTimeout = _resource.WaitForStatusTimeout

RemoteConsole = _server.RemoteConsole
RemoteConsoleType = _server.RemoteConsoleType
Server = _server.Server
ServerListOptions = _server.ServerListOptions
ServerStatus = _server.ServerStatus

ComputeService = _service.ComputeService
get_compute_api = _service.get_compute_api
get_compute_service = _service.get_compute_service
