"""Unit tests for the host listing form.

Tests for:
- Gate, waiting, redirect and form precedence
- Image validation and upload handling
- Form submission and the hostListing mutation
"""

from unittest.mock import MagicMock

import httpx
import pytest

from client.context import ViewerContext
from client.sections.host import (
    FORM_ERRORS_MESSAGE,
    IMAGE_UPLOAD_FAILED_MESSAGE,
    INVALID_IMAGE_SIZE_MESSAGE,
    INVALID_IMAGE_TYPE_MESSAGE,
    LISTING_CREATED_MESSAGE,
    LISTING_FAILED_MESSAGE,
    Host,
    HostFormView,
    HostGateView,
    HostState,
    HostWaitingView,
    ImageFile,
)
from client.notifications import NotificationLevel
from client.views import Redirect
from shared.models.viewer import Viewer
from shared.services.graphql_client import RemoteDataError
from shared.services.upload_client import ImageUploadClient, ImageUploadError

SMALL_PNG = ImageFile("house.png", "image/png", b"\x89PNG" + b"\x00" * (500 * 1024))
LARGE_JPEG = ImageFile("house.jpg", "image/jpeg", b"\xff\xd8" + b"\x00" * (2 * 1024 * 1024))

FORM_VALUES = {
    "type": "HOUSE",
    "num_of_guests": 4,
    "title": "The iconic and luxurious Bel-Air mansion",
    "description": "Modern, clean, and iconic home of the Fresh Prince.",
    "address": "251 North Bristol Avenue",
    "city": "Los Angeles",
    "state": "California",
    "postal_code": "90210",
    "price": 120,
}


@pytest.fixture
def uploader() -> MagicMock:
    return MagicMock(spec=ImageUploadClient)


@pytest.fixture
def host(viewer_context, graphql_client, notifier, uploader) -> Host:
    return Host(viewer_context, graphql_client, notifier, uploader=uploader)


def fill_form(host: Host) -> None:
    for name, value in FORM_VALUES.items():
        host.set_field(name, value)
    assert host.upload_image(SMALL_PNG)


class TestRenderPrecedence:
    @pytest.mark.parametrize(
        "viewer",
        [
            Viewer(did_request=True),
            Viewer(id="5d378db94e84753160e08b55", has_wallet=False, did_request=True),
        ],
    )
    def test_gate_without_viewer_or_wallet(self, graphql_client, notifier, uploader, viewer) -> None:
        host = Host(ViewerContext(viewer), graphql_client, notifier, uploader=uploader)

        assert host.state == HostState.GATE
        assert isinstance(host.render(), HostGateView)

    def test_form_for_connected_viewer(self, host) -> None:
        view = host.render()

        assert isinstance(view, HostFormView)
        assert view.title_max_length == 45
        assert view.description_max_length == 400

    def test_waiting_view_while_submitting(self, host, graphql_client) -> None:
        fill_form(host)
        rendered = []

        def execute(document, variables):
            rendered.append(host.render())
            return {"hostListing": {"id": "5d378db94e84753160e08b31"}}

        graphql_client.execute.side_effect = execute
        host.submit()

        assert isinstance(rendered[0], HostWaitingView)

    def test_redirects_to_created_listing(self, host, graphql_client, notifier) -> None:
        fill_form(host)
        graphql_client.execute.return_value = {"hostListing": {"id": "5d378db94e84753160e08b31"}}

        host.submit()

        assert host.created_listing_id == "5d378db94e84753160e08b31"
        assert host.render() == Redirect(to="/listing/5d378db94e84753160e08b31")
        assert [(n.level, n.message) for n in notifier.pending] == [
            (NotificationLevel.SUCCESS, LISTING_CREATED_MESSAGE)
        ]


class TestImageUpload:
    def test_rejects_large_image(self, host, uploader, notifier) -> None:
        assert host.upload_image(LARGE_JPEG) is False

        uploader.upload.assert_not_called()
        assert host.image_loading is False
        assert host.image_base64_value is None
        assert [n.message for n in notifier.pending] == [INVALID_IMAGE_SIZE_MESSAGE]

    def test_rejects_other_types(self, host, uploader, notifier) -> None:
        gif = ImageFile("house.gif", "image/gif", b"GIF89a")

        assert host.upload_image(gif) is False

        uploader.upload.assert_not_called()
        assert [n.message for n in notifier.pending] == [INVALID_IMAGE_TYPE_MESSAGE]

    def test_accepts_small_png(self, host, uploader, notifier) -> None:
        assert host.upload_image(SMALL_PNG) is True

        uploader.upload.assert_called_once_with("house.png", SMALL_PNG.content, "image/png")
        assert host.image_loading is False
        assert host.image_base64_value.startswith("data:image/png;base64,iVBORw")
        assert notifier.pending == ()

    def test_loading_during_upload(self, host, uploader) -> None:
        observed = []
        uploader.upload.side_effect = lambda *args: observed.append(host.render().image_loading)

        host.upload_image(SMALL_PNG)

        assert observed == [True]

    def test_upload_failure_resets_loading(self, host, uploader, notifier) -> None:
        uploader.upload.side_effect = ImageUploadError("HTTP 500")

        assert host.upload_image(SMALL_PNG) is False

        assert host.image_loading is False
        assert host.image_base64_value is None
        assert [n.message for n in notifier.pending] == [IMAGE_UPLOAD_FAILED_MESSAGE]

    @pytest.mark.parametrize(
        ("size", "accepted"),
        [(1024 * 1024 - 1, True), (1024 * 1024, False)],
    )
    def test_size_limit_boundary(self, host, uploader, size, accepted) -> None:
        image = ImageFile("house.png", "image/png", b"\x00" * size)

        assert host.upload_image(image) is accepted
        assert uploader.upload.called is accepted

    def test_unexpected_uploader_error_resets_loading(self, host, uploader, notifier) -> None:
        uploader.upload.side_effect = httpx.InvalidURL("Invalid URL")

        with pytest.raises(httpx.InvalidURL):
            host.upload_image(SMALL_PNG)

        assert host.image_loading is False
        assert host.render().image_loading is False
        assert [n.message for n in notifier.pending] == [IMAGE_UPLOAD_FAILED_MESSAGE]


class TestSubmit:
    def test_incomplete_form_notifies_once(self, host, graphql_client, notifier) -> None:
        host.set_field("title", "Cozy cabin")

        assert host.submit() is False

        graphql_client.execute.assert_not_called()
        assert [n.message for n in notifier.pending] == [FORM_ERRORS_MESSAGE]

    def test_missing_image_blocks_submit(self, host, graphql_client) -> None:
        for name, value in FORM_VALUES.items():
            host.set_field(name, value)

        assert host.submit() is False

        graphql_client.execute.assert_not_called()

    def test_sends_one_mutation_with_listing_input(self, host, graphql_client) -> None:
        fill_form(host)
        graphql_client.execute.return_value = {"hostListing": {"id": "5d378db94e84753160e08b31"}}

        assert host.submit() is True

        graphql_client.execute.assert_called_once()
        listing_input = graphql_client.execute.call_args.args[1]["input"]
        assert listing_input == {
            "type": "HOUSE",
            "numOfGuests": 4,
            "title": FORM_VALUES["title"],
            "description": FORM_VALUES["description"],
            "address": "251 North Bristol Avenue, Los Angeles, California, 90210",
            "image": host.image_base64_value,
            "price": 12000,
        }

    def test_failed_mutation_notifies_and_shows_form(self, host, graphql_client, notifier) -> None:
        fill_form(host)
        graphql_client.execute.side_effect = RemoteDataError("failed to create listing")

        host.submit()

        assert isinstance(host.render(), HostFormView)
        assert [n.message for n in notifier.pending] == [LISTING_FAILED_MESSAGE]

    def test_unknown_field_rejected(self, host) -> None:
        with pytest.raises(KeyError):
            host.set_field("bedrooms", 3)
