"""Host a listing: the listing creation form.

Only viewers who are signed in and connected with Stripe see the form.
The listing image is uploaded through the upload control and kept locally
as a base64 data URL, which is what the hostListing mutation receives.
"""

import base64
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import ValidationError

from client.context import ViewerContext
from client.graphql import HOST_LISTING
from client.hooks import Mutation
from client.navigation import LOGIN_PATH
from client.notifications import Notifier
from client.views import Redirect, View
from shared.models.enums import ListingType, UploadStatus
from shared.models.listing import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    HostListingData,
    ListingDraft,
)
from shared.services.graphql_client import GraphQLClient, RemoteDataError
from shared.services.upload_client import ImageUploadClient, ImageUploadError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/png")
MAX_IMAGE_SIZE_BYTES = 1024 * 1024

INVALID_IMAGE_TYPE_MESSAGE = "You're only able to upload valid JPG or PNG files!"
INVALID_IMAGE_SIZE_MESSAGE = (
    "You're only able to upload valid image files of under 1 MB in size!"
)
IMAGE_UPLOAD_FAILED_MESSAGE = "Sorry! We weren't able to upload your image. Please try again."
FORM_ERRORS_MESSAGE = "Please complete all required form fields!"
LISTING_CREATED_MESSAGE = "You've successfully created your listing!"
LISTING_FAILED_MESSAGE = (
    "Sorry! We weren't able to create your listing. Please try again later."
)

FORM_FIELDS = (
    "type",
    "num_of_guests",
    "title",
    "description",
    "address",
    "city",
    "state",
    "postal_code",
    "price",
)


@dataclass(frozen=True)
class ImageFile:
    """A file picked in the upload control."""

    name: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class UploadChange:
    """Status change reported by the upload control."""

    status: UploadStatus
    file: Optional[ImageFile] = None


def before_image_upload(file: ImageFile, notifier: Notifier) -> bool:
    """Accept only JPG/PNG images under 1 MB."""
    if file.content_type not in ALLOWED_IMAGE_TYPES:
        notifier.error(INVALID_IMAGE_TYPE_MESSAGE)
        return False

    if file.size >= MAX_IMAGE_SIZE_BYTES:
        notifier.error(INVALID_IMAGE_SIZE_MESSAGE)
        return False

    return True


def get_base64_value(file: ImageFile) -> str:
    """Encode a file as a data URL."""
    encoded = base64.b64encode(file.content).decode("ascii")
    return f"data:{file.content_type};base64,{encoded}"


class HostState(str, Enum):
    GATE = "gate"
    SUBMITTING = "submitting"
    CREATED = "created"
    FORM = "form"


class HostGateView(View):
    title: str = "You'll have to be signed in and connected with Stripe to host a listing!"
    text: str = (
        "We only allow users who've signed in to our application and have "
        "connected with Stripe to host new listings. You can sign in at the "
        "Log In page and connect with Stripe afterwards."
    )
    login_href: str = LOGIN_PATH


class HostWaitingView(View):
    title: str = "Please wait!"
    text: str = "We're creating your listing now."


class HostFormView(View):
    title: str = "Hi! Let's get started listing your place."
    text: str = (
        "In this form, we'll collect some basic and additional information "
        "about your listing."
    )
    values: dict[str, Any]
    listing_types: list[ListingType] = list(ListingType)
    title_max_length: int = TITLE_MAX_LENGTH
    description_max_length: int = DESCRIPTION_MAX_LENGTH
    image: Optional[str] = None
    image_loading: bool = False


class Host:
    """Listing creation form.

    ``render()`` shows exactly one of the gate, the waiting view, a redirect
    to the created listing, or the form, in that order of precedence.
    """

    def __init__(
        self,
        viewer_context: ViewerContext,
        client: GraphQLClient,
        notifier: Notifier,
        uploader: Optional[ImageUploadClient] = None,
    ) -> None:
        self._viewer_context = viewer_context
        self._notifier = notifier
        self._uploader = uploader or ImageUploadClient()
        self.values: dict[str, Any] = {}
        self.image_loading = False
        self.image_base64_value: Optional[str] = None

        self._host_listing = Mutation(
            client,
            HOST_LISTING,
            HostListingData,
            operation_name="HostListing",
            on_completed=self._on_listing_created,
            on_error=self._on_listing_failed,
        )

        self._renderers: dict[HostState, Callable[[], View]] = {
            HostState.GATE: self._render_gate,
            HostState.SUBMITTING: self._render_submitting,
            HostState.CREATED: self._render_created,
            HostState.FORM: self._render_form,
        }

    @property
    def created_listing_id(self) -> Optional[str]:
        data = self._host_listing.data
        if data is None or data.host_listing is None:
            return None
        return data.host_listing.id

    @property
    def state(self) -> HostState:
        viewer = self._viewer_context.viewer
        if not viewer.id or not viewer.has_wallet:
            return HostState.GATE
        if self._host_listing.loading:
            return HostState.SUBMITTING
        if self.created_listing_id is not None:
            return HostState.CREATED
        return HostState.FORM

    def set_field(self, name: str, value: Any) -> None:
        if name not in FORM_FIELDS:
            raise KeyError(f"Unknown host form field: {name}")
        self.values[name] = value

    def upload_image(self, file: ImageFile) -> bool:
        """Run a picked file through validation, upload and encoding.

        Returns:
            True when the image value was set.
        """
        if not before_image_upload(file, self._notifier):
            return False

        self.handle_image_upload(UploadChange(UploadStatus.UPLOADING, file))
        try:
            self._uploader.upload(file.name, file.content, file.content_type)
        except ImageUploadError:
            logger.warning("Image upload failed for %s", file.name, exc_info=True)
            self.handle_image_upload(UploadChange(UploadStatus.ERROR, file))
            return False
        except Exception:
            self.handle_image_upload(UploadChange(UploadStatus.ERROR, file))
            raise

        self.handle_image_upload(UploadChange(UploadStatus.DONE, file))
        return self.image_base64_value is not None

    def handle_image_upload(self, change: UploadChange) -> None:
        if change.status == UploadStatus.UPLOADING:
            self.image_loading = True
            return

        if change.status == UploadStatus.DONE and change.file is not None:
            self.image_base64_value = get_base64_value(change.file)
            self.image_loading = False
            return

        if change.status == UploadStatus.ERROR:
            self.image_loading = False
            self._notifier.error(IMAGE_UPLOAD_FAILED_MESSAGE)

    def submit(self) -> bool:
        """Validate the form and issue the hostListing mutation.

        Returns:
            True when the mutation was issued.
        """
        try:
            draft = ListingDraft.model_validate(
                {**self.values, "image": self.image_base64_value}
            )
        except ValidationError as e:
            self.handle_form_errors(e)
            return False

        self.handle_host_listing(draft)
        return True

    def handle_form_errors(self, error: ValidationError) -> None:
        logger.info(
            "Host form invalid: %s",
            ", ".join(str(err["loc"][0]) for err in error.errors() if err["loc"]),
        )
        self._notifier.error(FORM_ERRORS_MESSAGE)

    def handle_host_listing(self, draft: ListingDraft) -> None:
        listing_input = draft.to_host_listing_input()
        self._host_listing(
            {"input": listing_input.model_dump(mode="json", by_alias=True)}
        )

    def _on_listing_created(self, data: HostListingData) -> None:
        self._notifier.success(LISTING_CREATED_MESSAGE)

    def _on_listing_failed(self, error: RemoteDataError) -> None:
        self._notifier.error(LISTING_FAILED_MESSAGE)

    def render(self) -> View:
        return self._renderers[self.state]()

    def _render_gate(self) -> View:
        return HostGateView()

    def _render_submitting(self) -> View:
        return HostWaitingView()

    def _render_created(self) -> View:
        return Redirect(to=f"/listing/{self.created_listing_id}")

    def _render_form(self) -> View:
        return HostFormView(
            values=dict(self.values),
            image=self.image_base64_value,
            image_loading=self.image_loading,
        )
