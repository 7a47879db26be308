"""Backend services for TinyHouse."""

from .graphql_client import GraphQLClient, RemoteDataError
from .ssm_service import SSMService, SSMServiceError, get_ssm_service
from .stripe_service import StripeService, StripeServiceError, get_stripe_service
from .upload_client import ImageUploadClient, ImageUploadError

__all__ = [
    "GraphQLClient",
    "RemoteDataError",
    "ImageUploadClient",
    "ImageUploadError",
    "SSMService",
    "SSMServiceError",
    "get_ssm_service",
    "StripeService",
    "StripeServiceError",
    "get_stripe_service",
]
