"""Query and mutation hooks over the GraphQL client.

Each hook tracks ``data``, ``loading`` and ``error`` for the last request it
issued. Failures never escape a hook: they are stored in ``error`` and passed
to ``on_error`` so components can turn them into notifications, banners or
redirects.
"""

import logging
from collections.abc import Callable
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from shared.services.graphql_client import GraphQLClient, RemoteDataError
from shared.utils.logging import log_remote_operation

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class _Operation(Generic[T]):
    kind = "operation"

    def __init__(
        self,
        client: GraphQLClient,
        document: str,
        result_model: type[T],
        *,
        operation_name: str,
    ) -> None:
        self._client = client
        self._document = document
        self._result_model = result_model
        self.operation_name = operation_name
        self.data: Optional[T] = None
        self.loading = False
        self.error: Optional[RemoteDataError] = None
        self.call_count = 0

    @property
    def called(self) -> bool:
        return self.call_count > 0

    def _execute(self, variables: Optional[dict[str, Any]]) -> Optional[T]:
        self.call_count += 1
        self.loading = True
        self.error = None
        try:
            raw = self._client.execute(self._document, variables)
            data = self._result_model.model_validate(raw)
        except ValidationError as e:
            self.error = RemoteDataError(
                f"Unexpected {self.operation_name} response: {e.error_count()} invalid fields"
            )
        except RemoteDataError as e:
            self.error = e
        else:
            self.data = data
        finally:
            self.loading = False

        log_remote_operation(
            logger,
            self.operation_name,
            kind=self.kind,
            variables=variables,
            result="error" if self.error else "ok",
            error=str(self.error) if self.error else None,
        )
        return None if self.error else self.data


class Mutation(_Operation[T]):
    """A mutation triggered imperatively by calling the hook.

    Usage:
        host_listing = Mutation(client, HOST_LISTING, HostListingData,
                                operation_name="HostListing")
        host_listing({"input": {...}})
        if host_listing.data: ...
    """

    kind = "mutation"

    def __init__(
        self,
        client: GraphQLClient,
        document: str,
        result_model: type[T],
        *,
        operation_name: str,
        on_completed: Optional[Callable[[T], None]] = None,
        on_error: Optional[Callable[[RemoteDataError], None]] = None,
    ) -> None:
        super().__init__(client, document, result_model, operation_name=operation_name)
        self._on_completed = on_completed
        self._on_error = on_error

    def __call__(self, variables: Optional[dict[str, Any]] = None) -> Optional[T]:
        data = self._execute(variables)
        if self.error is not None:
            if self._on_error is not None:
                self._on_error(self.error)
        elif self._on_completed is not None and data is not None:
            self._on_completed(data)
        return data


class Query(_Operation[T]):
    """A query whose variables are kept so it can be refetched unchanged."""

    kind = "query"

    def __init__(
        self,
        client: GraphQLClient,
        document: str,
        result_model: type[T],
        *,
        operation_name: str,
    ) -> None:
        super().__init__(client, document, result_model, operation_name=operation_name)
        self.variables: Optional[dict[str, Any]] = None

    def fetch(self, variables: dict[str, Any]) -> Optional[T]:
        """Run the query with new variables."""
        self.variables = dict(variables)
        return self._execute(self.variables)

    def refetch(self) -> Optional[T]:
        """Re-run the query with the variables of the last fetch."""
        return self._execute(self.variables)
