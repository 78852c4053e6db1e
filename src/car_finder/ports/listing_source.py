from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ListingSource(ABC):
    """
    Port for the remote listing source.

    Implementations perform one read-only request and return the decoded
    payload as-is. They do not validate its shape: turning the payload into
    Car entities is the listing mapper's job.

    Contract:
        - Transport failures, error statuses and undecodable bodies are raised
          as CatalogFetchError
        - No retries
    """

    @abstractmethod
    def fetch(self) -> Any:
        """
        Fetch the raw listing payload.

        Returns:
            Decoded JSON payload (expected to be a list of car records)

        Raises:
            CatalogFetchError: If the source cannot deliver a payload
        """
        ...
