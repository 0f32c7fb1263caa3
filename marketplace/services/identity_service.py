"""
Who is acting on a product.

Handlers never compare raw request fields with a product's owner; they ask
``IdentityService.resolve`` for a Principal and compare that instead. How
the Principal is obtained depends on the configured mode:

* trust mode: the seller id the caller claims (body ``sellerId``, plus the
  ``x-seller-id`` header where allowed). Anyone can claim any seller.
* token mode: the seller bound to the ``x-api-key`` header in
  ``SELLER_API_KEYS``.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import Mapping, Optional

from marketplace.core.config import Settings

logger = logging.getLogger(__name__)

SELLER_HEADER_NAME = "x-seller-id"
API_KEY_HEADER_NAME = "x-api-key"


class AuthenticationRequiredError(Exception):
    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
        self.message = message
        self.status_code = 401


@dataclass(frozen=True)
class Principal:
    seller_id: Optional[str]
    authenticated: bool = False

    def owns(self, product: Mapping) -> bool:
        return product.get("sellerId") == self.seller_id


class IdentityService:
    def __init__(self, settings: Settings) -> None:
        self.trust_client = settings.trust_client_identity
        self._api_keys = tuple(settings.seller_api_keys)
        if self.trust_client:
            logger.warning("seller identity is taken from request data without verification (TRUST_CLIENT_IDENTITY=1)")
        elif not self._api_keys:
            logger.warning("token identity mode is enabled but SELLER_API_KEYS is empty; every mutation will be rejected")

    def _seller_for_key(self, supplied: str) -> Optional[str]:
        match = None
        for key, seller_id in self._api_keys:
            # check every key so timing does not reveal which one matched
            if secrets.compare_digest(key.encode(), supplied.encode()):
                match = seller_id
        return match

    def authenticate(self, headers: Mapping[str, str]) -> Principal:
        supplied = (headers.get(API_KEY_HEADER_NAME) or "").strip()
        seller_id = self._seller_for_key(supplied) if supplied else None
        if not seller_id:
            raise AuthenticationRequiredError()
        return Principal(seller_id=seller_id, authenticated=True)

    def resolve(self, body: Mapping, headers: Mapping[str, str], *, allow_header: bool = False) -> Principal:
        """Return the acting principal for a product mutation."""
        if not self.trust_client:
            return self.authenticate(headers)
        claimed = body.get("sellerId")
        if not claimed and allow_header:
            claimed = headers.get(SELLER_HEADER_NAME)
        return Principal(seller_id=claimed)

    def creator(self, headers: Mapping[str, str]) -> Optional[Principal]:
        """Principal that must own a new product, or None when the body decides."""
        if self.trust_client:
            return None
        return self.authenticate(headers)
