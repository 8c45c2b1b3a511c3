import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional

from ..dependencies import get_current_user, get_current_user_optional
from ..schemas.contact import ContactCreate
from ..schemas.customer import ProfileUpdate
from ..schemas.product import ProductFilters
from ..utils.logging import log_action
from .filters import coerce_filters

if TYPE_CHECKING:
    from ..api_client import ApiClient

logger = logging.getLogger(__name__)


class CustomerEndpoints:
    def __init__(self, client: "ApiClient"):
        self.client = client

    def get_profile(self) -> Any:
        return self.client.get("/users/profile", auth=True)

    def update_profile(self, changes: ProfileUpdate | Mapping[str, Any]) -> Any:
        """
        Sends only the fields the caller set; an explicit None clears that
        field on the server. The returned ``data.user`` replaces the stored one.
        """
        if not isinstance(changes, ProfileUpdate):
            changes = ProfileUpdate.model_validate(changes)
        body = changes.model_dump(mode="json", by_alias=True, exclude_unset=True)
        res = self.client.put("/users/profile", body, auth=True)
        self._remember_user(res, "update_profile")
        return res

    def sync_profile(self) -> Any:
        """
        Fetches the latest profile and writes ``data.user`` back to the store,
        keeping the stored token.
        """
        get_current_user(self.client.store)
        res = self.get_profile()
        self._remember_user(res, "sync_profile")
        return res

    def _remember_user(self, res: Any, action: str) -> None:
        data = res.get("data") if isinstance(res, dict) else None
        user = data.get("user") if isinstance(data, dict) else None
        if isinstance(user, dict):
            self.client.store.update_user(user)
            log_action(self.client.store.get().user, action, "user")
        else:
            logger.warning("%s response carried no user, stored profile left as is", action)

    def get_products(self, filters: ProductFilters | Mapping[str, Any] | None = None) -> Any:
        params = coerce_filters(ProductFilters, filters)
        return self.client.get("/products", params=params)

    def get_product_by_id(self, product_id: str) -> Any:
        return self.client.get(f"/products/{product_id}")

    def check_contact(self, product_id: str, customer_email: Optional[str] = None) -> Any:
        """
        Asks whether this customer already contacted the shop about a product.
        Without an explicit email the signed-in user's email is used, if any.
        """
        if customer_email is None:
            user = get_current_user_optional(self.client.store)
            customer_email = user.email if user else None
        return self.client.get(
            f"/contacts/check/{product_id}",
            params={"customerEmail": customer_email},
            auth=self._has_token(),
        )

    def contact_shop(self, product_id: str, contact: ContactCreate | Mapping[str, Any]) -> Any:
        if not isinstance(contact, ContactCreate):
            contact = ContactCreate.model_validate(contact)
        body = {"productId": product_id, **contact.model_dump(by_alias=True)}
        return self.client.post("/contacts", body, auth=self._has_token())

    def _has_token(self) -> bool:
        return self.client.store.get_token() is not None
