from typing import TYPE_CHECKING, Any, Mapping

from ..schemas.contact import ContactFilters, ContactStatus, ContactStatusUpdate
from ..schemas.product import ProductCreate, ProductStatus, ProductUpdate
from ..schemas.shop import DepositPayload, PackagePurchase
from .filters import coerce_filters

if TYPE_CHECKING:
    from ..api_client import ApiClient


class ShopEndpoints:
    """Wallet, posting packages, own listings and incoming contact requests."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    def get_wallet(self) -> Any:
        return self.client.get("/wallet", auth=True)

    def deposit(self, amount: float) -> Any:
        payload = DepositPayload(amount=amount)
        return self.client.post("/wallet/deposit", payload.model_dump(), auth=True)

    def get_available_packages(self) -> Any:
        return self.client.get("/packages")

    def get_my_packages(self) -> Any:
        return self.client.get("/packages/shop/my-packages", auth=True)

    def purchase_package(self, package_id: str) -> Any:
        payload = PackagePurchase(package_id=package_id)
        return self.client.post("/packages/purchase", payload.model_dump(by_alias=True), auth=True)

    def get_my_posts(self) -> Any:
        return self.client.get("/products/shop/my-products", auth=True)

    def create_post(self, post: ProductCreate | Mapping[str, Any]) -> Any:
        if not isinstance(post, ProductCreate):
            post = ProductCreate.model_validate(post)
        return self.client.post("/products", post, auth=True)

    def update_post(self, product_id: str, changes: ProductUpdate | Mapping[str, Any]) -> Any:
        if not isinstance(changes, ProductUpdate):
            changes = ProductUpdate.model_validate(changes)
        return self.client.put(f"/products/{product_id}", changes, auth=True)

    def update_product_status(self, product_id: str, status: ProductStatus | str) -> Any:
        """Hides (INACTIVE) or re-shows (APPROVED) one of the shop's listings."""
        return self.update_post(product_id, ProductUpdate(status=status))

    def delete_post(self, product_id: str) -> Any:
        return self.client.delete(f"/products/{product_id}", auth=True)

    def get_contacts(self, filters: ContactFilters | Mapping[str, Any] | None = None) -> Any:
        params = coerce_filters(ContactFilters, filters)
        return self.client.get("/contacts/shop/my-contacts", params=params, auth=True)

    def update_contact_status(self, contact_id: str, status: ContactStatus | str) -> Any:
        payload = ContactStatusUpdate(status=status)
        return self.client.put(f"/contacts/{contact_id}/status", payload, auth=True)
