from typing import TYPE_CHECKING, Any, Mapping, Optional

from ..schemas.admin import BanToggle, ProductReview
from ..schemas.product import ProductFilters, ProductStatus
from .filters import coerce_filters

if TYPE_CHECKING:
    from ..api_client import ApiClient


class AdminEndpoints:
    prefix = "/admin"

    def __init__(self, client: "ApiClient"):
        self.client = client

    def get_stats(self) -> Any:
        return self.client.get(f"{self.prefix}/stats", auth=True)

    def get_users(self) -> Any:
        return self.client.get(f"{self.prefix}/users", auth=True)

    def ban_user(self, user_id: str, is_banned: bool) -> Any:
        payload = BanToggle(is_banned=is_banned)
        return self.client.put(f"{self.prefix}/users/{user_id}/ban", payload, auth=True)

    def get_products(self, filters: ProductFilters | Mapping[str, Any] | None = None) -> Any:
        params = coerce_filters(ProductFilters, filters)
        return self.client.get(f"{self.prefix}/products", params=params, auth=True)

    def approve_product(
        self,
        product_id: str,
        status: ProductStatus | str = ProductStatus.APPROVED,
        rejected_reason: Optional[str] = None,
    ) -> Any:
        """Approves or rejects a pending listing; a reason only accompanies rejections."""
        payload = ProductReview(status=status, rejected_reason=rejected_reason)
        return self.client.put(f"/products/{product_id}/approve", payload, auth=True)

    def get_revenue(self) -> Any:
        return self.client.get(f"{self.prefix}/revenue", auth=True)
