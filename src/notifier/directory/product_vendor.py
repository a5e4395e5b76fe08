"""ProductVendor aggregate — which vendor accounts supply which products."""

from protean.fields import Identifier
from protean.utils.globals import current_domain

from notifier.domain import notifier
from notifier.utils.db import fetch_all


@notifier.aggregate
class ProductVendor:
    product_id: Identifier(required=True)
    vendor_id: Identifier(required=True)


def link_vendor(product_id, vendor_id) -> ProductVendor:
    link = ProductVendor(product_id=str(product_id), vendor_id=str(vendor_id))
    current_domain.repository_for(ProductVendor).add(link)
    return link


def vendor_ids_for_products(product_ids) -> list[str]:
    """Vendor ids linked to any of ``product_ids``, de-duplicated, in link order."""
    product_ids = list(dict.fromkeys(str(p) for p in product_ids if p))
    if not product_ids:
        return []

    repo = current_domain.repository_for(ProductVendor)
    links = fetch_all(repo._dao.query.filter(product_id__in=product_ids))
    return list(dict.fromkeys(str(link.vendor_id) for link in links))
