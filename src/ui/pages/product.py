import logging

import streamlit as st

from ui.components.product_card import render_product_grid
from ui.context import close_product, get_client, get_storefront, open_product
from ui.utils.formatting import format_price, image_or_placeholder

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = (
    "Discover the pinnacle of D2C craftsmanship, sourced directly from verified brands."
)


def show(slug: str):
    detail = get_client().fetch_product_detail(slug)
    if detail is None:
        logger.info("Product %s not found, returning to catalog", slug)
        close_product()
        st.rerun()
        return

    product = detail.product
    storefront = get_storefront()
    in_wishlist = detail.in_wishlist
    if storefront.sync_membership(product.id, in_wishlist):
        logger.debug("Wishlist state for %s refreshed from backend", product.id)

    st.button("← Back to catalog", on_click=close_product)
    if product.category:
        st.caption(f"Home / {product.category.name}")

    col1, col2 = st.columns([7, 5])

    with col1:
        st.image(image_or_placeholder(product.image_url), use_container_width=True)
        if product.new_arrival:
            st.caption("New Arrival")
        extra_images = [img for img in product.images if img and img != product.image_url]
        if extra_images:
            st.image(extra_images, width=120)

    with col2:
        if product.brand:
            st.caption(product.brand.name.upper())
        st.title(product.name)
        st.header(format_price(product.price, product.currency))
        st.caption("Included Taxes")

        if product.buy_url:
            st.link_button("🛒 Proceed to Checkout", product.buy_url, type="primary", use_container_width=True)

        label = "♥ Saved" if in_wishlist else "♡ Save"
        if st.button(label, key=f"detail-wish-{product.id}", use_container_width=True):
            storefront.toggle_wishlist(product.id)
            st.rerun()

        st.subheader("About this item")
        st.write(product.description or DEFAULT_DESCRIPTION)

    if detail.related:
        st.markdown("---")
        st.subheader("Items you might like")
        render_product_grid(
            detail.related,
            storefront.wishlist.product_ids,
            None,
            open_product,
            key_prefix="related",
        )
