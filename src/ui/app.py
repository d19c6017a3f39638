import logging

import streamlit as st

from config import settings

logging.basicConfig(level=settings.log_level.upper())

st.set_page_config(
    page_title=f"{settings.app_name} | Discovery",
    page_icon="🛍️",
    layout="wide",
)

from ui.context import get_storefront  # noqa: E402

storefront = get_storefront()

page = st.sidebar.radio(
    "Navigate",
    ["Catalog", "Wishlist"],
    format_func=lambda name: f"Wishlist ({len(storefront.wishlist)})" if name == "Wishlist" else name,
)

if st.sidebar.button("Refresh catalog"):
    get_storefront(refresh=True)

product_slug = st.query_params.get("product")

if product_slug:
    from ui.pages import product
    product.show(product_slug)
elif page == "Catalog":
    from ui.pages import catalog
    catalog.show()
else:
    from ui.pages import wishlist
    wishlist.show()
