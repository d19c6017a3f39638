import streamlit as st

from ui.components.product_card import render_product_grid
from ui.context import get_storefront, open_product
from ui.utils.formatting import pluralize_items


def _toggle(product_id: str) -> None:
    get_storefront().toggle_wishlist(product_id)


def show():
    st.title("♥ Your Favorites")
    storefront = get_storefront()

    saved = storefront.saved_products()
    if not saved:
        st.info("ℹ️ Nothing saved yet. Tap the heart on any product to keep it here.")
        return

    st.caption(f"{pluralize_items(len(saved))} saved")
    render_product_grid(saved, storefront.wishlist.product_ids, _toggle, open_product, key_prefix="wishlist")
