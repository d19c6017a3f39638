from typing import Callable, List, Optional

import streamlit as st

from models.schemas import ProductResponse
from ui.utils.formatting import format_price, image_or_placeholder, product_badges


def render_product_card(
    product: ProductResponse,
    in_wishlist: bool,
    on_toggle: Optional[Callable[[str], None]],
    on_open: Callable[[str], None],
    key_prefix: str,
) -> None:
    with st.container(border=True):
        st.image(image_or_placeholder(product.image_url), use_container_width=True)

        badges = product_badges(product)
        if badges:
            st.caption(" · ".join(badges))

        st.markdown(f"**{product.name}**")
        st.markdown(format_price(product.price, product.currency))

        meta = [part for part in (
            product.brand.name if product.brand else None,
            product.category.name if product.category else None,
        ) if part]
        if meta:
            st.caption(" • ".join(meta))

        col1, col2, col3 = st.columns(3)
        with col1:
            if product.buy_url:
                st.link_button("Buy Now", product.buy_url, use_container_width=True)
        with col2:
            st.button(
                "Details",
                key=f"{key_prefix}-open-{product.id}",
                on_click=on_open,
                args=(product.slug,),
                use_container_width=True,
            )
        with col3:
            if on_toggle is not None:
                st.button(
                    "♥" if in_wishlist else "♡",
                    key=f"{key_prefix}-wish-{product.id}",
                    help="Remove from wishlist" if in_wishlist else "Add to wishlist",
                    on_click=on_toggle,
                    args=(product.id,),
                    use_container_width=True,
                )


def render_product_grid(
    products: List[ProductResponse],
    wishlist_ids,
    on_toggle: Optional[Callable[[str], None]],
    on_open: Callable[[str], None],
    key_prefix: str,
    columns: int = 5,
) -> None:
    for start in range(0, len(products), columns):
        row = st.columns(columns)
        for col, product in zip(row, products[start:start + columns]):
            with col:
                render_product_card(
                    product,
                    in_wishlist=product.id in wishlist_ids,
                    on_toggle=on_toggle,
                    on_open=on_open,
                    key_prefix=key_prefix,
                )
