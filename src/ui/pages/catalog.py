import streamlit as st

from config import settings
from services.catalog_sections import catalog_stats, category_grid, category_rails
from services.filters import ProductKind
from ui.components.product_card import render_product_grid
from ui.context import get_storefront, open_product
from ui.utils.formatting import SEARCH_SUGGESTIONS, category_icon, pluralize_items

KIND_LABELS = {
    ProductKind.ALL: "All",
    ProductKind.FEATURED: "Featured",
    ProductKind.TRENDING: "Trending",
    ProductKind.NEW: "New Arrivals",
}


def _toggle(product_id: str) -> None:
    get_storefront().toggle_wishlist(product_id)


def _select_category(category_id: str) -> None:
    st.session_state["category_filter"] = category_id
    st.session_state["search_query"] = ""


def _use_suggestion(suggestion: str) -> None:
    st.session_state["search_query"] = suggestion


def _clear_filters() -> None:
    st.session_state["search_query"] = ""
    st.session_state["category_filter"] = ""
    st.session_state["brand_filter"] = ""
    st.session_state["kind_filter"] = ProductKind.ALL


def show():
    storefront = get_storefront()
    stats = catalog_stats(storefront.products, storefront.categories, storefront.brands)

    st.title("🛍️ Discovery")
    st.caption(
        f"{stats.categories} Categories • {stats.brands} Brands • {stats.products}+ Products"
    )

    query = st.text_input(
        "Search",
        key="search_query",
        placeholder="Search for Mobiles, TVs...",
        label_visibility="collapsed",
    )
    suggestion_cols = st.columns(len(SEARCH_SUGGESTIONS))
    for col, suggestion in zip(suggestion_cols, SEARCH_SUGGESTIONS):
        with col:
            st.button(suggestion, key=f"suggest-{suggestion}", on_click=_use_suggestion, args=(suggestion,))

    category_names = {"": "All categories"}
    category_names.update({c.id: c.name for c in storefront.categories})
    brand_names = {"": "All brands"}
    brand_names.update({b.id: b.name for b in storefront.brands})

    col1, col2, col3 = st.columns(3)
    with col1:
        category_id = st.selectbox(
            "Category",
            list(category_names.keys()),
            key="category_filter",
            format_func=lambda value: category_names.get(value, value),
        )
    with col2:
        brand_id = st.selectbox(
            "Brand",
            list(brand_names.keys()),
            key="brand_filter",
            format_func=lambda value: brand_names.get(value, value),
        )
    with col3:
        kind = st.radio(
            "Show",
            list(ProductKind),
            key="kind_filter",
            format_func=lambda value: KIND_LABELS[value],
            horizontal=True,
        )

    criteria = storefront.update_criteria(query=query, category_id=category_id, brand_id=brand_id, kind=kind)
    wishlist_ids = storefront.wishlist.product_ids

    st.markdown("---")

    if criteria.query:
        results = storefront.visible_products()
        st.subheader(f'Search Results for "{criteria.query}" ({len(results)} found)')
        if not results:
            st.info("No results found. Try different keywords or browse categories.")
            st.button("Show All Products", on_click=_clear_filters, type="primary")
        else:
            render_product_grid(results, wishlist_ids, _toggle, open_product, key_prefix="search")

    elif not criteria.is_empty:
        heading = storefront.category_name(criteria.category_id) or "Filtered Products"
        col1, col2 = st.columns([4, 1])
        with col1:
            st.subheader(heading)
        with col2:
            st.button("Clear Filter", on_click=_clear_filters)
        render_product_grid(storefront.visible_products(), wishlist_ids, _toggle, open_product, key_prefix="filtered")

    else:
        grid = category_grid(storefront.categories, storefront.products, limit=settings.category_grid_size)
        if grid:
            st.subheader("Explore Categories")
            grid_cols = st.columns(min(len(grid), 6))
            for index, (category, count) in enumerate(grid):
                with grid_cols[index % len(grid_cols)]:
                    st.button(
                        f"{category_icon(category.name)} {category.name}\n\n{count} Products",
                        key=f"grid-{category.id}",
                        on_click=_select_category,
                        args=(category.id,),
                        use_container_width=True,
                    )

        for category, items in category_rails(
            storefront.categories, storefront.products, per_category=settings.category_rail_size
        ):
            st.markdown("---")
            col1, col2 = st.columns([4, 1])
            with col1:
                st.subheader(category.name)
                st.caption(f"{len(items)} Products Available")
            with col2:
                st.button("View All", key=f"rail-{category.id}", on_click=_select_category, args=(category.id,))
            render_product_grid(items, wishlist_ids, _toggle, open_product, key_prefix=f"rail-{category.id}")

    saved = storefront.saved_products()
    if saved:
        st.markdown("---")
        st.header("♥ Your Favorites")
        st.caption(f"{pluralize_items(len(saved))} saved")
        render_product_grid(saved, wishlist_ids, _toggle, open_product, key_prefix="favorites")
