import streamlit as st

from config import settings
from services.identity import load_or_create_user_id
from ui.api_client import StorefrontClient
from ui.state import StorefrontSession

SESSION_KEY = "storefront"


def get_client() -> StorefrontClient:
    if "user_id" not in st.session_state:
        st.session_state["user_id"] = load_or_create_user_id(settings.user_id_file)
    return StorefrontClient(user_id=st.session_state["user_id"])


def get_storefront(refresh: bool = False) -> StorefrontSession:
    if refresh or SESSION_KEY not in st.session_state:
        with st.spinner("Opening Marketplace..."):
            st.session_state[SESSION_KEY] = StorefrontSession.load(get_client())
    return st.session_state[SESSION_KEY]


def open_product(slug: str) -> None:
    st.query_params["product"] = slug


def close_product() -> None:
    if "product" in st.query_params:
        del st.query_params["product"]
