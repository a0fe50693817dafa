# app/ui.py

# Configure import path (sys.path) for conflict with the app package name
import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import json
from typing import List

import pandas as pd
import streamlit as st

from app.client import ProductApiClient
from app.config import API_URL
from app.exceptions import ProductApiError
from app.logger import configure_logging, get_logger
from app.models import Product

configure_logging()

# Create logger object
log = get_logger(__name__)
log.info("Streamlit application is starting...")

COLUMNS = ["id", "name", "price", "created_at"]


def products_to_frame(products: List[Product]) -> pd.DataFrame:
	"""Products as a DataFrame with a fixed column order, also when empty."""
	return pd.DataFrame([p.model_dump() for p in products], columns=COLUMNS)


@st.cache_resource
def get_client() -> ProductApiClient:
	return ProductApiClient(API_URL)


def main():
	# Page settings
	st.set_page_config(
		page_title="Product Management",
		page_icon="🛒",
		layout="centered"
	)

	st.title("Product Management")

	# Initialize session_states
	initialize_sessions()

	client = get_client()

	with st.sidebar:
		st.header("➕ Add Product")
		add_product_form(client)

	search_products(client)


def add_product_form(client: ProductApiClient):
	"""Form posting a new product, shows the API's rejection reason on 400."""
	with st.form("add_product", clear_on_submit=True):
		name = st.text_input("Name", placeholder="Ex: Blue Pen")
		price = st.text_input("Price", placeholder="Ex: 2.50")
		submitted = st.form_submit_button("Add", type="primary")

	if not submitted:
		return

	log.info(f"Add button clicked. Name: '{name}', price: '{price}'")
	try:
		product = client.create_product(name, price)
		st.success(f"Added {product['name']} (${product['price']})")
		log.info(f"Product created with id {product['id']}")
	except ProductApiError as e:
		if e.status_code == 400:
			st.warning(e.message)
		elif e.status_code == 429:
			st.error("Too many requests, please wait a minute.")
		else:
			st.error(f"Could not add product: {e.message}")
		log.warning(f"Product creation failed ({e.status_code}): {e.message}")


def search_products(client: ProductApiClient):
	st.header("Products")

	query = st.text_input("Search product", placeholder="Ex: pen", key="search_query")

	try:
		products = client.list_products(query.strip() or None)
		st.session_state.products = products
		st.session_state.error = None
		log.info(f"Loaded {len(products)} products for query: '{query}'")
	except ProductApiError as e:
		st.session_state.error = e.message
		st.error(f"Unable to load products: {e.message}")
		log.error(f"Loading products failed for query '{query}': {e}")
		return

	products = st.session_state.products
	if not products:
		st.info("No products found.")
		return

	frame = products_to_frame(products)
	st.metric("Products", len(frame))
	st.dataframe(frame, hide_index=True, use_container_width=True)

	col1, col2 = st.columns([1,1])
	with col1:
		st.download_button(
			label = "📥 Download as JSON File",
			data = json.dumps([p.model_dump() for p in products], indent=2, ensure_ascii=False, default=str),
			file_name = "products.json",
			mime = "application/json"
		)
	with col2:
		st.download_button(
			label = "📥 Download as CSV File",
			data = frame.to_csv(index=False).encode("utf-8"),
			file_name = "products.csv",
			mime = "text/csv"
		)


def initialize_sessions():
	"""Initialize session state variables."""
	if "products" not in st.session_state:
		st.session_state.products = []
		log.debug("Session state 'products' initialized.")
	if "error" not in st.session_state:
		st.session_state.error = None
		log.debug("Session state 'error' initialized.")


if __name__ == "__main__":
	main()
