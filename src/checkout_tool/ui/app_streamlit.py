"""
Streamlit UI for the Checkout Tool.

Features:
- Customer type and coupon selection
- Cart building from the catalog
- Itemized price breakdown, trace and receipt preview
- Catalog browser with stock levels
"""
import streamlit as st
import pandas as pd
from datetime import datetime

from checkout_tool.data.load_store import load_store
from checkout_tool.checkout import Order, ShoppingCart
from checkout_tool.engine import PriceEngine, Customer, CustomerType
from checkout_tool.engine.coupons import recognized_codes
from checkout_tool.errors import CheckoutError
from checkout_tool.reports import Receipt, format_brl


st.set_page_config(
    page_title="Checkout Tool",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_store():
    """Get cached catalog, inventory and engine."""
    catalog, inventory, report = load_store()
    return catalog, inventory, PriceEngine(catalog), report


try:
    catalog, inventory, engine, load_report = get_store()
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


# ============================================================================
# SIDEBAR: Customer Context
# ============================================================================
with st.sidebar:
    st.header("👤 Customer")

    with st.container(border=True):
        customer_id = st.text_input("Customer ID", value="C1")
        customer_type = st.radio("Type", [t.value for t in CustomerType], horizontal=True)
        coupon = st.selectbox("Coupon", ["(none)"] + recognized_codes())

    customer = Customer(customer_id=customer_id, name=customer_id, customer_type=customer_type)
    coupon_code = None if coupon == "(none)" else coupon

    st.divider()
    st.caption(f"{len(catalog)} products loaded")
    for warning in load_report["warnings"]:
        st.warning(warning)


st.title("Checkout Tool")
st.caption(f"Pricing Engine Active | {datetime.now().strftime('%Y-%m-%d')}")

tab1, tab2 = st.tabs(["🛒 Checkout", "📚 Catalog"])


# ============================================================================
# TAB 1: CHECKOUT
# ============================================================================
with tab1:
    if 'cart' not in st.session_state:
        st.session_state.cart = ShoppingCart(catalog, inventory)
    cart = st.session_state.cart

    col1, col2 = st.columns([1.4, 1.6], gap="large")

    with col1:
        st.subheader("Add Items")
        with st.container(border=True):
            labels = [f"{p.sku} | {p.name} | {format_brl(p.price)}" for p in catalog]
            selected = st.selectbox("Product", options=labels, label_visibility="collapsed")
            quantity = st.number_input("Qty", min_value=1, value=1, step=1)

            if st.button("➕ Add to Cart", type="primary", key="add_to_cart") and selected:
                try:
                    cart.add_item(selected.split(" | ")[0], int(quantity))
                except CheckoutError as e:
                    st.error(str(e))
                else:
                    st.rerun()

        if len(cart):
            cart_df = pd.DataFrame([
                {
                    'SKU': item.sku,
                    'Name': catalog.get_product(item.sku).name,
                    'Qty': item.quantity,
                    'Unit Price': format_brl(item.unit_price),
                    'Total': format_brl(item.total),
                }
                for item in cart.list_items()
            ])
            st.dataframe(cart_df, use_container_width=True, hide_index=True)
            if st.button("🗑️ Clear Cart", key="clear_cart"):
                cart.clear()
                st.rerun()
        else:
            st.info("🛒 Cart is empty")

    with col2:
        st.subheader("Price Breakdown")
        if len(cart):
            items = cart.list_items()
            try:
                breakdown = engine.calculate(customer, items, coupon_code)
            except CheckoutError as e:
                st.error(str(e))
                st.stop()

            m1, m2, m3 = st.columns(3)
            m1.metric("Subtotal", format_brl(breakdown.subtotal))
            m2.metric("Discounts", f"-{format_brl(breakdown.total_discount)}")
            m3.metric("Total", format_brl(breakdown.grand_total))

            if breakdown.discounts:
                st.dataframe(pd.DataFrame([
                    {'Code': d.code, 'Description': d.description, 'Amount': format_brl(d.amount)}
                    for d in breakdown.discounts
                ]), use_container_width=True, hide_index=True)
            else:
                st.caption("No discounts apply")

            st.markdown("**Tax by category**")
            for category, amount in breakdown.tax_by_category.items():
                st.caption(f"{category}: {format_brl(amount)}")
            st.caption(f"Shipping: {format_brl(breakdown.shipping)}")

            with st.expander("🔍 Calculation Trace"):
                st.text(breakdown.get_trace_text())

            # Preview only: stock is taken when the register checks out
            preview = Order(order_id="PREVIEW", customer_id=customer.customer_id, items=items, breakdown=breakdown)
            with st.expander("🧾 Receipt Preview"):
                st.text(Receipt(preview).text())


# ============================================================================
# TAB 2: CATALOG
# ============================================================================
with tab2:
    st.subheader("📚 Catalog")
    search_term = st.text_input("Search Catalog", placeholder="Enter SKU or name...", label_visibility="collapsed")

    display = catalog.to_frame()
    if search_term:
        mask = (
            display.index.str.contains(search_term, case=False, na=False, regex=False) |
            display['name'].str.contains(search_term, case=False, na=False, regex=False)
        )
        display = display[mask]

    display = display.copy()
    display['price'] = display['price'].map(format_brl)
    display['stock'] = [inventory.get_quantity(sku) for sku in display.index]
    st.dataframe(display, use_container_width=True, height=500)
    st.caption(f"Total SKUs: {len(catalog):,} | Visible: {len(display):,}")
