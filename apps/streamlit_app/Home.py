# apps/streamlit_app/Home.py
import streamlit as st

# --- make the project root importable on Streamlit Cloud ---
import sys, os
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)
# -----------------------------------------------------------

from core.schema import Inputs, Assumptions
from core.table import tax_table
from core.tax import TAX_RATE
from core.logging_config import configure_logging

configure_logging(
    level=os.environ.get("FLATTAX_LOG_LEVEL", "INFO"),
    format_json=os.environ.get("FLATTAX_LOG_JSON", "0") == "1",
)

# -------------------------------------------------
# App configuration
# -------------------------------------------------
st.set_page_config(page_title="FlatTax — Flat Income Tax", layout="wide")
st.title("FlatTax — Flat Income Tax")
st.set_option("client.showErrorDetails", True)
st.caption(f"Every income is taxed at a flat {TAX_RATE * 100:g}%.")

tab_incomes, tab_result = st.tabs(["Incomes", "Tax"])

# ===============================
# INCOMES TAB
# ===============================
with tab_incomes:
    st.header("💵 Incomes")
    st.caption("Add a row per income. Negative amounts are accepted as-is.")
    import pandas as pd
    default_incomes = pd.DataFrame([
        {"label": "Salary",    "income": 85_000.0},
        {"label": "Freelance", "income": 12_500.0},
        {"label": "Refund",    "income": -1_000.0},
    ])
    if "incomes_df" not in st.session_state:
        st.session_state.incomes_df = default_incomes.copy()
    edited = st.data_editor(
        st.session_state.incomes_df,
        use_container_width=True,
        num_rows="dynamic",
        column_config={
            "label": "Label",
            "income": st.column_config.NumberColumn("Income", format="%.2f"),
        }
    )
    if not edited.equals(st.session_state.incomes_df):
        st.session_state.incomes_df = edited

# ===============================
# TAX TAB
# ===============================
with tab_result:
    round_whole = st.checkbox("Round to whole units", value=False)
    run_now = st.button("Calculate", type="primary")
    if run_now:
        rows = st.session_state.incomes_df.dropna(subset=["income"])
        inputs = Inputs(
            incomes=[float(x) for x in rows["income"]],
            labels=[str(x) if pd.notna(x) else "" for x in rows["label"]],
        )
        try:
            result = tax_table(inputs, Assumptions(), round_whole=round_whole)
            df = result["table"]
            st.subheader("📊 Tax")
            st.dataframe(df, use_container_width=True)
            c1, c2 = st.columns(2)
            c1.metric("Total Income", f"{df['Income'].sum():,.2f}")
            c2.metric("Total Tax", f"{df['Tax'].sum():,.2f}")
        except Exception as e:
            st.error("Calculation failed. Details below.")
            st.exception(e)
    else:
        st.caption("Edit the incomes, then click **Calculate**.")
