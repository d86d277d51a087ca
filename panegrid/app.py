#Streamlit playground: streamlit run panegrid/app.py
import json

import streamlit as st

from panegrid.config import LayoutConfig
from panegrid.models import Container, PaneSpec, SMART_MODE
from panegrid.preview import render_layout
from panegrid.smart import compute_layout, evaluate_strategies
from panegrid.utils.loaders import parse_ratio_list
from panegrid.utils.serialization import layout_to_dict, strategy_summary


st.set_page_config(page_title="Pane Layout Playground", layout="wide")

st.sidebar.header("Container")
col_w, col_h = st.sidebar.columns(2)
with col_w:
    container_w = st.number_input("Width", min_value=1, max_value=7680, value=1920)
with col_h:
    container_h = st.number_input("Height", min_value=1, max_value=4320, value=1080)

st.sidebar.header("Layout")
mode = st.sidebar.radio("Mode", options=["grid", "smart"], index=1)
ratios_text = st.sidebar.text_input(
    "Pane aspect ratios",
    value="16:9, 16:9, 4:3, 9:16",
    help="Comma-separated W:H or decimal ratios, one per pane.",
)
edge_tolerance = st.sidebar.slider("Edge tolerance (px)", min_value=0, max_value=50, value=10, step=1)

st.title("Pane Layout Playground")

try:
    ratios = parse_ratio_list(ratios_text)
except ValueError as exc:
    st.error(str(exc))
    st.stop()

container = Container(width=float(container_w), height=float(container_h))
panes = [PaneSpec(pane_id=f"pane_{i}", aspect_ratio=r) for i, r in enumerate(ratios)]
config = LayoutConfig().with_overrides(edge_tolerance=float(edge_tolerance))

layout = compute_layout(container, panes, mode=mode, config=config)

left_col, right_col = st.columns([3, 1])
with left_col:
    st.image(render_layout(container, layout, panes), width="stretch")
with right_col:
    st.metric("Efficiency", f"{layout.efficiency * 100:.1f}%")
    st.write(f"Grid: {layout.rows} x {layout.cols}")
    if layout.strategy:
        st.write(f"Strategy: {layout.strategy}")
    if mode == SMART_MODE and len(panes) > 1:
        st.subheader("Strategies")
        st.table(strategy_summary(evaluate_strategies(container, panes, config)))

with st.expander("Layout JSON"):
    st.code(json.dumps(layout_to_dict(layout), indent=2), language="json")
