import os
import streamlit as st

from yt_viral.client import PredictClient
from yt_viral.controller import PredictionFormController, ResultBadge
from yt_viral.settings import load_settings
from yt_viral.utils import setup_logging

st.set_page_config(page_title="YouTube Viral Video Predictor", page_icon="🎬", layout="wide")

@st.cache_resource
def get_settings():
    settings = load_settings(os.environ.get("YT_VIRAL_CONFIG"))
    setup_logging(settings.log_level)
    return settings

settings = get_settings()

if "controller" not in st.session_state:
    st.session_state.controller = PredictionFormController(
        PredictClient(settings.api_url, settings.timeout), st.error, numeric_policy=settings.numeric_policy)
ctl = st.session_state.controller
# st.error from the previous run would write into a stale script context
ctl.notify = st.error

def _key(name): return f"field_{name}"

for name, value in ctl.form.as_dict().items():
    st.session_state.setdefault(_key(name), value)

def _on_change(name):
    ctl.update_field(name, st.session_state[_key(name)])

def _on_prefill():
    ctl.prefill()
    for name, value in ctl.form.as_dict().items():
        st.session_state[_key(name)] = value

def field(label, name, placeholder, container=st):
    container.text_input(label, key=_key(name), placeholder=placeholder,
                         on_change=_on_change, args=(name,))

# ---------- Info panel ----------
with st.sidebar:
    st.title("YouTube Viral Video Predictor")
    st.markdown(
        "Powered by **XGBoost**, this tool predicts whether a YouTube video will go viral using public "
        "metadata like likes, comments, and publish time."
    )
    st.markdown("**Model:** XGBoost (Accuracy 91%)  \n**Stack:** Flask API · Streamlit UI")
    st.caption(f"API: `{settings.api_url}`")
    st.divider()
    st.markdown("**How this was built:**")
    st.markdown(
        "- Downloaded 500 MB+ YouTube trending dataset (40k+ videos).\n"
        "- Engineered features ⟶ likes, dislikes, tags, title length, publish time.\n"
        "- Trained XGBoost classifier (91% accuracy) versus LSTM baseline.\n"
        "- Saved model with `joblib`; exposed via Flask REST API.\n"
        "- Connected the front-end → real-time prediction in one click."
    )

# ---------- Form ----------
st.header("Predict Viral Potential")
col1, col2 = st.columns(2)
field("Likes ⭐", "likes", "e.g., 5000", col1)
field("Dislikes", "dislikes", "e.g., 120", col2)
field("Comment Count", "comment_count", "e.g., 800", col1)
field("Video Title ⭐", "title", "Catchy video title", col2)

with st.expander("Advanced Details (optional)", expanded=False):
    field("Description", "description", "Short description")
    field("Tags (pipe-separated)", "tags", "tech|review")

col3, col4 = st.columns(2)
field("Publish Hour (0-23) ⭐", "publish_hour", "18", col3)
field("Publish Day (0=Mon) ⭐", "publish_day", "4", col4)

b1, b2 = st.columns(2)
clicked = b1.button("Predict Viral Potential", key="predict", type="primary")
b2.button("Prefill Example", key="prefill", on_click=_on_prefill)

if clicked:
    with st.spinner("Calling API..."):
        ctl.submit()

badge = ctl.badge
if badge is ResultBadge.VIRAL:
    st.success(badge.value)
elif badge is ResultBadge.NOT_VIRAL:
    st.warning(badge.value)
