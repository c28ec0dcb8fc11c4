import streamlit as st

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title="AI Resume Builder")

import logging

from webcv import config
from webcv.errors import WebCVError
from webcv.extractor import first_page_image, validate_pdf
from webcv.generator_rule import cv_filename, render_html
from webcv.llm_client import get_llm_client
from webcv.parser_llm import extract_profile

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("webcv.gui")

# Initialize session state variables
if "profile" not in st.session_state:
    st.session_state.profile = None
if "error" not in st.session_state:
    st.session_state.error = None
# True while an extraction request is in flight; disables the generate button
if "loading" not in st.session_state:
    st.session_state.loading = False
# Tracks the name of the PDF currently in the uploader widget
if "current_uploader_pdf_name" not in st.session_state:
    st.session_state.current_uploader_pdf_name = None


# --- Helper to clear relevant state for a new upload ---
def reset_profile_state():
    st.session_state.profile = None
    st.session_state.error = None
    st.session_state.loading = False


def start_generation():
    st.session_state.loading = True
    st.session_state.error = None


# --- Generation Logic ---
def run_generation(pdf_bytes: bytes):
    try:
        client = get_llm_client()
        with st.spinner("Generating Profile..."):
            st.session_state.profile = extract_profile(pdf_bytes, client=client)
    except (WebCVError, ValueError, ImportError) as e:
        st.session_state.error = str(e)
    finally:
        st.session_state.loading = False


st.title("AI Resume Builder")

col_upload, col_profile = st.columns(2)

# --- Left Column: Upload ---
with col_upload:
    st.subheader("Upload Your Resume")
    uploaded_pdf_file_widget = st.file_uploader(
        "Drag 'n' drop your PDF resume here, or click to select a file", type="pdf"
    )

    current_widget_pdf_name = (
        uploaded_pdf_file_widget.name if uploaded_pdf_file_widget else None
    )
    # New file uploaded, or file cleared: previous profile no longer applies
    if current_widget_pdf_name != st.session_state.current_uploader_pdf_name:
        st.session_state.current_uploader_pdf_name = current_widget_pdf_name
        reset_profile_state()

    pdf_bytes = None
    if uploaded_pdf_file_widget:
        try:
            pdf_bytes = validate_pdf(
                uploaded_pdf_file_widget.name,
                uploaded_pdf_file_widget.getvalue(),
                uploaded_pdf_file_widget.type,
            )
        except WebCVError as e:
            st.session_state.error = str(e)

    if pdf_bytes:
        st.markdown(f"**Selected file:** {uploaded_pdf_file_widget.name}")
        try:
            preview = first_page_image(pdf_bytes)
        except Exception as e:  # preview only; extraction may still work
            logger.warning("Could not render PDF preview: %s", e)
            preview = None
        if preview is not None:
            st.image(preview, width="stretch")

    if st.session_state.error:
        st.error(st.session_state.error)

    st.button(
        "Generating Profile..." if st.session_state.loading else "Generate Web CV",
        on_click=start_generation,
        disabled=st.session_state.loading or not pdf_bytes,
        type="primary",
        width="stretch",
    )

    # button is already drawn disabled while the request runs
    if st.session_state.loading:
        if pdf_bytes:
            run_generation(pdf_bytes)
        else:
            st.session_state.loading = False
        st.rerun()

# --- Right Column: Profile ---
with col_profile:
    st.subheader("Your Web CV Profile")
    profile = st.session_state.profile
    if profile is None:
        st.markdown("Your generated profile will appear here.")
    else:
        cv_html = render_html(profile)
        st.components.v1.html(cv_html, height=700, scrolling=True)

        with st.expander("Structured data", expanded=False):
            st.json(profile.to_dict())

        st.download_button(
            label="📥 Download HTML CV",
            data=cv_html,
            file_name=cv_filename(profile),
            mime="text/html",
            help="Get a standalone HTML file you can upload to your website",
            width="stretch",
        )
