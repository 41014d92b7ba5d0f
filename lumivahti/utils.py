# lumivahti/utils.py
"""General-purpose helpers shared by the snow-data pipeline."""

import logging

import streamlit as st

from lumivahti.config import DEV

logger = logging.getLogger("lumivahti")


def report_error(ctx: str, e: Exception) -> None:
    """Log errors and, in DEV mode, display them in the Streamlit UI."""
    logger.error("%s: %s: %s", ctx, type(e).__name__, e)
    if DEV:
        st.caption(f"⚠ {ctx}: {type(e).__name__}: {e}")
