"""Dashboard package namespace.

This package contains the Streamlit panels of the statistics dashboard.
Each panel module pairs a mounted view (one fetch per mount, optional chart)
with a `render_*_panel` function that draws it and returns a status dict, so
panels can be exercised without a running Streamlit server.
"""
