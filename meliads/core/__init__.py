"""
Core business logic.

Nothing in this package imports Streamlit: models, metric calculation,
table sorting/filtering, mock data and the app state reducer are plain
Python so they can be tested without a running UI.
"""
