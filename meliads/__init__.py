"""
MeliAds - Mercado Ads campaign dashboard.

Run with:
    streamlit run meliads/app.py
"""

__version__ = "0.1.0"
