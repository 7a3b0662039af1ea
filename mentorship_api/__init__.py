"""
Mentorship Backend root package.

This package contains the FastAPI app entry point (main.py), API routes for
mentor and mentee accounts, the Gemini chat proxy, domain logic and the
infrastructure (MongoDB, outbound HTTP) behind them.
"""
