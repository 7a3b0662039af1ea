"""
API layer for the Mentorship Backend.

Exposes the mentor and mentee signup, login and dashboard endpoints, the
Gemini chat proxy and the database health check.
"""
