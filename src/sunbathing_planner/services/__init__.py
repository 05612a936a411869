"""
Shared service utilities.

- http.py - requests session factory (timeout, User-Agent, no retries)
"""
