"""
Test helpers package for the blueprint engine

Provides reusable helpers for:
- Fixed node/edge ids and raw document builders (factories.py)
"""
