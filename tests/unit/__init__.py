"""Unit tests.

Purpose
- Verify a single helper module in isolation.

Guidelines
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
