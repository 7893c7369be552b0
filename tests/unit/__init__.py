"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No network; filesystem access only under pytest's ``tmp_path``.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
