"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O or sleeping; use the fake clock and caplog at boundaries.
- Prefer behavior-centric assertions over implementation details.
"""
