"""
Test suite for engine_utilities

Contains:
- tests/unit/          : Unit tests for the scalar kernel and vector/quaternion algebra
"""
