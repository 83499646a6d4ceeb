"""
Tests for Segment Geometry

This package contains validation tests for:
- Point/Vector arithmetic and text format
- Segment closest-distance computation
- Array utilities and tolerances
- Policies, proximity checks and the CLI
"""
