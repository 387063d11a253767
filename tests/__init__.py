"""Test suite for Quant Cloud Init.

This package contains test modules and fixtures for verifying the functionality
of the Quant Cloud Init step. It includes tests for:
- Ref classification and target resolution
- Configuration parsing
- The Quant Cloud API client and remote validation
- Docker login and step outputs

The test suite uses pytest and provides fixtures for common test scenarios.
"""
