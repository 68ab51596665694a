"""
Integration tests package for the crypto market analysis system.

This package contains end-to-end integration tests that verify the complete data pipeline
from data collection to storage and analysis.
"""