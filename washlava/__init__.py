"""
Washlava: REST API backend for a laundry-service marketplace.
"""

__version__ = "1.0.0"
