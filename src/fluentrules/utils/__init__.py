"""
Contains some useful utility functions for validators consuming the declared rules.
"""
from .query_object import property_value
