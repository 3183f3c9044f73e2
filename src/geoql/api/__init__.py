"""
HTTP application for GeoQL
"""
