"""
Smart Home Energy - Core Service

Device on/off control, current energy usage aggregation and daily limit
alerts for a smart home, served through FastAPI.
"""

__version__ = "1.0.0"
__author__ = "Smart Home Energy Team"
__description__ = "Device control and energy monitoring core for the smart home"
