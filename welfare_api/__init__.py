"""
Military Welfare Portal API

Account registration and login, plus records for welfare schemes, benefit
applications, emergency contacts, marketplace listings and grievances.
"""

__version__ = "1.0.0"
__author__ = "Military Welfare Portal Team"
__description__ = "REST backend for the military welfare portal"
