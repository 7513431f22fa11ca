"""Flight booking API with surge pricing and atomic seat allocation"""

__version__ = "1.0.0"
