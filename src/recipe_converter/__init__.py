"""Recipe Converter Service.

FastAPI service for recipe unit conversion and serving scaling.
"""

__version__ = "0.1.0"
