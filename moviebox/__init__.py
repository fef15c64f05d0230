"""
moviebox – настільний переглядач каталогу фільмів на PySide6.
"""

__version__ = "0.1.0"
