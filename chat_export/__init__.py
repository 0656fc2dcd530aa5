"""
Chat Export - read-only export of chat room history as JSON or RSS.
"""

__version__ = "1.0.0"
