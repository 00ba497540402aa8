"""
ClarifyChat: a chat service that asks clarifying questions before answering.
"""

__version__ = "0.1.0"
