"""
Mux Integration Package

Wraps the Mux video hosting API used to back chapter videos. Only the asset
lifecycle is covered (create from URL with public playback, delete).
"""

from .client import MuxAsset, MuxClient

__all__ = ["MuxAsset", "MuxClient"]
