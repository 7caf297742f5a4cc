"""webflow-build: inject API keys into index.html and package it for Webflow."""

from .version import __version__

__all__ = ['__version__']
