"""API module for syncalerts.

The alerts domain lives in ``syncalerts.api.alerts``; configuration models in
``syncalerts.api.config``.
"""

__all__ = []
