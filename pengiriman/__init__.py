"""Delivery-time estimates, shipment history lookup and bar-chart layout, with a command line."""

__version__ = "1.0.0"
__all__ = ["chart", "cli", "estimasi", "history"]