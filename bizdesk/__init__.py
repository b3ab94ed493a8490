"""Business desk: clients, orders, expenses and the reports derived from them."""

__version__ = "0.1.0"
