"""Travel agency booking management: bookings, travels, customers, JSON files and a command line."""

__version__ = "0.1.0"