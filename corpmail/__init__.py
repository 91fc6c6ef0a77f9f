"""corpmail - provision and manage simulated corporate email accounts."""

__version__ = "0.1.0"
