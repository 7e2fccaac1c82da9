"""Send an SMS to every phone number listed in a CSV file."""

__version__ = "0.1.0"
