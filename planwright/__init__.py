"""planwright - turns feature descriptions and requirement documents into phased implementation workflows."""

__version__ = "0.3.0"
