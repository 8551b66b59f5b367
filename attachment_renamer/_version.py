__version__ = "20260119"
