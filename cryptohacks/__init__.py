"""Text conversions: hex, 7-bit binary, Base64, Base32 and a running Caesar shift."""

__version__ = "0.1.0"
__all__ = ["app", "basecodec", "binary", "caesar", "hexcodec"]