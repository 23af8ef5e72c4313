"""Read section headers, TLS and certificate records, and common ordinals of PE files."""

__version__ = "0.5.0"