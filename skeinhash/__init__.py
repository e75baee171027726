"""Skein hash functions, Threefish block ciphers and a random-math program interpreter."""

__version__ = "0.1.0"

__all__ = [
    "core",
    "randommath",
    "skein1024",
    "skein256",
    "skein512",
    "threefish",
    "threefish1024",
    "threefish256",
    "threefish512",
    "tweak",
]