"""Character, conversion, byte-buffer, string and file-descriptor output helpers."""

__version__ = "1.0.0"
__all__ = ["buffers", "chars", "convert", "memory", "output", "text"]