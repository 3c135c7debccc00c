from .detector import detect_format

__all__ = ["detect_format"]
