"""Image loading, letterboxing, non-max suppression and detection types for camera-trap detectors."""

__version__ = "0.1.0"