from .wav import WavFramer

__all__ = ["WavFramer"]
