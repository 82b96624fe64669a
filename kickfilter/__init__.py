"""State-variable audio filters, a stereo block processor, knob controls and a benchmark."""

__version__ = "0.1.0"
__all__ = ["bench", "controls", "filter", "processor"]