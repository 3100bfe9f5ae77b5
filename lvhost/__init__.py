"""Building blocks for an LV2 plugin host: URI mapping, event buffers, workers, process state and generic control models."""

__version__ = "1.6.9"