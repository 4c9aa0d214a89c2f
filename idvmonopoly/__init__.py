"""A three-player terminal board game: decoding progress, ability cards and a race along the final track."""

__version__ = "0.1.0"