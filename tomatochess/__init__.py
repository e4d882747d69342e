"""Chess bitboards, directions, colours, castling rights and magic attack tables."""

__version__ = "0.1.0"