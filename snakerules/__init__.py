"""Board state, placement rules, snake API models, board-viewer events and server, rendering and export for grid snake games."""

__version__ = "1.0.0"