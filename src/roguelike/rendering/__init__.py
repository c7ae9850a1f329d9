from .ascii import render_ascii
from .snapshot import CellState, CellView, FrameSnapshot, build_frame, cell_state

__all__ = ["CellState", "CellView", "FrameSnapshot", "build_frame", "cell_state", "render_ascii"]
