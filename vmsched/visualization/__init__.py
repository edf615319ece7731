"""可视化层"""

from .plots import PlotGenerator

__all__ = ["PlotGenerator"]
