from roundrect.plot.bars import draw_rounded_bars, rounded_bars
from roundrect.plot.scales import rescale, resolution

__all__ = ["draw_rounded_bars", "rescale", "resolution", "rounded_bars"]
