from pydantic import BaseModel


class VisualizationConfig(BaseModel):
    """Font and style settings shared by the analysis plots."""

    font_family: str = "DejaVu Sans"
    title_font_size: float = 12
    label_font_size: float = 10
    tick_font_size: float = 9
    legend_font_size: float = 9
    rms_linestyle: str = "--"
    show_grid: bool = True
