from .base_strategy import BaseRenderStrategy
from .pdf_strategy import PdfRenderStrategy
from .xlsx_strategy import XlsxRenderStrategy

STRATEGIES = {
    PdfRenderStrategy.name: PdfRenderStrategy,
    XlsxRenderStrategy.name: XlsxRenderStrategy,
}


def get_strategy(name: str) -> BaseRenderStrategy:
    """Instantiate the render strategy registered under ``name``."""
    strategy_class = STRATEGIES.get(name)
    if not strategy_class:
        raise ValueError(f"Unknown render format: {name}")
    return strategy_class()


__all__ = ["BaseRenderStrategy", "PdfRenderStrategy", "XlsxRenderStrategy", "STRATEGIES", "get_strategy"]
