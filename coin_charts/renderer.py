from typing import Any, Dict, List

from .page import CHART_SECTION_ID, Page, canvas

LINE_COLOR = "blue"

def build_chart_config(labels: List[str], data: List[float], symbol: str) -> Dict[str, Any]:
    # Descripción declarativa para Chart.js; "currency" lo resuelve coin_charts/static/charts.js
    return {
        "type": "line",
        "data": {
            "labels": list(labels),   # eje X
            "datasets": [
                {
                    "label": symbol,
                    "data": list(data),   # eje Y
                    "borderColor": LINE_COLOR,
                    "fill": False,
                }
            ],
        },
        "options": {
            "responsive": True,
            "scales": {
                "y": {
                    "beginAtZero": False,
                    "ticks": {"callback": "currency"},
                }
            },
        },
    }

def render_chart(page: Page, coin_id: str, labels: List[str], data: List[float], symbol: str) -> None:
    # El contenedor tiene que existir; no se borran canvas previos (eso lo hace el driver)
    container = page.get_element_by_id(CHART_SECTION_ID)
    surface = canvas(coin_id)
    container.append_child(surface)
    surface.chart = build_chart_config(labels, data, symbol)
