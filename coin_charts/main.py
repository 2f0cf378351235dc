import os
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from .client import create_api_client
from .config import Settings, load_settings
from .driver import RefreshDriver
from .logging_setup import configure_logging
from .page import CHART_SECTION_ID, Page, render_children
from .schemas import ChartSeriesOut, ChartsResponse
from .utils import format_currency

# Carpeta static/ dentro del paquete (se instala como package data)
STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")

# 🔹 Crear la aplicación FastAPI
app = FastAPI(title="Coin Charts")

# 🔹 Estado del proceso: la página y el driver que la repinta
settings: Settings = Settings()
page = Page()
driver: Optional[RefreshDriver] = None

# 🔹 Servir frontend estático
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# 🔹 Evento de inicio
@app.on_event("startup")
async def startup_event():
    global settings, driver
    settings = load_settings()
    configure_logging(settings.log_level, settings.log_dir)

    client = create_api_client(settings.base_url)
    driver = RefreshDriver(client, page, settings)

    # 🔹 Primer ciclo inmediato y luego cada refresh_interval segundos
    driver.start()

# 🔹 Evento de cierre: parar el timer y los ciclos en curso
@app.on_event("shutdown")
async def shutdown_event():
    global driver
    if driver is None:
        return
    await driver.stop()
    await driver.client.aclose()
    driver = None
    logger.info("HTTP client closed")

# 🔹 Página principal (UI)
@app.get("/", response_class=HTMLResponse)
async def index():
    return FileResponse(os.path.join(STATIC_DIR, "index.html"))

# 🔹 Contenido actual del contenedor de gráficos (loader, error o canvas)
@app.get("/chart-section", response_class=HTMLResponse)
async def chart_section():
    container = page.get_element_by_id(CHART_SECTION_ID)
    return HTMLResponse(render_children(container.children))

# 🔹 Series del último ciclo exitoso
@app.get("/api/charts", response_model=ChartsResponse)
async def get_charts():
    series = driver.last_series if driver is not None else []
    out = [
        ChartSeriesOut(**s.model_dump(), latest_price=format_currency(s.data[0]) if s.data else "-")
        for s in series
    ]
    return ChartsResponse(coins=list(settings.coins), series=out)

def run() -> None:
    import uvicorn
    uvicorn.run("coin_charts.main:app", host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")))
