"""
Driver de refresco: fetch de todas las monedas -> transformación -> render.

Cada ciclo reemplaza el contenedor completo. El timer dispara a período fijo
sin esperar al ciclo anterior; con ``overlap_policy="skip"`` un tick que
encuentra un ciclo en curso se descarta.
"""

import asyncio
from typing import Awaitable, Iterable, List, Optional, Set

import httpx
from loguru import logger

from .client import fetch_coin_prices
from .config import Settings
from .page import CHART_SECTION_ID, Page, error_message, loader
from .renderer import render_chart
from .schemas import ChartSeries, PricesResponse
from .utils import parse_price, time_label


def build_series(coin_id: str, response: PricesResponse, limit: int = 24) -> ChartSeries:
    # Primeras `limit` muestras tal como llegan (la más reciente primero); no se rellena
    prices = response.data.prices.hour.prices[:limit]
    return ChartSeries(
        coin_id=coin_id,
        labels=[time_label(ts) for ts, _ in prices],
        data=[parse_price(price) for _, price in prices],
        symbol=response.data.base,
    )


async def gather_or_cancel(aws: Iterable[Awaitable]) -> List:
    """Espera todas las tareas; con el primer fallo cancela el resto y relanza."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for t in tasks:
            t.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class RefreshDriver:

    def __init__(self, client: httpx.AsyncClient, page: Page, settings: Settings):
        self.client = client
        self.page = page
        self.settings = settings
        self.last_series: List[ChartSeries] = []
        self._timer: Optional[asyncio.Task] = None
        self._cycles: Set[asyncio.Task] = set()

    @property
    def coins(self):
        return self.settings.coins

    @property
    def running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    async def _fetch_series(self, coin_id: str) -> ChartSeries:
        response = await fetch_coin_prices(self.client, coin_id)
        return build_series(coin_id, response, self.settings.series_length)

    async def refresh_all(self) -> None:
        container = self.page.get_element_by_id(CHART_SECTION_ID)
        container.replace_children(loader())
        logger.debug(f"Refreshing charts for {', '.join(self.coins)}")

        try:
            all_series = await gather_or_cancel(self._fetch_series(c) for c in self.coins)

            container.clear()
            for s in all_series:
                render_chart(self.page, s.coin_id, s.labels, s.data, s.symbol)
            self.last_series = all_series
        except Exception:
            container.replace_children(error_message())
            logger.exception("Chart refresh failed")
            return

        logger.debug(f"Rendered {len(self.page.canvases())} charts")

    # 🔹 Timer

    def start(self) -> None:
        if self.running:
            return
        self._timer = asyncio.create_task(self._tick_loop())
        logger.info(
            f"Refresh driver started: {len(self.coins)} coins every {self.settings.refresh_interval}s "
            f"(overlap={self.settings.overlap_policy})"
        )

    async def stop(self) -> None:
        pending = list(self._cycles)
        if self._timer is not None:
            pending.append(self._timer)
            self._timer = None
        for t in pending:
            t.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        self._cycles.clear()
        logger.info("Refresh driver stopped")

    async def _tick_loop(self) -> None:
        while True:
            self._launch_cycle()
            await asyncio.sleep(self.settings.refresh_interval)

    def _launch_cycle(self) -> Optional[asyncio.Task]:
        if self._cycles and self.settings.overlap_policy == "skip":
            logger.warning("Previous refresh still running, skipping tick")
            return None
        # No se espera al ciclo: el timer sigue su período fijo
        task = asyncio.create_task(self.refresh_all())
        self._cycles.add(task)
        task.add_done_callback(self._cycles.discard)
        return task
