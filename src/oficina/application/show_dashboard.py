"""Application service: Show Dashboard use case (query).

Revenue figures, order counts and the per-service / per-product sales
tables.
"""

from __future__ import annotations

from oficina.application.dto import DashboardDTO, to_sales_line_dto
from oficina.domain.service.order_ledger import OrderLedger


class ShowDashboardHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(self) -> DashboardDTO:
        summary = self._ledger.summary()
        return DashboardDTO(
            total_revenue=str(summary.total_revenue),
            services_revenue=str(summary.services_revenue),
            products_revenue=str(summary.products_revenue),
            open_orders=summary.open_orders,
            in_progress_orders=summary.in_progress_orders,
            finalized_orders=summary.finalized_orders,
            service_sales=[to_sales_line_dto(e) for e in self._ledger.service_sales()],
            product_sales=[to_sales_line_dto(e) for e in self._ledger.product_sales()],
        )
