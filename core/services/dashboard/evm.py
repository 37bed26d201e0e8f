from __future__ import annotations

from core.domain.enums import StatusKind
from core.services.dashboard.models import DashboardEVM
from core.services.evm.models import ProjectPerformance


class DashboardEvmMixin:
    def _build_evm(self, performance: ProjectPerformance) -> DashboardEVM:
        totals = performance.totals
        return DashboardEVM(
            as_of=performance.reference_date,
            BAC=totals.total_budget,
            PV=performance.planned_value,
            EV=totals.total_earned_value,
            AC=totals.total_actual_cost,
            CPI=performance.indices.cpi,
            SPI=performance.indices.spi,
            CV=performance.cost_variance,
            SV=performance.schedule_variance,
            EAC=performance.forecast.EAC,
            VAC=performance.forecast.VAC,
            TCPI_to_BAC=performance.forecast.TCPI,
            overall_progress=performance.overall_progress,
            expected_progress=performance.expected_progress,
            progress_status=performance.progress_status,
            cost_status=performance.cost_status,
            schedule_status=performance.schedule_status,
            status_text=self._interpret_evm(performance),
        )

    def _interpret_evm(self, performance: ProjectPerformance) -> str:
        parts = []

        if performance.totals.total_actual_cost.is_zero:
            parts.append("Cost: no actual cost recorded yet.")
        elif performance.cost_status.kind == StatusKind.FAVORABLE:
            parts.append("Cost: under budget (good).")
        elif performance.cost_status.kind == StatusKind.CAUTION:
            parts.append("Cost: slightly over budget.")
        else:
            parts.append("Cost: over budget (needs action).")

        if performance.planned_value.is_zero:
            parts.append("Schedule: nothing planned yet.")
        elif performance.schedule_status.kind == StatusKind.FAVORABLE:
            parts.append("Schedule: on or ahead of plan.")
        elif performance.schedule_status.kind == StatusKind.CAUTION:
            parts.append("Schedule: slipping.")
        else:
            parts.append("Schedule: behind (recover plan).")

        vac = performance.forecast.VAC
        if vac is None:
            parts.append("VAC: not available.")
        elif not vac.is_negative:
            parts.append("Forecast: within budget at completion.")
        else:
            parts.append("Forecast: likely over budget at completion.")

        tcpi = performance.forecast.TCPI
        if tcpi is None:
            parts.append("TCPI(BAC): total planned budget exceeded.")
        elif tcpi <= 1:
            parts.append("TCPI(BAC): achievable efficiency to hit budget.")
        else:
            parts.append("TCPI(BAC): requires efficiency improvement.")

        return " ".join(parts)
