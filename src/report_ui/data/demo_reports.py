"""Static report payloads served by DemoReportService, keyed by endpoint path."""

_MONTH_NAMES = (
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
)

_PPN_OUTPUT = (
    41_250_000, 38_900_000, 45_600_000, 52_100_000, 47_300_000, 49_800_000,
    55_400_000, 58_200_000, 51_700_000, 60_300_000, 63_900_000, 71_500_000,
)
_PPN_INPUT = (
    29_800_000, 31_200_000, 33_450_000, 36_000_000, 35_100_000, 34_250_000,
    40_100_000, 42_600_000, 39_900_000, 44_800_000, 47_250_000, 52_300_000,
)

_COGS_PURCHASES = (
    310_000_000, 295_000_000, 342_000_000, 371_000_000, 356_000_000, 348_000_000,
    402_000_000, 415_000_000, 388_000_000, 436_000_000, 451_000_000, 498_000_000,
)


def _ppn_months() -> list[dict]:
    return [
        {
            "month": index + 1,
            "month_name": _MONTH_NAMES[index],
            "output": output,
            "input": input_tax,
            "net": output - input_tax,
        }
        for index, (output, input_tax) in enumerate(zip(_PPN_OUTPUT, _PPN_INPUT))
    ]


def _cogs_months() -> list[dict]:
    months = []
    inventory = 1_250_000_000
    for index, purchases in enumerate(_COGS_PURCHASES):
        ending = inventory + purchases - int(purchases * 0.97)
        months.append(
            {
                "month": index + 1,
                "month_name": _MONTH_NAMES[index],
                "beginning_inventory": inventory,
                "purchases": purchases,
                "ending_inventory": ending,
                "cogs": inventory + purchases - ending,
            }
        )
        inventory = ending
    return months


_WORK_ORDERS = [
    {"id": 101, "wo_number": "WO-2024-0101", "name": "Panel PLTS 50 kWp", "project": "PRJ-0012",
     "status": "completed", "estimated_cost": 412_000_000, "actual_cost": 447_500_000},
    {"id": 102, "wo_number": "WO-2024-0102", "name": "Inverter Hybrid 10 kW", "project": "PRJ-0012",
     "status": "completed", "estimated_cost": 86_000_000, "actual_cost": 79_350_000},
    {"id": 103, "wo_number": "WO-2024-0107", "name": "Mounting Atap Pabrik", "project": "PRJ-0015",
     "status": "in_progress", "estimated_cost": 54_500_000, "actual_cost": 54_500_000},
    {"id": 104, "wo_number": "WO-2024-0111", "name": "Panel Distribusi LVMDP", "project": "PRJ-0015",
     "status": "completed", "estimated_cost": 128_000_000, "actual_cost": 141_900_000},
    {"id": 105, "wo_number": "WO-2024-0118", "name": "Baterai LiFePO4 30 kWh", "project": "PRJ-0019",
     "status": "completed", "estimated_cost": 233_000_000, "actual_cost": 219_800_000},
]


def _with_variance(work_order: dict) -> dict:
    variance = work_order["actual_cost"] - work_order["estimated_cost"]
    return {
        **work_order,
        "variance": variance,
        "variance_percent": round(variance / work_order["estimated_cost"] * 100, 2),
    }


_AGING_CONTACTS = [
    {"id": 11, "code": "C-0011", "name": "PT Surya Abadi", "current": 125_000_000,
     "days_1_30": 48_500_000, "days_31_60": 0, "days_61_90": 0, "over_90": 0},
    {"id": 14, "code": "C-0014", "name": "CV Maju Jaya", "current": 0,
     "days_1_30": 22_000_000, "days_31_60": 37_250_000, "days_61_90": 0, "over_90": 0},
    {"id": 21, "code": "C-0021", "name": "PT Energi Nusantara", "current": 310_000_000,
     "days_1_30": 0, "days_31_60": 0, "days_61_90": 64_000_000, "over_90": 18_750_000},
]

_AGING_KEYS = ("current", "days_1_30", "days_31_60", "days_61_90", "over_90")


def _aging(report_name: str, contacts: list[dict]) -> dict:
    rows = [{**c, "total": sum(c[key] for key in _AGING_KEYS)} for c in contacts]
    totals = {key: sum(row[key] for row in rows) for key in _AGING_KEYS}
    totals["total"] = sum(totals.values())
    return {
        "report_name": report_name,
        "as_of_date": "2024-12-31",
        "contacts": rows,
        "totals": totals,
    }


_MOVEMENT_ITEMS = [
    {"product_id": 1, "sku": "PV-550M", "name": "Panel Surya 550 Wp Mono", "unit": "pcs",
     "opening_qty": 120, "in_qty": 300, "out_qty": 260, "adjustment_qty": -2, "closing_qty": 158,
     "opening_value": 270_000_000, "closing_value": 355_500_000},
    {"product_id": 2, "sku": "INV-10H", "name": "Inverter Hybrid 10 kW", "unit": "unit",
     "opening_qty": 8, "in_qty": 12, "out_qty": 15, "adjustment_qty": 0, "closing_qty": 5,
     "opening_value": 148_000_000, "closing_value": 92_500_000},
    {"product_id": 3, "sku": "CBL-DC6", "name": "Kabel DC 6 mm2", "unit": "m",
     "opening_qty": 2_000, "in_qty": 5_000, "out_qty": 4_200, "adjustment_qty": 0, "closing_qty": 2_800,
     "opening_value": 24_000_000, "closing_value": 33_600_000},
    {"product_id": 4, "sku": "MC4-PAIR", "name": "Konektor MC4", "unit": "pasang",
     "opening_qty": 0, "in_qty": 0, "out_qty": 0, "adjustment_qty": 0, "closing_qty": 0,
     "opening_value": 0, "closing_value": 0},
]

_PERIOD = {"start": "2024-01-01", "end": "2024-12-31"}

DEMO_REPORTS: dict[str, dict] = {
    "/reports/trial-balance": {
        "report_name": "Neraca Saldo",
        "as_of_date": "2024-12-31",
        "accounts": [
            {"id": 1, "code": "1-1100", "name": "Kas dan Bank", "type": "asset",
             "debit_balance": 842_500_000, "credit_balance": 0},
            {"id": 2, "code": "1-1200", "name": "Piutang Usaha", "type": "asset",
             "debit_balance": 625_500_000, "credit_balance": 0},
            {"id": 3, "code": "2-1100", "name": "Utang Usaha", "type": "liability",
             "debit_balance": 0, "credit_balance": 418_000_000},
            {"id": 4, "code": "3-1000", "name": "Modal Disetor", "type": "equity",
             "debit_balance": 0, "credit_balance": 1_050_000_000},
        ],
        "total_debit": 1_468_000_000,
        "total_credit": 1_468_000_000,
        "is_balanced": True,
    },
    "/reports/ppn-summary": {
        "report_name": "Ringkasan PPN",
        "period": _PERIOD,
        "output_tax": sum(_PPN_OUTPUT),
        "input_tax": sum(_PPN_INPUT),
        "net_vat": sum(_PPN_OUTPUT) - sum(_PPN_INPUT),
        "output_count": 412,
        "input_count": 288,
    },
    "/reports/ppn-monthly": {
        "report_name": "PPN Bulanan",
        "year": 2024,
        "months": _ppn_months(),
        "total_output": sum(_PPN_OUTPUT),
        "total_input": sum(_PPN_INPUT),
        "total_net": sum(_PPN_OUTPUT) - sum(_PPN_INPUT),
    },
    "/reports/receivable-aging": _aging("Umur Piutang", _AGING_CONTACTS),
    "/reports/payable-aging": _aging("Umur Utang", _AGING_CONTACTS[:2]),
    "/reports/cash-flow": {
        "report_name": "Arus Kas",
        "period": _PERIOD,
        "operating_activities": {"name": "Operasi", "items": [], "total": 512_300_000},
        "investing_activities": {"name": "Investasi", "items": [], "total": -215_000_000},
        "financing_activities": {"name": "Pendanaan", "items": [], "total": -80_000_000},
        "net_cash_change": 217_300_000,
        "opening_balance": 625_200_000,
        "closing_balance": 842_500_000,
    },
    "/reports/cogs-summary": {
        "report_name": "Ringkasan HPP",
        "period": _PERIOD,
        "beginning_inventory": 1_250_000_000,
        "purchases": sum(_COGS_PURCHASES),
        "goods_available": 1_250_000_000 + sum(_COGS_PURCHASES),
        "ending_inventory": _cogs_months()[-1]["ending_inventory"],
        "cogs": sum(m["cogs"] for m in _cogs_months()),
        "cogs_from_movements": sum(m["cogs"] for m in _cogs_months()),
    },
    "/reports/cogs-monthly-trend": {
        "report_name": "Tren HPP Bulanan",
        "year": 2024,
        "months": _cogs_months(),
        "total_cogs": sum(m["cogs"] for m in _cogs_months()),
    },
    "/reports/cost-variance": {
        "report_name": "Varians Biaya Work Order",
        "period": _PERIOD,
        "over_budget_items": [
            _with_variance(w) for w in _WORK_ORDERS if w["actual_cost"] > w["estimated_cost"]
        ],
        "under_budget_items": [
            _with_variance(w) for w in _WORK_ORDERS if w["actual_cost"] < w["estimated_cost"]
        ],
        "on_budget_items": [
            _with_variance(w) for w in _WORK_ORDERS if w["actual_cost"] == w["estimated_cost"]
        ],
    },
    "/reports/work-order-costs": {
        "report_name": "Biaya Work Order",
        "period": _PERIOD,
        "work_orders": [_with_variance(w) for w in _WORK_ORDERS],
        "summary": {
            "total_work_orders": len(_WORK_ORDERS),
            "total_estimated": sum(w["estimated_cost"] for w in _WORK_ORDERS),
            "total_actual": sum(w["actual_cost"] for w in _WORK_ORDERS),
            "total_variance": sum(w["actual_cost"] - w["estimated_cost"] for w in _WORK_ORDERS),
        },
    },
    "/inventory/summary": {
        "warehouse": None,
        "summary": {
            "total_value": sum(i["closing_value"] for i in _MOVEMENT_ITEMS),
            "total_items": len(_MOVEMENT_ITEMS),
            "total_quantity": sum(i["closing_qty"] for i in _MOVEMENT_ITEMS),
            "low_stock_count": 1,
            "out_of_stock_count": 1,
        },
    },
    "/inventory/movement-summary": {
        "warehouse": {"id": 1, "code": "WH-JKT", "name": "Gudang Jakarta"},
        "period": _PERIOD,
        "summary": {
            "total_opening_value": sum(i["opening_value"] for i in _MOVEMENT_ITEMS),
            "total_closing_value": sum(i["closing_value"] for i in _MOVEMENT_ITEMS),
            "total_in": sum(i["in_qty"] for i in _MOVEMENT_ITEMS),
            "total_out": sum(i["out_qty"] for i in _MOVEMENT_ITEMS),
            "total_adjustment": sum(i["adjustment_qty"] for i in _MOVEMENT_ITEMS),
            "items": _MOVEMENT_ITEMS,
        },
    },
}
