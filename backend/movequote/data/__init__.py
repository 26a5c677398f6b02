"""Rate band table and reference data for the movequote engine."""

from movequote.data.rates import (
    HourlyBand,
    LinehaulBand,
    PackingEntry,
    RateTable,
    load_rate_table,
)
from movequote.data.repository import RateTableRepository, filed_rate_from_band

__all__ = [
    "HourlyBand",
    "LinehaulBand",
    "PackingEntry",
    "RateTable",
    "RateTableRepository",
    "filed_rate_from_band",
    "load_rate_table",
]
