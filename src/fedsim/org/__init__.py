from .brands import (
    DEFAULT_BRAND_BALANCE,
    Brand,
    BrandFinancials,
    BrandRosterStats,
    adjust_brand_balance,
    brand_financials,
    brand_roster,
    brand_roster_stats,
    settle_production,
)

__all__ = [
    "Brand",
    "BrandFinancials",
    "BrandRosterStats",
    "DEFAULT_BRAND_BALANCE",
    "adjust_brand_balance",
    "brand_financials",
    "brand_roster",
    "brand_roster_stats",
    "settle_production",
]
