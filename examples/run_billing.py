import logging
from pathlib import Path

from utilitysim import WaterTariffPlan, load_city

logging.basicConfig(level=logging.INFO)

city = load_city(Path(__file__).parent / "config" / "city.yaml")
portfolio = city.portfolio

portfolio.supply_all()
portfolio.show_status_all()
print(portfolio.to_frame())
print(f"Total: {portfolio.total_bill():.2f}")

# Administrative price change, shared by every electricity account
city.rates.electricity.set_grid_unit_price(9.5)

# Switching a water plan starts a new billing period for that account
water = next(a for a in portfolio if a.service_name == "Water")
water.set_current_plan(WaterTariffPlan.RESIDENTIAL_CONSERVATION)
water.add_consumption(12)
for charge in water.bill_breakdown():
    print(charge)

print(f"Total after changes: {portfolio.total_bill():.2f}")
