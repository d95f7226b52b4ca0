"""
Configuration & Constants
=========================
This module serves as the central registry for the fixed constants used by
the estimator and the form.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (painter throughput, can size)
   from being scattered through the model and the view.
2. Consistency: Labels and units shown in the form and in the results are
   defined once, so the two can never disagree.

Exports:
    PAINTER_THROUGHPUT_M2_PER_HOUR (float): Area one painter covers per hour.
    CAN_VOLUME_LITRES (float): Volume of one purchasable can.
    DISPLAY_DECIMALS (int): Decimals used for area, cost and hours.
"""

# Visible names
VISIBLE_APP_NAME: str = "Paint Calculator"
ORG_ID: str = "paintestimator"
APP_ID: str = "paint-calculator"

# One professional painter covers around 250 m² per hour
PAINTER_THROUGHPUT_M2_PER_HOUR: float = 250.0

# Coverage is entered per can (one US gallon)
CAN_VOLUME_LITRES: float = 3.78

# Units & labels
LENGTH_UNIT: str = "m"
AREA_UNIT: str = "m²"
VOLUME_UNIT: str = "litres"
CURRENCY_SYMBOL: str = "$"
COVERAGE_UNIT_LABEL: str = f"sq. meters/{CAN_VOLUME_LITRES:.2f} {VOLUME_UNIT}"

# Rendering
DISPLAY_DECIMALS: int = 2
