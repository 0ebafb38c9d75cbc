"""Shop floor planning: utility sizing, layout and lean workflow analysis."""

__version__ = "0.1.0"
