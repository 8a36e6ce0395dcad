"""Scenarios for generating realistic household finance data sets."""

from kakeibo.scenarios.household import HouseholdScenario

__all__ = ["HouseholdScenario"]
