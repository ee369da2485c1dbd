"""Reusable contract tests for entity data services."""

from entitykit.testing.contract import CONTRACT_CASES, ContractHarness, contract_test

__all__ = [
    "CONTRACT_CASES",
    "ContractHarness",
    "contract_test",
]
