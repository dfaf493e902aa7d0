"""Debt payoff planning: amortization simulator and its HTTP API."""
