"""
Analytics — inbound/outbound flow totals for a target network.
"""

from usdc_trail.analytics.flow_totals import FlowTotals, compute_flow_totals

__all__ = ["FlowTotals", "compute_flow_totals"]
