"""
VM Task Scheduling Simulator

Assigns a batch of independent tasks (cloudlets) to a fixed pool of virtual
machines with one of five greedy heuristics and reports per-task timing and cost.
"""

__version__ = "0.1.0"
