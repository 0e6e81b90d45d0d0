"""TuxMart: a small store whose sale workflow is wired through ports.

The core package holds the domain model and the sale workflow; the
adapters package holds concrete payment, inventory and financial
collaborators; main.py wires them together.
"""

__version__ = "0.1.0"
