"""
CLI Simulator for the Monty Hall problem

This module provides a command-line interface for running the stay/switch
simulation and printing the comparison of both strategies.
"""

__version__ = "0.1.0"
