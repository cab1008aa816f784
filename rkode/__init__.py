"""Adaptive and fixed-step Runge-Kutta ODE solvers with dense output."""

__version__ = "0.1.0"