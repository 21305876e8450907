"""
Simulation Engine
=================
Finite-difference numerics (`fd`) and the driver that sequences them.

Note: This package should be pure Python/NumPy and should NOT import PySide6.
"""
