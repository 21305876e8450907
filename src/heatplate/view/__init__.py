"""
The VIEW layer. `colormap` and `renderer` are pure NumPy and produce pixel
buffers; the `widgets` and `main_window` modules are the PySide6 shell.
"""
