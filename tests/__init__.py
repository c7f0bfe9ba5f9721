"""Test package for the Half-Wit receiver.

The tests drive the display core headlessly: surfaces are plain Kivy
``EventDispatcher`` objects and time is advanced by hand through a fake
scheduler, so no window is ever opened. Run ``pytest`` from the project
root.
"""
