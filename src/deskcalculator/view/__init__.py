"""
The VIEW layer: Qt widgets only. It renders the display string and raises
input events as Qt Signals; it never performs calculations.
"""
