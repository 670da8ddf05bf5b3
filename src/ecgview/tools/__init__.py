"""Development tools and standalone helpers.

Includes the Matplotlib snapshot plotter for fetched series and the opt-in
debug timing hooks used by the GUI.
"""
