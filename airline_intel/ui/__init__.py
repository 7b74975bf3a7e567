"""
Dash UI layer: app factory, layout builders and callbacks.
"""
