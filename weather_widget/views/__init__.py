"""View rendering module for the weather card.

The presenter turns a DisplayState into a CardView; the template renderer
turns a CardView into HTML.
"""
