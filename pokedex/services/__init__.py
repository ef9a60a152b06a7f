"""Application services layer.

Services coordinate navigation state, the catalog client and the display
surface. They receive the client and surface as arguments and avoid UI code.
"""
