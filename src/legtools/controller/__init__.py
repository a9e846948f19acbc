"""
The CONTROLLER layer holds the legend operations users call.
"""
