"""
The CONTROLLER layer holds the conversions between the model objects.
"""
