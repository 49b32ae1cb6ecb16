"""
DIALux adapter: converts window and door openings between panel-hosted
BIM openings and DIALux furnishing records.
"""
