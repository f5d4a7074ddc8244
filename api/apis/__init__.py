"""
API descriptors: user-defined external endpoint configs and their parameters.
"""
