"""
engine_utilities — scalar math kernel and vector/quaternion algebra for engine code.
"""

__version__ = "0.1.0"
