"""
Core utilities — shared exceptions used across codec, verifier and proof service.
"""
