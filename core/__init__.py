"""
Core Package - Person model, errors, constants and shared utilities
"""
